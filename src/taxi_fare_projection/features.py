from typing import Dict, List, Tuple

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.preprocessing import OneHotEncoder

from .data import LABEL_COLUMN

LABEL_NAME = "Label"

# Concatenation order of the feature vector
NUMERIC_FEATURES = ["rate_code", "passenger_count", "trip_time_in_secs", "trip_distance"]
CATEGORICAL_FEATURES = ["vendor_id", "payment_type"]
FEATURE_COLUMNS = NUMERIC_FEATURES + CATEGORICAL_FEATURES


def split_label(df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.Series]:
    """Copy the fare column out as the regression label."""
    y = df[LABEL_COLUMN].astype(float).rename(LABEL_NAME)
    X = df[FEATURE_COLUMNS].copy()
    return X, y


def build_feature_transform() -> ColumnTransformer:
    """One-hot both categorical fields and append them to the raw numerics.

    Each encoder keeps the vocabulary it saw during ``fit``; values outside it
    come out as an all-zero block instead of raising.
    """
    return ColumnTransformer(
        transformers=[
            ("numeric", "passthrough", NUMERIC_FEATURES),
            ("vendor_id", OneHotEncoder(handle_unknown="ignore", sparse_output=False), ["vendor_id"]),
            ("payment_type", OneHotEncoder(handle_unknown="ignore", sparse_output=False), ["payment_type"]),
        ],
        remainder="drop",
        sparse_threshold=0.0,
    )


def learned_vocabulary(transform: ColumnTransformer) -> Dict[str, List[str]]:
    vocab = {}
    for name in CATEGORICAL_FEATURES:
        encoder = transform.named_transformers_[name]
        vocab[name] = [str(c) for c in encoder.categories_[0]]
    return vocab


def feature_names(transform: ColumnTransformer) -> List[str]:
    return [str(n) for n in transform.get_feature_names_out()]
