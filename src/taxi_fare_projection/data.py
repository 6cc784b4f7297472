import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict
from sklearn.model_selection import train_test_split

logger = logging.getLogger(__name__)

# Positional layout of taxi-fare-train.csv
COLUMNS = [
    "vendor_id",
    "rate_code",
    "passenger_count",
    "trip_time_in_secs",
    "trip_distance",
    "payment_type",
    "fare_amount",
]
CATEGORICAL_COLUMNS = ["vendor_id", "payment_type"]
NUMERIC_COLUMNS = [c for c in COLUMNS if c not in CATEGORICAL_COLUMNS]
LABEL_COLUMN = "fare_amount"


class DataLoadError(ValueError):
    """Raised when the training file cannot be turned into trip records."""


class TaxiTrip(BaseModel):
    model_config = ConfigDict(frozen=True)

    vendor_id: str
    rate_code: float
    passenger_count: float
    trip_time_in_secs: float
    trip_distance: float
    payment_type: str
    fare_amount: Optional[float] = None


def _looks_like_header(row: pd.Series) -> bool:
    values = [str(v).strip().lower() for v in row.tolist()]
    return values == COLUMNS


def load_training_data(path: Union[str, Path], has_header="auto") -> pd.DataFrame:
    """Read the 7-column trip file into a typed frame.

    Columns are mapped by position. ``has_header`` is ``True``, ``False`` or
    ``"auto"``; in auto mode a first row spelling out the column names is
    dropped.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Data file not found: {p}")

    try:
        raw = pd.read_csv(p, header=None, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise DataLoadError(f"Data file is empty: {p}") from exc
    except pd.errors.ParserError as exc:
        raise DataLoadError(f"Malformed row in {p}: {exc}") from exc

    if raw.shape[1] != len(COLUMNS):
        raise DataLoadError(
            f"Expected {len(COLUMNS)} fields per row in {p}, found {raw.shape[1]}"
        )
    raw.columns = COLUMNS

    if has_header is True or (has_header == "auto" and len(raw) and _looks_like_header(raw.iloc[0])):
        logger.debug("Skipping header row in %s", p)
        raw = raw.iloc[1:]
    raw = raw.reset_index(drop=True)

    short = raw.isna().any(axis=1)
    if short.any():
        row = int(short.idxmax()) + 1
        raise DataLoadError(f"Row {row} of {p} has fewer than {len(COLUMNS)} fields")

    df = pd.DataFrame(index=raw.index)
    for col in COLUMNS:
        values = raw[col].str.strip()
        if col in NUMERIC_COLUMNS:
            parsed = pd.to_numeric(values, errors="coerce")
            bad = parsed.isna()
            if bad.any():
                row = int(bad.idxmax())
                raise DataLoadError(
                    f"Row {row + 1} of {p}: non-numeric {col} value {raw[col].iloc[row]!r}"
                )
            df[col] = parsed.astype(float)
        else:
            df[col] = values

    logger.info("Loaded %d trips from %s", len(df), p)
    return df


def trips_to_frame(trips: Iterable[Union[TaxiTrip, dict]]) -> pd.DataFrame:
    records = [t if isinstance(t, TaxiTrip) else TaxiTrip.model_validate(t) for t in trips]
    return pd.DataFrame([r.model_dump() for r in records], columns=COLUMNS)


def train_test_split_trips(df: pd.DataFrame,
                           test_fraction: float = 0.2,
                           seed: int = 0) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Partition rows into disjoint train/test frames, reproducibly for a seed."""
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be between 0 and 1 (got {test_fraction})")
    train_df, test_df = train_test_split(df, test_size=test_fraction, random_state=seed)
    logger.info("Split %d rows into %d train / %d test", len(df), len(train_df), len(test_df))
    return train_df, test_df
