from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from .features import split_label


@dataclass(frozen=True)
class RegressionMetrics:
    mean_absolute_error: float
    mean_squared_error: float
    root_mean_squared_error: float
    loss_function: float
    r_squared: float

    def as_dict(self):
        return asdict(self)


def evaluate_model(model, test_df: pd.DataFrame) -> RegressionMetrics:
    """Score a fitted pipeline against labelled held-out trips."""
    if len(test_df) == 0:
        raise ValueError("Cannot evaluate on an empty test set")
    X, y = split_label(test_df)
    y_pred = model.predict(X)
    mse = float(mean_squared_error(y, y_pred))
    return RegressionMetrics(
        mean_absolute_error=float(mean_absolute_error(y, y_pred)),
        mean_squared_error=mse,
        root_mean_squared_error=float(np.sqrt(mse)),
        # squared loss, averaged
        loss_function=mse,
        r_squared=float(r2_score(y, y_pred)),
    )
