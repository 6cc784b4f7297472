import numpy as np
import pandas as pd
import pytest

from taxi_fare_projection.data import COLUMNS


@pytest.fixture
def trips_df():
    """Synthetic trips with a roughly linear fare."""
    rng = np.random.default_rng(0)
    n = 200
    time = rng.integers(120, 2400, size=n).astype(float)
    dist = np.round(time / 240 * rng.uniform(0.6, 1.4, size=n), 2)
    fare = 2.5 + 2.0 * dist + 0.004 * time + rng.normal(0, 0.5, size=n)
    return pd.DataFrame({
        "vendor_id": rng.choice(["CMT", "VTS"], size=n),
        "rate_code": np.ones(n),
        "passenger_count": rng.integers(1, 7, size=n).astype(float),
        "trip_time_in_secs": time,
        "trip_distance": dist,
        "payment_type": rng.choice(["CRD", "CSH"], size=n),
        "fare_amount": np.round(fare, 1),
    }, columns=COLUMNS)


@pytest.fixture
def trips_csv(tmp_path, trips_df):
    path = tmp_path / "taxi-fare-train.csv"
    trips_df.to_csv(path, index=False, header=False)
    return path


@pytest.fixture
def fitted(trips_df):
    from taxi_fare_projection.data import train_test_split_trips
    from taxi_fare_projection.features import split_label
    from taxi_fare_projection.model import train_model

    train_df, test_df = train_test_split_trips(trips_df, test_fraction=0.2, seed=0)
    X, y = split_label(train_df)
    return train_model(X, y), train_df, test_df
