import pandas as pd
import pytest

from taxi_fare_projection.data import (
    COLUMNS, DataLoadError, TaxiTrip, load_training_data, train_test_split_trips, trips_to_frame,
)


def test_load_training_data(trips_csv, trips_df):
    df = load_training_data(trips_csv)
    assert list(df.columns) == COLUMNS
    assert len(df) == len(trips_df)
    assert df["trip_distance"].dtype == float
    assert df["vendor_id"].iloc[0] == trips_df["vendor_id"].iloc[0]


def test_header_row_is_skipped(tmp_path, trips_df):
    path = tmp_path / "with_header.csv"
    trips_df.to_csv(path, index=False, header=True)
    df = load_training_data(path)
    assert len(df) == len(trips_df)


def test_column_order_wins_over_header_names(tmp_path):
    path = tmp_path / "renamed.csv"
    path.write_text("a,b,c,d,e,f,g\nVTS,1,1,1140,3.75,CRD,15.5\n")
    df = load_training_data(path, has_header=True)
    assert df.iloc[0]["vendor_id"] == "VTS"
    assert df.iloc[0]["fare_amount"] == 15.5


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_training_data(tmp_path / "nope.csv")


def test_non_numeric_value(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("VTS,1,1,1140,3.75,CRD,15.5\nCMT,1,two,300,1.0,CSH,6.0\n")
    with pytest.raises(DataLoadError, match="passenger_count"):
        load_training_data(path)


def test_extra_field(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("VTS,1,1,1140,3.75,CRD,15.5\nCMT,1,2,300,1.0,CSH,6.0,9\n")
    with pytest.raises(DataLoadError):
        load_training_data(path)


def test_missing_field(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("VTS,1,1,1140,3.75,CRD,15.5\nCMT,1,2,300,1.0,CSH\n")
    with pytest.raises(DataLoadError, match="Row 2"):
        load_training_data(path)


def test_split_is_deterministic(trips_df):
    train_a, test_a = train_test_split_trips(trips_df, 0.2, seed=0)
    train_b, test_b = train_test_split_trips(trips_df, 0.2, seed=0)
    assert list(train_a.index) == list(train_b.index)
    assert list(test_a.index) == list(test_b.index)


def test_split_is_disjoint_and_complete(trips_df):
    train_df, test_df = train_test_split_trips(trips_df, 0.2, seed=0)
    assert set(train_df.index).isdisjoint(test_df.index)
    assert len(train_df) + len(test_df) == len(trips_df)
    assert len(test_df) == 40


@pytest.mark.parametrize("fraction", [0.0, 1.0, -0.1])
def test_split_rejects_bad_fraction(trips_df, fraction):
    with pytest.raises(ValueError):
        train_test_split_trips(trips_df, fraction)


def test_trips_to_frame():
    df = trips_to_frame([
        TaxiTrip(vendor_id="VTS", rate_code=1, passenger_count=6,
                 trip_time_in_secs=900, trip_distance=5, payment_type="CRD"),
        {"vendor_id": "CMT", "rate_code": 2, "passenger_count": 2,
         "trip_time_in_secs": 1200, "trip_distance": 7, "payment_type": "CRD"},
    ])
    assert list(df.columns) == COLUMNS
    assert df["vendor_id"].tolist() == ["VTS", "CMT"]
    assert pd.isna(df["fare_amount"]).all()


def test_taxi_trip_is_frozen():
    trip = TaxiTrip(vendor_id="VTS", rate_code=1, passenger_count=1,
                    trip_time_in_secs=60, trip_distance=0.5, payment_type="CSH")
    with pytest.raises(Exception):
        trip.vendor_id = "CMT"
