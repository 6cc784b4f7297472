"""Train the taxi fare regressor, report held-out metrics and price three trips."""
import argparse
import logging
from typing import List, Optional

from .config import load_config
from .data import TaxiTrip, load_training_data, train_test_split_trips
from .evaluate import evaluate_model
from .features import split_label
from .model import train_model
from .predict import timed_prediction
from .tracking import tracked_run

logger = logging.getLogger(__name__)

EXAMPLE_TRIPS = [
    TaxiTrip(vendor_id="VTS", rate_code=1, passenger_count=6,
             trip_time_in_secs=900, trip_distance=5, payment_type="CRD"),
    TaxiTrip(vendor_id="CMT", rate_code=2, passenger_count=2,
             trip_time_in_secs=1200, trip_distance=7, payment_type="CRD"),
    TaxiTrip(vendor_id="CMT", rate_code=1, passenger_count=3,
             trip_time_in_secs=297, trip_distance=15, payment_type="CSH"),
]


def run(cfg: dict, trips: List[TaxiTrip] = EXAMPLE_TRIPS):
    df = load_training_data(cfg["data_path"], has_header=cfg["has_header"])
    train_df, test_df = train_test_split_trips(df, test_fraction=cfg["test_fraction"], seed=cfg["seed"])

    with tracked_run(cfg.get("tracking")) as tracker:
        tracker.log_params({**cfg["trainer"], "test_fraction": cfg["test_fraction"], "seed": cfg["seed"]})

        X_train, y_train = split_label(train_df)
        model = train_model(X_train, y_train, random_state=cfg["seed"], **cfg["trainer"])

        metrics = evaluate_model(model, test_df)
        tracker.log_metrics(metrics.as_dict())

    print(f"RMS error: {metrics.root_mean_squared_error}")
    print(f"RSquared: {metrics.r_squared}\n")

    for trip in trips:
        prediction = timed_prediction(model, trip)
        print(f"The predicted fare amount: ${prediction.fare_amount:.2f}")
        print(f"Prediction took {prediction.elapsed_ms} ms\n")

    return metrics


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--config", default=None, help="YAML file overriding the built-in settings")
    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    logging.basicConfig(
        level=cfg["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Using data file %s", cfg["data_path"])
    run(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
