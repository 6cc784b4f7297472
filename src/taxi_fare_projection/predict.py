import time
from dataclasses import dataclass
from typing import Any, Dict, Union

from prometheus_client import Counter, Histogram

from .data import TaxiTrip, trips_to_frame
from .features import FEATURE_COLUMNS

PREDICTIONS_TOTAL = Counter("predictions_total", "Total number of fare predictions made")
PREDICTION_LATENCY = Histogram("prediction_latency_seconds", "Latency of single fare predictions")


@dataclass(frozen=True)
class FarePrediction:
    fare_amount: float
    elapsed_ms: int


def predict_single(model, payload: Union[TaxiTrip, Dict[str, Any]]) -> float:
    # fare_amount on the payload, if any, is ignored
    X = trips_to_frame([payload])[FEATURE_COLUMNS]
    y = model.predict(X)[0]
    return float(y)


def timed_prediction(model, payload: Union[TaxiTrip, Dict[str, Any]]) -> FarePrediction:
    start = time.perf_counter()
    y = predict_single(model, payload)
    duration = time.perf_counter() - start
    PREDICTIONS_TOTAL.inc()
    PREDICTION_LATENCY.observe(duration)
    return FarePrediction(fare_amount=y, elapsed_ms=int(duration * 1000))
