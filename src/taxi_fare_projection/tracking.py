import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

import mlflow

logger = logging.getLogger(__name__)


class RunTracker:
    """Logs params and metrics to an MLflow run, or does nothing when disabled."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled

    def log_params(self, params: Dict[str, Any]):
        if self.enabled:
            mlflow.log_params(params)

    def log_metrics(self, metrics: Dict[str, float]):
        if self.enabled:
            mlflow.log_metrics({k: float(v) for k, v in metrics.items()})


@contextmanager
def tracked_run(tracking_cfg: Optional[Dict[str, Any]]):
    cfg = tracking_cfg or {}
    if not cfg.get("enabled"):
        yield RunTracker(enabled=False)
        return

    if cfg.get("tracking_uri"):
        mlflow.set_tracking_uri(cfg["tracking_uri"])
    # keyword so the name is never read as an experiment id
    mlflow.set_experiment(experiment_name=cfg.get("experiment_name", "taxi_fare_projection"))
    logger.info("Logging run to MLflow at %s", mlflow.get_tracking_uri())
    with mlflow.start_run(run_name=cfg.get("run_name")):
        yield RunTracker(enabled=True)
