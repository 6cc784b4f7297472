import logging
import warnings

from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import Ridge
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from .features import build_feature_transform

logger = logging.getLogger(__name__)

DEFAULT_TRAINER_OPTIONS = {
    "max_iterations": 25,
    "convergence_tolerance": 0.001,
    "l2_regularization": 0.1,
}


def build_regressor(n_samples: int,
                    max_iterations: int = 25,
                    convergence_tolerance: float = 0.001,
                    l2_regularization: float = 0.1,
                    random_state: int = 0) -> Ridge:
    """Stochastic L2-regularized least squares.

    ``l2_regularization`` is the per-sample penalty of the dual coordinate
    ascent objective (mean squared loss + lambda/2 * ||w||^2), which Ridge
    expresses as ``alpha = lambda * n_samples``.
    """
    return Ridge(
        alpha=l2_regularization * n_samples,
        solver="saga",
        max_iter=max_iterations,
        tol=convergence_tolerance,
        random_state=random_state,
    )


def train_model(X, y, **model_params) -> Pipeline:
    if len(X) == 0:
        raise ValueError("Cannot train on an empty dataset")
    params = {**DEFAULT_TRAINER_OPTIONS, **model_params}
    model = Pipeline([
        ("features", build_feature_transform()),
        ("scale", StandardScaler()),
        ("regressor", build_regressor(len(X), **params)),
    ])
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ConvergenceWarning)
        model.fit(X, y)
    for w in caught:
        if issubclass(w.category, ConvergenceWarning):
            # the last iterate is kept
            logger.warning("Solver stopped at %d iterations without converging: %s",
                           params["max_iterations"], w.message)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
    logger.info("Trained regressor on %d rows (%d features)",
                len(X), model.named_steps["regressor"].coef_.shape[0])
    return model
