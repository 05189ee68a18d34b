"""
Per-fold fitting, scoring and prediction.
"""

import numbers
import time
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .exceptions import ConfigError, ScoreTypeError
from .splitting import index_param_value, num_samples, safe_split
from ..utils.helpers import format_time
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _index_fit_params(X: Any, fit_params: Optional[Dict[str, Any]], train: np.ndarray) -> Dict[str, Any]:
    fit_params = fit_params if fit_params is not None else {}
    return {k: index_param_value(X, v, train) for k, v in fit_params.items()}


def _fit(estimator: Any, X_train: Any, y_train: Any, fit_params: Dict[str, Any]) -> None:
    if y_train is None:
        estimator.fit(X_train, **fit_params)
    else:
        estimator.fit(X_train, y_train, **fit_params)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def score(estimator: Any, X_test: Any, y_test: Any, scorer: Any) -> Any:
    """
    Compute the score of an estimator on a given test set.

    Raises:
        ScoreTypeError: If the scorer does not return a single number
    """
    if y_test is None:
        result = scorer(estimator, X_test)
    else:
        result = scorer(estimator, X_test, y_test)
    if isinstance(result, np.ndarray) and result.ndim == 0:
        result = result.item()
    if not _is_number(result):
        raise ScoreTypeError(f"scoring must return a number, got {result!r} ({type(result).__name__}) instead.")
    return result


def fit_and_score(
    estimator: Any,
    X: Any,
    y: Any,
    scorer: Any,
    train: np.ndarray,
    test: np.ndarray,
    verbose: int,
    parameters: Optional[Dict[str, Any]],
    fit_params: Optional[Dict[str, Any]],
    return_train_score: bool = False,
    return_parameters: bool = False,
    error_score: Any = "raise"
) -> Tuple[Any, ...]:
    """
    Fit estimator and compute scores for a given dataset split.

    Args:
        estimator: Estimator implementing 'fit'; it is modified in place
        X: The data to fit, 1-D or 2-D
        y: The target variable, or None for unsupervised learning
        scorer: Callable with signature ``scorer(estimator, X[, y])``
        train: Indices of training samples
        test: Indices of test samples
        verbose: The verbosity level
        parameters: Parameters to be set on the estimator before fitting
        fit_params: Parameters passed to ``estimator.fit``; arrays with one
            entry per sample are restricted to ``train``
        return_train_score: Also compute the score on the training set
        return_parameters: Also return ``parameters``
        error_score: Must be 'raise'; any fit failure propagates

    Returns:
        Tuple of ([train_score], test_score, n_test_samples, scoring_time,
        [parameters]); the bracketed fields are present only when requested
    """
    if not (isinstance(error_score, str) and error_score == "raise"):
        raise ConfigError(
            f"error_score={error_score!r} is not supported; fit failures always propagate (use 'raise')"
        )

    msg = ""
    if verbose > 1:
        if parameters is None:
            msg = "no parameters to be set"
        else:
            msg = ", ".join(f"{k}={v}" for k, v in parameters.items())
        logger.info(f"[CV] {msg}")

    if parameters is not None:
        if not callable(getattr(estimator, "set_params", None)):
            raise ConfigError(f"Parameters were given but {estimator!r} has no set_params method")
        estimator.set_params(**parameters)

    fit_params = _index_fit_params(X, fit_params, train)

    start_time = time.time()

    X_train, y_train = safe_split(estimator, X, y, train)
    X_test, y_test = safe_split(estimator, X, y, test, train)

    _fit(estimator, X_train, y_train, fit_params)

    test_score = score(estimator, X_test, y_test, scorer)
    if return_train_score:
        train_score = score(estimator, X_train, y_train, scorer)

    scoring_time = time.time() - start_time

    if verbose > 2:
        msg += f", score={test_score:.5f}"
    if verbose > 1:
        logger.info(f"[CV] {msg}  -  {format_time(scoring_time)}")

    ret = [train_score] if return_train_score else []
    ret.extend([test_score, num_samples(X_test), scoring_time])
    if return_parameters:
        ret.append(parameters)
    return tuple(ret)


def fit_and_predict(
    estimator: Any,
    X: Any,
    y: Any,
    train: np.ndarray,
    test: np.ndarray,
    verbose: int,
    fit_params: Optional[Dict[str, Any]]
) -> Tuple[Any, np.ndarray]:
    """
    Fit estimator and predict values for a given dataset split.

    Returns:
        Tuple of (predictions on the test samples, ``test``)
    """
    fit_params = _index_fit_params(X, fit_params, train)

    X_train, y_train = safe_split(estimator, X, y, train)
    X_test, _ = safe_split(estimator, X, y, test, train)

    _fit(estimator, X_train, y_train, fit_params)
    if verbose > 1:
        logger.info(f"[CV] fitted on {len(train)} samples, predicting {len(test)}")
    preds = estimator.predict(X_test)
    return preds, test
