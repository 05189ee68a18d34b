"""
Scorer resolution for crossVal.

A scorer is any callable ``scorer(estimator, X[, y]) -> number``.
"""

from typing import Any, Callable, Optional, Union

from sklearn.metrics import get_scorer

from .base import get_capabilities
from .exceptions import ConfigError

Scorer = Callable[..., Any]


def passthrough_scorer(estimator: Any, X: Any, y: Any = None) -> Any:
    """Score with the estimator's own ``score`` method."""
    if y is None:
        return estimator.score(X)
    return estimator.score(X, y)


def get_named_scorer(scoring: Union[str, Scorer]) -> Scorer:
    """Resolve a scorer name (see ``sklearn.metrics.get_scorer_names``) or return a callable as is."""
    if callable(scoring):
        return scoring
    if not isinstance(scoring, str):
        raise ConfigError(f"scoring must be a string, a callable or None, got {scoring!r}")
    try:
        return get_scorer(scoring)
    except (KeyError, ValueError) as e:
        raise ConfigError(f"{scoring!r} is not a valid scoring value") from e


def check_scoring(
    estimator: Any,
    scoring: Optional[Union[str, Scorer]] = None,
    allow_none: bool = False
) -> Optional[Scorer]:
    """
    Determine the scorer from user options.

    Args:
        estimator: Estimator to be scored
        scoring: Scorer name, scorer callable, or None
        allow_none: Return None instead of failing when nothing can score

    Returns:
        A scorer callable, or None when ``allow_none`` is set and the estimator
        has no ``score`` method

    Raises:
        ConfigError: If no scorer can be resolved
    """
    if scoring is not None:
        return get_named_scorer(scoring)
    if get_capabilities(estimator).has_score:
        return passthrough_scorer
    if allow_none:
        return None
    raise ConfigError(
        "If no scoring is specified, the estimator passed should have a 'score' method. "
        f"The estimator {estimator!r} does not."
    )
