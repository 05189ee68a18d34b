"""
Cross-validation input checking for crossVal.
"""

from collections.abc import Iterable
from typing import Any, Optional

import numpy as np
from sklearn.utils.multiclass import type_of_target

from .base import FoldSet
from .exceptions import ConfigError
from .registry import ExternalSplitter, SplitterRegistry, default_registry
from .splitters import KFold, StratifiedKFold
from .splitting import num_samples

DEFAULT_N_FOLDS = 3
STRATIFIABLE_TARGETS = ("binary", "multiclass")


def build_kfold(
    n_folds: int,
    X: Any = None,
    y: Any = None,
    classifier: bool = False,
    shuffle: bool = False,
    random_state: Any = None
) -> FoldSet:
    """
    Build the default partitioner for ``n_folds`` folds.

    Stratified K-fold when ``classifier`` is set and y is a binary or
    multiclass target, plain K-fold over the rows of X (or y) otherwise.
    """
    if classifier and y is not None and type_of_target(y) in STRATIFIABLE_TARGETS:
        return StratifiedKFold(y, n_folds=n_folds, shuffle=shuffle, random_state=random_state)
    data = X if X is not None else y
    if data is None:
        raise ConfigError("X or y is required to build a KFold")
    return KFold(num_samples(data), n_folds=n_folds, shuffle=shuffle, random_state=random_state)


def check_cv(
    cv: Any = None,
    X: Any = None,
    y: Any = None,
    classifier: bool = False,
    groups: Any = None,
    registry: Optional[SplitterRegistry] = None
) -> FoldSet:
    """
    Input checker utility for building a CV in a user friendly way.

    Args:
        cv: None (3 folds), an int (number of folds), the name of a
            registered splitter, a FoldSet, a scikit-learn style splitter
            object, or an iterable of (train, test) pairs
        X: The data the folds will be applied on
        y: The target variable
        classifier: Whether the task is a classification task, in which case
            stratified K-fold is used for binary and multiclass targets
        groups: Group labels, for group-aware named splitters
        registry: Registry used to resolve splitter names

    Returns:
        A FoldSet, whatever the input type
    """
    if cv is None:
        cv = DEFAULT_N_FOLDS
    if isinstance(cv, bool):
        raise ConfigError(f"cv must not be a boolean, got {cv!r}")
    if isinstance(cv, (int, np.integer)):
        return build_kfold(int(cv), X, y, classifier=classifier)
    if isinstance(cv, str):
        return (registry or default_registry).create(cv, X, y, groups)
    if isinstance(cv, FoldSet):
        return cv
    if hasattr(cv, "split"):
        return ExternalSplitter(cv, X, y, groups)
    if isinstance(cv, Iterable):
        n = num_samples(X) if X is not None else None
        return FoldSet.from_iterable(cv, n_samples=n)
    raise ConfigError(
        "Expected cv as an integer, a splitter name, a FoldSet, a splitter object "
        f"or an iterable of (train, test) pairs, got {cv!r}"
    )
