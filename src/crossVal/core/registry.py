"""
Named splitter factories.

Native partitioners and scikit-learn's richer iterators sit behind the same
``factory(X, y, groups, **params) -> FoldSet`` interface, so call sites can
ask for any of them by name. Iterators from scikit-learn go through
``ExternalSplitter``, the one place where foreign fold indices are checked and
normalised.
"""

from typing import Any, Callable, Dict, List, Optional

import numpy as np

from .base import FoldSet, as_index_array
from .exceptions import ConfigError
from .splitters import KFold, StratifiedKFold
from .splitting import num_samples
from ..utils.helpers import import_class
from ..utils.logger import get_logger

SplitterFactory = Callable[..., FoldSet]

EXTERNAL_MODULE = "sklearn.model_selection"

NATIVE_SPLITTERS = ("kfold", "stratified_kfold")

EXTERNAL_SPLITTERS = {
    "leave_one_out": "LeaveOneOut",
    "leave_p_out": "LeavePOut",
    "shuffle_split": "ShuffleSplit",
    "stratified_shuffle_split": "StratifiedShuffleSplit",
    "group_kfold": "GroupKFold",
    "leave_one_group_out": "LeaveOneGroupOut",
    "leave_p_groups_out": "LeavePGroupsOut",
    "group_shuffle_split": "GroupShuffleSplit",
    "repeated_kfold": "RepeatedKFold",
    "repeated_stratified_kfold": "RepeatedStratifiedKFold",
    "time_series_split": "TimeSeriesSplit",
}


class ExternalSplitter(FoldSet):
    """
    FoldSet adapter around a scikit-learn style splitter.

    The wrapped splitter's ``split(X, y, groups)`` is consumed once; every
    index array is converted to integers and checked to lie in
    ``0..n_samples-1``. The resulting folds need not partition the samples
    (shuffle-split variants, for instance, leave samples out).
    """

    def __init__(self, splitter: Any, X: Any, y: Any = None, groups: Any = None):
        if X is None:
            raise ConfigError("X is required to run an external splitter")
        n = num_samples(X)
        self.splitter = splitter
        folds = [
            (self._normalise(train, n), self._normalise(test, n))
            for train, test in splitter.split(X, y, groups)
        ]
        super().__init__(folds, n_samples=n)

    @staticmethod
    def _normalise(indices: Any, n: int) -> np.ndarray:
        arr = as_index_array(indices)
        if arr.size and (arr.min() < 0 or arr.max() >= n):
            raise ConfigError(f"External splitter produced indices outside 0..{n - 1}")
        return arr


def _kfold_factory(X: Any, y: Any = None, groups: Any = None, **params) -> FoldSet:
    data = X if X is not None else y
    if data is None:
        raise ConfigError("X or y is required to build a KFold")
    return KFold(num_samples(data), **params)


def _stratified_kfold_factory(X: Any, y: Any = None, groups: Any = None, **params) -> FoldSet:
    if y is None:
        raise ConfigError("y is required to build a StratifiedKFold")
    return StratifiedKFold(y, **params)


def _external_factory(class_name: str, module_name: str = EXTERNAL_MODULE) -> SplitterFactory:
    def factory(X: Any, y: Any = None, groups: Any = None, **params) -> FoldSet:
        splitter_class = import_class(module_name, class_name)
        return ExternalSplitter(splitter_class(**params), X, y, groups)

    factory.__name__ = f"{class_name}_factory"
    return factory


class SplitterRegistry:
    """Registry of named splitter factories."""

    def __init__(self):
        self.logger = get_logger("SplitterRegistry")
        self._factories: Dict[str, SplitterFactory] = {}

    def register(self, name: str, factory: SplitterFactory) -> 'SplitterRegistry':
        """Register ``factory`` under ``name``, replacing any previous entry."""
        if not callable(factory):
            raise ConfigError(f"Splitter factory for {name!r} must be callable")
        self._factories[name] = factory
        return self

    def register_external(self, name: str, class_name: str, module_name: str = EXTERNAL_MODULE) -> 'SplitterRegistry':
        """Register a splitter class imported lazily from ``module_name``."""
        return self.register(name, _external_factory(class_name, module_name))

    def create(self, name: str, X: Any = None, y: Any = None, groups: Any = None, **params) -> FoldSet:
        """
        Build the FoldSet registered under ``name``.

        Args:
            name: Registered splitter name
            X: Features
            y: Targets (required by stratified splitters)
            groups: Group labels (required by group-aware splitters)
            **params: Passed to the splitter's constructor

        Returns:
            The materialised FoldSet
        """
        if name not in self._factories:
            raise ConfigError(f"Unknown splitter {name!r}; known splitters: {', '.join(self.names())}")
        self.logger.debug(f"Building splitter {name} with params {params}")
        return self._factories[name](X, y, groups, **params)

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


def _build_default_registry() -> SplitterRegistry:
    registry = SplitterRegistry()
    registry.register("kfold", _kfold_factory)
    registry.register("stratified_kfold", _stratified_kfold_factory)
    for name, class_name in EXTERNAL_SPLITTERS.items():
        registry.register_external(name, class_name)
    return registry


default_registry = _build_default_registry()


def make_splitter(
    name: str,
    X: Any = None,
    y: Any = None,
    groups: Any = None,
    registry: Optional[SplitterRegistry] = None,
    **params
) -> FoldSet:
    """Build a named splitter from ``registry`` (the default registry if omitted)."""
    return (registry or default_registry).create(name, X, y, groups, **params)
