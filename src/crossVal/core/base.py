"""
Base types for crossVal.

This module defines the fold containers, the estimator capability descriptor
and the cross-validation configuration shared by every other component.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

import numpy as np
from sklearn.base import BaseEstimator, clone
from sklearn.base import is_classifier as sklearn_is_classifier

from .exceptions import ConfigError


def as_index_array(indices: Any) -> np.ndarray:
    """Convert an index sequence into a read-only 1-D integer array."""
    arr = np.asarray(indices)
    if arr.size == 0:
        arr = arr.astype(np.intp)
    if arr.ndim != 1:
        raise ConfigError(f"Fold indices must be one-dimensional, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ConfigError(f"Fold indices must be integers, got dtype {arr.dtype}")
    arr = arr.astype(np.intp, copy=True)
    arr.setflags(write=False)
    return arr


class Fold(NamedTuple):
    """One (train, test) split of a dataset."""
    train: np.ndarray
    test: np.ndarray


class FoldSet(Sequence):
    """
    Ordered, immutable collection of folds for one evaluation run.

    Iterating yields ``Fold`` tuples, so a FoldSet can be unpacked the same
    way as the output of a scikit-learn ``split`` call::

        for train, test in fold_set:
            ...
    """

    def __init__(self, folds: Iterable[Tuple[Any, Any]], n_samples: Optional[int] = None):
        built = []
        for train, test in folds:
            fold = Fold(as_index_array(train), as_index_array(test))
            if np.intersect1d(fold.train, fold.test).size:
                raise ConfigError("A fold's train and test indices must be disjoint")
            built.append(fold)
        self._folds: Tuple[Fold, ...] = tuple(built)
        self.n_samples = n_samples

    @classmethod
    def from_iterable(cls, folds: Iterable[Tuple[Any, Any]], n_samples: Optional[int] = None) -> 'FoldSet':
        """Materialise any iterable of (train, test) pairs."""
        return cls(folds, n_samples=n_samples)

    def __len__(self) -> int:
        return len(self._folds)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return FoldSet(self._folds[item], n_samples=self.n_samples)
        return self._folds[item]

    def __repr__(self) -> str:
        # may run on a half-built instance when __init__ raised
        folds = getattr(self, "_folds", ())
        sizes = [len(fold.test) for fold in folds]
        n_samples = getattr(self, "n_samples", None)
        return f"{self.__class__.__name__}(n_splits={len(folds)}, n_samples={n_samples}, test_sizes={sizes})"

    def get_n_splits(self, X=None, y=None, groups=None) -> int:
        """Number of folds; the arguments are accepted for scikit-learn compatibility."""
        return len(self._folds)

    def split(self, X=None, y=None, groups=None):
        """Yield the stored (train, test) pairs."""
        for fold in self._folds:
            yield fold.train, fold.test

    def is_partition(self, n_samples: Optional[int] = None) -> bool:
        """Whether the test sets cover ``0..n-1`` exactly once."""
        n = self.n_samples if n_samples is None else n_samples
        if n is None:
            return False
        return is_partition([fold.test for fold in self._folds], n)

    def test_folds(self) -> np.ndarray:
        """Per-sample fold assignment; only defined when the test sets form a partition."""
        if not self.is_partition():
            raise ConfigError("Test sets of this FoldSet do not partition the samples")
        assignment = np.empty(self.n_samples, dtype=np.intp)
        for fold_idx, fold in enumerate(self._folds):
            assignment[fold.test] = fold_idx
        return assignment


def is_partition(index_sets: Iterable[np.ndarray], n: int) -> bool:
    """Check that the given index sets hold every integer in ``0..n-1`` exactly once."""
    parts = [np.asarray(part) for part in index_sets]
    if not parts:
        return n == 0
    locs = np.concatenate(parts)
    if locs.shape[0] != n:
        return False
    hit = np.zeros(n, dtype=bool)
    if locs.size and (locs.min() < 0 or locs.max() >= n):
        return False
    hit[locs] = True
    return bool(np.all(hit))


def complement_folds(n: int, test_sets: List[np.ndarray]) -> List[Fold]:
    """Pair each test set with the remaining indices of ``0..n-1``."""
    if sum(len(test) for test in test_sets) != n:
        raise ConfigError(
            f"Test sets hold {sum(len(test) for test in test_sets)} indices, expected {n}"
        )
    universe = np.arange(n)
    return [Fold(np.setdiff1d(universe, test), np.asarray(test, dtype=np.intp)) for test in test_sets]


def folds_from_test_sets(n: int, test_sets: List[np.ndarray]) -> FoldSet:
    """Build a FoldSet whose train sets are the complements of ``test_sets``."""
    return FoldSet(complement_folds(n, test_sets), n_samples=n)


_PRECOMPUTED_ATTRIBUTES = ("kernel", "metric", "affinity")


@dataclass(frozen=True)
class EstimatorCapabilities:
    """What the evaluation harness may assume about an estimator."""
    is_classifier: bool = False
    is_pairwise: bool = False
    has_score: bool = False

    @classmethod
    def from_estimator(cls, estimator: Any) -> 'EstimatorCapabilities':
        """Derive the descriptor from the attributes an estimator declares."""
        if isinstance(estimator, BaseEstimator):
            classifier = sklearn_is_classifier(estimator)
        else:
            classifier = getattr(estimator, "_estimator_type", None) == "classifier"

        pairwise = bool(getattr(estimator, "_pairwise", False))
        for attr in _PRECOMPUTED_ATTRIBUTES:
            value = getattr(estimator, attr, None)
            if isinstance(value, str) and value == "precomputed":
                pairwise = True

        return cls(
            is_classifier=bool(classifier),
            is_pairwise=pairwise,
            has_score=callable(getattr(estimator, "score", None)),
        )


def get_capabilities(estimator: Any) -> EstimatorCapabilities:
    """Return the estimator's explicit ``capabilities`` or derive them."""
    declared = getattr(estimator, "capabilities", None)
    if isinstance(declared, EstimatorCapabilities):
        return declared
    return EstimatorCapabilities.from_estimator(estimator)


def clone_estimator(estimator: Any) -> Any:
    """Return an independent, unfitted copy of ``estimator``."""
    own_clone = getattr(estimator, "clone", None)
    if callable(own_clone):
        return own_clone()
    return clone(estimator)


@dataclass
class CVConfig:
    """Configuration for a cross-validation run."""
    n_folds: int = 3
    shuffle: bool = False
    random_state: Optional[int] = None
    splitter: Optional[str] = None
    splitter_params: Dict[str, Any] = field(default_factory=dict)
    scoring: Optional[Union[str, Any]] = None
    n_jobs: int = 1
    verbose: int = 0
    error_score: Union[str, float] = "raise"
    return_train_score: bool = False
    return_parameters: bool = False

    def validate(self) -> 'CVConfig':
        """Reject settings the harness cannot honour."""
        if isinstance(self.n_folds, bool) or not isinstance(self.n_folds, (int, np.integer)):
            raise ConfigError(f"n_folds must be an integer, got {self.n_folds!r}")
        if self.n_folds < 2:
            raise ConfigError(f"n_folds must be at least 2, got {self.n_folds}")
        if self.n_jobs != 1:
            raise ConfigError(
                f"n_jobs={self.n_jobs} requested but parallel cross-validation is not supported; use n_jobs=1"
            )
        if not (isinstance(self.error_score, str) and self.error_score == "raise"):
            raise ConfigError(f"error_score={self.error_score!r} is not supported; only 'raise' is")
        return self
