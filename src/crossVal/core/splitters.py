"""
Fold partitioners for crossVal.

This module contains the natively implemented K-fold and stratified K-fold
partitioners. Both build their folds eagerly and are immutable FoldSets.
"""

import warnings
from typing import Any, Optional

import numpy as np

from .base import FoldSet, complement_folds
from .exceptions import ConfigError, StratificationWarning
from .random_state import check_random_state, shuffle_in_place


def check_n_folds(n_folds: Any) -> int:
    """Validate a fold count."""
    if isinstance(n_folds, bool) or not isinstance(n_folds, (int, np.integer)):
        raise ConfigError(f"n_folds must be an integer, got {n_folds!r}")
    if n_folds < 2:
        raise ConfigError(
            f"k-fold cross-validation requires at least one train/test split "
            f"by setting n_folds=2 or more, got n_folds={n_folds}"
        )
    return int(n_folds)


def kfold_sizes(n: int, n_folds: int) -> np.ndarray:
    """Sizes of the test sets: the first ``n % n_folds`` folds hold one extra item."""
    fold_sizes = np.full(n_folds, n // n_folds, dtype=np.intp)
    fold_sizes[:n % n_folds] += 1
    if fold_sizes.sum() != n:
        raise ConfigError(f"Fold sizes {fold_sizes.tolist()} do not add up to {n}")
    return fold_sizes


class KFold(FoldSet):
    """
    K-Folds cross-validation partitioner.

    Splits ``n`` items into ``n_folds`` consecutive folds (without shuffling
    by default). Each fold is used once as the test set while the remaining
    folds form the training set.

    The first ``n % n_folds`` folds have size ``n // n_folds + 1``, the other
    folds have size ``n // n_folds``.

    Args:
        n: Total number of items
        n_folds: Number of folds, at least 2
        shuffle: Whether to shuffle the items before carving the folds
        random_state: Seed or random source used when ``shuffle`` is set

    Example:
        >>> [fold.test.tolist() for fold in KFold(7, n_folds=3)]
        [[0, 1, 2], [3, 4], [5, 6]]
    """

    def __init__(self, n: int, n_folds: int = 3, shuffle: bool = False, random_state: Any = None):
        n_folds = check_n_folds(n_folds)
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
            raise ConfigError(f"n must be a positive integer, got {n!r}")
        if n_folds > n:
            raise ConfigError(f"Cannot have number of folds n_folds={n_folds} greater than the number of items n={n}")

        self.n_folds = n_folds
        self.shuffle = shuffle
        self.random_state = random_state

        indices = np.arange(n)
        if shuffle:
            rng = check_random_state(random_state)
            shuffle_in_place(rng, indices)

        test_sets = []
        current = 0
        for fold_size in kfold_sizes(int(n), n_folds):
            start, stop = current, current + fold_size
            test_sets.append(indices[start:stop])
            current = stop

        super().__init__(complement_folds(int(n), test_sets), n_samples=int(n))


class StratifiedKFold(FoldSet):
    """
    Stratified K-Folds cross-validation partitioner.

    Each label's samples are partitioned with their own KFold so every fold
    keeps roughly the global class proportions. A label with fewer members
    than ``n_folds`` is partitioned as if it had ``n_folds`` members and the
    positions past its real count are dropped, so some test folds may come
    out smaller than requested (possibly empty). Every sample is still
    assigned to exactly one test fold; this is checked after assignment.

    Args:
        y: Label vector
        n_folds: Number of folds, at least 2
        shuffle: Whether to shuffle each label's samples before splitting
        random_state: Seed or random source used when ``shuffle`` is set. A
            single random source is shared by all labels, in label order.
    """

    def __init__(self, y: Any, n_folds: int = 3, shuffle: bool = False, random_state: Any = None):
        n_folds = check_n_folds(n_folds)
        y = np.asarray(y)
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()
        if y.ndim != 1:
            raise ConfigError(f"y must be one-dimensional for stratification, got shape {y.shape}")
        n_samples = y.shape[0]
        if n_samples == 0:
            raise ConfigError("Cannot stratify an empty label vector")

        self.n_folds = n_folds
        self.shuffle = shuffle
        self.random_state = random_state

        unique_labels, y_inversed, label_counts = np.unique(y, return_inverse=True, return_counts=True)
        y_inversed = y_inversed.ravel()
        self.classes_ = unique_labels

        min_labels = int(label_counts.min())
        if n_folds > min_labels:
            warnings.warn(
                f"The least populated class in y has only {min_labels} members, which is too few. "
                f"The minimum number of labels for any class cannot be less than n_folds={n_folds}.",
                StratificationWarning,
                stacklevel=2,
            )

        rng: Optional[Any] = check_random_state(random_state) if shuffle else random_state

        per_label_cvs = [
            KFold(max(int(count), n_folds), n_folds=n_folds, shuffle=shuffle, random_state=rng)
            for count in label_counts
        ]

        test_folds = np.full(n_samples, -1, dtype=np.intp)
        for label_idx, per_label_cv in enumerate(per_label_cvs):
            label_mask = y_inversed == label_idx
            label_test_folds = test_folds[label_mask]
            count = label_counts[label_idx]
            for test_fold_idx, (_, test_split) in enumerate(per_label_cv):
                # KFold(max(c, n_folds)) can overshoot a small label
                test_split = test_split[test_split < count]
                label_test_folds[test_split] = test_fold_idx
            test_folds[label_mask] = label_test_folds

        test_sets = [np.flatnonzero(test_folds == fold_idx) for fold_idx in range(n_folds)]
        super().__init__(complement_folds(n_samples, test_sets), n_samples=n_samples)
