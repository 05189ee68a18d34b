"""
Train/test subsetting of datasets and fit parameters.
"""

from typing import Any, Optional, Tuple

import numpy as np
import pandas as pd

from .base import get_capabilities
from .exceptions import ConfigError


def _is_arraylike(x: Any) -> bool:
    if isinstance(x, (str, bytes, dict)):
        return False
    return hasattr(x, "shape") or hasattr(x, "__len__") or hasattr(x, "__array__")


def num_samples(x: Any) -> int:
    """Return the leading dimension of an array-like."""
    shape = getattr(x, "shape", None)
    if shape is not None:
        if len(shape) == 0:
            raise ConfigError(f"Singleton array {x!r} cannot be considered a valid collection")
        return int(shape[0])
    if not _is_arraylike(x) or not hasattr(x, "__len__"):
        raise ConfigError(f"Expected sequence or array-like, got {type(x)}")
    return len(x)


def check_consistent_length(*arrays: Any) -> None:
    """Check that all non-None arrays share the same number of samples."""
    lengths = [num_samples(x) for x in arrays if x is not None]
    if len(set(lengths)) > 1:
        raise ConfigError(f"Found input variables with inconsistent numbers of samples: {lengths}")


def safe_indexing(x: Any, indices: Any) -> Any:
    """Select the rows (or elements) of ``x`` at ``indices``."""
    indices = np.asarray(indices, dtype=np.intp)
    if isinstance(x, (pd.DataFrame, pd.Series)):
        return x.iloc[indices]
    if hasattr(x, "shape"):
        if len(x.shape) == 1:
            return x[indices]
        return x[indices, ...]
    return [x[idx] for idx in indices]


def safe_split(
    estimator: Any,
    X: Any,
    y: Any,
    indices: Any,
    train_indices: Optional[Any] = None
) -> Tuple[Any, Optional[Any]]:
    """
    Create the subset of a dataset at ``indices``.

    Args:
        estimator: Estimator the subset is meant for
        X: Features, 1-D or 2-D
        y: Targets, or None
        indices: Sample indices to select
        train_indices: Training indices, only used for precomputed kernels

    Returns:
        Tuple of (X_subset, y_subset), y_subset being None when y is None

    Raises:
        ConfigError: If X is not 1-D/2-D, or not square for a pairwise estimator
        NotImplementedError: If the estimator works on a precomputed kernel matrix
    """
    if get_capabilities(estimator).is_pairwise:
        shape = getattr(X, "shape", None)
        if shape is None or len(shape) != 2 or shape[0] != shape[1]:
            raise ConfigError("X should be a square kernel matrix")
        # rows at indices, columns at train_indices (or indices)
        raise NotImplementedError(
            "Cross-validation of estimators on precomputed kernel or affinity matrices is not supported"
        )

    ndim = getattr(X, "ndim", 1)
    if ndim > 2:
        raise ConfigError(f"X must be 1D or 2D, got {ndim} dimensions")
    X_subset = safe_indexing(X, indices)

    if y is not None:
        y_subset = safe_indexing(y, indices)
    else:
        y_subset = None

    return X_subset, y_subset


def index_param_value(X: Any, v: Any, indices: Any) -> Any:
    """
    Re-index a fit parameter alongside X.

    Array-likes with as many samples as X (sample weights, for instance) are
    subset with ``indices``; every other value passes through untouched.
    """
    if not _is_arraylike(v):
        return v
    try:
        if num_samples(v) != num_samples(X):
            return v
    except ConfigError:
        return v
    return safe_indexing(v, indices)
