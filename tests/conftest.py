"""Shared fixtures."""

import numpy as np
import pandas as pd
import pytest

from tests.fixtures.estimators import RecordingEstimator


@pytest.fixture
def regression_data():
    """Six samples, two features, targets 0..5."""
    X = np.arange(12, dtype=float).reshape(6, 2)
    y = np.arange(6, dtype=float)
    return X, y


@pytest.fixture
def imbalanced_binary():
    """Nine samples, six of class 0 then three of class 1."""
    X = np.arange(18, dtype=float).reshape(9, 2)
    y = np.array([0] * 6 + [1] * 3)
    return X, y


@pytest.fixture
def classification_frame():
    """A small pandas classification dataset."""
    rng = np.random.RandomState(0)
    X = pd.DataFrame(rng.randn(30, 3), columns=["a", "b", "c"])
    y = pd.Series([0, 1, 2] * 10, name="target")
    return X, y


@pytest.fixture
def recording():
    RecordingEstimator.reset()
    yield RecordingEstimator
    RecordingEstimator.reset()
