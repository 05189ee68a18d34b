"""Small estimators with predictable behaviour for the test-suite."""

import numpy as np

from crossVal.core.base import EstimatorCapabilities


class MeanRegressor:
    """Predicts the (weighted) mean of the training targets plus ``offset``."""

    capabilities = EstimatorCapabilities(is_classifier=False, is_pairwise=False, has_score=True)

    def __init__(self, offset=0.0):
        self.offset = offset

    def clone(self):
        return MeanRegressor(offset=self.offset)

    def set_params(self, **params):
        for key, value in params.items():
            setattr(self, key, value)
        return self

    def fit(self, X, y, sample_weight=None):
        self.fit_sample_weight_ = sample_weight
        self.n_train_ = len(y)
        self.mean_ = float(np.average(np.asarray(y, dtype=float), weights=sample_weight)) + self.offset
        return self

    def predict(self, X):
        return np.full(len(X), self.mean_)

    def score(self, X, y):
        return -float(np.mean((np.asarray(y, dtype=float) - self.predict(X)) ** 2))


class RecordingEstimator(MeanRegressor):
    """MeanRegressor that remembers every instance that was fitted."""

    fitted = []
    clones = 0

    def clone(self):
        RecordingEstimator.clones += 1
        return RecordingEstimator(offset=self.offset)

    def fit(self, X, y, sample_weight=None):
        RecordingEstimator.fitted.append(self)
        self.fit_count_ = getattr(self, "fit_count_", 0) + 1
        return super().fit(X, y, sample_weight=sample_weight)

    @classmethod
    def reset(cls):
        cls.fitted = []
        cls.clones = 0


class CentroidClusterer:
    """Unsupervised estimator: fit(X) only, scored by negative inertia."""

    def clone(self):
        return CentroidClusterer()

    def fit(self, X):
        self.center_ = np.asarray(X, dtype=float).mean(axis=0)
        return self

    def predict(self, X):
        return np.zeros(len(X), dtype=int)

    def score(self, X):
        return -float(((np.asarray(X, dtype=float) - self.center_) ** 2).sum())


class NoScoreEstimator:
    """Has fit and predict but no score method."""

    def clone(self):
        return NoScoreEstimator()

    def fit(self, X, y=None):
        return self

    def predict(self, X):
        return np.zeros(len(X))


class KernelEstimator(MeanRegressor):
    """Declares that it works on precomputed kernel matrices."""

    capabilities = EstimatorCapabilities(is_classifier=False, is_pairwise=True, has_score=True)

    def clone(self):
        return KernelEstimator(offset=self.offset)


class FailingEstimator(MeanRegressor):
    """Raises on fit."""

    def clone(self):
        return FailingEstimator()

    def fit(self, X, y, sample_weight=None):
        raise RuntimeError("fit failed on purpose")
