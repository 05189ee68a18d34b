"""check_cv unit tests"""

import numpy as np
import pytest
from sklearn.model_selection import KFold as SklearnKFold

from crossVal.core.base import FoldSet
from crossVal.core.exceptions import ConfigError
from crossVal.core.registry import ExternalSplitter
from crossVal.core.splitters import KFold, StratifiedKFold
from crossVal.core.validation import build_kfold, check_cv


class TestCheckCv:
    """check_cv input normalisation"""

    def test_none_means_three_folds(self, regression_data):
        X, y = regression_data
        folds = check_cv(None, X, y)
        assert isinstance(folds, KFold)
        assert len(folds) == 3

    def test_int_for_classifier_with_discrete_target_stratifies(self, imbalanced_binary):
        X, y = imbalanced_binary
        assert isinstance(check_cv(3, X, y, classifier=True), StratifiedKFold)

    def test_int_without_classifier_uses_kfold(self, imbalanced_binary):
        X, y = imbalanced_binary
        folds = check_cv(3, X, y, classifier=False)
        assert isinstance(folds, KFold)
        assert [fold.test.tolist() for fold in folds] == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    def test_continuous_target_never_stratifies(self):
        X = np.zeros((6, 1))
        y = np.linspace(0.1, 0.9, 6)
        assert isinstance(check_cv(2, X, y, classifier=True), KFold)

    def test_numpy_integer(self, regression_data):
        X, y = regression_data
        assert len(check_cv(np.int64(2), X, y)) == 2

    def test_fold_set_passes_through(self, regression_data):
        X, y = regression_data
        folds = KFold(6, n_folds=2)
        assert check_cv(folds, X, y) is folds

    def test_splitter_object_is_wrapped(self, regression_data):
        X, y = regression_data
        folds = check_cv(SklearnKFold(n_splits=2), X, y)
        assert isinstance(folds, ExternalSplitter)
        assert [fold.test.tolist() for fold in folds] == [[0, 1, 2], [3, 4, 5]]

    def test_named_splitter(self, regression_data):
        X, y = regression_data
        folds = check_cv("leave_one_out", X, y)
        assert len(folds) == 6
        assert folds.is_partition()

    def test_iterable_of_pairs(self, regression_data):
        X, y = regression_data
        pairs = (([2, 3, 4, 5], [0, 1]) for _ in range(2))
        folds = check_cv(pairs, X, y)
        assert isinstance(folds, FoldSet)
        assert len(folds) == 2
        assert folds.n_samples == 6
        assert not folds.is_partition()

    @pytest.mark.parametrize("cv", [True, 2.5, object()])
    def test_invalid_cv(self, cv, regression_data):
        X, y = regression_data
        with pytest.raises(ConfigError):
            check_cv(cv, X, y)

    def test_unknown_name(self, regression_data):
        X, y = regression_data
        with pytest.raises(ConfigError, match="Unknown splitter"):
            check_cv("no_such_splitter", X, y)

    def test_too_many_folds(self, regression_data):
        X, y = regression_data
        with pytest.raises(ConfigError):
            check_cv(7, X, y)


class TestBuildKFold:
    """build_kfold"""

    def test_falls_back_to_y_length(self):
        assert len(build_kfold(2, X=None, y=np.arange(4))) == 2

    def test_needs_data(self):
        with pytest.raises(ConfigError):
            build_kfold(2)

    def test_shuffle_arguments_are_forwarded(self, imbalanced_binary):
        _, y = imbalanced_binary
        folds = build_kfold(3, y=y, classifier=True, shuffle=True, random_state=0)
        assert folds.shuffle
        assert folds.random_state == 0

    def test_column_vector_target_stratifies(self, imbalanced_binary):
        X, y = imbalanced_binary
        folds = check_cv(3, X, y.reshape(-1, 1), classifier=True)
        assert isinstance(folds, StratifiedKFold)
        assert [fold.test.tolist() for fold in folds] == [[0, 1, 6], [2, 3, 7], [4, 5, 8]]
