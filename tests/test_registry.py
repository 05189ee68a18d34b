"""Splitter registry unit tests"""

import numpy as np
import pytest

from crossVal.core.base import FoldSet
from crossVal.core.exceptions import ConfigError
from crossVal.core.registry import (
    EXTERNAL_SPLITTERS,
    NATIVE_SPLITTERS,
    ExternalSplitter,
    SplitterRegistry,
    default_registry,
    make_splitter,
)
from crossVal.core.splitters import KFold, StratifiedKFold


class _OutOfRangeSplitter:
    def split(self, X, y=None, groups=None):
        yield np.array([0, 1]), np.array([len(X)])


class TestDefaultRegistry:
    """Registered splitter names"""

    def test_all_names_registered(self):
        for name in NATIVE_SPLITTERS + tuple(EXTERNAL_SPLITTERS):
            assert name in default_registry
        assert default_registry.names() == sorted(default_registry.names())

    def test_native_kfold(self):
        folds = make_splitter("kfold", X=np.zeros((6, 1)), n_folds=3)
        assert isinstance(folds, KFold)
        assert [fold.test.tolist() for fold in folds] == [[0, 1], [2, 3], [4, 5]]

    def test_native_kfold_from_y(self):
        assert len(make_splitter("kfold", y=np.arange(4), n_folds=2)) == 2

    def test_native_stratified_kfold(self, imbalanced_binary):
        X, y = imbalanced_binary
        folds = make_splitter("stratified_kfold", X, y, n_folds=3)
        assert isinstance(folds, StratifiedKFold)

    def test_stratified_kfold_needs_y(self):
        with pytest.raises(ConfigError):
            make_splitter("stratified_kfold", X=np.zeros((4, 1)))

    def test_group_kfold(self):
        X = np.zeros((6, 1))
        groups = np.array([0, 0, 1, 1, 2, 2])
        folds = make_splitter("group_kfold", X, groups=groups, n_splits=3)
        assert isinstance(folds, ExternalSplitter)
        assert folds.is_partition()
        for fold in folds:
            assert len(np.unique(groups[fold.test])) == 1
            assert np.intersect1d(groups[fold.train], groups[fold.test]).size == 0

    def test_shuffle_split_is_not_a_partition(self):
        folds = make_splitter("shuffle_split", np.zeros((10, 1)), n_splits=3, test_size=2, random_state=0)
        assert len(folds) == 3
        assert all(len(fold.test) == 2 for fold in folds)
        assert not folds.is_partition()

    def test_time_series_split(self):
        folds = make_splitter("time_series_split", np.zeros((6, 1)), n_splits=2)
        for fold in folds:
            assert fold.train.max() < fold.test.min()

    def test_unknown_name_lists_known_names(self):
        with pytest.raises(ConfigError, match="kfold"):
            make_splitter("bogus", X=np.zeros((4, 1)))


class TestSplitterRegistry:
    """Custom registries"""

    def test_register_custom_factory(self):
        registry = SplitterRegistry()

        def halves(X, y=None, groups=None, **params):
            return FoldSet([([2, 3], [0, 1]), ([0, 1], [2, 3])], n_samples=4)

        registry.register("halves", halves)
        assert "halves" in registry
        assert registry.names() == ["halves"]
        assert len(make_splitter("halves", np.zeros((4, 1)), registry=registry)) == 2
        with pytest.raises(ConfigError):
            make_splitter("kfold", np.zeros((4, 1)), registry=registry)

    def test_register_external(self):
        registry = SplitterRegistry().register_external("sk_kfold", "KFold")
        folds = registry.create("sk_kfold", np.zeros((4, 1)), n_splits=2)
        assert [fold.test.tolist() for fold in folds] == [[0, 1], [2, 3]]

    def test_register_external_missing_class(self):
        registry = SplitterRegistry().register_external("missing", "NoSuchSplitter")
        with pytest.raises(ImportError):
            registry.create("missing", np.zeros((4, 1)))

    def test_rejects_non_callable_factory(self):
        with pytest.raises(ConfigError):
            SplitterRegistry().register("broken", "not callable")


class TestExternalSplitter:
    """ExternalSplitter normalisation"""

    def test_out_of_range_indices(self):
        with pytest.raises(ConfigError, match="outside"):
            ExternalSplitter(_OutOfRangeSplitter(), np.zeros((3, 1)))

    def test_requires_x(self):
        with pytest.raises(ConfigError):
            ExternalSplitter(_OutOfRangeSplitter(), None)

    def test_indices_are_read_only(self):
        folds = make_splitter("leave_one_out", np.zeros((3, 1)))
        with pytest.raises(ValueError):
            folds[0].train[0] = 2
