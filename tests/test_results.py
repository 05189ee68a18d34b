"""Result container tests"""

import warnings

import numpy as np
import pytest

from crossVal.core.results import CVResults, DiagnosticEvent, ScoreRecord
from crossVal.utils.helpers import save_object


def _results():
    records = (
        ScoreRecord(fold=0, test_score=0.5, n_test_samples=3, fit_time=0.1, train_score=0.9),
        ScoreRecord(fold=1, test_score=1.0, n_test_samples=2, fit_time=0.2, train_score=0.7),
    )
    return CVResults(records=records, diagnostics=(DiagnosticEvent("UserWarning", "careful", fold=1),))


class TestScoreRecord:
    """ScoreRecord.from_result"""

    def test_plain_result(self):
        record = ScoreRecord.from_result(2, (0.8, 10, 0.5))
        assert record == ScoreRecord(fold=2, test_score=0.8, n_test_samples=10, fit_time=0.5)

    def test_full_result(self):
        record = ScoreRecord.from_result(0, (0.9, 0.8, 10, 0.5, {"C": 1}), True, True)
        assert record.train_score == 0.9
        assert record.test_score == 0.8
        assert record.parameters == {"C": 1}


class TestDiagnosticEvent:
    """DiagnosticEvent.from_warning"""

    def test_from_warning(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warnings.warn("odd", RuntimeWarning)
        event = DiagnosticEvent.from_warning(caught[0], fold=3)
        assert event == DiagnosticEvent("RuntimeWarning", "odd", 3)


class TestCVResults:
    """CVResults aggregation and persistence"""

    def test_summary(self):
        summary = _results().summary()
        assert summary["score_mean"] == pytest.approx(0.75)
        assert summary["score_std"] == pytest.approx(0.25)
        assert summary["score_min"] == 0.5
        assert summary["score_max"] == 1.0
        assert summary["n_folds"] == 2
        assert summary["total_samples"] == 5
        assert summary["total_fit_time"] == pytest.approx(0.3)
        assert summary["train_score_mean"] == pytest.approx(0.8)

    def test_empty_summary(self):
        assert CVResults().summary() == {"n_folds": 0, "total_samples": 0}
        assert CVResults().train_scores is None

    def test_scores(self):
        results = _results()
        np.testing.assert_array_equal(results.scores, [0.5, 1.0])
        np.testing.assert_array_equal(results.train_scores, [0.9, 0.7])

    def test_to_frame(self):
        frame = _results().to_frame()
        assert list(frame.columns) == [
            "fold", "test_score", "n_test_samples", "fit_time", "train_score", "parameters"
        ]
        assert frame["test_score"].tolist() == [0.5, 1.0]

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "results.joblib"
        _results().save(path)
        loaded = CVResults.load(path)
        assert loaded == _results()

    def test_load_wrong_type(self, tmp_path):
        path = tmp_path / "other.joblib"
        save_object({"not": "results"}, path)
        with pytest.raises(TypeError):
            CVResults.load(path)
