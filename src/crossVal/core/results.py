"""
Result containers for crossVal.

This module contains the per-fold score records, the diagnostic events
captured during an evaluation and their aggregate.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union
from pathlib import Path
import warnings

import numpy as np
import pandas as pd

from ..utils.helpers import load_object, save_object


@dataclass(frozen=True)
class ScoreRecord:
    """Outcome of one fold."""
    fold: int
    test_score: float
    n_test_samples: int
    fit_time: float
    train_score: Optional[float] = None
    parameters: Optional[Dict[str, Any]] = None

    @classmethod
    def from_result(
        cls,
        fold: int,
        result: Sequence[Any],
        return_train_score: bool = False,
        return_parameters: bool = False
    ) -> 'ScoreRecord':
        """Build a record from the tuple returned by ``fit_and_score``."""
        values = list(result)
        train_score = values.pop(0) if return_train_score else None
        parameters = values.pop() if return_parameters else None
        test_score, n_test_samples, fit_time = values
        return cls(
            fold=fold,
            test_score=test_score,
            n_test_samples=n_test_samples,
            fit_time=fit_time,
            train_score=train_score,
            parameters=parameters,
        )


@dataclass(frozen=True)
class DiagnosticEvent:
    """A warning raised while building folds or fitting, kept with the results."""
    category: str
    message: str
    fold: Optional[int] = None

    @classmethod
    def from_warning(cls, record: warnings.WarningMessage, fold: Optional[int] = None) -> 'DiagnosticEvent':
        return cls(category=record.category.__name__, message=str(record.message), fold=fold)


@dataclass(frozen=True)
class CVResults:
    """Score records of an evaluation run, in fold order."""
    records: Tuple[ScoreRecord, ...] = ()
    diagnostics: Tuple[DiagnosticEvent, ...] = ()

    @property
    def scores(self) -> np.ndarray:
        return np.array([record.test_score for record in self.records], dtype=float)

    @property
    def train_scores(self) -> Optional[np.ndarray]:
        if not self.records or self.records[0].train_score is None:
            return None
        return np.array([record.train_score for record in self.records], dtype=float)

    def summary(self) -> Dict[str, Any]:
        """
        Aggregate the fold scores.

        Returns:
            Dictionary with mean/std/min/max of the test scores, the number of
            folds, the number of test samples and the total fit time
        """
        if not self.records:
            return {'n_folds': 0, 'total_samples': 0}

        scores = self.scores
        summary = {
            'score_mean': float(np.mean(scores)),
            'score_std': float(np.std(scores)),
            'score_min': float(np.min(scores)),
            'score_max': float(np.max(scores)),
            'n_folds': len(self.records),
            'total_samples': int(sum(record.n_test_samples for record in self.records)),
            'total_fit_time': float(sum(record.fit_time for record in self.records)),
        }
        train_scores = self.train_scores
        if train_scores is not None:
            summary['train_score_mean'] = float(np.mean(train_scores))
            summary['train_score_std'] = float(np.std(train_scores))
        return summary

    def to_frame(self) -> pd.DataFrame:
        """One row per fold."""
        return pd.DataFrame([asdict(record) for record in self.records])

    def save(self, path: Union[str, Path]) -> None:
        save_object(self, path)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'CVResults':
        results = load_object(path)
        if not isinstance(results, cls):
            raise TypeError(f"{path} does not hold {cls.__name__}, got {type(results).__name__}")
        return results
