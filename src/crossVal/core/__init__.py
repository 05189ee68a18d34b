"""
Core functionality for crossVal.

This module contains the fold partitioners, the resolvers and the
cross-validation loops.
"""

from .base import (
    CVConfig,
    EstimatorCapabilities,
    Fold,
    FoldSet,
    clone_estimator,
    folds_from_test_sets,
    get_capabilities,
)
from .exceptions import ConfigError, ScoreTypeError, StratificationWarning
from .random_state import check_random_state
from .splitters import KFold, StratifiedKFold
from .splitting import check_consistent_length, index_param_value, num_samples, safe_split
from .scoring import check_scoring
from .registry import ExternalSplitter, SplitterRegistry, default_registry, make_splitter
from .validation import check_cv
from .results import CVResults, DiagnosticEvent, ScoreRecord
from .evaluation import fit_and_predict, fit_and_score, score
from .cross_validation import CrossValidator, cross_val_predict, cross_val_score, train_test_split

__all__ = [
    "CVConfig",
    "EstimatorCapabilities",
    "Fold",
    "FoldSet",
    "clone_estimator",
    "folds_from_test_sets",
    "get_capabilities",
    "ConfigError",
    "ScoreTypeError",
    "StratificationWarning",
    "check_random_state",
    "KFold",
    "StratifiedKFold",
    "check_consistent_length",
    "index_param_value",
    "num_samples",
    "safe_split",
    "check_scoring",
    "ExternalSplitter",
    "SplitterRegistry",
    "default_registry",
    "make_splitter",
    "check_cv",
    "CVResults",
    "DiagnosticEvent",
    "ScoreRecord",
    "fit_and_predict",
    "fit_and_score",
    "score",
    "CrossValidator",
    "cross_val_predict",
    "cross_val_score",
    "train_test_split",
]
