"""
crossVal v1.0

Reproducible train/test fold generation and cross-validated evaluation of
scikit-learn style estimators.
"""

__version__ = "1.0.0"

# Core imports
from .core.base import CVConfig, EstimatorCapabilities, Fold, FoldSet
from .core.exceptions import ConfigError, ScoreTypeError, StratificationWarning
from .core.splitters import KFold, StratifiedKFold
from .core.registry import SplitterRegistry, make_splitter
from .core.validation import check_cv
from .core.scoring import check_scoring
from .core.results import CVResults, ScoreRecord
from .core.cross_validation import CrossValidator, cross_val_predict, cross_val_score, train_test_split

__all__ = [
    # Core
    "CVConfig",
    "EstimatorCapabilities",
    "Fold",
    "FoldSet",
    "ConfigError",
    "ScoreTypeError",
    "StratificationWarning",
    "KFold",
    "StratifiedKFold",
    "SplitterRegistry",
    "make_splitter",
    "check_cv",
    "check_scoring",
    
    # Evaluation
    "CVResults",
    "ScoreRecord",
    "CrossValidator",
    "cross_val_predict",
    "cross_val_score",
    "train_test_split",
]
