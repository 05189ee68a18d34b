"""
Cross-validation orchestrators for crossVal.

This module contains the fold loops: scoring an estimator across folds,
collecting out-of-fold predictions, and the configurable CrossValidator that
returns full per-fold records.
"""

import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
from sklearn.model_selection import train_test_split as _sklearn_train_test_split

from .base import CVConfig, FoldSet, clone_estimator, get_capabilities, is_partition
from .evaluation import fit_and_predict, fit_and_score
from .exceptions import ConfigError
from .registry import NATIVE_SPLITTERS, SplitterRegistry, default_registry
from .results import CVResults, DiagnosticEvent, ScoreRecord
from .scoring import check_scoring
from .splitting import check_consistent_length, num_samples
from .validation import build_kfold, check_cv
from ..utils.config import ConfigManager
from ..utils.helpers import format_time
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _check_n_jobs(n_jobs: Any) -> None:
    if n_jobs != 1:
        raise ConfigError(
            f"n_jobs={n_jobs} requested but parallel cross-validation is not supported; use n_jobs=1"
        )


def cross_val_score(
    estimator: Any,
    X: Any,
    y: Any = None,
    scoring: Any = None,
    cv: Any = None,
    n_jobs: int = 1,
    verbose: int = 0,
    fit_params: Optional[Dict[str, Any]] = None
) -> np.ndarray:
    """
    Evaluate a score by cross-validation.

    Args:
        estimator: Estimator implementing 'fit'; it is cloned for every fold
        X: The data to fit, 1-D or 2-D
        y: The target variable, or None for unsupervised learning
        scoring: Scorer name, scorer callable ``scorer(estimator, X, y)``, or
            None to use the estimator's own ``score`` method
        cv: Anything accepted by ``check_cv``. An int is the number of
            stratified folds for a classifier on a binary or multiclass
            target, of plain folds otherwise. None means 3 folds.
        n_jobs: Must be 1
        verbose: The verbosity level
        fit_params: Parameters passed to the estimator's fit method

    Returns:
        Array of the test scores, one per fold, in fold order
    """
    _check_n_jobs(n_jobs)
    check_consistent_length(X, y)

    cv = check_cv(cv, X, y, classifier=get_capabilities(estimator).is_classifier)
    scorer = check_scoring(estimator, scoring)

    scores = []
    for fold_idx, (train, test) in enumerate(cv):
        logger.debug(f"Scoring fold {fold_idx + 1}/{len(cv)} ({len(train)} train, {len(test)} test)")
        result = fit_and_score(
            clone_estimator(estimator), X, y, scorer, train, test, verbose, None, fit_params
        )
        scores.append(result[0])
    return np.array(scores, dtype=float)


def _predict_over_folds(
    estimator: Any,
    X: Any,
    y: Any,
    folds: FoldSet,
    verbose: int,
    fit_params: Optional[Dict[str, Any]]
) -> np.ndarray:
    n = num_samples(X)
    if not is_partition([test for _, test in folds], n):
        raise ConfigError("cross_val_predict only works for partitions: every sample must be tested exactly once")

    preds_blocks = [
        fit_and_predict(clone_estimator(estimator), X, y, train, test, verbose, fit_params)
        for train, test in folds
    ]
    p = np.concatenate([np.asarray(block_preds) for block_preds, _ in preds_blocks])
    locs = np.concatenate([loc for _, loc in preds_blocks])
    preds = np.empty_like(p)
    preds[locs] = p
    return preds


def cross_val_predict(
    estimator: Any,
    X: Any,
    y: Any = None,
    cv: Any = None,
    n_jobs: int = 1,
    verbose: int = 0,
    fit_params: Optional[Dict[str, Any]] = None
) -> np.ndarray:
    """
    Generate cross-validated estimates for each input data point.

    Args:
        estimator: Estimator implementing 'fit' and 'predict'
        X: The data to fit
        y: The target variable, or None
        cv: Anything accepted by ``check_cv``. Its test sets must contain
            every sample exactly once, otherwise a ConfigError is raised.
        n_jobs: Must be 1
        verbose: The verbosity level
        fit_params: Parameters passed to the estimator's fit method

    Returns:
        Array of predictions, position i holding the prediction made for
        sample i by the model that did not see it during fitting
    """
    _check_n_jobs(n_jobs)
    check_consistent_length(X, y)

    cv = check_cv(cv, X, y, classifier=get_capabilities(estimator).is_classifier)
    return _predict_over_folds(estimator, X, y, cv, verbose, fit_params)


def train_test_split(*arrays: Any, **options: Any):
    """Split arrays into random train and test subsets (``sklearn.model_selection.train_test_split``)."""
    return _sklearn_train_test_split(*arrays, **options)


class CrossValidator:
    """
    Configurable cross-validation runner.

    Unlike ``cross_val_score`` it keeps a full ScoreRecord per fold and the
    warnings raised along the way, as DiagnosticEvents on the results.
    """

    def __init__(self, config: Optional[CVConfig] = None, registry: Optional[SplitterRegistry] = None):
        self.config = (config if config is not None else CVConfig()).validate()
        self.registry = registry if registry is not None else default_registry
        self.logger = get_logger("CrossValidator")
        self.results_: Optional[CVResults] = None

    @classmethod
    def from_config(cls, config_path: Optional[Union[str, Path]] = None, **overrides) -> 'CrossValidator':
        """Build a runner from a YAML/JSON file and keyword overrides."""
        manager = ConfigManager()
        if config_path is not None:
            manager.load_from_file(config_path)
        manager.update_config(**overrides)
        return cls(manager.get_config())

    def build_folds(self, estimator: Any, X: Any, y: Any = None, groups: Any = None) -> FoldSet:
        """Build the FoldSet described by the configuration."""
        cfg = self.config
        if cfg.splitter is not None:
            params = dict(cfg.splitter_params)
            if cfg.splitter in NATIVE_SPLITTERS:
                params.setdefault("n_folds", cfg.n_folds)
                params.setdefault("shuffle", cfg.shuffle)
                params.setdefault("random_state", cfg.random_state)
            return self.registry.create(cfg.splitter, X, y, groups, **params)
        return build_kfold(
            cfg.n_folds, X, y,
            classifier=get_capabilities(estimator).is_classifier,
            shuffle=cfg.shuffle,
            random_state=cfg.random_state,
        )

    def evaluate(
        self,
        estimator: Any,
        X: Any,
        y: Any = None,
        groups: Any = None,
        fit_params: Optional[Dict[str, Any]] = None,
        parameters: Optional[Dict[str, Any]] = None
    ) -> CVResults:
        """
        Score ``estimator`` on every fold.

        Args:
            estimator: Estimator implementing 'fit'; it is cloned for every fold
            X: Feature matrix
            y: Target labels
            groups: Group labels for group-aware splitters
            fit_params: Parameters passed to the estimator's fit method
            parameters: Hyperparameters set on every clone before fitting

        Returns:
            CVResults with one ScoreRecord per fold
        """
        cfg = self.config.validate()
        check_consistent_length(X, y, groups)
        scorer = check_scoring(estimator, cfg.scoring)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            folds = self.build_folds(estimator, X, y, groups)
        diagnostics = [DiagnosticEvent.from_warning(w) for w in caught]

        self.logger.info(f"Cross-validating {type(estimator).__name__} on {len(folds)} folds")

        records = []
        for fold_idx, (train, test) in enumerate(folds):
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                result = fit_and_score(
                    clone_estimator(estimator), X, y, scorer, train, test, cfg.verbose,
                    parameters, fit_params,
                    return_train_score=cfg.return_train_score,
                    return_parameters=cfg.return_parameters,
                    error_score=cfg.error_score,
                )
            diagnostics.extend(DiagnosticEvent.from_warning(w, fold=fold_idx) for w in caught)

            record = ScoreRecord.from_result(fold_idx, result, cfg.return_train_score, cfg.return_parameters)
            records.append(record)
            self.logger.info(
                f"Fold {fold_idx + 1}/{len(folds)}: score={record.test_score:.4f} "
                f"n_test={record.n_test_samples} ({format_time(record.fit_time)})"
            )

        if diagnostics:
            self.logger.warning(f"{len(diagnostics)} diagnostic event(s) recorded during cross-validation")

        self.results_ = CVResults(records=tuple(records), diagnostics=tuple(diagnostics))
        return self.results_

    def predict(
        self,
        estimator: Any,
        X: Any,
        y: Any = None,
        groups: Any = None,
        fit_params: Optional[Dict[str, Any]] = None
    ) -> np.ndarray:
        """Out-of-fold predictions over the configured folds."""
        cfg = self.config.validate()
        check_consistent_length(X, y, groups)
        folds = self.build_folds(estimator, X, y, groups)
        return _predict_over_folds(estimator, X, y, folds, cfg.verbose, fit_params)

    def get_results(self) -> Optional[CVResults]:
        """Get evaluation results."""
        return self.results_
