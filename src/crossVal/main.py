#!/usr/bin/env python3
"""
crossVal v1.0 - command line entry point.

Modes:
- score: cross-validated scores of an estimator, per fold and summarised
- predict: out-of-fold predictions for every sample
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from crossVal.cli.argument_parser import parse_arguments
from crossVal.config import DEFAULT_CONFIG
from crossVal.core.cross_validation import CrossValidator
from crossVal.core.exceptions import ConfigError
from crossVal.utils.helpers import ensure_directory, import_dotted
from crossVal.utils.logger import get_logger, setup_logging

logger = get_logger("crossVal")

# CLI option -> CVConfig field
_CONFIG_OPTIONS = {
    'cv': 'n_folds',
    'splitter': 'splitter',
    'splitter_params': 'splitter_params',
    'shuffle': 'shuffle',
    'random_state': 'random_state',
    'verbose': 'verbose',
    'scoring': 'scoring',
    'return_train_score': 'return_train_score',
}


def config_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """CVConfig values given explicitly on the command line."""
    overrides = {}
    for option, field_name in _CONFIG_OPTIONS.items():
        value = getattr(args, option, None)
        if value is not None:
            overrides[field_name] = value
    return overrides


def load_dataset(args: argparse.Namespace) -> Tuple[pd.DataFrame, Optional[pd.Series], Optional[pd.Series]]:
    """Read the CSV and split off the target and group columns."""
    data_path = Path(args.data)
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    df = pd.read_csv(data_path)
    logger.info(f"Loaded {data_path} with shape {df.shape}")

    drop: List[str] = []
    y = groups = None
    for column, role in ((args.target, 'target'), (args.groups, 'groups')):
        if column is None:
            continue
        if column not in df.columns:
            raise ConfigError(f"{role} column {column!r} not found in {data_path}")
        drop.append(column)
    if args.target is not None:
        y = df[args.target]
    if args.groups is not None:
        groups = df[args.groups]

    return df.drop(columns=drop), y, groups


def run_score(args: argparse.Namespace, validator: CrossValidator, estimator: Any,
              X: pd.DataFrame, y: Optional[pd.Series], groups: Optional[pd.Series]) -> None:
    results = validator.evaluate(estimator, X, y, groups=groups)

    table = results.to_frame()
    logger.info("Per-fold results:\n" + table.to_string(index=False))
    for key, value in results.summary().items():
        logger.info(f"  {key}: {value}")
    for event in results.diagnostics:
        logger.warning(f"[{event.category}] {event.message}")

    if args.output:
        output = Path(args.output)
        if output.suffix.lower() == '.joblib':
            results.save(output)
        else:
            ensure_directory(output.parent)
            table.to_csv(output, index=False)
        logger.info(f"Results written to {output}")


def run_predict(args: argparse.Namespace, validator: CrossValidator, estimator: Any,
                X: pd.DataFrame, y: Optional[pd.Series], groups: Optional[pd.Series]) -> None:
    preds = validator.predict(estimator, X, y, groups=groups)
    table = pd.DataFrame({'sample': X.index, 'prediction': preds})
    if y is not None:
        table['target'] = y.to_numpy()

    if args.output:
        output = Path(args.output)
        ensure_directory(output.parent)
        table.to_csv(output, index=False)
        logger.info(f"Predictions written to {output}")
    else:
        logger.info("Out-of-fold predictions:\n" + table.head(20).to_string(index=False))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the crossVal command line interface."""
    args = parse_arguments(argv)
    setup_logging(level=args.log_level or DEFAULT_CONFIG['logging']['level'],
                  log_format=DEFAULT_CONFIG['logging']['format'])

    validator = CrossValidator.from_config(args.config, **config_overrides(args))
    estimator_class = import_dotted(args.estimator)
    estimator = estimator_class(**args.estimator_params)
    X, y, groups = load_dataset(args)

    if args.command == 'score':
        run_score(args, validator, estimator, X, y, groups)
    elif args.command == 'predict':
        run_predict(args, validator, estimator, X, y, groups)
    return 0


if __name__ == "__main__":
    sys.exit(main())
