"""
Argument parser for crossVal.

Supports the score and predict modes.
"""

import argparse
import json
from typing import Any, Dict, List, Optional


def str2bool(v):
    """Convert a string to a boolean."""
    if isinstance(v, bool):
        return v
    if v.lower() in ('yes', 'true', 't', 'y', '1'):
        return True
    elif v.lower() in ('no', 'false', 'f', 'n', '0'):
        return False
    else:
        raise argparse.ArgumentTypeError('Boolean value expected.')


def json_dict(value: str) -> Dict[str, Any]:
    """Parse a JSON object given on the command line."""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise argparse.ArgumentTypeError('A JSON object is expected, e.g. \'{"C": 0.5}\'')
    return parsed


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI parser with the score and predict subcommands."""
    parser = argparse.ArgumentParser(
        description="crossVal v1.0 - cross-validated evaluation of scikit-learn estimators",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    def add_common_options(p):
        """Add the options shared by every subcommand."""
        # Data
        p.add_argument('--data', type=str, required=True,
                       help="CSV file, one row per sample")
        p.add_argument('--target', type=str, required=False, default=None,
                       help="Target column (omit for unsupervised estimators)")
        p.add_argument('--output', type=str, required=False, default=None,
                       help="Output file (.csv, or .joblib for score results)")

        # Estimator
        p.add_argument('--estimator', type=str, required=True,
                       help="Dotted estimator class path, e.g. sklearn.linear_model.LogisticRegression")
        p.add_argument('--estimator_params', type=json_dict, required=False, default={},
                       help="Estimator constructor parameters as a JSON object")

        # Cross-validation
        p.add_argument('--cv', type=int, required=False, default=None,
                       help="Number of folds")
        p.add_argument('--splitter', type=str, required=False, default=None,
                       help="Registered splitter name (kfold, stratified_kfold, leave_one_out, ...)")
        p.add_argument('--splitter_params', type=json_dict, required=False, default=None,
                       help="Splitter parameters as a JSON object")
        p.add_argument('--groups', type=str, required=False, default=None,
                       help="Column holding group labels for group-aware splitters")
        p.add_argument('--shuffle', type=str2bool, required=False, default=None,
                       help="Shuffle samples before building folds")
        p.add_argument('--random_state', type=int, required=False, default=None,
                       help="Seed used when shuffling")

        # System
        p.add_argument('--config', type=str, required=False, default=None,
                       help="YAML/JSON configuration file (command line options take precedence)")
        p.add_argument('--verbose', type=int, required=False, default=None,
                       help="Verbosity level")
        p.add_argument('--log_level', type=str, required=False, default='INFO',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help="Logging level")

    score_p = subparsers.add_parser('score', help='Score an estimator on every fold')
    add_common_options(score_p)
    score_p.add_argument('--scoring', type=str, required=False, default=None,
                         help="Scorer name (defaults to the estimator's score method)")
    score_p.add_argument('--return_train_score', type=str2bool, required=False, default=None,
                         help="Also score each fold's training set")

    predict_p = subparsers.add_parser('predict', help='Collect out-of-fold predictions')
    add_common_options(predict_p)

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return create_argument_parser().parse_args(argv)
