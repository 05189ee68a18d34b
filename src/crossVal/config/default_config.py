"""
Default configuration for crossVal.

This module contains the default configuration settings.
"""

DEFAULT_CONFIG = {
    # Cross-validation configuration
    "cv": {
        "n_folds": 3,
        "shuffle": False,
        "random_state": None,
        "splitter": None,
        "splitter_params": {},
        "scoring": None,
        "n_jobs": 1,
        "verbose": 0,
        "error_score": "raise",
        "return_train_score": False,
        "return_parameters": False
    },
    
    # Logging configuration
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s",
        "file": None
    }
}
