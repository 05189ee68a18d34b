"""
Helper utilities for crossVal.

This module contains various helper functions and utilities.
"""

import importlib
from typing import Any, Union
from pathlib import Path

import joblib


def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if it doesn't."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_object(obj: Any, path: Union[str, Path]) -> None:
    """Save object to file using joblib."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    joblib.dump(obj, path)


def load_object(path: Union[str, Path]) -> Any:
    """Load object from file using joblib."""
    return joblib.load(path)


def import_class(module_name: str, class_name: str):
    """
    Import a class (or any attribute) from a module by name.

    Args:
        module_name: Module path, e.g. 'sklearn.model_selection'
        class_name: Attribute name, e.g. 'LeaveOneOut'

    Raises:
        ImportError: If the module or the attribute cannot be found
    """
    try:
        module = importlib.import_module(module_name)
        return getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise ImportError(f"Failed to import {class_name} from {module_name}: {e}") from e


def import_dotted(path: str):
    """Import 'package.module.Name' given as a single dotted string."""
    module_name, _, class_name = path.rpartition('.')
    if not module_name:
        raise ImportError(f"Expected a dotted path such as 'sklearn.svm.SVC', got {path!r}")
    return import_class(module_name, class_name)


def format_time(seconds: float) -> str:
    """Format time in seconds to human readable format."""
    if seconds < 60:
        return f"{seconds:.2f}s"
    elif seconds < 3600:
        minutes = seconds / 60
        return f"{minutes:.2f}m"
    else:
        hours = seconds / 3600
        return f"{hours:.2f}h"
