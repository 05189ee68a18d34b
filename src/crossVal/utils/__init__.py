"""
Utility modules for crossVal.

This module contains logging, configuration and general helpers.
"""

from .logger import get_logger, setup_logging
from .helpers import ensure_directory, format_time, import_class, import_dotted, load_object, save_object
from .config import ConfigManager

__all__ = [
    "get_logger",
    "setup_logging",
    "ConfigManager",
    "ensure_directory",
    "format_time",
    "import_class",
    "import_dotted",
    "load_object",
    "save_object",
]
