"""
Exceptions and warnings raised by crossVal.
"""


class ConfigError(ValueError):
    """Raised when a cross-validation option or input cannot be used."""


class ScoreTypeError(TypeError):
    """Raised when a scorer returns something other than a single number."""


class StratificationWarning(UserWarning):
    """Emitted when a class has fewer members than the requested folds."""
