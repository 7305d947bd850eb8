"""Project-wide exception types."""

class MixUncertaintyError(Exception):
    """Base exception for all mix_uncertainty errors."""


class DataShapeError(MixUncertaintyError, ValueError):
    """Raised when an input matrix or vector is malformed or degenerate."""


class InsufficientDataError(MixUncertaintyError):
    """Raised when a dataset does not hold enough observations to fit."""


class FitResultError(MixUncertaintyError):
    """Raised when optimizer output lacks a value that is required."""


class ModelVariantError(MixUncertaintyError, ValueError):
    """Raised when a model variant code is not recognised."""


class ConfigError(MixUncertaintyError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
