# inputmask/core/exceptions.py

"""Custom exception hierarchy for the input mask engine.

Masking and unmasking never raise. These types cover the surrounding
layers: loading the token configuration, building the default engine and
validating values handed in by collaborators.
"""


class InputMaskError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(InputMaskError):
    """Raised when token configuration loading or validation fails."""

    pass


class InitializationError(InputMaskError):
    """Raised when the default engine fails to initialize."""

    pass


class ValidationError(InputMaskError):
    """Raised when a collaborator hands in an invalid value (e.g., not a string)."""

    pass
