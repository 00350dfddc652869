"""
Exceptions raised by ipsbench.
"""


class ConfigurationError(ValueError):
    """Invalid benchmark registration or configuration."""

    def __init__(self, message: str, label: str = None):
        self.label = label
        if label is not None:
            message = f"{label!r}: {message}"
        super().__init__(message)


class SequencingError(RuntimeError):
    """Measurement requested without a matching calibration result."""
