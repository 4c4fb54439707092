# errors.py


class NoiseError(ValueError):
    """Base class for precondition failures in the noise pipeline."""


class InvalidDimension(NoiseError):
    """Non-positive width/height passed to grid construction or resampling."""


class InvalidConfiguration(NoiseError):
    """Non-positive octave count or output size."""


class EmptyInput(NoiseError):
    """Compositing was asked to blend zero octaves."""
