"""Exception hierarchy for the garble package."""


class GarbleError(Exception):
    """Base exception for garble errors."""
    pass


class ConfigurationError(GarbleError, ValueError):
    """Invalid garbler configuration (e.g. probability outside [0, 1])."""
    pass


class UnsupportedTypeError(GarbleError, TypeError):
    """A value or class has no garble implementation."""
    pass
