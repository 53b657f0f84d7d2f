__all__ = [
    "ConfigurationError",
    "MapFormatError",
    "IllegalMoveError",
]


class ConfigurationError(ValueError):
    """Required positions or solver settings are missing or invalid."""


class MapFormatError(ValueError):
    """Map text does not follow the N x N format."""


class IllegalMoveError(ValueError):
    """An action cannot be applied to the current agent/box positions."""
