class ConfigurationError(ValueError):
    """Raised when pairs or scalar inputs are configured incorrectly."""


class SignalNotPluggedError(ConfigurationError):
    """Raised when an input slot is read before anything is plugged in."""


class DimensionError(ValueError):
    """Raised when positions or Jacobians do not have the expected shape."""


class ArithmeticDegeneracy(ArithmeticError):
    """Raised when the damping law cannot be evaluated numerically.

    This happens when the two points of a pair coincide, so that the
    separating direction is undefined, or when the influence distance
    equals the safety distance.
    """
