"""Exceptions raised by weight and balance calculations."""


class WeightBalanceError(Exception):
    """Base class for weight and balance errors."""


class NotFuelError(WeightBalanceError):
    """Raised when a landing recomputation finds no fuel moment to burn from."""


class NoSolutionError(WeightBalanceError):
    """Raised when the maximum-load solve has no finite solution.

    This happens when the station arm sits exactly on the binding CG limit:
    any load placed there leaves the CG where it is.
    """


class OutOfEnvelopeError(WeightBalanceError):
    """Raised when the aircraft is already outside the envelope before loading.

    The maximum-load solve then yields a negative mass.
    """


class EmptyAirplaneError(WeightBalanceError):
    """Raised when a CG is requested for a zero total mass."""
