"""Weight and balance model for small aircraft.

This module provides unit-tagged quantities, load items, envelope limits,
and the Airplane aggregate with its maximum-load solver.
"""

from massbalance.weight_balance.airplane import CG_LIMIT_SPLIT_ARM_M, Airplane
from massbalance.weight_balance.exceptions import (
    EmptyAirplaneError,
    NoSolutionError,
    NotFuelError,
    OutOfEnvelopeError,
    WeightBalanceError,
)
from massbalance.weight_balance.limits import Limits
from massbalance.weight_balance.moment import Moment
from massbalance.weight_balance.quantities import (
    CenterOfGravity,
    LeverArm,
    Mass,
    MassKind,
    MassMoment,
    Volume,
    VolumeUnit,
)

__all__ = [
    "Airplane",
    "CG_LIMIT_SPLIT_ARM_M",
    "CenterOfGravity",
    "EmptyAirplaneError",
    "LeverArm",
    "Limits",
    "Mass",
    "MassKind",
    "MassMoment",
    "Moment",
    "NoSolutionError",
    "NotFuelError",
    "OutOfEnvelopeError",
    "Volume",
    "VolumeUnit",
    "WeightBalanceError",
]
