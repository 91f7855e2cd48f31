"""Pytest configuration and fixtures for all tests."""

from collections.abc import Callable

import pytest

from massbalance.weight_balance import (
    Airplane,
    CenterOfGravity,
    LeverArm,
    Limits,
    Mass,
    Moment,
    Volume,
)


@pytest.fixture
def phdha_limits() -> Limits:
    """PH-DHA envelope: 558-750 kg, CG 427-523 mm."""
    return Limits(
        Mass.kilograms(558.0),
        Mass.kilograms(750.0),
        CenterOfGravity.millimeters(427.0),
        CenterOfGravity.millimeters(523.0),
    )


@pytest.fixture
def phdha(phdha_limits: Limits) -> Callable[[float], Airplane]:
    """Factory for the PH-DHA reference loading with a given pilot mass."""

    def build(pilot_kg: float = 80.0) -> Airplane:
        return Airplane(
            "PHDHA",
            [
                Moment("Empty mass", LeverArm(0.4294), Mass.kilograms(517.0)),
                Moment("Pilot", LeverArm(0.515), Mass.kilograms(pilot_kg)),
                Moment("Passenger", LeverArm(0.515), Mass.kilograms(89.0)),
                Moment("Baggage", LeverArm(1.3), Mass.kilograms(5.0)),
                Moment("Fuel", LeverArm(0.325), Mass.avgas(Volume.liters(62.0))),
            ],
            phdha_limits,
            Volume.liters(20.0),
        )

    return build


@pytest.fixture
def two_moments() -> list[Moment]:
    """15 kg at a CG of 2.333 m."""
    return [
        Moment("front", LeverArm(2.0), Mass.kilograms(10.0)),
        Moment("rear", LeverArm(3.0), Mass.kilograms(5.0)),
    ]


@pytest.fixture
def simple_limits() -> Callable[[float], Limits]:
    """Factory for 1-3 m CG limits with a given MTOW."""

    def build(mtow_kg: float = 40.0) -> Limits:
        return Limits(
            Mass.kilograms(10.0),
            Mass.kilograms(mtow_kg),
            CenterOfGravity.meters(1.0),
            CenterOfGravity.meters(3.0),
        )

    return build
