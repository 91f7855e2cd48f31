"""Loaded aircraft aggregate and maximum-load solver.

The Airplane collects the load items (moments) of one flight, derives total
mass, mass moment and CG from them, checks the result against the envelope,
and solves for the largest load a station can take before the CG or the
MTOW limit is reached.

Typical usage:
    plane = Airplane("PHDHA", moments, limits, Volume.liters(20.0))
    fuel = plane.add_max_fuel_within_limits(
        "Fuel", LeverArm(0.325), MassKind.AVGAS, VolumeUnit.LITER, Volume.liters(110.0)
    )
    plane.within_limits()
"""

import math
from collections.abc import Iterable

from massbalance.core.logging_system import get_logger
from massbalance.weight_balance.exceptions import (
    EmptyAirplaneError,
    NoSolutionError,
    NotFuelError,
    OutOfEnvelopeError,
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

logger = get_logger(__name__)

# Stations at or aft of this arm push the CG towards the rearward limit,
# stations ahead of it towards the forward limit.
CG_LIMIT_SPLIT_ARM_M = 0.5

_ROUNDING_STEPS = 16


class Airplane:
    """Weight and balance state of one aircraft for one flight.

    The airplane owns its list of moments. Items are only ever appended;
    totals are recomputed from the full list on every call.

    The fuel moment used for landing calculations is the most recently
    added fuel-typed moment, whichever way it was added.

    Examples:
        >>> plane = Airplane("PHDHA", [empty, pilot, fuel], limits)
        >>> plane.total_mass().kilo()
        >>> plane.within_limits()
        True
    """

    def __init__(
        self,
        callsign: str,
        moments: Iterable[Moment],
        limits: Limits,
        fuel_consumption_trip: Volume = Volume.liters(0.0),
    ) -> None:
        """Initialize airplane.

        Args:
            callsign: Aircraft registration or callsign.
            moments: Initial load items, in order.
            limits: Certified envelope.
            fuel_consumption_trip: Fuel burned between takeoff and landing.
        """
        self._callsign = callsign
        self._moments: list[Moment] = []
        self._fuel_index: int | None = None
        self._limits = limits
        self._fuel_consumption_trip = fuel_consumption_trip

        for moment in moments:
            self._append(moment)

        logger.debug("Airplane %s created with %d moments", callsign, len(self._moments))

    @property
    def callsign(self) -> str:
        return self._callsign

    @property
    def moments(self) -> tuple[Moment, ...]:
        """Snapshot of the load items in insertion order."""
        return tuple(self._moments)

    @property
    def limits(self) -> Limits:
        return self._limits

    @property
    def fuel_consumption_trip(self) -> Volume:
        return self._fuel_consumption_trip

    @property
    def fuel_moment(self) -> Moment | None:
        """The fuel load burned from during the trip, if any."""
        if self._fuel_index is None:
            return None
        return self._moments[self._fuel_index]

    def _append(self, moment: Moment) -> Moment:
        self._moments.append(moment)
        if moment.mass.is_fuel:
            self._fuel_index = len(self._moments) - 1
        return moment

    def add_moment(self, moment: Moment) -> None:
        """Append a load item without any limit check."""
        self._append(moment)

    def total_mass(self) -> Mass:
        return Mass.kilograms(sum(m.mass.kilo() for m in self._moments))

    def total_mass_moment(self) -> MassMoment:
        return MassMoment(sum(m.total().kgm() for m in self._moments))

    def center_of_gravity(self) -> CenterOfGravity:
        """Current CG position.

        Raises:
            EmptyAirplaneError: If the total mass is zero.
        """
        return self._center_of_gravity(self.total_mass(), self.total_mass_moment())

    def _center_of_gravity(self, mass: Mass, moment: MassMoment) -> CenterOfGravity:
        kg_mass = mass.kilo()
        if kg_mass == 0.0:
            raise EmptyAirplaneError(f"{self._callsign}: total mass is zero, CG is undefined")
        return CenterOfGravity.meters(moment.kgm() / kg_mass)

    def _is_within_limits(self, mass: Mass, moment: MassMoment) -> bool:
        cg = self._center_of_gravity(mass, moment).meter()
        return (
            mass.kilo() <= self._limits.mtow.kilo()
            and cg <= self._limits.rearward_cg_limit.meter()
            and cg >= self._limits.forward_cg_limit.meter()
        )

    def within_limits(self) -> bool:
        """Check MTOW and both CG limits, all bounds inclusive."""
        return self._is_within_limits(self.total_mass(), self.total_mass_moment())

    def add_max_mass_within_limits(
        self,
        name: str,
        arm: LeverArm,
        mass: Mass,
        max_volume: Volume | None = None,
    ) -> Moment:
        """Append the largest load of the given kind that keeps the airplane in limits.

        Args:
            name: Name of the new load item.
            arm: Station position.
            mass: Template selecting the result kind; for fuel, its volume
                unit selects the unit of the result. The value is ignored.
            max_volume: Optional cap on a fuel load (e.g., tank capacity).

        Returns:
            The appended moment.

        Raises:
            NoSolutionError: If the arm lies exactly on the binding CG limit.
            OutOfEnvelopeError: If the airplane is already out of limits.
        """
        volume_unit = mass.volume.unit if mass.is_fuel else VolumeUnit.LITER
        return self._add_max_load(name, arm, mass.kind, volume_unit, max_volume)

    def add_max_fuel_within_limits(
        self,
        name: str,
        arm: LeverArm,
        fuel_type: MassKind,
        volume_unit: VolumeUnit,
        max_volume: Volume | None = None,
    ) -> Moment:
        """Append the largest fuel load that keeps the airplane in limits.

        Args:
            name: Name of the new load item.
            arm: Tank position.
            fuel_type: MassKind.AVGAS or MassKind.MOGAS.
            volume_unit: Unit of the resulting fuel volume.
            max_volume: Optional cap, usually the usable tank capacity.

        Returns:
            The appended fuel moment.

        Raises:
            ValueError: If ``fuel_type`` is not a fuel kind.
            NoSolutionError: If the arm lies exactly on the binding CG limit.
            OutOfEnvelopeError: If the airplane is already out of limits.
        """
        if fuel_type is MassKind.KILO:
            raise ValueError(f"Not a fuel type: {fuel_type}")
        return self._add_max_load(name, arm, fuel_type, volume_unit, max_volume)

    def _add_max_load(
        self,
        name: str,
        arm: LeverArm,
        kind: MassKind,
        volume_unit: VolumeUnit,
        max_volume: Volume | None,
    ) -> Moment:
        kg_max_mass = self._max_kilograms_at(arm)

        if kind is MassKind.KILO:
            max_mass = Mass.kilograms(kg_max_mass)
        else:
            if kind is MassKind.AVGAS:
                as_fuel = Mass.kilograms(kg_max_mass).to_avgas()
            else:
                as_fuel = Mass.kilograms(kg_max_mass).to_mogas()

            volume = as_fuel.volume.in_unit(volume_unit)
            if max_volume is not None and volume.to_liter() > max_volume.to_liter():
                logger.debug("%s: capped at %s (solution was %s)", name, max_volume, volume)
                volume = max_volume.in_unit(volume_unit)
            max_mass = Mass.fuel(kind, volume)

        logger.info("%s: maximum load at %.3f m is %s", self._callsign, arm.meter(), max_mass)
        return self._append(Moment(name, arm, max_mass))

    def _max_kilograms_at(self, arm: LeverArm) -> float:
        """Solve for the largest mass at ``arm`` within the CG and MTOW limits."""
        total_mass = self.total_mass().kilo()
        total_moment = self.total_mass_moment().kgm()
        mtow = self._limits.mtow.kilo()

        rearward = arm.meter() >= CG_LIMIT_SPLIT_ARM_M
        if rearward:
            cg_limit = self._limits.rearward_cg_limit.meter()
        else:
            cg_limit = self._limits.forward_cg_limit.meter()

        if arm.meter() == cg_limit:
            raise NoSolutionError(
                f"{self._callsign}: station at {arm.meter()} m lies on the CG limit, "
                "no maximum load can be derived"
            )

        forward_limit = self._limits.forward_cg_limit.meter()
        rearward_limit = self._limits.rearward_cg_limit.meter()
        if total_mass != 0.0:
            cg = total_moment / total_mass
            if cg > rearward_limit or cg < forward_limit:
                raise OutOfEnvelopeError(
                    f"{self._callsign}: CG {cg:.4f} m is already outside "
                    f"{forward_limit:.4f} - {rearward_limit:.4f} m"
                )

        kg_max_mass = (cg_limit * total_mass - total_moment) / (arm.meter() - cg_limit)
        if kg_max_mass < 0.0:
            # The load moves the CG away from this limit, solve against the other one
            opposite_limit = forward_limit if rearward else rearward_limit
            kg_max_mass = mtow - total_mass
            if arm.meter() != opposite_limit:
                kg_opposite = (opposite_limit * total_mass - total_moment) / (arm.meter() - opposite_limit)
                if kg_opposite > 0.0:
                    kg_max_mass = min(kg_opposite, kg_max_mass)
                else:
                    logger.debug("%s: CG unbound at %.3f m, weight limited", self._callsign, arm.meter())

        if total_mass + kg_max_mass >= mtow:
            kg_max_mass = mtow - total_mass

        if kg_max_mass < 0.0:
            raise OutOfEnvelopeError(
                f"{self._callsign}: total mass {total_mass:.1f} kg already exceeds MTOW {mtow:.1f} kg"
            )

        # A solution landing exactly on a limit may overshoot it by rounding
        for _ in range(_ROUNDING_STEPS):
            if self._fits(kg_max_mass, arm, total_mass, total_moment):
                break
            kg_max_mass = math.nextafter(kg_max_mass, 0.0)

        return kg_max_mass

    def _fits(self, kilograms: float, arm: LeverArm, total_mass: float, total_moment: float) -> bool:
        mass = total_mass + kilograms
        if mass == 0.0:
            return True
        cg = (total_moment + kilograms * arm.meter()) / mass
        return (
            mass <= self._limits.mtow.kilo()
            and self._limits.forward_cg_limit.meter() <= cg <= self._limits.rearward_cg_limit.meter()
        )

    def _landing_moments(self) -> list[Moment]:
        """Moments with the trip fuel burned from the fuel moment.

        Raises:
            NotFuelError: If there is no fuel moment.
        """
        fuel = self.fuel_moment
        if fuel is None:
            raise NotFuelError(f"{self._callsign}: no fuel moment to burn trip fuel from")

        remaining = fuel.mass.volume.to_liter() - self._fuel_consumption_trip.to_liter()
        if remaining < 0.0:
            logger.warning(
                "%s: trip fuel %s exceeds fuel on board %s",
                self._callsign,
                self._fuel_consumption_trip,
                fuel.mass.volume,
            )

        landing_fuel = Moment(
            fuel.name,
            fuel.lever_arm,
            Mass.fuel(fuel.mass.kind, Volume.liters(remaining).in_unit(fuel.mass.volume.unit)),
        )

        moments = list(self._moments)
        moments[self._fuel_index] = landing_fuel
        return moments

    def total_mass_landing(self) -> Mass:
        """Total mass after the trip fuel has been burned."""
        return Mass.kilograms(sum(m.mass.kilo() for m in self._landing_moments()))

    def total_mass_moment_landing(self) -> MassMoment:
        """Total mass moment after the trip fuel has been burned."""
        return MassMoment(sum(m.total().kgm() for m in self._landing_moments()))

    def center_of_gravity_landing(self) -> CenterOfGravity:
        return self._center_of_gravity(self.total_mass_landing(), self.total_mass_moment_landing())

    def within_limits_landing(self) -> bool:
        """Envelope check at landing, same bounds as at takeoff."""
        return self._is_within_limits(self.total_mass_landing(), self.total_mass_moment_landing())
