"""Named load item at a fixed station."""

from dataclasses import dataclass

from massbalance.weight_balance.quantities import LeverArm, Mass, MassMoment


@dataclass(frozen=True)
class Moment:
    """A load (crew, baggage, fuel, empty aircraft) at a lever arm.

    Values are not validated; negative masses or arms are accepted.

    Attributes:
        name: Label shown in load tables (e.g., "Pilot", "Fuel")
        lever_arm: Station position from the datum
        mass: Load mass, plain kilograms or a fuel volume

    Examples:
        >>> pilot = Moment("Pilot", LeverArm(0.515), Mass.kilograms(80.0))
        >>> pilot.total().kgm()  # 80 kg × 0.515 m = 41.2 kg·m
    """

    name: str
    lever_arm: LeverArm
    mass: Mass

    def total(self) -> MassMoment:
        """Mass moment of this load in kg·m."""
        return MassMoment(self.mass.kilo() * self.lever_arm.meter())
