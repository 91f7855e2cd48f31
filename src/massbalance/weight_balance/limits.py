"""Certified weight and CG envelope of an aircraft."""

from dataclasses import dataclass

from massbalance.weight_balance.quantities import CenterOfGravity, Mass


@dataclass(frozen=True)
class Limits:
    """Envelope bounded by weights and a forward/rearward CG pair.

    The forward limit is expected to lie ahead of (be smaller than) the
    rearward limit. This is not checked.

    Attributes:
        minimum_weight: Lowest weight drawn on the envelope
        mtow: Maximum takeoff weight
        forward_cg_limit: Forward CG bound
        rearward_cg_limit: Rearward CG bound
    """

    minimum_weight: Mass
    mtow: Mass
    forward_cg_limit: CenterOfGravity
    rearward_cg_limit: CenterOfGravity

    def envelope_points(self) -> list[tuple[float, float]]:
        """Corners of the envelope in (mass moment kg·m, mass kg) space.

        Returns:
            Forward and rearward corners at minimum weight, then rearward
            and forward corners at MTOW.
        """
        forward = self.forward_cg_limit.meter()
        rearward = self.rearward_cg_limit.meter()
        minimum = self.minimum_weight.kilo()
        mtow = self.mtow.kilo()

        return [
            (forward * minimum, minimum),
            (rearward * minimum, minimum),
            (rearward * mtow, mtow),
            (forward * mtow, mtow),
        ]
