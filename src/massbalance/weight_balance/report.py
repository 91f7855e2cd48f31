"""Text table of an airplane's load breakdown.

Typical usage:
    print(render_table(airplane))
"""

from massbalance.weight_balance.airplane import Airplane
from massbalance.weight_balance.exceptions import EmptyAirplaneError

_HEADER = f"{'Item':<20} {'Arm [m]':>9} {'Load':>16} {'Mass [kg]':>10} {'Moment [kg m]':>14}"


def _verdict(within: bool) -> str:
    return "WITHIN LIMITS" if within else "OUT OF LIMITS"


def render_table(airplane: Airplane) -> str:
    """Render the load breakdown, totals and limit verdicts.

    Args:
        airplane: Fully loaded airplane.

    Returns:
        Multi-line fixed-width text.
    """
    rule = "-" * len(_HEADER)
    lines = [airplane.callsign, rule, _HEADER, rule]

    for moment in airplane.moments:
        lines.append(
            f"{moment.name[:20]:<20} {moment.lever_arm.meter():>9.4f} {str(moment.mass):>16} "
            f"{moment.mass.kilo():>10.2f} {moment.total().kgm():>14.2f}"
        )

    lines.append(rule)
    lines.append(
        f"{'Takeoff':<20} {'':>9} {'':>16} "
        f"{airplane.total_mass().kilo():>10.2f} {airplane.total_mass_moment().kgm():>14.2f}"
    )

    if airplane.fuel_moment is not None:
        lines.append(
            f"{'Landing':<20} {'':>9} {'-' + str(airplane.fuel_consumption_trip):>16} "
            f"{airplane.total_mass_landing().kilo():>10.2f} "
            f"{airplane.total_mass_moment_landing().kgm():>14.2f}"
        )

    lines.append(rule)

    limits = airplane.limits
    lines.append(
        f"Limits: MTOW {limits.mtow.kilo():.1f} kg, minimum {limits.minimum_weight.kilo():.1f} kg, "
        f"CG {limits.forward_cg_limit.meter():.4f} - {limits.rearward_cg_limit.meter():.4f} m"
    )

    try:
        cg = airplane.center_of_gravity().meter()
    except EmptyAirplaneError:
        lines.append("Takeoff: no load")
        return "\n".join(lines)

    lines.append(f"Takeoff CG {cg:.4f} m: {_verdict(airplane.within_limits())}")

    if airplane.fuel_moment is not None:
        landing_cg = airplane.center_of_gravity_landing().meter()
        lines.append(f"Landing CG {landing_cg:.4f} m: {_verdict(airplane.within_limits_landing())}")

    return "\n".join(lines)
