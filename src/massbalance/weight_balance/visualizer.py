"""SVG chart of the weight and balance envelope.

The chart plots mass (kg) against mass moment (kg·m). The envelope is drawn
as a polygon; the takeoff point is green when within limits and red when
not. When the airplane has a fuel moment the landing point is drawn too.

Typical usage:
    svg = weight_and_balance(airplane, WeightBalanceVisualization((800, 600)))
    Path("phdha.svg").write_text(svg, encoding="utf-8")
"""

import io
from dataclasses import dataclass

from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from massbalance.core.logging_system import get_logger
from massbalance.weight_balance.airplane import Airplane

logger = get_logger(__name__)

_DPI = 100


@dataclass
class WeightBalanceVisualization:
    """Chart size and axis ranges.

    Attributes:
        dimensions: (width, height) in pixels
        axis: ((x_min, x_max), (y_min, y_max)) in kg·m and kg, or None to
            fit the envelope
    """

    dimensions: tuple[int, int] = (800, 600)
    axis: tuple[tuple[float, float], tuple[float, float]] | None = None


def _point_color(within: bool) -> str:
    return "green" if within else "red"


def weight_and_balance(airplane: Airplane, visualization: WeightBalanceVisualization) -> str:
    """Draw the envelope chart for an airplane.

    Args:
        airplane: Fully loaded airplane.
        visualization: Chart size and axis ranges.

    Returns:
        SVG document as a string.
    """
    width, height = visualization.dimensions
    figure = Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
    ax = figure.add_subplot()

    ax.set_title(airplane.callsign, fontsize=24)
    ax.set_xlabel("Mass Moment [kg m]")
    ax.set_ylabel("Mass [kg]")
    ax.grid(True, alpha=0.3)

    ax.add_patch(Polygon(airplane.limits.envelope_points(), closed=True, color="red", alpha=0.2))

    ax.scatter(
        [airplane.total_mass_moment().kgm()],
        [airplane.total_mass().kilo()],
        s=60,
        color=_point_color(airplane.within_limits()),
        label="Takeoff",
        zorder=3,
    )

    if airplane.fuel_moment is not None:
        ax.scatter(
            [airplane.total_mass_moment_landing().kgm()],
            [airplane.total_mass_landing().kilo()],
            s=60,
            marker="s",
            color=_point_color(airplane.within_limits_landing()),
            label="Landing",
            zorder=3,
        )

    if visualization.axis is not None:
        ax.set_xlim(*visualization.axis[0])
        ax.set_ylim(*visualization.axis[1])
    else:
        ax.autoscale_view()

    ax.legend(loc="lower right")

    buffer = io.StringIO()
    figure.savefig(buffer, format="svg")

    logger.debug("Rendered envelope chart for %s (%dx%d)", airplane.callsign, width, height)
    return buffer.getvalue()
