"""MassBalance - weight and balance check for small aircraft.

Loads an aircraft preset, fills the fuel tank with the maximum fuel that
keeps the aircraft within limits (when the preset asks for it), prints the
load table and optionally writes the envelope chart.

Exit codes:
    0: within limits at takeoff (and landing, when fuel is loaded)
    1: error
    2: out of limits

Typical usage:
    massbalance config/aircraft/phdha.yaml
    massbalance config/aircraft/phdha.yaml --svg phdha.svg
"""

import argparse
import sys
from pathlib import Path

from massbalance.core.logging_system import get_logger, initialize_logging
from massbalance.weight_balance.presets import load_preset
from massbalance.weight_balance.report import render_table
from massbalance.weight_balance.visualizer import WeightBalanceVisualization, weight_and_balance

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_OUT_OF_LIMITS = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="MassBalance - aircraft weight and balance check")

    parser.add_argument(
        "preset",
        type=Path,
        help="Aircraft preset YAML file (e.g., config/aircraft/phdha.yaml)",
    )

    parser.add_argument(
        "--svg",
        type=Path,
        help="Write the envelope chart to this SVG file",
    )

    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        default=(800, 600),
        metavar=("WIDTH", "HEIGHT"),
        help="Chart size in pixels (default: 800 600)",
    )

    parser.add_argument(
        "--logging-config",
        type=Path,
        help="Logging configuration YAML file",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Evaluate one preset.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code.
    """
    preset = load_preset(args.preset)
    preset.apply_max_fuel()
    airplane = preset.airplane

    print(render_table(airplane))

    if args.svg:
        svg = weight_and_balance(airplane, WeightBalanceVisualization(dimensions=tuple(args.size)))
        args.svg.write_text(svg, encoding="utf-8")
        logger.info("Wrote envelope chart to %s", args.svg)

    within = airplane.within_limits()
    if airplane.fuel_moment is not None:
        within = within and airplane.within_limits_landing()

    return EXIT_OK if within else EXIT_OUT_OF_LIMITS


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code.
    """
    args = parse_args(argv)

    try:
        if args.logging_config:
            initialize_logging(args.logging_config)
        return run(args)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
