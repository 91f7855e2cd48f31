"""Aircraft presets loaded from YAML configuration.

A preset describes one aircraft and its loading: callsign, envelope, trip
fuel, the fixed load items and, optionally, a request to fill a fuel tank
with the maximum fuel that keeps the aircraft within limits.

Typical usage:
    preset = load_preset("config/aircraft/phdha.yaml")
    preset.apply_max_fuel()
    preset.airplane.within_limits()

Example preset:
    airplane:
      callsign: PHDHA
      limits:
        minimum_weight: {kg: 558}
        mtow: {kg: 750}
        forward_cg_limit: {mm: 427}
        rearward_cg_limit: {mm: 523}
      fuel_consumption_trip: {liters: 20}
      moments:
        - {name: Empty mass, lever_arm: 0.4294, mass: {kg: 517}}
        - {name: Pilot, lever_arm: 0.515, mass: {kg: 80}}
      max_fuel:
        name: Fuel
        lever_arm: 0.325
        fuel_type: avgas
        unit: liter
        max_volume: {liters: 110}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from massbalance.core.config import ConfigError, ConfigLoader
from massbalance.core.logging_system import get_logger
from massbalance.weight_balance.airplane import Airplane
from massbalance.weight_balance.limits import Limits
from massbalance.weight_balance.moment import Moment
from massbalance.weight_balance.quantities import (
    CenterOfGravity,
    LeverArm,
    Mass,
    MassKind,
    Volume,
    VolumeUnit,
)

logger = get_logger(__name__)


@dataclass
class MaxFuelRequest:
    """Request to fill a tank with the maximum fuel within limits.

    Attributes:
        name: Name of the fuel load item
        lever_arm: Tank position
        fuel_type: MassKind.AVGAS or MassKind.MOGAS
        unit: Unit the resulting volume is expressed in
        max_volume: Optional tank capacity
    """

    name: str
    lever_arm: LeverArm
    fuel_type: MassKind
    unit: VolumeUnit
    max_volume: Volume | None = None


@dataclass
class AirplanePreset:
    """An airplane built from a preset, with its pending fuel request."""

    airplane: Airplane
    max_fuel: MaxFuelRequest | None = None

    def apply_max_fuel(self) -> Moment | None:
        """Run the fuel request, if the preset has one.

        Returns:
            The appended fuel moment, or None when there is no request.
        """
        if self.max_fuel is None:
            return None

        request = self.max_fuel
        return self.airplane.add_max_fuel_within_limits(
            request.name,
            request.lever_arm,
            request.fuel_type,
            request.unit,
            request.max_volume,
        )


def _single_key(value: Any, what: str) -> tuple[str, Any]:
    if not isinstance(value, dict) or len(value) != 1:
        raise ConfigError(f"{what} must be a mapping with exactly one unit key, got: {value!r}")
    return next(iter(value.items()))


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{what} must be a number, got: {value!r}")
    return float(value)


def parse_volume(value: Any) -> Volume:
    """Parse ``{liters: x}`` or ``{gallons: x}``."""
    unit, amount = _single_key(value, "volume")
    amount = _number(amount, f"volume.{unit}")

    if unit == "liters":
        return Volume.liters(amount)
    if unit == "gallons":
        return Volume.gallons(amount)
    raise ConfigError(f"Unknown volume unit: {unit}")


def parse_mass(value: Any) -> Mass:
    """Parse ``{kg: x}``, ``{avgas: <volume>}`` or ``{mogas: <volume>}``."""
    kind, amount = _single_key(value, "mass")

    if kind == "kg":
        return Mass.kilograms(_number(amount, "mass.kg"))
    if kind == "avgas":
        return Mass.avgas(parse_volume(amount))
    if kind == "mogas":
        return Mass.mogas(parse_volume(amount))
    raise ConfigError(f"Unknown mass kind: {kind}")


def parse_center_of_gravity(value: Any) -> CenterOfGravity:
    """Parse ``{m: x}`` or ``{mm: x}``."""
    unit, amount = _single_key(value, "CG limit")
    amount = _number(amount, f"CG limit.{unit}")

    if unit == "m":
        return CenterOfGravity.meters(amount)
    if unit == "mm":
        return CenterOfGravity.millimeters(amount)
    raise ConfigError(f"Unknown CG unit: {unit}")


def _parse_limits(section: dict[str, Any]) -> Limits:
    try:
        return Limits(
            minimum_weight=parse_mass(section["minimum_weight"]),
            mtow=parse_mass(section["mtow"]),
            forward_cg_limit=parse_center_of_gravity(section["forward_cg_limit"]),
            rearward_cg_limit=parse_center_of_gravity(section["rearward_cg_limit"]),
        )
    except KeyError as e:
        raise ConfigError(f"Limits missing field: {e.args[0]}") from e


def _parse_moment(entry: dict[str, Any]) -> Moment:
    if not isinstance(entry, dict):
        raise ConfigError(f"Moment entry must be a mapping, got: {entry!r}")

    try:
        return Moment(
            name=str(entry["name"]),
            lever_arm=LeverArm(_number(entry["lever_arm"], "lever_arm")),
            mass=parse_mass(entry["mass"]),
        )
    except KeyError as e:
        raise ConfigError(f"Moment missing field: {e.args[0]}") from e


def _parse_max_fuel(entry: dict[str, Any]) -> MaxFuelRequest:
    if not isinstance(entry, dict):
        raise ConfigError(f"max_fuel must be a mapping, got: {entry!r}")

    try:
        fuel_type = MassKind(entry.get("fuel_type", "avgas"))
        unit = VolumeUnit(entry.get("unit", "liter"))
        max_volume = entry.get("max_volume")

        request = MaxFuelRequest(
            name=str(entry.get("name", "Fuel")),
            lever_arm=LeverArm(_number(entry["lever_arm"], "max_fuel.lever_arm")),
            fuel_type=fuel_type,
            unit=unit,
            max_volume=parse_volume(max_volume) if max_volume is not None else None,
        )
    except KeyError as e:
        raise ConfigError(f"max_fuel missing field: {e.args[0]}") from e
    except ValueError as e:
        raise ConfigError(f"Invalid max_fuel entry: {e}") from e

    if request.fuel_type is MassKind.KILO:
        raise ConfigError("max_fuel.fuel_type must be avgas or mogas")

    return request


def build_airplane(section: dict[str, Any]) -> AirplanePreset:
    """Build an airplane preset from the ``airplane`` configuration section.

    Args:
        section: Mapping with callsign, limits, moments and the optional
            fuel_consumption_trip and max_fuel entries.

    Returns:
        AirplanePreset with the built airplane.

    Raises:
        ConfigError: If a required field is missing or malformed.
    """
    callsign = section.get("callsign")
    if not callsign:
        raise ConfigError("Airplane preset missing 'callsign'")

    limits_section = section.get("limits")
    if not isinstance(limits_section, dict):
        raise ConfigError(f"Airplane '{callsign}' missing 'limits' section")

    moments_config = section.get("moments", [])
    if not isinstance(moments_config, list):
        raise ConfigError(f"Airplane '{callsign}': 'moments' must be a list")

    trip = section.get("fuel_consumption_trip")
    max_fuel = section.get("max_fuel")

    airplane = Airplane(
        str(callsign),
        [_parse_moment(entry) for entry in moments_config],
        _parse_limits(limits_section),
        parse_volume(trip) if trip is not None else Volume.liters(0.0),
    )

    if not moments_config:
        logger.warning("No moments configured for airplane '%s'", callsign)

    return AirplanePreset(
        airplane=airplane,
        max_fuel=_parse_max_fuel(max_fuel) if max_fuel is not None else None,
    )


def load_preset(path: str | Path) -> AirplanePreset:
    """Load an airplane preset from a YAML file.

    Args:
        path: Path to the preset file.

    Returns:
        AirplanePreset with the built airplane.

    Raises:
        ConfigError: If the file cannot be loaded or is invalid.
    """
    config = ConfigLoader.load(path)
    preset = build_airplane(config.get_section("airplane"))

    logger.info(
        "Loaded preset '%s' with %d moments",
        preset.airplane.callsign,
        len(preset.airplane.moments),
    )
    return preset
