"""Unit-tagged quantities for mass and balance calculations.

Every quantity carries an explicit unit tag so that kilograms, liters of
fuel, gallons, meters and millimeters can never be mixed up silently.
Conversions go through the accessor methods (``Mass.kilo()``,
``Volume.to_liter()``, ``CenterOfGravity.meter()``, ...).

Fuel densities are fixed:
    - Avgas: 0.72 kg/L
    - Mogas: 0.74 kg/L

Typical usage:
    fuel = Mass.avgas(Volume.liters(62.0))
    fuel.kilo()  # 44.64
"""

from dataclasses import dataclass
from enum import Enum

AVGAS_FUEL_DENSITY_KG_LITER = 0.72
MOGAS_FUEL_DENSITY_KG_LITER = 0.74

LITERS_IN_GALLON = 378541.0 / 100000.0


class VolumeUnit(Enum):
    """Units a fuel volume can be expressed in."""

    LITER = "liter"
    GALLON = "gallon"


class MassKind(Enum):
    """What a mass is made of.

    Fuel kinds are stored as a volume and converted with the fuel density.
    """

    KILO = "kilo"
    AVGAS = "avgas"
    MOGAS = "mogas"


class CenterOfGravityUnit(Enum):
    """Units a CG position can be expressed in."""

    METER = "meter"
    MILLIMETER = "millimeter"


@dataclass(frozen=True)
class Volume:
    """A volume in liters or US gallons.

    Attributes:
        value: Numeric value in ``unit``.
        unit: Unit tag.
    """

    value: float
    unit: VolumeUnit = VolumeUnit.LITER

    @classmethod
    def liters(cls, value: float) -> "Volume":
        return cls(float(value), VolumeUnit.LITER)

    @classmethod
    def gallons(cls, value: float) -> "Volume":
        return cls(float(value), VolumeUnit.GALLON)

    def to_liter(self) -> float:
        if self.unit is VolumeUnit.LITER:
            return self.value
        return self.value * LITERS_IN_GALLON

    def to_gallon(self) -> float:
        if self.unit is VolumeUnit.GALLON:
            return self.value
        return self.value / LITERS_IN_GALLON

    def in_unit(self, unit: VolumeUnit) -> "Volume":
        """Express the same volume in another unit.

        Args:
            unit: Target unit.

        Returns:
            New Volume tagged with ``unit``.
        """
        if unit is self.unit:
            return self
        if unit is VolumeUnit.LITER:
            return Volume.liters(self.to_liter())
        return Volume.gallons(self.to_gallon())

    def __str__(self) -> str:
        if self.unit is VolumeUnit.LITER:
            return f"{self.value:.2f}L"
        return f"{self.value:.2f}gal"


_FUEL_DENSITIES = {
    MassKind.AVGAS: AVGAS_FUEL_DENSITY_KG_LITER,
    MassKind.MOGAS: MOGAS_FUEL_DENSITY_KG_LITER,
}


@dataclass(frozen=True)
class Mass:
    """A mass in kilograms, or a volume of Avgas or Mogas.

    Build instances with ``Mass.kilograms()``, ``Mass.avgas()`` or
    ``Mass.mogas()``. For ``KILO`` masses ``kilograms`` holds the value and
    ``volume`` is None; for fuel masses ``volume`` holds the fuel volume.

    Examples:
        >>> Mass.kilograms(80.0).kilo()
        80.0
        >>> Mass.avgas(Volume.liters(100.0)).kilo()
        72.0
    """

    kind: MassKind
    kilograms_value: float = 0.0
    volume: Volume | None = None

    def __post_init__(self) -> None:
        if self.kind is MassKind.KILO:
            if self.volume is not None:
                raise ValueError("A kilogram mass has no fuel volume")
        elif self.volume is None:
            raise ValueError(f"{self.kind.value} mass needs a fuel volume")

    @classmethod
    def kilograms(cls, value: float) -> "Mass":
        return cls(MassKind.KILO, kilograms_value=float(value))

    @classmethod
    def avgas(cls, volume: Volume) -> "Mass":
        return cls(MassKind.AVGAS, volume=volume)

    @classmethod
    def mogas(cls, volume: Volume) -> "Mass":
        return cls(MassKind.MOGAS, volume=volume)

    @classmethod
    def fuel(cls, fuel_type: MassKind, volume: Volume) -> "Mass":
        """Build a fuel mass of the given kind.

        Raises:
            ValueError: If ``fuel_type`` is not a fuel kind.
        """
        if fuel_type not in _FUEL_DENSITIES:
            raise ValueError(f"Not a fuel type: {fuel_type}")
        return cls(fuel_type, volume=volume)

    @property
    def is_fuel(self) -> bool:
        return self.kind in _FUEL_DENSITIES

    def density(self) -> float | None:
        """Fuel density in kg/L, None for plain kilograms."""
        return _FUEL_DENSITIES.get(self.kind)

    def kilo(self) -> float:
        """Physical mass in kilograms, whatever the tag."""
        if self.kind is MassKind.KILO:
            return self.kilograms_value
        return self.volume.to_liter() * _FUEL_DENSITIES[self.kind]

    def to_avgas(self) -> "Mass":
        """Liters of Avgas weighing the same as this mass."""
        return Mass.avgas(Volume.liters(self.kilo() / AVGAS_FUEL_DENSITY_KG_LITER))

    def to_mogas(self) -> "Mass":
        """Liters of Mogas weighing the same as this mass."""
        return Mass.mogas(Volume.liters(self.kilo() / MOGAS_FUEL_DENSITY_KG_LITER))

    def unit(self) -> str:
        """Describe the unit the value is entered in.

        Returns:
            "kg" for plain masses, the fuel density per liter or per gallon
            for fuel.
        """
        if self.kind is MassKind.KILO:
            return "kg"
        density = _FUEL_DENSITIES[self.kind]
        if self.volume.unit is VolumeUnit.LITER:
            return f"{density:.2f}kg/L"
        return f"{density * LITERS_IN_GALLON:.2f}kg/gal"

    def __str__(self) -> str:
        if self.kind is MassKind.KILO:
            return f"{self.kilograms_value:.1f}kg"
        return f"{self.volume} {self.kind.value}"


@dataclass(frozen=True)
class LeverArm:
    """Distance from the datum in meters; positive is aft."""

    meters: float

    def meter(self) -> float:
        return self.meters


@dataclass(frozen=True)
class MassMoment:
    """Mass times lever arm, in kg·m."""

    kilogram_meters: float

    def kgm(self) -> float:
        return self.kilogram_meters


@dataclass(frozen=True)
class CenterOfGravity:
    """CG position relative to the datum; positive numbers are aft of it."""

    value: float
    unit: CenterOfGravityUnit = CenterOfGravityUnit.METER

    @classmethod
    def meters(cls, value: float) -> "CenterOfGravity":
        return cls(float(value), CenterOfGravityUnit.METER)

    @classmethod
    def millimeters(cls, value: float) -> "CenterOfGravity":
        return cls(float(value), CenterOfGravityUnit.MILLIMETER)

    def meter(self) -> float:
        if self.unit is CenterOfGravityUnit.METER:
            return self.value
        return self.value / 1000.0
