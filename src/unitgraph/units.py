"""
Unit conversion for measured quantities.

Every quantity is stored in one base unit per kind (height in centimeters,
weight in kilograms). A conversion multiplies the stored value by the factor
for the requested unit.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class UnitConversionError(ValueError):
    """Base class for unit conversion failures."""

    pass


class InvalidUnitError(UnitConversionError):
    """Raised when a unit symbol is not in the table for its quantity kind."""

    def __init__(self, kind: "QuantityKind", unit: object):
        self.kind = kind
        self.unit = unit
        super().__init__(f"Invalid {kind.value} unit: {unit!r}")


class UnknownQuantityError(UnitConversionError):
    """Raised when no unit table exists for a quantity kind."""

    pass


class UnitTableError(UnitConversionError):
    """Raised when a unit table breaks its invariants."""

    pass


class QuantityKind(Enum):
    """Kinds of measured quantity."""

    HEIGHT = "height"
    WEIGHT = "weight"


class HeightUnit(Enum):
    """Height units. Base unit is CENTIMETER."""

    METRE = "METRE"
    CENTIMETER = "CENTIMETER"
    FOOT = "FOOT"


class WeightUnit(Enum):
    """Weight units. Base unit is KILOGRAM."""

    KILOGRAM = "KILOGRAM"
    GRAM = "GRAM"
    POUND = "POUND"


HEIGHT_FACTORS: Mapping[str, float] = MappingProxyType(
    {
        HeightUnit.METRE.value: 100,
        HeightUnit.CENTIMETER.value: 1,
        HeightUnit.FOOT.value: 30.48,
    }
)

WEIGHT_FACTORS: Mapping[str, float] = MappingProxyType(
    {
        WeightUnit.KILOGRAM.value: 1,
        WeightUnit.GRAM.value: 100,
        WeightUnit.POUND.value: 0.45,
    }
)

UNIT_TABLES: Mapping[QuantityKind, Mapping[str, float]] = MappingProxyType(
    {
        QuantityKind.HEIGHT: HEIGHT_FACTORS,
        QuantityKind.WEIGHT: WEIGHT_FACTORS,
    }
)

UNIT_ENUMS: Mapping[QuantityKind, type[Enum]] = MappingProxyType(
    {
        QuantityKind.HEIGHT: HeightUnit,
        QuantityKind.WEIGHT: WeightUnit,
    }
)

BASE_UNITS: Mapping[QuantityKind, str] = MappingProxyType(
    {
        QuantityKind.HEIGHT: HeightUnit.CENTIMETER.value,
        QuantityKind.WEIGHT: WeightUnit.KILOGRAM.value,
    }
)


def _as_kind(kind: QuantityKind | str) -> QuantityKind:
    if isinstance(kind, QuantityKind):
        return kind
    try:
        return QuantityKind(kind)
    except ValueError:
        raise UnknownQuantityError(f"Unknown quantity kind: {kind!r}") from None


def base_unit(kind: QuantityKind | str) -> str:
    """Return the symbol of the base unit for a quantity kind."""
    return BASE_UNITS[_as_kind(kind)]


def factor(kind: QuantityKind | str, unit: Enum | str | None) -> float:
    """Return the conversion factor for a unit of the given kind.

    Args:
        kind: Quantity kind, as a QuantityKind or its value
        unit: Unit enum member or symbol; None means the base unit

    Raises:
        InvalidUnitError: If the unit is not in the kind's table
    """
    kind = _as_kind(kind)
    table = UNIT_TABLES[kind]
    if unit is None:
        return table[BASE_UNITS[kind]]
    if isinstance(unit, Enum):
        # A HeightUnit must never match the weight table by value
        if not isinstance(unit, UNIT_ENUMS[kind]):
            raise InvalidUnitError(kind, unit)
        unit = unit.value
    try:
        return table[unit]
    except (KeyError, TypeError):
        raise InvalidUnitError(kind, unit) from None


def convert(kind: QuantityKind | str, base_value: float, unit: Enum | str | None) -> float:
    """Rescale a base-unit value to the requested unit.

    Raises:
        InvalidUnitError: If the unit is not in the kind's table
        UnknownQuantityError: If there is no table for the kind
    """
    return base_value * factor(kind, unit)


def check_unit_tables() -> None:
    """Verify that every unit table matches its enum and has an identity base unit.

    Raises:
        UnitTableError: If any table is inconsistent
    """
    for kind in QuantityKind:
        table = UNIT_TABLES.get(kind)
        if table is None:
            raise UnitTableError(f"No unit table for {kind.value}")

        symbols = {member.value for member in UNIT_ENUMS[kind]}
        if set(table) != symbols:
            raise UnitTableError(
                f"{kind.value} table keys {sorted(table)} do not match units {sorted(symbols)}"
            )

        base = BASE_UNITS[kind]
        if table[base] != 1:
            raise UnitTableError(f"{kind.value} base unit {base} has factor {table[base]}, not 1")


check_unit_tables()
