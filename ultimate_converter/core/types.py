"""
Data types for the conversion engine.

Unit descriptors come from the catalog and are immutable; the strategy kind
is derived from the category id, never from a unit attribute.
"""

from dataclasses import dataclass
from enum import Enum


class StrategyKind(Enum):
    """Closed set of base-normalization strategies."""
    LINEAR = "linear"                    # value * scale
    TEMPERATURE = "temperature"          # affine, base Kelvin
    FUEL_CONSUMPTION = "fuel_consumption"  # reciprocal, base L/100km
    SIZE_LOOKUP = "size_lookup"          # table interpolation


@dataclass(frozen=True)
class Unit:
    """
    A unit descriptor scoped to one category.

    Attributes:
        id: Identifier, unique within its category (e.g. "mile")
        name: Display name (e.g. "Mile")
        symbol: Display symbol (e.g. "mi")
        to_base: One unit equals `to_base` base units (Linear strategy only)
        category: Owning category id, set by the catalog loader
    """

    id: str
    name: str
    symbol: str
    to_base: float = 1.0
    category: str | None = None

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol})"


# Batch conversion result: unit id -> converted value
ConversionResult = dict[str, float]


class ConversionError(Exception):
    """Base exception for conversion failures in strict mode."""
    pass


class UnknownUnitError(ConversionError):
    """Raised in strict mode when a strategy does not know a unit id."""

    def __init__(self, unit_id: str, category_id: str):
        self.unit_id = unit_id
        self.category_id = category_id
        super().__init__(f"Unknown unit '{unit_id}' for category '{category_id}'")


class CategoryMismatchError(ConversionError):
    """Raised in strict mode when a unit belongs to another category."""

    def __init__(self, unit: Unit, category_id: str):
        self.unit = unit
        self.category_id = category_id
        super().__init__(
            f"Unit '{unit.id}' belongs to '{unit.category}', not '{category_id}'"
        )
