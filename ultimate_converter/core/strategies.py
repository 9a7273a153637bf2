"""
Base-normalization strategies.

Every category converts through a single base unit. A strategy knows how
to take a value in some unit to that base and back:

    Linear           base = value * scale            (most categories)
    Temperature      affine, base Kelvin
    FuelConsumption  reciprocal, base L/100km
    SizeLookup       table interpolation, base mm / cm

Unknown unit ids degrade instead of raising: the linear-family strategies
return the value unchanged and the size lookup returns 0 from the base.
Pass strict=True to get an UnknownUnitError instead.
"""

import logging
import math

import numpy as np

from .constants import (
    FAHRENHEIT_ZERO_R,
    FUEL_BASE_UNIT,
    FUEL_RECIPROCAL_CONSTANTS,
    K_PER_R,
    R_PER_K,
    SIZE_MATCH_TOLERANCE,
    ZERO_CELSIUS_K,
)
from .interpolation import lookup_from_base, lookup_to_base, snap_from_base
from .types import StrategyKind, Unit, UnknownUnitError
from ..data.size_tables import SizeTable

logger = logging.getLogger(__name__)


class ConversionStrategy:
    """Common interface: to_base / from_base over one category."""

    kind: StrategyKind

    def __init__(self, category_id: str | None = None):
        self.category_id = category_id

    def to_base(self, value: float, unit: Unit, strict: bool = False) -> float:
        raise NotImplementedError

    def from_base(self, base_value: float, unit: Unit, strict: bool = False) -> float:
        raise NotImplementedError

    def knows(self, unit_id: str) -> bool:
        """Check if the strategy has a conversion for a unit id."""
        return True

    def _unknown_unit(self, unit: Unit, strict: bool, fallback: float) -> float:
        category_id = self.category_id or unit.category or '?'
        if strict:
            raise UnknownUnitError(unit.id, category_id)
        logger.warning(
            "Unknown unit '%s' in %s, falling back to %r", unit.id, category_id, fallback
        )
        return fallback

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.category_id!r})"


# =============================================================================
# Linear
# =============================================================================

class LinearStrategy(ConversionStrategy):
    """Scale by the unit's catalog factor."""

    kind = StrategyKind.LINEAR

    def to_base(self, value: float, unit: Unit, strict: bool = False) -> float:
        return value * unit.to_base

    def from_base(self, base_value: float, unit: Unit, strict: bool = False) -> float:
        return base_value / unit.to_base


# =============================================================================
# Temperature
# =============================================================================

class TemperatureStrategy(ConversionStrategy):
    """
    Affine temperature scales through Kelvin.

    No clamping at absolute zero: negative Kelvin passes through.
    """

    kind = StrategyKind.TEMPERATURE

    UNITS = ('celsius', 'fahrenheit', 'kelvin', 'rankine')

    def __init__(self, category_id: str = 'temperature'):
        super().__init__(category_id)

    def knows(self, unit_id: str) -> bool:
        return unit_id in self.UNITS

    def to_base(self, value: float, unit: Unit, strict: bool = False) -> float:
        if unit.id == 'celsius':
            return value + ZERO_CELSIUS_K
        elif unit.id == 'fahrenheit':
            return (value + FAHRENHEIT_ZERO_R) * K_PER_R
        elif unit.id == 'kelvin':
            return value
        elif unit.id == 'rankine':
            return value * K_PER_R
        return self._unknown_unit(unit, strict, value)

    def from_base(self, base_value: float, unit: Unit, strict: bool = False) -> float:
        if unit.id == 'celsius':
            return base_value - ZERO_CELSIUS_K
        elif unit.id == 'fahrenheit':
            return base_value * R_PER_K - FAHRENHEIT_ZERO_R
        elif unit.id == 'kelvin':
            return base_value
        elif unit.id == 'rankine':
            return base_value * R_PER_K
        return self._unknown_unit(unit, strict, base_value)


# =============================================================================
# Fuel Consumption
# =============================================================================

class FuelConsumptionStrategy(ConversionStrategy):
    """
    Consumption (L/100km) versus economy (distance per volume).

    Economy units are reciprocal: base = constant / value and
    value = constant / base. An input of exactly 0 maps to infinity in
    both directions, so 0 km/L is infinite consumption and 0 L/100km
    becomes 0 km/L on the way out. The zero check comes before the unit
    lookup: 0 in an unknown unit is still infinity unless strict.
    """

    kind = StrategyKind.FUEL_CONSUMPTION

    def __init__(self, category_id: str = 'fuel-consumption'):
        super().__init__(category_id)

    def knows(self, unit_id: str) -> bool:
        return unit_id == FUEL_BASE_UNIT or unit_id in FUEL_RECIPROCAL_CONSTANTS

    def _reciprocal(self, value: float, unit: Unit, strict: bool) -> float:
        known = self.knows(unit.id)
        if strict and not known:
            return self._unknown_unit(unit, strict, value)
        if value == 0:
            return math.inf
        if not known:
            return self._unknown_unit(unit, strict, value)
        if unit.id == FUEL_BASE_UNIT:
            return value
        return FUEL_RECIPROCAL_CONSTANTS[unit.id] / value

    def to_base(self, value: float, unit: Unit, strict: bool = False) -> float:
        return self._reciprocal(value, unit, strict)

    def from_base(self, base_value: float, unit: Unit, strict: bool = False) -> float:
        # The reciprocal is its own inverse
        return self._reciprocal(base_value, unit, strict)


# =============================================================================
# Size Lookup
# =============================================================================

class SizeLookupStrategy(ConversionStrategy):
    """
    Discrete size charts with piecewise-linear interpolation.

    Units are resolved in order: the base column (identity), directly
    derived linear units such as inches (fixed factor), then table columns.
    Values outside the chart clamp to its first or last row.

    Letter columns (UK ring sizes) take and return offsets from 'A'. Going
    to base, the value is rounded half up to a letter; coming from base,
    the nearest row is chosen since letters have no fractional positions.
    """

    kind = StrategyKind.SIZE_LOOKUP

    def __init__(self, table: SizeTable):
        super().__init__(table.name)
        self.table = table

    def knows(self, unit_id: str) -> bool:
        return unit_id in self.table

    def to_base(self, value: float, unit: Unit, strict: bool = False) -> float:
        table = self.table
        if unit.id == table.base_key:
            return value

        factor = table.linear_units.get(unit.id)
        if factor is not None:
            return value * factor

        column = table.column(unit.id)
        if column is None:
            return self._unknown_unit(unit, strict, value)

        if table.is_letter_unit(unit.id):
            # np.floor keeps NaN/inf instead of raising
            value = np.floor(value + 0.5)

        return lookup_to_base(float(value), column, table.base, SIZE_MATCH_TOLERANCE)

    def from_base(self, base_value: float, unit: Unit, strict: bool = False) -> float:
        table = self.table
        if unit.id == table.base_key:
            return base_value

        factor = table.linear_units.get(unit.id)
        if factor is not None:
            return base_value / factor

        column = table.column(unit.id)
        if column is None:
            return self._unknown_unit(unit, strict, 0.0)

        if table.is_letter_unit(unit.id):
            return snap_from_base(float(base_value), table.base, column)
        return lookup_from_base(float(base_value), table.base, column)
