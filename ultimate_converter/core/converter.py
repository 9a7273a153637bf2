"""
Category-aware conversion dispatcher.

Picks the strategy for a category id and composes to_base / from_base:

    value [from_unit] -> base -> value [to_unit]

Categories without a dedicated strategy are linear. The dispatcher trusts
the caller to pass units of the stated category; strict=True adds the
category and unit-id checks.

Example:
    >>> from ultimate_converter.data.catalog import get_unit
    >>> mile = get_unit('length', 'mile')
    >>> km = get_unit('length', 'kilometer')
    >>> convert(1, mile, km, 'length')
    1.609344
"""

import logging
from collections.abc import Iterable

from .strategies import (
    ConversionStrategy,
    FuelConsumptionStrategy,
    LinearStrategy,
    SizeLookupStrategy,
    TemperatureStrategy,
)
from .types import CategoryMismatchError, ConversionResult, StrategyKind, Unit
from ..data.size_tables import SIZE_TABLES

logger = logging.getLogger(__name__)


# =============================================================================
# Strategy Registry
# =============================================================================

_LINEAR = LinearStrategy()

_SPECIAL_STRATEGIES: dict[str, ConversionStrategy] = {
    'temperature': TemperatureStrategy(),
    'fuel-consumption': FuelConsumptionStrategy(),
    **{category_id: SizeLookupStrategy(table) for category_id, table in SIZE_TABLES.items()},
}


def get_strategy(category_id: str) -> ConversionStrategy:
    """Get the strategy for a category; unknown categories are linear."""
    return _SPECIAL_STRATEGIES.get(category_id, _LINEAR)


def strategy_kind(category_id: str) -> StrategyKind:
    """Get the strategy kind used for a category."""
    return get_strategy(category_id).kind


def special_categories() -> list[str]:
    """Category ids with a non-linear strategy."""
    return list(_SPECIAL_STRATEGIES)


def _check_category(unit: Unit, category_id: str):
    if unit.category is not None and unit.category != category_id:
        raise CategoryMismatchError(unit, category_id)


# =============================================================================
# Conversion Functions
# =============================================================================

def to_base(value: float, unit: Unit, category_id: str, strict: bool = False) -> float:
    """Convert a value in `unit` to the category's base unit."""
    if strict:
        _check_category(unit, category_id)
    return get_strategy(category_id).to_base(value, unit, strict)


def from_base(base_value: float, unit: Unit, category_id: str,
              strict: bool = False) -> float:
    """Convert a value in the category's base unit to `unit`."""
    if strict:
        _check_category(unit, category_id)
    return get_strategy(category_id).from_base(base_value, unit, strict)


def convert(value: float, from_unit: Unit, to_unit: Unit, category_id: str,
            strict: bool = False) -> float:
    """
    Convert a value from one unit to another within a category.

    Args:
        value: Numeric value in `from_unit`
        from_unit: Source unit descriptor
        to_unit: Target unit descriptor
        category_id: Category both units belong to (e.g. 'length')
        strict: Raise on unknown units and category mismatches instead of
            degrading

    Returns:
        Converted value. Non-finite inputs propagate arithmetically.

    Raises:
        UnknownUnitError: strict mode, unit unknown to the strategy
        CategoryMismatchError: strict mode, unit from another category
    """
    base_value = to_base(value, from_unit, category_id, strict)
    return from_base(base_value, to_unit, category_id, strict)


def convert_to_all_units(value: float, from_unit: Unit, all_units: Iterable[Unit],
                         category_id: str, strict: bool = False) -> ConversionResult:
    """
    Convert one value to every unit of a category.

    The base value is computed once and reused for every target, which
    saves the table scan of the size categories.

    Returns:
        Unit id -> converted value, in the order of `all_units`
    """
    base_value = to_base(value, from_unit, category_id, strict)

    conversions: ConversionResult = {}
    for unit in all_units:
        conversions[unit.id] = from_base(base_value, unit, category_id, strict)

    logger.debug(
        "Converted %r %s to %d units in %s", value, from_unit.id, len(conversions), category_id
    )
    return conversions
