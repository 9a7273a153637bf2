"""
Ultimate Converter - unit conversion engine.

Converts values between units of a category through a per-category base
unit, using linear, temperature, fuel-consumption or size-table strategies.

Usage:
    from ultimate_converter import convert, get_unit, format_number

    mile = get_unit('length', 'mile')
    km = get_unit('length', 'kilometer')
    format_number(convert(1, mile, km, 'length'))   # '1.609344'
"""

from .core import (
    Unit,
    StrategyKind,
    ConversionError,
    UnknownUnitError,
    CategoryMismatchError,
    convert,
    convert_to_all_units,
    validate_catalog,
)
from .data import (
    CatalogError,
    load_catalog,
    list_categories,
    get_category_name,
    get_units,
    get_unit,
    get_input_constraints,
)
from .utils import format_number, format_conversions

__version__ = "1.0.0"

__all__ = [
    "Unit",
    "StrategyKind",
    "ConversionError",
    "UnknownUnitError",
    "CategoryMismatchError",
    "CatalogError",
    "convert",
    "convert_to_all_units",
    "validate_catalog",
    "load_catalog",
    "list_categories",
    "get_category_name",
    "get_units",
    "get_unit",
    "get_input_constraints",
    "format_number",
    "format_conversions",
]
