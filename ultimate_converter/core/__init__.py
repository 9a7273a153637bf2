"""Conversion engine - strategies, dispatcher, catalog validation."""

from .types import (
    Unit,
    StrategyKind,
    ConversionResult,
    ConversionError,
    UnknownUnitError,
    CategoryMismatchError,
)
from .strategies import (
    ConversionStrategy,
    LinearStrategy,
    TemperatureStrategy,
    FuelConsumptionStrategy,
    SizeLookupStrategy,
)
from .converter import (
    convert,
    convert_to_all_units,
    to_base,
    from_base,
    get_strategy,
    strategy_kind,
    special_categories,
)
from .validation import (
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_catalog,
    validate_category,
    validate_size_table,
)

__all__ = [
    # Types
    "Unit",
    "StrategyKind",
    "ConversionResult",
    # Exceptions
    "ConversionError",
    "UnknownUnitError",
    "CategoryMismatchError",
    # Strategies
    "ConversionStrategy",
    "LinearStrategy",
    "TemperatureStrategy",
    "FuelConsumptionStrategy",
    "SizeLookupStrategy",
    # Dispatcher
    "convert",
    "convert_to_all_units",
    "to_base",
    "from_base",
    "get_strategy",
    "strategy_kind",
    "special_categories",
    # Validation
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_catalog",
    "validate_category",
    "validate_size_table",
]
