"""
Catalog validation for the conversion engine.

Checks the unit catalog and the size tables for configuration errors that
would otherwise surface as silent fallbacks at conversion time. Validation
reports; it never raises.
"""

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .converter import get_strategy
from .types import StrategyKind, Unit
from ..data.size_tables import SIZE_TABLES, SizeTable

# Linear scale factors must lie strictly inside this range
SCALE_RANGE = (0.0, math.inf)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""
    ERROR = "error"      # Conversions will be wrong
    WARNING = "warning"  # Works, but probably unintended
    INFO = "info"        # Just informational


@dataclass
class ValidationIssue:
    """A single validation issue."""
    severity: ValidationSeverity
    field: str
    message: str
    value: float | None = None
    valid_range: tuple[float, float] | None = None

    def __str__(self) -> str:
        icon = {"error": "❌", "warning": "⚠️", "info": "ℹ️"}[self.severity.value]
        return f"{icon} {self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Complete validation result."""
    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.INFO]

    def __str__(self) -> str:
        if self.is_valid and not self.warnings:
            return "✓ Catalog valid"

        return "\n".join(str(issue) for issue in self.issues)


# =============================================================================
# Unit Checks
# =============================================================================

def validate_unit_scale(category_id: str, unit: Unit) -> list[ValidationIssue]:
    """
    Validate a linear scale factor.

    Only meaningful for linear categories; the other strategies ignore
    the catalog scale.

    Args:
        category_id: Owning category
        unit: Unit descriptor

    Returns:
        List of validation issues
    """
    issues = []
    scale = unit.to_base

    if not math.isfinite(scale) or scale <= 0:
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=f"{category_id}/{unit.id}",
            message=f"Scale must be positive and finite (got {scale!r})",
            value=scale,
            valid_range=SCALE_RANGE,
        ))

    return issues


def validate_category(category_id: str, units: Iterable[Unit]) -> list[ValidationIssue]:
    """
    Validate the units of one category against its strategy.

    Args:
        category_id: Category id
        units: Units listed for the category

    Returns:
        List of validation issues
    """
    units = list(units)
    issues = []

    if not units:
        issues.append(ValidationIssue(
            severity=ValidationSeverity.WARNING,
            field=category_id,
            message="Category has no units",
        ))
        return issues

    for unit_id, count in Counter(u.id for u in units).items():
        if count > 1:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=f"{category_id}/{unit_id}",
                message=f"Unit id listed {count} times",
            ))

    strategy = get_strategy(category_id)
    for unit in units:
        if strategy.kind == StrategyKind.LINEAR:
            issues.extend(validate_unit_scale(category_id, unit))
        elif not strategy.knows(unit.id):
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=f"{category_id}/{unit.id}",
                message=f"No {strategy.kind.value} conversion for this unit",
            ))

    return issues


# =============================================================================
# Size Table Checks
# =============================================================================

def validate_size_table(table: SizeTable) -> list[ValidationIssue]:
    """
    Validate a size table's shape and ordering.

    Every column must have the base column's length; the base column must
    be strictly ascending; other columns may repeat values (reported as
    INFO) but must not descend.
    """
    issues = []
    base = table.base
    n = len(base)

    if n < 2:
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=table.name,
            message=f"Table needs at least 2 rows (got {n})",
            value=float(n),
        ))
        return issues

    if np.any(np.diff(base) <= 0):
        issues.append(ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field=f"{table.name}/{table.base_key}",
            message="Base column must be strictly ascending",
        ))

    for unit_id in table.columns:
        column = table.column(unit_id)
        if len(column) != n:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=f"{table.name}/{unit_id}",
                message=f"Column has {len(column)} rows, base has {n}",
                value=float(len(column)),
                valid_range=(float(n), float(n)),
            ))
            continue

        steps = np.diff(column)
        if np.any(steps < 0):
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=f"{table.name}/{unit_id}",
                message="Column must not descend",
            ))
        elif np.any(steps == 0):
            flats = int(np.count_nonzero(steps == 0))
            issues.append(ValidationIssue(
                severity=ValidationSeverity.INFO,
                field=f"{table.name}/{unit_id}",
                message=f"{flats} flat segment(s); repeated sizes",
                value=float(flats),
            ))

    for unit_id, factor in table.linear_units.items():
        if not math.isfinite(factor) or factor <= 0:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=f"{table.name}/{unit_id}",
                message=f"Linear factor must be positive and finite (got {factor!r})",
                value=factor,
                valid_range=SCALE_RANGE,
            ))

    return issues


# =============================================================================
# Whole Catalog
# =============================================================================

def validate_catalog(
    catalog: Mapping[str, Iterable[Unit]],
    size_tables: Mapping[str, SizeTable] | None = None,
) -> ValidationResult:
    """
    Validate a unit catalog and the size tables it relies on.

    Args:
        catalog: Category id -> units
        size_tables: Tables to check (default: the built-in tables)

    Returns:
        ValidationResult with all issues
    """
    if size_tables is None:
        size_tables = SIZE_TABLES

    all_issues = []

    for category_id, units in catalog.items():
        all_issues.extend(validate_category(category_id, units))

    for category_id, table in size_tables.items():
        all_issues.extend(validate_size_table(table))
        if category_id not in catalog:
            all_issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                field=category_id,
                message="Size table has no catalog category",
            ))

    # Any ERROR = invalid
    has_errors = any(i.severity == ValidationSeverity.ERROR for i in all_issues)

    return ValidationResult(
        is_valid=not has_errors,
        issues=all_issues
    )
