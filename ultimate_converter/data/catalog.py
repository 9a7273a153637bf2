"""
Unit catalog loader.

The catalog is a JSON file mapping category ids to ordered unit lists:

    {"length": [{"id": "meter", "name": "Meter", "symbol": "m", "toBase": 1}, ...]}

`toBase` is the linear scale to the category's base unit. It is only read
by the linear strategy; the temperature, fuel-consumption and size
categories convert by unit id.

The packaged catalog is read once per process and shared read-only.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ..core.types import Unit

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).parent / "units.json"

Catalog = Mapping[str, tuple[Unit, ...]]


class CatalogError(Exception):
    """Exception raised for malformed catalog files."""
    pass


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Load a unit catalog.

    Args:
        path: Catalog JSON file (default: the packaged units.json, cached)

    Returns:
        Read-only mapping of category id -> tuple of Units

    Raises:
        CatalogError: If the file is not a valid catalog
        FileNotFoundError: If the file doesn't exist
    """
    if path is None:
        return _load_default_catalog()
    return _read_catalog(Path(path))


@lru_cache(maxsize=1)
def _load_default_catalog() -> Catalog:
    return _read_catalog(CATALOG_PATH)


def _read_catalog(path: Path) -> Catalog:
    if not path.exists():
        raise FileNotFoundError(f"Unit catalog not found: {path}")

    with open(path, encoding='utf-8') as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog root must be an object, got {type(raw).__name__}")

    catalog = {}
    for category_id, entries in raw.items():
        if not isinstance(entries, list):
            raise CatalogError(f"Category '{category_id}' must be a list of units")
        catalog[category_id] = tuple(_parse_unit(category_id, entry) for entry in entries)

    logger.debug(
        "Loaded %d categories, %d units from %s",
        len(catalog), sum(len(u) for u in catalog.values()), path
    )
    return MappingProxyType(catalog)


def _parse_unit(category_id: str, entry: Any) -> Unit:
    """Build a Unit from one catalog entry."""
    try:
        return Unit(
            id=str(entry['id']),
            name=str(entry['name']),
            symbol=str(entry.get('symbol', '')),
            to_base=float(entry.get('toBase', 1.0)),
            category=category_id,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise CatalogError(f"Bad unit entry in '{category_id}': {entry!r}") from e


# =============================================================================
# Lookup Helpers
# =============================================================================

def list_categories(catalog: Catalog | None = None) -> list[str]:
    """All category ids, in catalog order."""
    if catalog is None:
        catalog = load_catalog()
    return list(catalog)


def get_units(category_id: str, catalog: Catalog | None = None) -> tuple[Unit, ...]:
    """Units of a category; empty for an unknown category."""
    if catalog is None:
        catalog = load_catalog()
    return catalog.get(category_id, ())


def get_unit(category_id: str, unit_id: str, catalog: Catalog | None = None) -> Unit | None:
    """Find a unit by id within a category."""
    for unit in get_units(category_id, catalog):
        if unit.id == unit_id:
            return unit
    return None


# =============================================================================
# Category Names
# =============================================================================

CATEGORY_NAMES: dict[str, str] = {
    'length': "Length",
    'area': "Area",
    'volume': "Volume",
    'mass': "Mass",
    'pressure': "Pressure",
    'acceleration': "Acceleration",
    'speed': "Speed",
    'temperature': "Temperature",
    'angle': "Angle",
    'time': "Time",
    'power': "Power",
    'energy': "Energy",
    'charge': "Electric Charge",
    'frequency': "Frequency",
    'resistance': "Electric Resistance",
    'voltage': "Electric Potential",
    'current': "Electric Current",
    'fuel-consumption': "Fuel Consumption",
    'fuel-volume': "Fuel Volume",
    'ring-size': "Ring Size",
    'mens-shoe-size': "Men's Shoe Size",
    'womens-shoe-size': "Women's Shoe Size",
    'cooking': "Cooking",
    'illuminance': "Illuminance",
    'wind-speed': "Wind Speed",
    'concentration': "Concentration",
    'radioactivity': "Radioactivity",
    'radiation-dose': "Radiation Dose",
    'data': "Information Storage",
    'network-bandwidth': "Network Bandwidth",
}


def get_category_name(category_id: str) -> str:
    """Display name of a category; derived from the id when none is listed."""
    name = CATEGORY_NAMES.get(category_id)
    if name is None:
        name = category_id.replace('-', ' ').title()
    return name
