"""Data modules - unit catalog and size tables."""

from .size_tables import (
    SizeTable,
    InputConstraints,
    RING_SIZE_TABLE,
    MENS_SHOE_SIZE_TABLE,
    WOMENS_SHOE_SIZE_TABLE,
    SIZE_TABLES,
    get_size_table,
    get_input_constraints,
)
from .catalog import (
    Catalog,
    CatalogError,
    CATALOG_PATH,
    CATEGORY_NAMES,
    get_category_name,
    load_catalog,
    list_categories,
    get_units,
    get_unit,
)

__all__ = [
    # Size tables
    "SizeTable",
    "InputConstraints",
    "RING_SIZE_TABLE",
    "MENS_SHOE_SIZE_TABLE",
    "WOMENS_SHOE_SIZE_TABLE",
    "SIZE_TABLES",
    "get_size_table",
    "get_input_constraints",
    # Catalog
    "Catalog",
    "CatalogError",
    "CATALOG_PATH",
    "CATEGORY_NAMES",
    "get_category_name",
    "load_catalog",
    "list_categories",
    "get_units",
    "get_unit",
]
