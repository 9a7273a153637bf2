"""Display helpers."""

from .formatting import (
    format_number,
    format_conversions,
    INFINITY_SYMBOL,
    OUT_OF_RANGE_SYMBOL,
)

__all__ = ["format_number", "format_conversions", "INFINITY_SYMBOL", "OUT_OF_RANGE_SYMBOL"]
