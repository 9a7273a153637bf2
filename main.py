"""
Ultimate Converter - unit conversion engine.

Entry point for command-line use.

Usage:
    python main.py 1 mile kilometer -c length      # One conversion
    python main.py 25 celsius -c temperature --all # Every unit of a category
    python main.py --list                          # Categories
    python main.py --list ring-size                # Units of a category
    python main.py --test                          # Quick validation test
"""

import argparse
import logging
import sys

from ultimate_converter import __version__
from ultimate_converter.core import (
    ConversionError,
    convert,
    convert_to_all_units,
    strategy_kind,
    validate_catalog,
)
from ultimate_converter.data import (
    get_category_name,
    get_input_constraints,
    get_unit,
    get_units,
    list_categories,
    load_catalog,
)
from ultimate_converter.utils import format_conversions, format_number


def run_conversion(args: argparse.Namespace) -> int:
    """Convert a value to one unit, or to every unit with --all."""
    units = get_units(args.category)
    if not units:
        print(f"ERROR: Unknown category '{args.category}'", file=sys.stderr)
        return 2

    from_unit = get_unit(args.category, args.from_unit)
    if from_unit is None:
        print(f"ERROR: Unknown unit '{args.from_unit}' in {args.category}", file=sys.stderr)
        return 2

    # Size inputs outside the chart only clamp; show them as unavailable
    out_of_range = get_input_constraints(args.category, from_unit.id).is_out_of_range(args.value)

    try:
        if args.all or args.to_unit is None:
            conversions = convert_to_all_units(
                args.value, from_unit, units, args.category, strict=args.strict
            )
            formatted = format_conversions(conversions, from_unit.id, out_of_range)
            width = max(len(u.id) for u in units)
            for unit in units:
                print(f"{unit.id:<{width}}  {formatted[unit.id]} {unit.symbol}")
            return 0

        to_unit = get_unit(args.category, args.to_unit)
        if to_unit is None:
            print(f"ERROR: Unknown unit '{args.to_unit}' in {args.category}", file=sys.stderr)
            return 2

        result = convert(args.value, from_unit, to_unit, args.category, strict=args.strict)
    except ConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    formatted = format_conversions({to_unit.id: result}, from_unit.id, out_of_range)
    print(f"{formatted[to_unit.id]} {to_unit.symbol}")
    return 0


def run_list(category_id: str | None) -> int:
    """List categories, or the units of one category."""
    if category_id is None:
        for cid in list_categories():
            print(f"{cid:<20} {get_category_name(cid):<22} "
                  f"{strategy_kind(cid).value:<17} {len(get_units(cid))} units")
        return 0

    units = get_units(category_id)
    if not units:
        print(f"ERROR: Unknown category '{category_id}'", file=sys.stderr)
        return 2

    for unit in units:
        print(f"{unit.id:<28} {unit.symbol:<10} {unit.name}")
    return 0


def run_validation_test() -> int:
    """Run a quick validation test of the catalog and the strategies."""
    print("Ultimate Converter - Validation Test")
    print("=" * 40)

    catalog = load_catalog()
    print(f"\n✓ Loaded {len(catalog)} categories, "
          f"{sum(len(u) for u in catalog.values())} units")

    result = validate_catalog(catalog)
    print(f"\n{result}")

    print("\nFixed points:")
    checks = [
        (0, 'celsius', 'fahrenheit', 'temperature', 32.0),
        (100, 'celsius', 'fahrenheit', 'temperature', 212.0),
        (1, 'mile', 'kilometer', 'length', 1.609344),
        (10, 'liter_per_100km', 'mpg_us', 'fuel-consumption', 23.521458),
        (7, 'us', 'diameter_mm', 'ring-size', 17.3),
    ]
    failures = 0
    for value, from_id, to_id, category_id, expected in checks:
        got = convert(value, get_unit(category_id, from_id), get_unit(category_id, to_id),
                      category_id)
        ok = abs(got - expected) < 1e-6
        failures += not ok
        mark = "✓" if ok else "✗"
        print(f"  {mark} {value} {from_id} -> {format_number(got)} {to_id} "
              f"(expected {expected})")

    print("\n" + "=" * 40)
    if result.is_valid and failures == 0:
        print("✓ Conversion engine operational!")
        print("  Run 'pytest tests/' for full test suite.\n")
        return 0

    print("⚠ Validation found problems\n")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ultimate Converter - unit conversion engine",
        prog="ultimate-converter"
    )
    parser.add_argument("value", nargs="?", type=float, help="Value to convert")
    parser.add_argument("from_unit", nargs="?", help="Source unit id")
    parser.add_argument("to_unit", nargs="?", help="Target unit id (omit for all units)")
    parser.add_argument("-c", "--category", default="length",
                        help="Category id (default: length)")
    parser.add_argument("--all", action="store_true",
                        help="Convert to every unit of the category")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on unknown units instead of falling back")
    parser.add_argument("--list", nargs="?", const="", metavar="CATEGORY",
                        help="List categories, or units of CATEGORY")
    parser.add_argument("--test", action="store_true",
                        help="Run quick validation test")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-v info, -vv debug)")
    parser.add_argument("--version", action="version",
                        version=f"Ultimate Converter {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.test:
        return run_validation_test()
    if args.list is not None:
        return run_list(args.list or None)
    if args.value is None or args.from_unit is None:
        parser.print_usage(sys.stderr)
        return 2
    return run_conversion(args)


if __name__ == "__main__":
    sys.exit(main())
