"""
Unit tests for the conversion dispatcher.

Exercises strategy selection, unit-to-unit conversion, the batch form and
strict mode against the packaged catalog.
"""

import math

import pytest
from numpy.testing import assert_allclose

from ultimate_converter.core.converter import (
    convert,
    convert_to_all_units,
    get_strategy,
    special_categories,
    strategy_kind,
)
from ultimate_converter.core.types import (
    CategoryMismatchError,
    StrategyKind,
    Unit,
    UnknownUnitError,
)
from ultimate_converter.data.catalog import get_unit, get_units, list_categories
from ultimate_converter.data.size_tables import SIZE_TABLES

LINEAR_CATEGORIES = [c for c in list_categories() if strategy_kind(c) == StrategyKind.LINEAR]


def u(category_id: str, unit_id: str) -> Unit:
    found = get_unit(category_id, unit_id)
    assert found is not None, f"{category_id}/{unit_id} missing from catalog"
    return found


# =============================================================================
# Strategy Selection
# =============================================================================

class TestStrategySelection:
    """Test category -> strategy dispatch."""

    @pytest.mark.parametrize("category_id, kind", [
        ('temperature', StrategyKind.TEMPERATURE),
        ('fuel-consumption', StrategyKind.FUEL_CONSUMPTION),
        ('ring-size', StrategyKind.SIZE_LOOKUP),
        ('mens-shoe-size', StrategyKind.SIZE_LOOKUP),
        ('womens-shoe-size', StrategyKind.SIZE_LOOKUP),
        ('length', StrategyKind.LINEAR),
        ('fuel-volume', StrategyKind.LINEAR),
    ])
    def test_kind(self, category_id, kind):
        assert strategy_kind(category_id) == kind

    def test_unknown_category_is_linear(self):
        assert strategy_kind('no-such-category') == StrategyKind.LINEAR

    def test_strategies_are_shared(self):
        """Strategies are built once and reused."""
        assert get_strategy('ring-size') is get_strategy('ring-size')
        assert get_strategy('length') is get_strategy('mass')

    def test_special_categories(self):
        assert set(special_categories()) == {
            'temperature', 'fuel-consumption', 'ring-size', 'mens-shoe-size', 'womens-shoe-size'
        }


# =============================================================================
# Round Trips
# =============================================================================

class TestRoundTrips:
    """Test that converting there and back restores the value."""

    @pytest.mark.parametrize("category_id", LINEAR_CATEGORIES)
    def test_linear_all_pairs(self, category_id):
        """Every unit pair of every linear category round-trips 42.5."""
        units = get_units(category_id)
        for u1 in units:
            for u2 in units:
                there = convert(42.5, u1, u2, category_id)
                back = convert(there, u2, u1, category_id)
                assert_allclose(back, 42.5, rtol=1e-9, err_msg=f"{u1.id} <-> {u2.id}")

    @pytest.mark.parametrize("value", [-40.0, 0.0, 25.0, 100.0])
    def test_temperature_celsius_fahrenheit(self, value):
        c, f = u('temperature', 'celsius'), u('temperature', 'fahrenheit')
        back = convert(convert(value, c, f, 'temperature'), f, c, 'temperature')
        assert back == pytest.approx(value, abs=1e-9)

    def test_temperature_via_kelvin(self):
        k, c = u('temperature', 'kelvin'), u('temperature', 'celsius')
        back = convert(convert(300.0, k, c, 'temperature'), c, k, 'temperature')
        assert back == pytest.approx(300.0, abs=1e-9)

    @pytest.mark.parametrize("value", [0.5, 8.5, 25.0, 120.0, -3.0])
    def test_fuel_consumption_nonzero(self, value):
        units = get_units('fuel-consumption')
        for u1 in units:
            for u2 in units:
                there = convert(value, u1, u2, 'fuel-consumption')
                back = convert(there, u2, u1, 'fuel-consumption')
                assert back == pytest.approx(value, rel=1e-9)


# =============================================================================
# Edge Cases
# =============================================================================

class TestEdgeCases:
    """Boundary behavior of the dispatcher."""

    def test_fuel_zero_is_asymmetric(self):
        """0 L/100km -> 0 km/L, but 0 km/L -> infinite L/100km."""
        l100 = u('fuel-consumption', 'liter_per_100km')
        kml = u('fuel-consumption', 'km_per_liter')
        assert convert(0, l100, kml, 'fuel-consumption') == 0
        assert convert(0, kml, l100, 'fuel-consumption') == math.inf

    def test_infinity_propagates_linearly(self):
        m, km = u('length', 'meter'), u('length', 'kilometer')
        assert convert(math.inf, m, km, 'length') == math.inf
        assert convert(-math.inf, m, km, 'length') == -math.inf

    def test_negative_length(self):
        m, cm = u('length', 'meter'), u('length', 'centimeter')
        assert convert(-2.0, m, cm, 'length') == pytest.approx(-200.0)

    def test_very_small_numbers(self):
        m, nm = u('length', 'meter'), u('length', 'nanometer')
        assert convert(1, m, nm, 'length') == pytest.approx(1e9)

    def test_very_large_numbers(self):
        b, pb = u('data', 'byte'), u('data', 'petabyte')
        assert convert(1, pb, b, 'data') == 1125899906842624

    @pytest.mark.parametrize("category_id", list(SIZE_TABLES))
    def test_size_lookup_clamps(self, category_id):
        """Out-of-range sizes clamp to the first/last row in every column."""
        table = SIZE_TABLES[category_id]
        for from_id in table.columns:
            if from_id == table.base_key:
                continue
            for to_id in table.columns:
                column = table.column(to_id)
                low = convert(-1e6, u(category_id, from_id), u(category_id, to_id), category_id)
                high = convert(1e6, u(category_id, from_id), u(category_id, to_id), category_id)
                assert low == pytest.approx(column[0]), f"{from_id} -> {to_id}"
                assert high == pytest.approx(column[-1]), f"{from_id} -> {to_id}"

    def test_unknown_unit_does_not_raise(self):
        """Without strict mode a foreign unit never raises."""
        ring = u('ring-size', 'us')
        stray = Unit(id='swiss', name='Swiss', symbol='CH')
        assert convert(7, ring, stray, 'ring-size') == 0.0


# =============================================================================
# Batch Conversion
# =============================================================================

class TestConvertToAllUnits:
    """Test the one-to-many batch form."""

    @pytest.mark.parametrize("category_id", list_categories())
    def test_matches_single_conversions(self, category_id):
        """Batch results equal the corresponding single conversions."""
        units = get_units(category_id)
        from_unit = units[0]
        batch = convert_to_all_units(42.5, from_unit, units, category_id)
        for to_unit in units:
            single = convert(42.5, from_unit, to_unit, category_id)
            assert batch[to_unit.id] == single, to_unit.id

    def test_keys_in_unit_order(self):
        units = get_units('length')
        batch = convert_to_all_units(1.0, units[0], units, 'length')
        assert list(batch) == [unit.id for unit in units]

    def test_fresh_result_each_call(self):
        units = get_units('mass')
        first = convert_to_all_units(1.0, units[0], units, 'mass')
        second = convert_to_all_units(1.0, units[0], units, 'mass')
        assert first == second
        assert first is not second

    def test_empty_units(self):
        m = u('length', 'meter')
        assert convert_to_all_units(1.0, m, [], 'length') == {}


# =============================================================================
# Strict Mode
# =============================================================================

class TestStrictMode:
    """Test strict unit and category checking."""

    def test_category_mismatch(self):
        pound = u('mass', 'pound')
        meter = u('length', 'meter')
        with pytest.raises(CategoryMismatchError) as exc_info:
            convert(1.0, pound, meter, 'length', strict=True)
        assert exc_info.value.category_id == 'length'
        assert exc_info.value.unit is pound

    def test_mismatch_ignored_when_not_strict(self):
        """Non-strict conversion never inspects unit categories."""
        pound = u('mass', 'pound')
        meter = u('length', 'meter')
        assert convert(1.0, pound, meter, 'length') == pytest.approx(0.45359237)

    def test_unit_without_category_passes(self):
        free = Unit(id='celsius', name='Celsius', symbol='°C')
        k = u('temperature', 'kelvin')
        assert convert(0.0, free, k, 'temperature', strict=True) == pytest.approx(273.15)

    def test_unknown_unit(self):
        c = u('temperature', 'celsius')
        stray = Unit(id='reaumur', name='Réaumur', symbol='°Ré', category='temperature')
        with pytest.raises(UnknownUnitError):
            convert(10.0, c, stray, 'temperature', strict=True)

    def test_batch_strict(self):
        units = list(get_units('ring-size')) + [
            Unit(id='swiss', name='Swiss', symbol='CH', category='ring-size')
        ]
        with pytest.raises(UnknownUnitError):
            convert_to_all_units(7.0, units[1], units, 'ring-size', strict=True)

    def test_strict_catalog_conversions_succeed(self):
        """Every catalog unit is known to its category's strategy."""
        for category_id in list_categories():
            units = get_units(category_id)
            convert_to_all_units(1.0, units[0], units, category_id, strict=True)
