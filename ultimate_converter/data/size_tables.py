"""
Ring and shoe size reference tables.

Each table lists the same discrete real-world sizes in several sizing
systems. Row i of every sequence denotes the same physical size, and rows
ascend along the base sequence (ring inner diameter in mm, foot length in cm).

UK ring sizes are letters; they are stored as letters and exposed to the
interpolation kernels as offsets from 'A'.

References:
    - ISO 8653:2016 "Jewellery - Ring-sizes"
    - ISO 9407:2019 "Shoe sizes - Mondopoint system"
    - Common US/UK/EU retail size charts
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

CM_PER_INCH = 2.54

# Letter sizes are encoded as offsets from this character
LETTER_ORIGIN = "A"


@dataclass(frozen=True)
class InputConstraints:
    """Accepted input range for a unit's entry field."""
    min: float | None = None
    max: float | None = None
    step: float | None = None

    def is_out_of_range(self, value: float) -> bool:
        """Check if a value lies outside [min, max]; NaN and open ranges never do."""
        if self.min is None or self.max is None:
            return False
        return value < self.min or value > self.max


@dataclass
class SizeTable:
    """
    Parallel size sequences keyed by unit id.

    Attributes:
        name: Category id served by this table
        base_key: Unit id of the base sequence
        columns: Unit id -> sequence of sizes (numbers, or letters for
            ids listed in `letter_units`)
        letter_units: Unit ids whose sizes are single letters
        linear_units: Unit ids derived from the base by a fixed factor
            (unit id -> base units per unit); these bypass the table
    """

    name: str
    base_key: str
    columns: dict[str, list]
    letter_units: frozenset[str] = frozenset()
    linear_units: dict[str, float] = field(default_factory=dict)
    _arrays: dict[str, NDArray[np.float64]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self):
        origin = ord(LETTER_ORIGIN)
        for unit_id, column in self.columns.items():
            if unit_id in self.letter_units:
                values = [ord(letter) - origin for letter in column]
            else:
                values = column
            arr = np.asarray(values, dtype=np.float64)
            arr.setflags(write=False)
            self._arrays[unit_id] = arr

    @property
    def base(self) -> NDArray[np.float64]:
        """Base sequence."""
        return self._arrays[self.base_key]

    @property
    def unit_ids(self) -> list[str]:
        """All unit ids the table can convert, table columns first."""
        return list(self.columns) + [u for u in self.linear_units if u not in self.columns]

    def __len__(self) -> int:
        return len(self.base)

    def __contains__(self, unit_id: str) -> bool:
        return unit_id in self._arrays or unit_id in self.linear_units

    def column(self, unit_id: str) -> NDArray[np.float64] | None:
        """Numeric sequence for a unit (letters as offsets), or None."""
        return self._arrays.get(unit_id)

    def is_letter_unit(self, unit_id: str) -> bool:
        return unit_id in self.letter_units


# =============================================================================
# Ring Size (base: inner diameter, mm)
# =============================================================================

RING_SIZE_TABLE = SizeTable(
    name='ring-size',
    base_key='diameter_mm',
    columns={
        'diameter_mm': [14.0, 14.4, 14.8, 15.3, 15.7, 16.1, 16.5, 16.9, 17.3, 17.7, 18.2,
                        18.6, 19.0, 19.4, 19.8, 20.2, 20.6, 21.0, 21.4, 21.8, 22.2],
        'us': [3, 3.5, 4, 4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11,
               11.5, 12, 12.5, 13],
        'uk': ['F', 'G', 'H', 'I', 'J', 'K', 'L', 'M', 'N', 'O', 'P', 'Q', 'R', 'S',
               'T', 'U', 'V', 'W', 'X', 'Y', 'Z'],
        'eu': [44, 45, 47, 48, 49, 51, 52, 53, 54, 56, 57, 58, 60, 61, 62, 63, 65, 66,
               67, 69, 70],
        'japan': [4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22,
                  23, 24],
    },
    letter_units=frozenset({'uk'}),
)

# =============================================================================
# Men's Shoe Size (base: foot length, cm) - US Men's 4.5-14
# =============================================================================

MENS_SHOE_SIZE_TABLE = SizeTable(
    name='mens-shoe-size',
    base_key='cm',
    columns={
        'cm': [22.5, 23.0, 23.5, 24.0, 24.5, 25.0, 25.5, 26.0, 26.5, 27.0, 27.5, 28.0,
               28.5, 29.0, 29.5, 30.0, 30.5, 31.0, 31.5, 32.0],
        'us_mens': [4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11, 11.5, 12,
                    12.5, 13, 13.5, 14],
        'uk': [3.5, 4, 4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11, 11.5,
               12, 12.5, 13],
        'eu': [36.5, 37, 37.5, 38, 38.5, 39, 39.5, 40, 40.5, 41, 41.5, 42, 42.5, 43,
               43.5, 44, 44.5, 45, 45.5, 46],
        'china': [36, 36.5, 37, 37.5, 38, 38.5, 39, 39.5, 40, 40.5, 41, 41.5, 42, 42.5,
                  43, 43.5, 44, 44.5, 45, 45.5],
    },
    linear_units={'inches': CM_PER_INCH},
)

# =============================================================================
# Women's Shoe Size (base: foot length, cm) - US Women's 4.5-14
# =============================================================================

# EU and China repeat sizes across neighbouring US half sizes; the flat
# segments are part of the published charts.
WOMENS_SHOE_SIZE_TABLE = SizeTable(
    name='womens-shoe-size',
    base_key='cm',
    columns={
        'us_womens': [4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5, 11, 11.5,
                      12, 12.5, 13, 13.5, 14],
        'uk': [2, 2.5, 3, 3.5, 4, 4.5, 5, 5.5, 6, 6.5, 7, 7.5, 8, 8.5, 9, 9.5, 10, 10.5,
               11, 11.5],
        'eu': [35, 35, 36, 37, 37, 38, 38, 39, 40, 40, 41, 42, 42, 43, 43, 44, 44, 45,
               45, 46],
        'china': [34, 34, 35, 36, 36, 37, 37, 38, 39, 39, 40, 40, 40, 41, 41, 42, 42, 43,
                  43, 44],
        'cm': [21.5, 22.0, 22.5, 23.0, 23.5, 24.0, 24.5, 25.0, 25.5, 26.0, 26.5, 27.0,
               27.5, 28.0, 28.5, 29.0, 29.5, 30.0, 30.5, 31.0],
    },
    linear_units={'inches': CM_PER_INCH},
)


SIZE_TABLES: dict[str, SizeTable] = {
    table.name: table
    for table in (RING_SIZE_TABLE, MENS_SHOE_SIZE_TABLE, WOMENS_SHOE_SIZE_TABLE)
}


# =============================================================================
# Input Constraints
# =============================================================================

INPUT_CONSTRAINTS: dict[str, dict[str, InputConstraints]] = {
    'mens-shoe-size': {
        'us_mens': InputConstraints(4.5, 14, 0.5),
        'uk': InputConstraints(3.5, 13, 0.5),
        'eu': InputConstraints(36.5, 46, 0.5),
        'china': InputConstraints(36, 45.5, 0.5),
        'cm': InputConstraints(22.5, 32, 0.5),
        'inches': InputConstraints(8.86, 12.6, 0.01),
    },
    'womens-shoe-size': {
        'us_womens': InputConstraints(4.5, 14, 0.5),
        'uk': InputConstraints(2, 11.5, 0.5),
        'eu': InputConstraints(35, 46, 0.5),
        'china': InputConstraints(34, 44, 0.5),
        'cm': InputConstraints(21.5, 31, 0.5),
        'inches': InputConstraints(8.46, 12.2, 0.01),
    },
    'ring-size': {
        'diameter_mm': InputConstraints(12, 25, 0.1),
    },
}

UNCONSTRAINED = InputConstraints()


def get_size_table(category_id: str) -> SizeTable | None:
    """Get the lookup table serving a category, if any."""
    return SIZE_TABLES.get(category_id)


def get_input_constraints(category_id: str, unit_id: str) -> InputConstraints:
    """Get the input range for a unit; unconstrained when none is declared."""
    return INPUT_CONSTRAINTS.get(category_id, {}).get(unit_id, UNCONSTRAINED)
