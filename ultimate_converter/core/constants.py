"""
Conversion constants for the non-linear strategies.

Linear scale factors live in the unit catalog (data/units.json); only the
constants that strategies hard-code are kept here.
"""

# =============================================================================
# Temperature (base: Kelvin)
# =============================================================================

ZERO_CELSIUS_K = 273.15          # 0 °C in K
FAHRENHEIT_ZERO_R = 459.67       # 0 °F in °R
K_PER_R = 5 / 9                  # K per °R (and per °F step)
R_PER_K = 9 / 5

# =============================================================================
# Fuel Consumption (base: L/100km)
# =============================================================================

# base = constant / value for rate-style units
FUEL_RECIPROCAL_CONSTANTS = {
    'km_per_liter': 100.0,
    'mile_per_liter': 62.13711922373339,  # 100 km in miles
    'mpg_us': 235.214583,
    'mpg_uk': 282.480936,
}

FUEL_BASE_UNIT = 'liter_per_100km'

# =============================================================================
# Size Tables
# =============================================================================

# Absolute tolerance for an exact hit on a table entry
SIZE_MATCH_TOLERANCE = 0.01
