"""
WindLoad configuration and constants.

Coefficient tables follow ASCE 7-22 (simplified MWFRS, rigid building).
All lookups keyed by an enum are read-only mappings.
"""

from enum import Enum
from types import MappingProxyType


class ExposureCategory(str, Enum):
    B = "B"  # Urban / suburban
    C = "C"  # Open terrain
    D = "D"  # Flat, unobstructed


class RiskCategory(str, Enum):
    I = "I"
    II = "II"
    III = "III"
    IV = "IV"


class EnclosureType(str, Enum):
    ENCLOSED = "enclosed"
    PARTIALLY_ENCLOSED = "partially_enclosed"


class RoofType(str, Enum):
    FLAT = "flat"
    SLOPED = "sloped"


# Power-law exponent α (ASCE 7-22 Table 26.10-1)
TERRAIN_ALPHA = MappingProxyType({
    ExposureCategory.B: 7.0,
    ExposureCategory.C: 9.5,
    ExposureCategory.D: 11.5,
})

# Gradient height zg, ft (ASCE 7-22 Table 26.10-1)
GRADIENT_HEIGHT_FT = MappingProxyType({
    ExposureCategory.B: 1200.0,
    ExposureCategory.C: 900.0,
    ExposureCategory.D: 700.0,
})

# Height limits for Kz evaluation, ft
KZ_MIN_HEIGHT_FT = 15.0
KZ_MAX_HEIGHT_FT = 500.0

# Importance factors (ASCE 7-22 Table 1.5-2)
IMPORTANCE_FACTORS = MappingProxyType({
    RiskCategory.I: 0.87,
    RiskCategory.II: 1.0,
    RiskCategory.III: 1.15,
    RiskCategory.IV: 1.15,
})
DEFAULT_IMPORTANCE_FACTOR = 1.0

# Internal pressure coefficients (+GCpi, -GCpi), ASCE 7-22 Table 26.11-1
GCPI_VALUES = MappingProxyType({
    EnclosureType.ENCLOSED: (0.18, -0.18),
    EnclosureType.PARTIALLY_ENCLOSED: (0.55, -0.55),
})

# Velocity pressure constant for qz in psf with V in mph
VELOCITY_PRESSURE_CONSTANT = 0.00256

# Gust effect factor for rigid buildings (ASCE 7-22 §27.4.1)
RIGID_GUST_EFFECT_FACTOR = 0.85

# Input defaults
DEFAULT_DIRECTIONALITY_FACTOR = 0.85  # Kd for MWFRS
DEFAULT_TOPOGRAPHIC_FACTOR = 1.0      # Kzt
DEFAULT_KH_FACTOR = 1.0
DEFAULT_RISK_CATEGORY = RiskCategory.II

# Wall external pressure coefficients (ASCE 7-22 Fig. 27.3-1)
WALL_CP_WINDWARD = 0.8
WALL_CP_SIDEWALL = -0.7
# Leeward Cp breakpoints: (L/B upper bound, Cp), interpolated linearly
WALL_CP_LEEWARD_BREAKPOINTS = (
    (1.0, -0.5),
    (2.0, -0.3),
    (4.0, -0.2),
)

# Flat roof edge zone Cp: (L/B upper bound, (zone 1, zone 3)), stepped
FLAT_ROOF_EDGE_CP_BANDS = (
    (0.5, (0.8, -0.7)),
    (1.0, (0.7, -0.6)),
    (2.0, (0.6, -0.5)),
)
FLAT_ROOF_EDGE_CP_ABOVE = (0.5, -0.4)
FLAT_ROOF_MIDDLE_CP = 0.5

# Sloped roof Cp (slope angle not modeled)
SLOPED_ROOF_CP_WINDWARD = 0.3
SLOPED_ROOF_CP_LEEWARD = -0.7

# Flat roof edge strip width: lesser of these fractions of B and L
ROOF_EDGE_FRACTION_OF_WIDTH = 0.2
ROOF_EDGE_FRACTION_OF_LENGTH = 0.1

# Input limits enforced at the HTTP boundary (mirrors the calculator form)
MAX_WIND_SPEED_MPH = 300.0
MAX_STORIES = 200
MIN_STORY_HEIGHT_FT = 4.0   # exclusive
MAX_STORY_HEIGHT_FT = 20.0
MAX_PLAN_DIMENSION_FT = 1000.0
MANUAL_KZ_MIN = 0.3         # exclusive
MANUAL_KZ_MAX = 3.0         # exclusive

# Output units
PRESSURE_UNIT = "psf"
