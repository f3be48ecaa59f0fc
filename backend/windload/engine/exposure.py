"""
Velocity pressure exposure coefficient (Kz) resolver.

Power-law profile from ASCE 7-22 Table 26.10-1:
  Kz = 2.01 × (z / zg)^(2/α)
with z clamped to 15 ft ≤ z ≤ 500 ft.
"""

from windload.config import (
    GRADIENT_HEIGHT_FT,
    KZ_MAX_HEIGHT_FT,
    KZ_MIN_HEIGHT_FT,
    TERRAIN_ALPHA,
    ExposureCategory,
)


def clamp_height(height_ft: float) -> float:
    """Clamp a height to the Kz evaluation range without raising."""
    return max(KZ_MIN_HEIGHT_FT, min(height_ft, KZ_MAX_HEIGHT_FT))


def resolve_kz(exposure: ExposureCategory, height_ft: float) -> float:
    """
    Compute Kz for the given exposure category and height.

    Heights below 15 ft use the 15 ft value and heights above 500 ft use the
    500 ft value. Result is rounded to 3 decimals.
    """
    z = clamp_height(height_ft)
    alpha = TERRAIN_ALPHA[exposure]
    zg = GRADIENT_HEIGHT_FT[exposure]
    kz = 2.01 * (z / zg) ** (2.0 / alpha)
    return round(kz, 3)
