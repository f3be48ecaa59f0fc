"""
Velocity pressure (qz) calculator.

ASCE 7-22:
  qz = 0.00256 × Kz × Kzt × Ke × V² × I   (psf, V in mph)

Kd was moved out of qz in ASCE 7-22 and is applied when design pressures
are composed. It is still reported in the notes for traceability.
"""

import math
from typing import Optional

from windload.config import (
    DEFAULT_IMPORTANCE_FACTOR,
    IMPORTANCE_FACTORS,
    VELOCITY_PRESSURE_CONSTANT,
    RiskCategory,
)
from windload.engine.exposure import resolve_kz
from windload.models.wind import VelocityPressureResult, WindInput

FORMULA_NOTE = "Formula: qz = 0.00256 * Kz * Kzt * Ke * V^2 * I (psf)"


def get_importance_factor(risk_category: RiskCategory) -> float:
    """Importance factor for a risk category; unknown values fall back to 1.0."""
    return IMPORTANCE_FACTORS.get(risk_category, DEFAULT_IMPORTANCE_FACTOR)


def effective_kz(override_kz: Optional[float], computed_kz: float) -> float:
    """Return the override when it is a finite number, else the computed Kz."""
    if override_kz is not None and math.isfinite(override_kz):
        return override_kz
    return computed_kz


def calculate_velocity_pressure(wind_input: WindInput) -> VelocityPressureResult:
    """
    Compute qz at wind_input.height_ft.

    Never raises for a well-typed input: a NaN or infinite override falls
    back to the computed Kz and out-of-range heights are clamped.
    """
    wi = wind_input

    importance = get_importance_factor(wi.risk_category)
    computed_kz = resolve_kz(wi.exposure, wi.height_ft)
    kz = effective_kz(wi.override_kz, computed_kz)

    qz_base = (
        VELOCITY_PRESSURE_CONSTANT
        * kz
        * wi.topographic_factor
        * wi.kh_factor
        * wi.wind_speed_mph ** 2
    )
    qz = qz_base * importance

    return VelocityPressureResult(
        velocity_pressure_psf=round(qz, 3),
        kz=kz,
        computed_kz=computed_kz,
        importance_factor=importance,
        pressure_notes=_build_notes(wi, importance, kz, computed_kz),
    )


def _build_notes(
    wi: WindInput,
    importance: float,
    kz: float,
    computed_kz: float,
) -> list[str]:
    notes = [
        f"Risk Cat {wi.risk_category.value}: Kd={wi.directionality_factor:.2f}, "
        f"Kzt={wi.topographic_factor:.2f}, I={importance:.2f}, "
        f"Kz={kz:.3f}, Kh={wi.kh_factor:.2f}"
    ]
    if kz != computed_kz:
        notes.append(f"Manual Kz override used (auto was {computed_kz:.3f})")
    notes.append(FORMULA_NOTE)
    return notes
