"""
Pydantic models for velocity pressure (qz) calculations.
"""

from typing import Optional

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

from windload.config import (
    DEFAULT_DIRECTIONALITY_FACTOR,
    DEFAULT_KH_FACTOR,
    DEFAULT_RISK_CATEGORY,
    DEFAULT_TOPOGRAPHIC_FACTOR,
    MANUAL_KZ_MAX,
    MANUAL_KZ_MIN,
    MAX_WIND_SPEED_MPH,
    ExposureCategory,
    RiskCategory,
)


class WindInput(BaseModel):
    """
    Input for a velocity pressure calculation at one height.

    Ranges are not checked here; callers pass already-validated numbers.
    A non-finite override_kz is accepted and ignored.
    """

    model_config = ConfigDict(frozen=True)

    wind_speed_mph: float                 # Basic wind speed V, 3-sec gust
    exposure: ExposureCategory
    height_ft: float                      # Height above ground z
    directionality_factor: float = DEFAULT_DIRECTIONALITY_FACTOR  # Kd
    topographic_factor: float = DEFAULT_TOPOGRAPHIC_FACTOR        # Kzt
    risk_category: RiskCategory = DEFAULT_RISK_CATEGORY
    override_kz: Optional[float] = None   # Manual Kz, wins when finite
    kh_factor: float = DEFAULT_KH_FACTOR


class VelocityPressureResult(BaseModel):
    """Result of a velocity pressure calculation."""

    model_config = ConfigDict(frozen=True)

    velocity_pressure_psf: float          # qz, rounded to 3 decimals
    kz: float                             # Kz actually used
    computed_kz: float                    # Kz from the exposure table
    importance_factor: float
    pressure_notes: list[str] = Field(
        default_factory=list,
        description="Ordered human-readable notes: factors, override, formula",
    )


class VelocityPressureRequest(BaseModel):
    """
    HTTP request for a single-height qz calculation.

    Same fields as WindInput, with the calculator's limits enforced.
    """

    model_config = ConfigDict(frozen=True)

    wind_speed_mph: float = Field(..., gt=0, lt=MAX_WIND_SPEED_MPH)
    exposure: ExposureCategory
    height_ft: float = Field(..., gt=0)
    directionality_factor: float = Field(DEFAULT_DIRECTIONALITY_FACTOR, gt=0, le=1)
    topographic_factor: float = Field(DEFAULT_TOPOGRAPHIC_FACTOR, ge=1)
    risk_category: RiskCategory = DEFAULT_RISK_CATEGORY
    override_kz: Optional[float] = None
    kh_factor: float = Field(DEFAULT_KH_FACTOR, gt=0)

    @model_validator(mode="after")
    def _check_override(self) -> "VelocityPressureRequest":
        if self.override_kz is not None:
            if not math.isfinite(self.override_kz) or not (
                MANUAL_KZ_MIN < self.override_kz < MANUAL_KZ_MAX
            ):
                raise ValueError(
                    f"override_kz must be between {MANUAL_KZ_MIN} and {MANUAL_KZ_MAX}"
                )
        return self

    def to_wind_input(self) -> WindInput:
        return WindInput(**self.model_dump())
