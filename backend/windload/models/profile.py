"""
Pydantic models for the velocity pressure height profile.
"""

from pydantic import BaseModel, Field, model_validator

from windload.config import (
    DEFAULT_KH_FACTOR,
    DEFAULT_RISK_CATEGORY,
    DEFAULT_TOPOGRAPHIC_FACTOR,
    KZ_MAX_HEIGHT_FT,
    MAX_WIND_SPEED_MPH,
    ExposureCategory,
    RiskCategory,
)


class ProfileInput(BaseModel):
    """Input for sampling Kz and qz over a height range."""

    wind_speed_mph: float = Field(..., gt=0, lt=MAX_WIND_SPEED_MPH)
    exposure: ExposureCategory
    risk_category: RiskCategory = DEFAULT_RISK_CATEGORY
    topographic_factor: float = Field(DEFAULT_TOPOGRAPHIC_FACTOR, ge=1.0)
    kh_factor: float = DEFAULT_KH_FACTOR
    min_height_ft: float = Field(0.0, ge=0)
    max_height_ft: float = Field(100.0, gt=0, le=2 * KZ_MAX_HEIGHT_FT)
    num_points: int = Field(50, ge=2, le=1000)

    @model_validator(mode="after")
    def _check_range(self) -> "ProfileInput":
        if self.min_height_ft >= self.max_height_ft:
            raise ValueError("min_height_ft must be less than max_height_ft")
        return self


class ProfilePoint(BaseModel):
    height_ft: float
    kz: float
    velocity_pressure_psf: float


class ProfileOutput(BaseModel):
    exposure: ExposureCategory
    points: list[ProfilePoint]
    kz_min_height_ft: float          # heights below use this Kz
    kz_max_height_ft: float          # heights above use this Kz
    importance_factor: float
