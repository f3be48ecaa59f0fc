"""
Pydantic models for building-level wind pressure evaluation.

Provides models for:
  - Plan geometry and the pressure coefficients derived from it
  - Signed surface / roof zone pressures
  - The full building request and response used by the calculator
"""

import math
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from windload.config import (
    DEFAULT_DIRECTIONALITY_FACTOR,
    DEFAULT_RISK_CATEGORY,
    MANUAL_KZ_MAX,
    MANUAL_KZ_MIN,
    MAX_PLAN_DIMENSION_FT,
    MAX_STORIES,
    MAX_STORY_HEIGHT_FT,
    MAX_WIND_SPEED_MPH,
    MIN_STORY_HEIGHT_FT,
    EnclosureType,
    ExposureCategory,
    RiskCategory,
    RoofType,
)
from windload.models.wind import VelocityPressureResult


class PlanGeometry(BaseModel):
    """Rectangular plan. L is parallel to the wind, B is the windward edge."""

    model_config = ConfigDict(frozen=True)

    length_ft: float   # L
    width_ft: float    # B

    @computed_field
    @property
    def lb_ratio(self) -> float:
        return self.length_ft / self.width_ft


class GcpiValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    positive: float
    negative: float


class WallCpValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    windward: float
    leeward: float     # varies with L/B
    sidewall: float


class RoofCpValues(BaseModel):
    """Flat roofs fill zone1..zone3; sloped roofs fill windward/leeward."""

    model_config = ConfigDict(frozen=True)

    roof_type: RoofType
    zone1: Optional[float] = None   # windward edge
    zone2: Optional[float] = None   # middle
    zone3: Optional[float] = None   # leeward edge
    windward: Optional[float] = None
    leeward: Optional[float] = None


class RoofZoneWidths(BaseModel):
    model_config = ConfigDict(frozen=True)

    zone1_width_ft: float
    zone2_width_ft: float
    zone3_width_ft: float


class SurfacePressure(BaseModel):
    """Design pressure pair for one surface or roof zone."""

    model_config = ConfigDict(frozen=True)

    label: str
    p_positive_internal_psf: float   # evaluated with +GCpi
    p_negative_internal_psf: float   # evaluated with -GCpi
    value: str                       # "p+, p- psf"


class StoryPressure(BaseModel):
    model_config = ConfigDict(frozen=True)

    story: int                       # 1-based, ground story first
    mid_height_ft: float
    velocity_pressure_psf: float


class SummaryItem(BaseModel):
    label: str
    value: Union[float, int, str]


class CoefficientInput(BaseModel):
    """Input for a standalone coefficient lookup."""

    length_ft: float = Field(..., gt=0, le=MAX_PLAN_DIMENSION_FT)
    width_ft: float = Field(..., gt=0, le=MAX_PLAN_DIMENSION_FT)
    roof_type: RoofType = RoofType.FLAT
    enclosure: EnclosureType = EnclosureType.ENCLOSED


class CoefficientOutput(BaseModel):
    lb_ratio: float
    wall_cp: WallCpValues
    roof_cp: RoofCpValues
    gcpi: GcpiValues
    roof_zone_widths: Optional[RoofZoneWidths] = None   # flat roofs only


class BuildingInput(BaseModel):
    """
    Calculator request for a box-shaped building.

    Field limits mirror the calculator form; a request that passes
    validation always yields finite pressures.
    """

    model_config = ConfigDict(frozen=True)

    wind_speed_mph: float = Field(115.0, gt=0, lt=MAX_WIND_SPEED_MPH)
    exposure: ExposureCategory = ExposureCategory.B
    num_stories: int = Field(3, ge=1, le=MAX_STORIES)
    story_height_ft: float = Field(10.0, gt=MIN_STORY_HEIGHT_FT, le=MAX_STORY_HEIGHT_FT)
    directionality_factor: float = Field(DEFAULT_DIRECTIONALITY_FACTOR, gt=0, le=1)
    risk_category: RiskCategory = DEFAULT_RISK_CATEGORY
    roof_type: RoofType = RoofType.FLAT
    enclosure: EnclosureType = EnclosureType.ENCLOSED
    roof_length_ft: float = Field(100.0, gt=0, le=MAX_PLAN_DIMENSION_FT)  # L
    roof_width_ft: float = Field(50.0, gt=0, le=MAX_PLAN_DIMENSION_FT)    # B
    wall_evaluation_height_ft: float = Field(15.0, gt=0)
    manual_kz: Optional[float] = Field(
        None, description="Manual Kz override; omit to use the exposure table"
    )

    @model_validator(mode="after")
    def _check_heights_and_override(self) -> "BuildingInput":
        total_height = self.num_stories * self.story_height_ft
        if self.wall_evaluation_height_ft > total_height:
            raise ValueError(
                f"wall_evaluation_height_ft ({self.wall_evaluation_height_ft}) "
                f"exceeds building height ({total_height})"
            )
        if self.manual_kz is not None:
            if not math.isfinite(self.manual_kz) or not (
                MANUAL_KZ_MIN < self.manual_kz < MANUAL_KZ_MAX
            ):
                raise ValueError(
                    f"manual_kz must be between {MANUAL_KZ_MIN} and {MANUAL_KZ_MAX}"
                )
        return self

    @property
    def total_height_ft(self) -> float:
        return self.num_stories * self.story_height_ft

    @property
    def plan(self) -> PlanGeometry:
        return PlanGeometry(length_ft=self.roof_length_ft, width_ft=self.roof_width_ft)


class DiagramData(BaseModel):
    """Numbers consumed by the elevation / roof diagram renderer."""

    roof_type: RoofType
    num_stories: int
    story_height_ft: float
    per_story_pressures_psf: list[float]
    length_ft: float
    width_ft: float


class BuildingOutput(BaseModel):
    """Full result of a building evaluation."""

    summary_items: list[SummaryItem]
    story_pressures: list[StoryPressure]
    wall_pressures: list[SurfacePressure]
    roof_pressures: list[SurfacePressure]

    gust_effect_factor: float
    gcpi: GcpiValues
    wall_cp: WallCpValues
    roof_cp: RoofCpValues
    roof_zone_widths: Optional[RoofZoneWidths] = None

    roof_velocity_pressure: VelocityPressureResult   # at roof reference height
    wall_velocity_pressure: VelocityPressureResult   # at wall evaluation height

    diagram: DiagramData
    warnings: list[str] = Field(default_factory=list)
