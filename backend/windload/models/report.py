"""
Pydantic models for PDF report generation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from windload.models.building import BuildingInput


class ReportInput(BaseModel):
    """Input for generating a PDF wind pressure report."""

    title: str = "Wind Pressure Report"
    building: BuildingInput = Field(
        default_factory=BuildingInput,
        description="Building evaluated for the report",
    )
    diagram_image_base64: Optional[str] = Field(
        None, description="Base64-encoded PNG of the building diagram, if rendered"
    )
    notes: Optional[str] = Field(
        None, description="Free-text notes to include in the report"
    )
    include_sections: list[str] = Field(
        default_factory=lambda: ["diagram", "summary", "stories", "walls", "roof", "notes"],
        description="Which sections to include in the report",
    )
