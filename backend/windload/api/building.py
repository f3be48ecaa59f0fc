"""
API routes for building-level pressure evaluation and height profiles.
"""

from fastapi import APIRouter, HTTPException

from windload.engine.building import evaluate_building
from windload.engine.profile_generator import generate_pressure_profile
from windload.models.building import BuildingInput, BuildingOutput
from windload.models.profile import ProfileInput, ProfileOutput

router = APIRouter(prefix="/api/v1", tags=["building"])


@router.post("/building", response_model=BuildingOutput)
async def building(data: BuildingInput) -> BuildingOutput:
    """
    Evaluate story, wall and roof design pressures for a box-shaped building.

    Returns the per-story qz series, signed wall and roof pressure pairs,
    the coefficients used, and the data needed to draw the diagram.
    """
    try:
        return evaluate_building(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/profile", response_model=ProfileOutput)
async def profile(data: ProfileInput) -> ProfileOutput:
    """Sample Kz and qz over a height range for charting."""
    try:
        return generate_pressure_profile(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
