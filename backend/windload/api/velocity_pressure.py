"""
API routes for velocity pressure and coefficient lookups.
"""

from fastapi import APIRouter, HTTPException

from windload.engine.coefficients import lookup_coefficients
from windload.engine.velocity_pressure import calculate_velocity_pressure
from windload.models.building import CoefficientInput, CoefficientOutput
from windload.models.wind import VelocityPressureRequest, VelocityPressureResult

router = APIRouter(prefix="/api/v1", tags=["velocity-pressure"])


@router.post("/velocity-pressure", response_model=VelocityPressureResult)
async def velocity_pressure(data: VelocityPressureRequest) -> VelocityPressureResult:
    """
    Calculate qz at a single height.

    Out-of-range inputs are rejected with 422. Heights outside 15-500 ft are
    clamped. A supplied override_kz replaces the exposure-table Kz and is
    reported in the notes.
    """
    try:
        return calculate_velocity_pressure(data.to_wind_input())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/coefficients", response_model=CoefficientOutput)
async def coefficients(data: CoefficientInput) -> CoefficientOutput:
    """Look up wall Cp, roof Cp, GCpi and roof zone widths for a plan."""
    try:
        return lookup_coefficients(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
