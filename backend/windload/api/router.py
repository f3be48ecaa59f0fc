"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from windload.api.velocity_pressure import router as velocity_pressure_router
from windload.api.building import router as building_router
from windload.api.report import router as report_router

router = APIRouter()
router.include_router(velocity_pressure_router)
router.include_router(building_router)
router.include_router(report_router)
