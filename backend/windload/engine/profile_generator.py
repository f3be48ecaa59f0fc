"""
Velocity pressure height profile.

Samples Kz and qz at evenly spaced heights so a front end can chart how
pressure grows with height. Values below 15 ft and above 500 ft are flat
because of the Kz clamp.
"""

import numpy as np

from windload.config import KZ_MAX_HEIGHT_FT, KZ_MIN_HEIGHT_FT
from windload.engine.velocity_pressure import calculate_velocity_pressure, get_importance_factor
from windload.models.profile import ProfileInput, ProfileOutput, ProfilePoint
from windload.models.wind import WindInput


def _get_height_range(min_height_ft: float, max_height_ft: float, num_points: int) -> np.ndarray:
    return np.linspace(min_height_ft, max_height_ft, num_points)


def generate_pressure_profile(profile_input: ProfileInput) -> ProfileOutput:
    pi = profile_input
    points = []

    for z in _get_height_range(pi.min_height_ft, pi.max_height_ft, pi.num_points):
        result = calculate_velocity_pressure(WindInput(
            wind_speed_mph=pi.wind_speed_mph,
            exposure=pi.exposure,
            height_ft=float(z),
            topographic_factor=pi.topographic_factor,
            risk_category=pi.risk_category,
            kh_factor=pi.kh_factor,
        ))
        points.append(ProfilePoint(
            height_ft=round(float(z), 2),
            kz=result.kz,
            velocity_pressure_psf=result.velocity_pressure_psf,
        ))

    return ProfileOutput(
        exposure=pi.exposure,
        points=points,
        kz_min_height_ft=KZ_MIN_HEIGHT_FT,
        kz_max_height_ft=KZ_MAX_HEIGHT_FT,
        importance_factor=get_importance_factor(pi.risk_category),
    )
