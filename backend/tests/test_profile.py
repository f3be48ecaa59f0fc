"""
Tests for the velocity pressure height profile.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from windload.config import ExposureCategory, RiskCategory
from windload.engine.profile_generator import generate_pressure_profile
from windload.main import app
from windload.models.profile import ProfileInput

client = TestClient(app)


class TestProfileGenerator:

    def setup_method(self):
        self.result = generate_pressure_profile(ProfileInput(
            wind_speed_mph=115.0,
            exposure=ExposureCategory.B,
            min_height_ft=0.0,
            max_height_ft=20.0,
            num_points=5,
        ))

    def test_heights(self):
        assert [p.height_ft for p in self.result.points] == [0.0, 5.0, 10.0, 15.0, 20.0]

    def test_flat_below_floor(self):
        kz = [p.kz for p in self.result.points[:4]]
        assert kz == [0.575] * 4
        assert self.result.points[0].velocity_pressure_psf == 19.467

    def test_grows_above_floor(self):
        assert self.result.points[-1].kz > self.result.points[-2].kz

    def test_clamp_limits_reported(self):
        assert self.result.kz_min_height_ft == 15.0
        assert self.result.kz_max_height_ft == 500.0
        assert self.result.importance_factor == 1.0

    def test_monotonic_over_tall_range(self):
        result = generate_pressure_profile(ProfileInput(
            wind_speed_mph=150.0,
            exposure=ExposureCategory.D,
            risk_category=RiskCategory.IV,
            max_height_ft=800.0,
            num_points=81,
        ))
        qz = [p.velocity_pressure_psf for p in result.points]
        assert all(lo <= hi for lo, hi in zip(qz, qz[1:]))
        assert qz[-1] == qz[-2]  # above 500 ft

    def test_invalid_range(self):
        with pytest.raises(ValidationError, match="min_height_ft"):
            ProfileInput(
                wind_speed_mph=115.0,
                exposure=ExposureCategory.B,
                min_height_ft=50.0,
                max_height_ft=20.0,
            )


class TestProfileEndpoint:

    def test_success(self):
        resp = client.post("/api/v1/profile", json={
            "wind_speed_mph": 115,
            "exposure": "C",
            "max_height_ft": 60,
            "num_points": 7,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["exposure"] == "C"
        assert len(data["points"]) == 7

    def test_too_few_points(self):
        resp = client.post("/api/v1/profile", json={
            "wind_speed_mph": 115,
            "exposure": "C",
            "num_points": 1,
        })
        assert resp.status_code == 422
