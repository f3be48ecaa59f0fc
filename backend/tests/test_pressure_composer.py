"""
Tests for design pressure composition.

Covers wall p = q·G·Cp − qi·GCpi, roof p = Kd × q·(G·Cp − GCpi),
internal pressure sign reversal, the gust effect factor, per-story
mid-heights, wall/roof labels, and the "a, b psf" formatting.
"""

import re

import pytest

from windload.config import EnclosureType, ExposureCategory, RiskCategory, RoofType
from windload.engine.coefficients import get_gcpi, roof_cp, roof_zone_widths, wall_cp
from windload.engine.pressure_composer import (
    compose_pressure,
    format_height,
    format_pressure_pair,
    gust_effect_factor,
    roof_pressures,
    story_mid_heights,
    story_pressures,
    wall_pressures,
)
from windload.models.building import GcpiValues, PlanGeometry
from windload.models.wind import WindInput

PAIR_PATTERN = re.compile(r"^-?\d+\.\d{2}, -?\d+\.\d{2} psf$")

ENCLOSED = GcpiValues(positive=0.18, negative=-0.18)


# ---------------------------------------------------------------------------
# compose_pressure
# ---------------------------------------------------------------------------

class TestComposePressure:

    def test_windward_wall_no_kd(self):
        """q=20, G=0.85, Cp=0.8, qi=25: 13.6 − 4.5 = 9.1 and 13.6 + 4.5 = 18.1."""
        p_pos, p_neg = compose_pressure(20.0, 0.85, 0.8, ENCLOSED, 25.0)
        assert p_pos == pytest.approx(9.1)
        assert p_neg == pytest.approx(18.1)

    def test_kd_scales_both_terms(self):
        base = compose_pressure(20.0, 0.85, 0.8, ENCLOSED, 25.0)
        scaled = compose_pressure(20.0, 0.85, 0.8, ENCLOSED, 25.0, kd=0.85)
        assert scaled[0] == pytest.approx(0.85 * base[0])
        assert scaled[1] == pytest.approx(0.85 * base[1])

    def test_internal_pressure_reverses_sign(self):
        p_pos, p_neg = compose_pressure(20.0, 0.85, -0.7, ENCLOSED, 20.0)
        assert p_pos < p_neg
        assert p_neg - p_pos == pytest.approx(2 * 20.0 * 0.18)

    def test_internal_uses_roof_q(self):
        low = compose_pressure(20.0, 0.85, 0.8, ENCLOSED, 10.0)
        high = compose_pressure(20.0, 0.85, 0.8, ENCLOSED, 30.0)
        assert high[0] < low[0]
        assert high[1] > low[1]

    def test_zero_q(self):
        assert compose_pressure(0.0, 0.85, 0.8, ENCLOSED, 0.0) == (0.0, 0.0)


class TestGustEffectFactor:

    @pytest.mark.parametrize("exposure", list(ExposureCategory))
    @pytest.mark.parametrize("height", [10.0, 60.0, 600.0])
    def test_rigid_value(self, exposure, height):
        assert gust_effect_factor(exposure, height) == 0.85


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

class TestFormatPressurePair:

    @pytest.mark.parametrize("pair", [
        (7.807284, 14.696568),
        (-12.0, -3.456),
        (0.0, 0.0),
        (1234.5, -0.004),
        (-0.001, 0.001),
    ])
    def test_two_decimals_and_unit(self, pair):
        text = format_pressure_pair(pair)
        assert PAIR_PATTERN.match(text), text
        assert text.endswith(" psf")

    def test_values(self):
        assert format_pressure_pair((7.807284, 14.696568)) == "7.81, 14.70 psf"
        assert format_pressure_pair((-12.0, -3.456)) == "-12.00, -3.46 psf"


# ---------------------------------------------------------------------------
# Per-story series
# ---------------------------------------------------------------------------

class TestStorySeries:

    def test_mid_heights(self):
        assert story_mid_heights(3, 10.0) == [5.0, 15.0, 25.0]

    def test_single_story(self):
        assert story_mid_heights(1, 12.0) == [6.0]

    def test_story_pressures(self):
        base = WindInput(
            wind_speed_mph=115.0,
            exposure=ExposureCategory.B,
            height_ft=0.0,
            risk_category=RiskCategory.II,
        )
        series = story_pressures(base, 3, 10.0)
        assert [s.story for s in series] == [1, 2, 3]
        assert [s.mid_height_ft for s in series] == [5.0, 15.0, 25.0]
        # stories 1 and 2 both sit at or below the 15 ft floor
        assert series[0].velocity_pressure_psf == 19.467
        assert series[1].velocity_pressure_psf == 19.467
        assert series[2].velocity_pressure_psf == 22.514

    def test_base_input_unchanged(self):
        base = WindInput(wind_speed_mph=115.0, exposure=ExposureCategory.C, height_ft=1.0)
        story_pressures(base, 4, 10.0)
        assert base.height_ft == 1.0


# ---------------------------------------------------------------------------
# Walls and roof
# ---------------------------------------------------------------------------

class TestWallPressures:

    def setup_method(self):
        self.walls = wall_pressures(
            q_wall=19.467,
            q_roof=22.514,
            gust_factor=0.85,
            cp=wall_cp(2.0),
            gcpi=get_gcpi(EnclosureType.ENCLOSED),
            evaluation_height_ft=15.0,
        )

    def test_labels(self):
        assert [w.label for w in self.walls] == [
            "Windward wall pressure (at 15ft)",
            "Leeward wall pressure (at 15ft)",
            "Sidewall pressure (at 15ft)",
        ]

    def test_windward_values(self):
        """19.467·0.85·0.8 ∓ 22.514·0.18, no Kd on walls."""
        windward = self.walls[0]
        assert windward.p_positive_internal_psf == pytest.approx(9.18504, abs=1e-6)
        assert windward.p_negative_internal_psf == pytest.approx(17.29008, abs=1e-6)
        assert windward.value == "9.19, 17.29 psf"

    def test_all_formatted(self):
        for w in self.walls:
            assert PAIR_PATTERN.match(w.value)

    def test_fractional_height_label(self):
        walls = wall_pressures(20.0, 20.0, 0.85, wall_cp(1.0), ENCLOSED, 12.5)
        assert walls[0].label == "Windward wall pressure (at 12.5ft)"

    @pytest.mark.parametrize("height, text", [
        (15.0, "15"),
        (12.5, "12.5"),
        (0.00001, "0.00001"),
        (123.456789, "123.456789"),
    ])
    def test_height_label_as_entered(self, height, text):
        walls = wall_pressures(20.0, 20.0, 0.85, wall_cp(1.0), ENCLOSED, height)
        assert walls[1].label == f"Leeward wall pressure (at {text}ft)"
        assert format_height(height) == text


class TestRoofPressures:

    def test_flat_roof_zones(self):
        plan = PlanGeometry(length_ft=100.0, width_ft=50.0)
        roof = roof_pressures(
            q_roof=22.514,
            gust_factor=0.85,
            cp=roof_cp(RoofType.FLAT, plan.lb_ratio),
            gcpi=ENCLOSED,
            zone_widths=roof_zone_widths(plan),
            kd=0.85,
        )
        assert [r.label for r in roof] == [
            "Roof Zone 1 (windward edge, 10.0ft)",
            "Roof Zone 2 (middle, 40.0ft)",
            "Roof Zone 3 (leeward edge, 10.0ft)",
        ]
        # 0.85 × 22.514 × (0.85·0.6 − 0.18) = 6.3152
        assert roof[0].p_positive_internal_psf == pytest.approx(6.315177, abs=1e-6)
        assert roof[0].value == "6.32, 13.20 psf"

    def test_flat_roof_requires_widths(self):
        with pytest.raises(ValueError, match="zone_widths"):
            roof_pressures(20.0, 0.85, roof_cp(RoofType.FLAT, 1.0), ENCLOSED)

    def test_sloped_roof(self):
        roof = roof_pressures(20.0, 0.85, roof_cp(RoofType.SLOPED, 1.0), ENCLOSED)
        assert [r.label for r in roof] == [
            "Windward slope (positive)",
            "Leeward slope (negative)",
        ]
        # 20 × 0.85 × 0.3 − 20 × 0.18 = 1.5
        assert roof[0].p_positive_internal_psf == pytest.approx(1.5)
        # 20 × 0.85 × −0.7 + 20 × 0.18 = −8.3
        assert roof[1].p_negative_internal_psf == pytest.approx(-8.3)
