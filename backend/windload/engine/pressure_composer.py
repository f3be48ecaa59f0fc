"""
Design pressure composition for MWFRS surfaces.

  walls:  p = q × G × Cp − qi × GCpi
  roof:   p = Kd × (q × G × Cp − q × GCpi)

evaluated once with +GCpi and once with -GCpi. Wall q is the velocity
pressure at the evaluation height and qi the roof-height velocity pressure.
Roof zones take both from roof height and carry Kd.
"""

from typing import Optional

from windload.config import PRESSURE_UNIT, RIGID_GUST_EFFECT_FACTOR, ExposureCategory, RoofType
from windload.engine.velocity_pressure import calculate_velocity_pressure
from windload.models.building import (
    GcpiValues,
    RoofCpValues,
    RoofZoneWidths,
    StoryPressure,
    SurfacePressure,
    WallCpValues,
)
from windload.models.wind import WindInput


def gust_effect_factor(exposure: ExposureCategory, height_ft: float) -> float:
    """
    Gust effect factor G.

    Rigid-building value only. The natural-frequency (flexible building)
    path is not modeled, so exposure and height do not change the result.
    """
    return RIGID_GUST_EFFECT_FACTOR


def compose_pressure(
    q: float,
    gust_factor: float,
    cp: float,
    gcpi: GcpiValues,
    q_internal: float,
    kd: float = 1.0,
) -> tuple[float, float]:
    """
    Signed design pressure pair for one surface.

    Returns (p with +GCpi, p with -GCpi) in psf.
    """
    external = kd * q * gust_factor * cp
    return (
        external - kd * q_internal * gcpi.positive,
        external - kd * q_internal * gcpi.negative,
    )


def format_pressure_pair(pair: tuple[float, float]) -> str:
    """Render a pressure pair as "a, b psf" with two decimals each."""
    p_pos, p_neg = pair
    return f"{p_pos:.2f}, {p_neg:.2f} {PRESSURE_UNIT}"


def format_height(height_ft: float) -> str:
    """Height as entered: 15.0 -> "15", 12.5 -> "12.5", no exponent form."""
    text = repr(float(height_ft))
    if "e" in text or "E" in text:
        text = f"{height_ft:.15f}".rstrip("0")
    if text.endswith(".0"):
        text = text[:-2]
    return text.rstrip(".")


def _surface(label: str, pair: tuple[float, float]) -> SurfacePressure:
    return SurfacePressure(
        label=label,
        p_positive_internal_psf=pair[0],
        p_negative_internal_psf=pair[1],
        value=format_pressure_pair(pair),
    )


def story_mid_heights(num_stories: int, story_height_ft: float) -> list[float]:
    """Mid-height of each story, ground story first."""
    return [(i - 0.5) * story_height_ft for i in range(1, num_stories + 1)]


def story_pressures(
    base_input: WindInput,
    num_stories: int,
    story_height_ft: float,
) -> list[StoryPressure]:
    """
    qz at the mid-height of every story.

    base_input supplies every factor except height, which is replaced per
    story.
    """
    series = []
    for story, z in enumerate(story_mid_heights(num_stories, story_height_ft), start=1):
        result = calculate_velocity_pressure(base_input.model_copy(update={"height_ft": z}))
        series.append(StoryPressure(
            story=story,
            mid_height_ft=z,
            velocity_pressure_psf=result.velocity_pressure_psf,
        ))
    return series


def wall_pressures(
    q_wall: float,
    q_roof: float,
    gust_factor: float,
    cp: WallCpValues,
    gcpi: GcpiValues,
    evaluation_height_ft: float,
) -> list[SurfacePressure]:
    """Windward, leeward and sidewall pressures at one evaluation height (no Kd)."""
    at = f"(at {format_height(evaluation_height_ft)}ft)"
    surfaces = [
        (f"Windward wall pressure {at}", cp.windward),
        (f"Leeward wall pressure {at}", cp.leeward),
        (f"Sidewall pressure {at}", cp.sidewall),
    ]
    return [
        _surface(label, compose_pressure(q_wall, gust_factor, wall_cp, gcpi, q_roof))
        for label, wall_cp in surfaces
    ]


def roof_pressures(
    q_roof: float,
    gust_factor: float,
    cp: RoofCpValues,
    gcpi: GcpiValues,
    zone_widths: Optional[RoofZoneWidths] = None,
    kd: float = 1.0,
) -> list[SurfacePressure]:
    """
    Roof zone pressures. Both q and qi are taken at roof height.

    Flat roofs need zone_widths for the zone labels.
    """
    if cp.roof_type == RoofType.FLAT:
        if zone_widths is None:
            raise ValueError("zone_widths are required for flat roof pressures")
        zones = [
            (f"Roof Zone 1 (windward edge, {zone_widths.zone1_width_ft:.1f}ft)", cp.zone1),
            (f"Roof Zone 2 (middle, {zone_widths.zone2_width_ft:.1f}ft)", cp.zone2),
            (f"Roof Zone 3 (leeward edge, {zone_widths.zone3_width_ft:.1f}ft)", cp.zone3),
        ]
    else:
        zones = [
            ("Windward slope (positive)", cp.windward),
            ("Leeward slope (negative)", cp.leeward),
        ]
    return [
        _surface(label, compose_pressure(q_roof, gust_factor, zone_cp, gcpi, q_roof, kd))
        for label, zone_cp in zones
    ]
