"""
Building evaluation: one request in, every displayed result out.

Steps:
  1. qz at the mid-height of every story
  2. qz at the roof reference height (mid-height of the top story) and at
     the wall evaluation height
  3. Cp / GCpi lookups for the plan ratio and enclosure
  4. Wall and roof design pressures, summary items, diagram data
"""

import logging

from windload.config import RoofType
from windload.engine.coefficients import get_gcpi, roof_cp, roof_zone_widths, wall_cp
from windload.engine.exposure import resolve_kz
from windload.engine.pressure_composer import (
    gust_effect_factor,
    roof_pressures,
    story_pressures,
    wall_pressures,
)
from windload.engine.velocity_pressure import calculate_velocity_pressure
from windload.models.building import (
    BuildingInput,
    BuildingOutput,
    DiagramData,
    SummaryItem,
)
from windload.models.wind import WindInput

logger = logging.getLogger(__name__)


def _base_wind_input(bi: BuildingInput) -> WindInput:
    return WindInput(
        wind_speed_mph=bi.wind_speed_mph,
        exposure=bi.exposure,
        height_ft=bi.story_height_ft / 2.0,
        directionality_factor=bi.directionality_factor,
        risk_category=bi.risk_category,
        override_kz=bi.manual_kz,
    )


def evaluate_building(building_input: BuildingInput) -> BuildingOutput:
    """Compute story, wall and roof pressures for a box-shaped building."""
    bi = building_input
    warnings: list[str] = []
    kd = bi.directionality_factor

    base = _base_wind_input(bi)
    stories = story_pressures(base, bi.num_stories, bi.story_height_ft)

    roof_height = (bi.num_stories - 0.5) * bi.story_height_ft
    roof_result = calculate_velocity_pressure(base.model_copy(update={"height_ft": roof_height}))
    wall_result = calculate_velocity_pressure(
        base.model_copy(update={"height_ft": bi.wall_evaluation_height_ft})
    )
    q_roof = roof_result.velocity_pressure_psf
    q_wall = wall_result.velocity_pressure_psf

    gcpi = get_gcpi(bi.enclosure)
    gust = gust_effect_factor(bi.exposure, bi.total_height_ft)

    plan = bi.plan
    walls_cp = wall_cp(plan.lb_ratio)
    roofs_cp = roof_cp(bi.roof_type, plan.lb_ratio)
    widths = roof_zone_widths(plan) if bi.roof_type == RoofType.FLAT else None

    walls = wall_pressures(q_wall, q_roof, gust, walls_cp, gcpi, bi.wall_evaluation_height_ft)
    roof = roof_pressures(q_roof, gust, roofs_cp, gcpi, widths, kd)

    if widths is not None and round(widths.zone1_width_ft, 1) <= 0:
        msg = (
            f"Roof edge zones have zero width (L={plan.length_ft}ft, B={plan.width_ft}ft); "
            "no minimum strip width is applied"
        )
        logger.warning(msg)
        warnings.append(msg)

    if roof_result.kz != roof_result.computed_kz:
        msg = (
            f"Manual Kz={roof_result.kz:.3f} used at every height "
            f"(auto at roof was {roof_result.computed_kz:.3f})"
        )
        logger.info(msg)
        warnings.append(msg)

    summary = [
        SummaryItem(label="Stories", value=bi.num_stories),
        SummaryItem(label="Story height (ft)", value=bi.story_height_ft),
        SummaryItem(label="Total height (ft)", value=bi.total_height_ft),
        SummaryItem(label="Kz at total height", value=resolve_kz(bi.exposure, bi.total_height_ft)),
        SummaryItem(label="V (mph)", value=bi.wind_speed_mph),
        SummaryItem(label="Exposure", value=bi.exposure.value),
        SummaryItem(label="Risk Category", value=bi.risk_category.value),
        SummaryItem(label="Kd", value=kd),
        SummaryItem(label="G (Gust Factor)", value=gust),
        SummaryItem(label="Gcpi (+)", value=gcpi.positive),
        SummaryItem(label="Gcpi (-)", value=gcpi.negative),
        SummaryItem(label="Top story qz (psf)", value=q_roof),
        SummaryItem(label="Wall Cp Windward", value=walls_cp.windward),
        SummaryItem(label="Wall Cp Leeward", value=walls_cp.leeward),
        SummaryItem(label="Wall Cp Sidewalls", value=walls_cp.sidewall),
        SummaryItem(label="L/B", value=round(plan.lb_ratio, 4)),
    ]

    logger.debug(
        "Evaluated %d-story building: q_roof=%.3f psf, q_wall=%.3f psf, L/B=%.3f",
        bi.num_stories, q_roof, q_wall, plan.lb_ratio,
    )

    return BuildingOutput(
        summary_items=summary,
        story_pressures=stories,
        wall_pressures=walls,
        roof_pressures=roof,
        gust_effect_factor=gust,
        gcpi=gcpi,
        wall_cp=walls_cp,
        roof_cp=roofs_cp,
        roof_zone_widths=widths,
        roof_velocity_pressure=roof_result,
        wall_velocity_pressure=wall_result,
        diagram=DiagramData(
            roof_type=bi.roof_type,
            num_stories=bi.num_stories,
            story_height_ft=bi.story_height_ft,
            per_story_pressures_psf=[s.velocity_pressure_psf for s in stories],
            length_ft=plan.length_ft,
            width_ft=plan.width_ft,
        ),
        warnings=warnings,
    )
