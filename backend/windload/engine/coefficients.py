"""
External (Cp) and internal (GCpi) pressure coefficient tables.

Provides:
  - A breakpoint table with an explicit linear or step policy. Each
    breakpoint closes its band on the upper bound, and bands are tested in
    ascending order so a ratio sitting on a boundary belongs to the lower
    band.
  - Wall Cp (ASCE 7-22 Fig. 27.3-1): windward, sidewall, leeward vs. L/B
  - Roof Cp: flat roof zones 1-3 vs. L/B, sloped roof windward/leeward
  - GCpi by enclosure classification (ASCE 7-22 Table 26.11-1)
  - Flat roof zone widths: edge strip = lesser of 0.2·B and 0.1·L
"""

from bisect import bisect_left
from enum import Enum
from typing import Any, Sequence

from windload.config import (
    FLAT_ROOF_EDGE_CP_ABOVE,
    FLAT_ROOF_EDGE_CP_BANDS,
    FLAT_ROOF_MIDDLE_CP,
    GCPI_VALUES,
    ROOF_EDGE_FRACTION_OF_LENGTH,
    ROOF_EDGE_FRACTION_OF_WIDTH,
    SLOPED_ROOF_CP_LEEWARD,
    SLOPED_ROOF_CP_WINDWARD,
    WALL_CP_LEEWARD_BREAKPOINTS,
    WALL_CP_SIDEWALL,
    WALL_CP_WINDWARD,
    EnclosureType,
    RoofType,
)
from windload.models.building import (
    CoefficientInput,
    CoefficientOutput,
    GcpiValues,
    PlanGeometry,
    RoofCpValues,
    RoofZoneWidths,
    WallCpValues,
)


class TablePolicy(str, Enum):
    LINEAR = "linear"  # interpolate between the band's end points
    STEP = "step"      # take the band's value as-is


def find_band(bounds: Sequence[float], x: float) -> int:
    """
    Index of the first band whose closed upper bound contains x.

    Returns len(bounds) when x lies above every bound.
    """
    return bisect_left(bounds, x)


class BreakpointTable:
    """
    Ordered (upper bound, value) breakpoints with a lookup policy.

    LINEAR: below the first bound the first value holds; between bounds the
    value is interpolated; above the last bound the last value holds.
    STEP: each band returns its own value; above the last bound `above` is
    returned.
    """

    def __init__(
        self,
        breakpoints: Sequence[tuple[float, Any]],
        policy: TablePolicy,
        above: Any = None,
    ):
        if not breakpoints:
            raise ValueError("breakpoints must not be empty")
        bounds = [b for b, _ in breakpoints]
        if any(lo >= hi for lo, hi in zip(bounds, bounds[1:])):
            raise ValueError("breakpoint bounds must be strictly ascending")
        if policy == TablePolicy.STEP and above is None:
            raise ValueError("step tables need a value above the last bound")

        self._bounds = tuple(bounds)
        self._values = tuple(v for _, v in breakpoints)
        self._policy = policy
        self._above = above

    @property
    def policy(self) -> TablePolicy:
        return self._policy

    def lookup(self, x: float) -> Any:
        idx = find_band(self._bounds, x)

        if self._policy == TablePolicy.STEP:
            return self._values[idx] if idx < len(self._values) else self._above

        # LINEAR
        if idx == 0:
            return self._values[0]
        if idx >= len(self._values):
            return self._values[-1]
        x_lo, x_hi = self._bounds[idx - 1], self._bounds[idx]
        y_lo, y_hi = self._values[idx - 1], self._values[idx]
        return y_lo + (x - x_lo) * (y_hi - y_lo) / (x_hi - x_lo)


WALL_LEEWARD_CP_TABLE = BreakpointTable(WALL_CP_LEEWARD_BREAKPOINTS, TablePolicy.LINEAR)

FLAT_ROOF_EDGE_CP_TABLE = BreakpointTable(
    FLAT_ROOF_EDGE_CP_BANDS,
    TablePolicy.STEP,
    above=FLAT_ROOF_EDGE_CP_ABOVE,
)


def get_gcpi(enclosure: EnclosureType) -> GcpiValues:
    positive, negative = GCPI_VALUES[enclosure]
    return GcpiValues(positive=positive, negative=negative)


def leeward_wall_cp(lb_ratio: float) -> float:
    return WALL_LEEWARD_CP_TABLE.lookup(lb_ratio)


def wall_cp(lb_ratio: float) -> WallCpValues:
    """Wall Cp values for wind normal to the B face."""
    return WallCpValues(
        windward=WALL_CP_WINDWARD,
        leeward=leeward_wall_cp(lb_ratio),
        sidewall=WALL_CP_SIDEWALL,
    )


def roof_cp(roof_type: RoofType, lb_ratio: float) -> RoofCpValues:
    """
    Roof Cp values.

    Flat roofs: zone 2 is fixed, zones 1 and 3 step with L/B.
    Sloped roofs: fixed windward/leeward values, slope angle not modeled.
    """
    if roof_type == RoofType.FLAT:
        zone1, zone3 = FLAT_ROOF_EDGE_CP_TABLE.lookup(lb_ratio)
        return RoofCpValues(
            roof_type=roof_type,
            zone1=zone1,
            zone2=FLAT_ROOF_MIDDLE_CP,
            zone3=zone3,
        )
    return RoofCpValues(
        roof_type=roof_type,
        windward=SLOPED_ROOF_CP_WINDWARD,
        leeward=SLOPED_ROOF_CP_LEEWARD,
    )


def roof_zone_widths(plan: PlanGeometry) -> RoofZoneWidths:
    """
    Split B into windward edge / middle / leeward edge strips.

    No minimum strip width is applied, so a plan with a very small L or B
    gets an edge zone of (near) zero width. Zone 3 reuses the zone 1 width.
    """
    edge = min(
        ROOF_EDGE_FRACTION_OF_WIDTH * plan.width_ft,
        ROOF_EDGE_FRACTION_OF_LENGTH * plan.length_ft,
    )
    return RoofZoneWidths(
        zone1_width_ft=edge,
        zone2_width_ft=plan.width_ft - edge,
        zone3_width_ft=edge,
    )


def lookup_coefficients(ci: CoefficientInput) -> CoefficientOutput:
    """All coefficients for one plan, roof type and enclosure."""
    plan = PlanGeometry(length_ft=ci.length_ft, width_ft=ci.width_ft)
    return CoefficientOutput(
        lb_ratio=round(plan.lb_ratio, 4),
        wall_cp=wall_cp(plan.lb_ratio),
        roof_cp=roof_cp(ci.roof_type, plan.lb_ratio),
        gcpi=get_gcpi(ci.enclosure),
        roof_zone_widths=roof_zone_widths(plan) if ci.roof_type == RoofType.FLAT else None,
    )
