"""
PDF report generator using fpdf2.

Produces a short report for one building evaluation containing:
  - Title page with the input summary and an optional diagram image
  - Per-story velocity pressure table
  - Wall and roof design pressure tables
  - Warnings, calculation notes, and user notes
"""

import base64
import os
import tempfile
from datetime import datetime

from fpdf import FPDF

from windload.engine.building import evaluate_building
from windload.models.building import SurfacePressure
from windload.models.report import ReportInput


_STORY_COLS = [
    ("Story", 30),
    ("Mid-height (ft)", 45),
    ("qz (psf)", 45),
]

_SURFACE_COLS = [
    ("Surface / Zone", 100),
    ("p (+GCpi) psf", 45),
    ("p (-GCpi) psf", 45),
]


class WindReport(FPDF):
    """Custom FPDF subclass with header/footer."""

    def __init__(self, title: str):
        super().__init__(orientation="P", unit="mm", format="letter")
        self._report_title = title
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 9)
        self.set_text_color(100, 100, 100)
        self.cell(0, 6, self._report_title, align="L")
        self.cell(0, 6, datetime.now().strftime("%Y-%m-%d %H:%M"), align="R", new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(200, 200, 200)
        self.line(10, self.get_y(), self.w - 10, self.get_y())
        self.ln(3)

    def footer(self):
        self.set_y(-12)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(150, 150, 150)
        self.cell(0, 8, f"Page {self.page_no()}/{{nb}}", align="C")


def generate_report(inp: ReportInput) -> bytearray:
    """Evaluate the building and return the PDF bytes."""
    result = evaluate_building(inp.building)

    pdf = WindReport(inp.title)
    pdf.alias_nb_pages()

    # ── Page 1: Title + summary ──
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 12, inp.title, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)

    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(60, 60, 60)
    info_lines = [
        "ASCE 7-22 MWFRS, simplified (rigid building, wind normal to face)",
        f"Generated: {datetime.now().strftime('%B %d, %Y at %H:%M')}",
    ]
    for line in info_lines:
        pdf.cell(0, 6, line, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    if "diagram" in inp.include_sections and inp.diagram_image_base64:
        _add_diagram_image(pdf, inp.diagram_image_base64)

    if "summary" in inp.include_sections:
        _add_section_heading(pdf, "Summary")
        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(40, 40, 40)
        for item in result.summary_items:
            pdf.cell(0, 5, f"{item.label}: {_fv(item.value, 3)}", new_x="LMARGIN", new_y="NEXT")
        pdf.ln(3)

    # ── Story table ──
    if "stories" in inp.include_sections:
        pdf.add_page()
        _add_section_heading(pdf, "Velocity Pressure by Story")
        _add_table_header(pdf, _STORY_COLS)
        pdf.set_font("Helvetica", "", 8)
        pdf.set_text_color(40, 40, 40)
        for sp in result.story_pressures:
            vals = [str(sp.story), _fv(sp.mid_height_ft, 1), _fv(sp.velocity_pressure_psf, 3)]
            for val, (_, width) in zip(vals, _STORY_COLS):
                pdf.cell(width, 5, val, border=1, align="C")
            pdf.ln()

    # ── Surfaces ──
    if "walls" in inp.include_sections or "roof" in inp.include_sections:
        pdf.add_page()
    if "walls" in inp.include_sections:
        _add_section_heading(pdf, "Wall Pressures")
        _add_surface_table(pdf, result.wall_pressures)
        pdf.ln(4)
    if "roof" in inp.include_sections:
        _add_section_heading(pdf, f"Roof Pressures ({result.roof_cp.roof_type.value})")
        _add_surface_table(pdf, result.roof_pressures)
        pdf.ln(4)

    # ── Warnings and calculation notes ──
    calc_notes = result.roof_velocity_pressure.pressure_notes
    if result.warnings or calc_notes:
        _add_section_heading(pdf, "Calculation Notes")
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(40, 40, 40)
        for line in calc_notes:
            pdf.multi_cell(0, 5, line, new_x="LMARGIN", new_y="NEXT")
        for line in result.warnings:
            pdf.multi_cell(0, 5, f"Warning: {line}", new_x="LMARGIN", new_y="NEXT")

    # ── Notes ──
    if "notes" in inp.include_sections and inp.notes:
        pdf.add_page()
        _add_section_heading(pdf, "Notes")
        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(40, 40, 40)
        pdf.multi_cell(0, 5, inp.notes)

    return pdf.output()


def _add_diagram_image(pdf: FPDF, b64_data: str) -> None:
    """Decode base64 PNG and add to PDF."""
    # Strip data URI prefix if present
    if "," in b64_data:
        b64_data = b64_data.split(",", 1)[1]

    img_bytes = base64.b64decode(b64_data)

    tmp = tempfile.NamedTemporaryFile(suffix=".png", delete=False)
    try:
        tmp.write(img_bytes)
        tmp.flush()
        tmp.close()

        available_width = pdf.w - 20
        available_height = pdf.h - pdf.get_y() - 20

        pdf.image(tmp.name, x=10, w=available_width, h=min(available_height, 100))
    finally:
        os.unlink(tmp.name)


def _add_section_heading(pdf: FPDF, text: str) -> None:
    pdf.set_font("Helvetica", "B", 14)
    pdf.set_text_color(30, 30, 30)
    pdf.cell(0, 10, text, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)


def _add_table_header(pdf: FPDF, cols: list[tuple[str, int]]) -> None:
    pdf.set_font("Helvetica", "B", 8)
    pdf.set_fill_color(230, 230, 230)
    pdf.set_text_color(30, 30, 30)
    for label, width in cols:
        pdf.cell(width, 6, label, border=1, fill=True, align="C")
    pdf.ln()


def _add_surface_table(pdf: FPDF, surfaces: list[SurfacePressure]) -> None:
    _add_table_header(pdf, _SURFACE_COLS)
    pdf.set_font("Helvetica", "", 8)
    pdf.set_text_color(40, 40, 40)
    for s in surfaces:
        vals = [s.label, _fv(s.p_positive_internal_psf), _fv(s.p_negative_internal_psf)]
        for i, (val, (_, width)) in enumerate(zip(vals, _SURFACE_COLS)):
            align = "L" if i == 0 else "C"
            pdf.cell(width, 5, val, border=1, align=align)
        pdf.ln()


def _fv(val, decimals: int = 2) -> str:
    """Format a value for display, handling None gracefully."""
    if val is None:
        return "-"
    if isinstance(val, float):
        return f"{val:.{decimals}f}"
    return str(val)
