from io import BytesIO
from datetime import datetime
from typing import Dict, Optional
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas as rl_canvas
from reportlab.lib.units import inch
from reportlab.lib.utils import ImageReader, simpleSplit

from .constants import DISCLAIMER
from .utils import fmt_karat, fmt_usd

def build_pdf(inputs: Dict, result, value: Optional[Dict] = None,
              fig_png_bytes: Optional[bytes] = None) -> bytes:
    buf = BytesIO()
    c = rl_canvas.Canvas(buf, pagesize=letter)
    W, H = letter
    margin = 0.75 * inch

    def text_line(x, y, s, size=10):
        c.setFont("Helvetica", size); c.drawString(x, y, str(s))

    def wrapped(x, y, s, size=9):
        for line in simpleSplit(str(s), "Helvetica", size, W - 2 * margin):
            text_line(x, y, line, size); y -= size + 3
        return y

    # Header
    y = H - margin
    c.setTitle("Gold Karat Screening Report")
    text_line(margin, y, "Gold Karat Screening — Hydrostatic Weighing Report", 14); y -= 18
    text_line(margin, y, f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", 9); y -= 14

    # Inputs
    text_line(margin, y, "Inputs:", 12); y -= 12
    for label, val in inputs.items():
        text_line(margin, y, f"• {label}: {val}", 10); y -= 12

    # Physical
    y -= 2
    text_line(margin, y, "Measurement:", 12); y -= 12
    text_line(margin, y, f"• Water density used: {result.water_density:.4f} g/cm³", 10); y -= 12
    text_line(margin, y, f"• Volume: {result.volume:.4f} cm³", 10); y -= 12
    text_line(margin, y, f"• Density: {result.density:.2f} g/cm³", 10); y -= 14

    # Estimates
    text_line(margin, y, "Estimates:", 12); y -= 12
    text_line(margin, y, f"• Gold content (linear): {result.gold_percent:.1f}%", 10); y -= 12
    text_line(margin, y, f"• Karat from percent: {result.karat_from_percent:.1f}K", 10); y -= 12
    if result.karat_from_density is not None:
        text_line(margin, y, f"• Karat from density table: {fmt_karat(result.karat_from_density)}K "
                             f"({result.karat_density_range})", 10); y -= 12
    else:
        text_line(margin, y, "• Karat from density table: ? (outside the table range)", 10); y -= 12
    text_line(margin, y, f"• Final range: {result.final_range_label} — {result.category_label}", 10); y -= 12
    delta = "" if result.delta_karat is None else f" (difference {result.delta_karat:.1f}K)"
    text_line(margin, y, f"• Consistency: {result.delta_flag}{delta}", 10); y -= 12
    y = wrapped(margin, y, result.delta_note); y -= 2
    y = wrapped(margin, y, result.conclusion); y -= 4

    if value:
        text_line(margin, y, "Gold content value:", 12); y -= 12
        for name, row in value.items():
            text_line(margin, y, f"• {name}: {row['karat']:.1f}K, {row['fine_gold_g']:.3f} g fine gold, "
                                 f"{fmt_usd(row['value_usd'])}", 10); y -= 12
        y -= 2

    # Chart
    if fig_png_bytes:
        if (y - 3.8 * inch) < margin:
            c.showPage(); y = H - margin
        text_line(margin, y, "Density bands:", 12); y -= 12
        c.drawImage(ImageReader(BytesIO(fig_png_bytes)), margin, y - 3.6 * inch,
                    width=4.2 * inch, height=3.6 * inch, preserveAspectRatio=True, anchor='sw')
        y -= (3.6 * inch + 12)

    if (y - 60) < margin:
        c.showPage(); y = H - margin
    text_line(margin, y, "Disclaimer:", 12); y -= 12
    wrapped(margin, y, DISCLAIMER)

    c.showPage()
    c.save()
    return buf.getvalue()
