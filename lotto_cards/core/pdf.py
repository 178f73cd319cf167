from __future__ import annotations

from datetime import datetime
from typing import Callable

from reportlab.pdfgen.canvas import Canvas

from .config import Configuration
from .fonts import FontHandle
from .generator import LottoCard
from .layout import GRID_LINE_WIDTH, border_rects, cell_center, grid_lines


# Baseline correction as a fraction of the font size. Tuned by eye so digits
# sit visually centred in their cell; linear between the anchor sizes.
CENTERING_FACTOR_SMALL = 0.35  # up to 22 pt
CENTERING_FACTOR_MEDIUM = 0.30  # at 28 pt
CENTERING_SMALL_LIMIT = 22
CENTERING_MEDIUM_LIMIT = 28
CENTERING_MEDIUM_SLOPE = 0.05 / 6
CENTERING_LARGE_SLOPE = 0.05 / 8

FOOTER_CENTER_SHIFT = 5
FOOTER_NUMBER_GAP = 3


def vertical_centering_factor(font_size: float) -> float:
    if font_size <= CENTERING_SMALL_LIMIT:
        return CENTERING_FACTOR_SMALL
    if font_size <= CENTERING_MEDIUM_LIMIT:
        return CENTERING_FACTOR_SMALL - (font_size - CENTERING_SMALL_LIMIT) * CENTERING_MEDIUM_SLOPE
    return CENTERING_FACTOR_MEDIUM - (font_size - CENTERING_MEDIUM_LIMIT) * CENTERING_LARGE_SLOPE


def format_timestamp(moment: datetime) -> str:
    """YYYYMMDDHHMMSSmmm, millisecond precision."""
    return f"{moment:%Y%m%d%H%M%S}{moment.microsecond // 1000:03d}"


def _draw_borders(canvas: Canvas, x: float, y: float, config: Configuration) -> None:
    borders = border_rects(x, y, config)
    for rect in (borders.outer, borders.inner):
        canvas.setLineWidth(rect.stroke_width)
        canvas.rect(rect.x, rect.y, rect.width, rect.height, stroke=1, fill=0)

    canvas.setLineWidth(GRID_LINE_WIDTH)
    for x1, y1, x2, y2 in grid_lines(x, y, config):
        canvas.line(x1, y1, x2, y2)


def _draw_numbers(
    canvas: Canvas, card: LottoCard, x: float, y: float, config: Configuration, font: FontHandle
) -> None:
    size = config.font_size
    drop = size * vertical_centering_factor(size)
    canvas.setFont(font.name, size)
    for r, row in enumerate(card.rows):
        for c, value in enumerate(row):
            if value is None:
                continue
            text = str(value)
            cx, cy = cell_center(x, y, r, c, config)
            canvas.drawString(cx - font.measure(text, size) / 2, cy - drop, text)


def _draw_footer(
    canvas: Canvas,
    x: float,
    y: float,
    config: Configuration,
    font: FontHandle,
    stamp: str,
    sequence_number: int,
) -> str:
    number = f" {sequence_number}"
    stamp_w = font.measure(stamp, config.date_time_font_size)
    stamp_x = x + config.card_width / 2 - stamp_w / 2 - FOOTER_CENTER_SHIFT
    baseline = y + config.footer_margin

    canvas.setFont(font.name, config.date_time_font_size)
    canvas.drawString(stamp_x, baseline, stamp)
    canvas.setFont(font.name, config.number_font_size)
    canvas.drawString(stamp_x + stamp_w + FOOTER_NUMBER_GAP, baseline, number)
    return stamp + number


def draw_card(
    canvas: Canvas,
    card: LottoCard,
    x: float,
    y: float,
    config: Configuration,
    font: FontHandle,
    sequence_number: int,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> str:
    """Draw one card with its bottom-left corner at (x, y); return the footer label."""
    canvas.setStrokeColorRGB(0, 0, 0)
    canvas.setFillColorRGB(0, 0, 0)
    _draw_borders(canvas, x, y, config)
    _draw_numbers(canvas, card, x, y, config, font)
    return _draw_footer(canvas, x, y, config, font, format_timestamp(clock()), sequence_number)
