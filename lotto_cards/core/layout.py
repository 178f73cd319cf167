from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

from .config import Configuration
from .generator import COLUMNS, ROWS


# A4 rounded to whole points: 595 x 842.
PAGE_WIDTH, PAGE_HEIGHT = (round(v) for v in A4)
PAGE_SIZE = (PAGE_WIDTH, PAGE_HEIGHT)

GRID_LINE_WIDTH = 0.5


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    stroke_width: float


@dataclass(frozen=True)
class BorderGeometry:
    outer: Rect
    inner: Rect


def cards_per_page(config: Configuration) -> int:
    pitch = config.card_height + config.vertical_spacing
    if pitch <= 0:
        return 0
    return max(0, int(PAGE_HEIGHT // pitch))


def card_position(row_index: int, config: Configuration) -> tuple[float, float]:
    """Bottom-left corner of the card in slot `row_index`, counted from the top."""
    if row_index < 0:
        raise ValueError("row_index must be >= 0")
    x = (PAGE_WIDTH - config.card_width) / 2
    y = PAGE_HEIGHT - (row_index + 1) * (config.card_height + config.vertical_spacing)
    return x, y


def border_rects(x: float, y: float, config: Configuration) -> BorderGeometry:
    w, h = config.card_width, config.card_height
    inset = config.border_spacing + config.outer_border / 2
    return BorderGeometry(
        outer=Rect(x, y, w, h, config.outer_border),
        inner=Rect(x + inset, y + inset, w - 2 * inset, h - 2 * inset, config.inner_border),
    )


def cell_size(config: Configuration) -> tuple[float, float]:
    return config.card_width / COLUMNS, config.card_height / ROWS


def cell_center(x: float, y: float, row: int, col: int, config: Configuration) -> tuple[float, float]:
    cw, ch = cell_size(config)
    return x + (col + 0.5) * cw, y + config.card_height - (row + 0.5) * ch


def grid_lines(x: float, y: float, config: Configuration) -> list[tuple[float, float, float, float]]:
    """Separator segments at the cell boundaries, clipped to the inner border."""
    inner = border_rects(x, y, config).inner
    cw, ch = cell_size(config)
    lines: list[tuple[float, float, float, float]] = []
    for i in range(1, COLUMNS):
        lx = x + i * cw
        lines.append((lx, inner.y, lx, inner.y + inner.height))
    for j in range(1, ROWS):
        ly = y + j * ch
        lines.append((inner.x, ly, inner.x + inner.width, ly))
    return lines
