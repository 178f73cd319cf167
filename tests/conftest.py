from __future__ import annotations

import pytest

from lotto_cards.core.fonts import FontError, FontFamily, FontHandle


class RecordingCanvas:
    """Collects drawing calls in the order they are made."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.font: tuple[str, float] | None = None
        self.line_width: float | None = None

    def setStrokeColorRGB(self, r, g, b):
        self.calls.append(("stroke_color", r, g, b))

    def setFillColorRGB(self, r, g, b):
        self.calls.append(("fill_color", r, g, b))

    def setLineWidth(self, width):
        self.line_width = width
        self.calls.append(("line_width", width))

    def rect(self, x, y, width, height, stroke=1, fill=0):
        self.calls.append(("rect", x, y, width, height, self.line_width, stroke, fill))

    def line(self, x1, y1, x2, y2):
        self.calls.append(("line", x1, y1, x2, y2, self.line_width))

    def setFont(self, name, size):
        self.font = (name, size)
        self.calls.append(("font", name, size))

    def drawString(self, x, y, text):
        self.calls.append(("text", x, y, text, self.font))

    def of(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


class FlakyFontProvider:
    """Embeds only the plain family; everything else fails."""

    def __init__(self) -> None:
        self.requested: list[FontFamily] = []

    def embed(self, family: FontFamily) -> FontHandle:
        self.requested.append(family)
        if family is not FontFamily.PLAIN:
            raise FontError(f"{family.value} unavailable")
        return FontHandle("Helvetica")


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def flaky_fonts() -> FlakyFontProvider:
    return FlakyFontProvider()
