from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Protocol

from reportlab.pdfbase import pdfmetrics


logger = logging.getLogger(__name__)


class FontError(RuntimeError):
    pass


class FontFamily(Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"

    @classmethod
    def parse(cls, value: object) -> FontFamily:
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.casefold() in (member.value, member.name.casefold()):
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unsupported font family {value!r} (choose one of: {choices})")


# Standard-14 faces per typeface, in FontFamily order.
_TYPEFACES: dict[str, tuple[str, str, str, str]] = {
    "helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}
_TYPEFACE_ALIASES = {
    "arial": "helvetica",
    "times new roman": "times",
    "times-roman": "times",
}

TYPEFACES = tuple(_TYPEFACES)
DEFAULT_TYPEFACE = "helvetica"


@dataclass(frozen=True)
class FontHandle:
    name: str

    def measure(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.name, size)


class FontProvider(Protocol):
    def embed(self, family: FontFamily) -> FontHandle: ...


class ReportLabFontProvider:
    """Resolve font families to reportlab's built-in Type 1 faces."""

    def __init__(self, typeface: str = "Helvetica"):
        key = typeface.strip().casefold()
        key = _TYPEFACE_ALIASES.get(key, key)
        if key not in _TYPEFACES:
            logger.warning("Unknown typeface %r; falling back to %s", typeface, DEFAULT_TYPEFACE.title())
            key = DEFAULT_TYPEFACE
        self.typeface = key

    def embed(self, family: FontFamily) -> FontHandle:
        name = _TYPEFACES[self.typeface][list(FontFamily).index(family)]
        try:
            pdfmetrics.getFont(name)
        except KeyError as exc:
            raise FontError(f"Font {name!r} is not available") from exc
        return FontHandle(name)


def embed_with_fallback(provider: FontProvider, family: FontFamily) -> FontHandle:
    try:
        return provider.embed(family)
    except FontError as exc:
        if family is FontFamily.PLAIN:
            raise
        logger.warning("Could not embed %s font (%s); falling back to %s", family.value, exc, FontFamily.PLAIN.value)
    return provider.embed(FontFamily.PLAIN)
