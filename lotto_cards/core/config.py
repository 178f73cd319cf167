"""
Generation settings for one run.

`Configuration` is validated on construction against `FIELD_RANGES`, the one
range table this package honours. Loosely typed input (form or CLI strings)
goes through `Configuration.from_mapping`, which either rejects bad values
(strict, the default) or clamps them into range (lenient).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import math
from typing import Any, Mapping

from .fonts import FontFamily


logger = logging.getLogger(__name__)

# 1 mm = 2.83464567 pt, so 0.1 mm = 0.283464567 pt.
TENTHS_MM_TO_PT = 0.283464567

FIELD_RANGES: dict[str, tuple[int, int]] = {
    "page_count": (1, 100),
    "font_size": (16, 36),
    "outer_border": (1, 10),
    "inner_border": (1, 5),
    "border_spacing": (0, 20),
    "card_width_tenths": (1060, 2120),
    "card_height_tenths": (350, 1060),
    "vertical_spacing": (7, 150),
    "date_time_font_size": (1, 20),
    "number_font_size": (8, 36),
    "footer_margin": (-50, 50),
}

FIELD_LABELS: dict[str, str] = {
    "page_count": "Page count",
    "font_size": "Number font size (pt)",
    "outer_border": "Outer border width (pt)",
    "inner_border": "Inner border width (pt)",
    "border_spacing": "Spacing between borders (pt)",
    "card_width_tenths": "Card width (tenths of mm)",
    "card_height_tenths": "Card height (tenths of mm)",
    "vertical_spacing": "Vertical spacing between cards (pt)",
    "date_time_font_size": "Date-time font size (pt)",
    "number_font_size": "Card number font size (pt)",
    "footer_margin": "Footer offset (pt)",
}

# Form-style keys accepted by `from_mapping` in addition to the field names.
_CAMEL_KEYS: dict[str, str] = {
    "pageCount": "page_count",
    "fontSize": "font_size",
    "outerBorder": "outer_border",
    "innerBorder": "inner_border",
    "borderSpacing": "border_spacing",
    "cardWidthTenths": "card_width_tenths",
    "cardHeightTenths": "card_height_tenths",
    "verticalSpacing": "vertical_spacing",
    "dateTimeFontSize": "date_time_font_size",
    "numberFontSize": "number_font_size",
    "footerMargin": "footer_margin",
    "fontFamily": "font_family",
}


class ConfigurationError(ValueError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


def tenths_mm_to_pt(tenths: float) -> int:
    """Convert tenths of a millimetre to whole points, rounding halves up."""
    if isinstance(tenths, bool) or not isinstance(tenths, (int, float)):
        raise TypeError(f"tenths must be a number, got {type(tenths).__name__}")
    if math.isnan(tenths) or math.isinf(tenths):
        raise ValueError(f"tenths must be finite, got {tenths!r}")
    return math.floor(tenths * TENTHS_MM_TO_PT + 0.5)


def _range_error(name: str, value: Any) -> str | None:
    lo, hi = FIELD_RANGES[name]
    label = FIELD_LABELS[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{label} must be a number, got {value!r}"
    if math.isnan(value):
        return f"{label} must be a number, got NaN"
    if isinstance(value, float):
        return f"{label} must be a whole number, got {value}"
    if value < lo or value > hi:
        return f"{label} must be between {lo} and {hi}, got {value}"
    return None


def _parse_number(raw: Any) -> int | float | None:
    """Return a number, None for blank input; raise ValueError for junk.

    Integral floats come back as ints; other floats are left for the caller.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"not a number: {raw!r}")
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            value = float(text)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"not a finite number: {raw!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class Configuration:
    page_count: int = 6
    font_size: int = 30
    outer_border: int = 4
    inner_border: int = 2
    border_spacing: int = 3
    card_width_tenths: int = 1965
    card_height_tenths: int = 657
    vertical_spacing: int = 20
    date_time_font_size: int = 3
    number_font_size: int = 8
    footer_margin: int = 5
    font_family: FontFamily = FontFamily.PLAIN

    def __post_init__(self) -> None:
        errors = [
            err
            for name in FIELD_RANGES
            if (err := _range_error(name, getattr(self, name))) is not None
        ]
        if not isinstance(self.font_family, FontFamily):
            errors.append(f"Font family must be a FontFamily, got {self.font_family!r}")
        if errors:
            raise ConfigurationError(errors)

    @property
    def card_width(self) -> int:
        return tenths_mm_to_pt(self.card_width_tenths)

    @property
    def card_height(self) -> int:
        return tenths_mm_to_pt(self.card_height_tenths)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], *, strict: bool = True) -> Configuration:
        """Build a configuration from form-like input.

        Keys may be field names or their camelCase form. Missing or blank
        values take the field default. In strict mode every problem is
        collected into one `ConfigurationError`; in lenient mode numbers are
        clamped into range and junk falls back to the default, each with a
        warning.
        """
        defaults = {f.name: f.default for f in fields(cls)}
        errors: list[str] = []
        kwargs: dict[str, Any] = {}
        normalized: dict[str, Any] = {}
        for key, raw in values.items():
            name = _CAMEL_KEYS.get(key, key)
            if name not in defaults:
                if strict:
                    errors.append(f"Unknown setting: {key}")
                else:
                    logger.warning("Ignoring unknown setting %r", key)
                continue
            normalized[name] = raw

        for name, (lo, hi) in FIELD_RANGES.items():
            raw = normalized.get(name)
            try:
                value = _parse_number(raw)
            except ValueError:
                if strict:
                    errors.append(f"{FIELD_LABELS[name]} must be a number, got {raw!r}")
                    continue
                logger.warning("%s: %r is not a number, using %s", name, raw, defaults[name])
                value = None
            if value is None:
                value = defaults[name]
            if isinstance(value, float):
                if strict:
                    errors.append(f"{FIELD_LABELS[name]} must be a whole number, got {value}")
                    continue
                logger.warning("%s: %s is not a whole number, rounded down to %s", name, value, math.floor(value))
                value = math.floor(value)
            if not strict and not lo <= value <= hi:
                clamped = min(max(value, lo), hi)
                logger.warning("%s: %s is outside %s..%s, clamped to %s", name, value, lo, hi, clamped)
                value = clamped
            kwargs[name] = value

        raw_family = normalized.get("font_family")
        if raw_family is None or (isinstance(raw_family, str) and not raw_family.strip()):
            kwargs["font_family"] = defaults["font_family"]
        else:
            try:
                kwargs["font_family"] = FontFamily.parse(raw_family)
            except ValueError as exc:
                if strict:
                    errors.append(str(exc))
                else:
                    logger.warning("%s, using %s", exc, FontFamily.PLAIN.value)
                    kwargs["font_family"] = FontFamily.PLAIN

        if errors:
            raise ConfigurationError(errors)
        return cls(**kwargs)
