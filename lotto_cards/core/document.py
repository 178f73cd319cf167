from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from io import BytesIO
import logging
from pathlib import Path
import random
from typing import Callable

from reportlab.pdfgen.canvas import Canvas

from .config import Configuration
from .fonts import FontProvider, ReportLabFontProvider, embed_with_fallback
from .generator import DEFAULT_MAX_ATTEMPTS, LottoCard, generate_card
from .layout import PAGE_SIZE, card_position, cards_per_page
from .pdf import draw_card


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacedCard:
    number: int
    card: LottoCard
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class Page:
    index: int
    cards: tuple[PlacedCard, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Document:
    pages: tuple[Page, ...]
    pdf: bytes
    font_name: str

    @property
    def card_count(self) -> int:
        return sum(len(page.cards) for page in self.pages)

    def write(self, path: Path) -> Path:
        path.write_bytes(self.pdf)
        return path


def default_filename(now: datetime | None = None) -> str:
    moment = now or datetime.now(timezone.utc)
    stamp = moment.strftime("%Y-%m-%d-%H-%M-%S") + f"-{moment.microsecond // 1000:03d}Z"
    return f"russian-lotto-cards-{stamp}.pdf"


def generate_document(
    config: Configuration,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
    fonts: FontProvider | None = None,
    clock: Callable[[], datetime] = datetime.now,
    on_page: Callable[[Page], None] | None = None,
    max_attempts_per_card: int = DEFAULT_MAX_ATTEMPTS,
) -> Document:
    rng = rng or random.Random(seed)
    font = embed_with_fallback(fonts or ReportLabFontProvider(), config.font_family)
    per_page = cards_per_page(config)
    logger.info(
        "Generating %d page(s), %d card(s) per page, font %s",
        config.page_count,
        per_page,
        font.name,
    )

    buf = BytesIO()
    canvas = Canvas(buf, pagesize=PAGE_SIZE)
    canvas.setTitle("Russian Lotto cards")

    pages: list[Page] = []
    next_number = 1
    for page_index in range(config.page_count):
        placed: list[PlacedCard] = []
        for slot in range(per_page):
            card = generate_card(rng, max_attempts=max_attempts_per_card)
            x, y = card_position(slot, config)
            label = draw_card(canvas, card, x, y, config, font, next_number, clock=clock)
            placed.append(PlacedCard(number=next_number, card=card, x=x, y=y, label=label))
            next_number += 1

        canvas.showPage()
        page = Page(index=page_index, cards=tuple(placed))
        pages.append(page)
        logger.debug("Finished page %d with cards %s", page_index + 1, [p.number for p in placed])
        if on_page is not None:
            on_page(page)

    canvas.save()
    return Document(pages=tuple(pages), pdf=buf.getvalue(), font_name=font.name)
