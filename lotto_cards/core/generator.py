from __future__ import annotations

from dataclasses import dataclass
import logging
import random


logger = logging.getLogger(__name__)

ROWS = 3
COLUMNS = 9
NUMBERS_PER_ROW = 5

# Column c holds values from COLUMN_RANGES[c]; the last column also takes 90.
COLUMN_RANGES: tuple[tuple[int, int], ...] = (
    (1, 9),
    (10, 19),
    (20, 29),
    (30, 39),
    (40, 49),
    (50, 59),
    (60, 69),
    (70, 79),
    (80, 90),
)

DEFAULT_MAX_ATTEMPTS = 10_000


class CardGenerationError(RuntimeError):
    pass


@dataclass(frozen=True)
class LottoCard:
    rows: tuple[tuple[int | None, ...], ...]

    def column(self, index: int) -> tuple[int | None, ...]:
        return tuple(row[index] for row in self.rows)

    @property
    def numbers(self) -> tuple[int, ...]:
        return tuple(sorted(v for row in self.rows for v in row if v is not None))


def validate_card(card: LottoCard) -> None:
    if len(card.rows) != ROWS or any(len(row) != COLUMNS for row in card.rows):
        raise ValueError(f"Card must be a {ROWS}x{COLUMNS} grid")

    for r, row in enumerate(card.rows):
        filled = sum(1 for v in row if v is not None)
        if filled != NUMBERS_PER_ROW:
            raise ValueError(f"Row {r} has {filled} numbers, expected {NUMBERS_PER_ROW}")

    for c, (lo, hi) in enumerate(COLUMN_RANGES):
        filled = sum(1 for v in card.column(c) if v is not None)
        if not 1 <= filled <= 2:
            raise ValueError(f"Column {c} has {filled} numbers, expected 1 or 2")
        for value in card.column(c):
            if value is not None and not lo <= value <= hi:
                raise ValueError(f"Column {c} holds {value}, outside {lo}..{hi}")

    values = card.numbers
    if len(set(values)) != len(values):
        raise ValueError("Card contains duplicate numbers")


def _draw_candidate(rng: random.Random) -> LottoCard:
    grid: list[list[int | None]] = [[None] * COLUMNS for _ in range(ROWS)]
    for c, (lo, hi) in enumerate(COLUMN_RANGES):
        count = rng.randint(1, 2)
        for value in rng.sample(range(lo, hi + 1), k=count):
            while True:
                r = rng.randrange(ROWS)
                if grid[r][c] is None:
                    grid[r][c] = value
                    break
    return LottoCard(rows=tuple(tuple(row) for row in grid))


def generate_card(
    rng: random.Random | None = None,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> LottoCard:
    """Draw candidate cards until one has exactly five numbers in every row.

    Candidates are never repaired; a failing one is thrown away whole.
    """
    if max_attempts <= 0:
        raise ValueError("max_attempts must be > 0")
    rng = rng or random.Random()

    for attempt in range(1, max_attempts + 1):
        card = _draw_candidate(rng)
        try:
            validate_card(card)
        except ValueError:
            continue
        logger.debug("Accepted card after %d attempt(s)", attempt)
        return card

    raise CardGenerationError(
        f"Unable to generate a valid card in {max_attempts} attempts; try again or raise the attempt limit."
    )
