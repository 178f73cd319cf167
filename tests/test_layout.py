import pytest

from lotto_cards.core.config import FIELD_RANGES, Configuration
from lotto_cards.core.layout import (
    PAGE_HEIGHT,
    PAGE_SIZE,
    PAGE_WIDTH,
    border_rects,
    card_position,
    cards_per_page,
    cell_center,
    cell_size,
    grid_lines,
)


def test_page_is_a4_in_whole_points():
    assert PAGE_SIZE == (595, 842)


def test_default_config_fits_four_cards():
    config = Configuration()
    assert cards_per_page(config) == 842 // (186 + 20) == 4


@pytest.mark.parametrize("height", [350, 500, 777, 1060])
@pytest.mark.parametrize("spacing", list(FIELD_RANGES["vertical_spacing"]))
def test_cards_per_page_is_a_positive_int_across_ranges(height, spacing):
    config = Configuration(card_height_tenths=height, vertical_spacing=spacing)
    count = cards_per_page(config)
    assert isinstance(count, int)
    assert count >= 1
    assert count * (config.card_height + spacing) <= PAGE_HEIGHT
    assert (count + 1) * (config.card_height + spacing) > PAGE_HEIGHT


def test_cards_are_centred_and_stacked_top_down():
    config = Configuration()
    positions = [card_position(r, config) for r in range(cards_per_page(config))]
    assert positions == [(19.0, 636), (19.0, 430), (19.0, 224), (19.0, 18)]
    for x, _ in positions:
        assert x + config.card_width / 2 == PAGE_WIDTH / 2


def test_card_position_rejects_negative_row():
    with pytest.raises(ValueError):
        card_position(-1, Configuration())


def test_inner_border_is_inset_by_spacing_and_half_outer_stroke():
    config = Configuration(outer_border=4, inner_border=2, border_spacing=3)
    borders = border_rects(10, 20, config)
    assert (borders.outer.x, borders.outer.y) == (10, 20)
    assert (borders.outer.width, borders.outer.height) == (557, 186)
    assert borders.outer.stroke_width == 4
    assert (borders.inner.x, borders.inner.y) == (15, 25)
    assert (borders.inner.width, borders.inner.height) == (547, 176)
    assert borders.inner.stroke_width == 2


def test_cells_split_card_into_nine_by_three():
    config = Configuration(card_width_tenths=1587, card_height_tenths=635)
    assert config.card_width == 450
    assert config.card_height == 180
    assert cell_size(config) == (50, 60)
    assert cell_center(0, 0, 0, 0, config) == (25, 150)
    assert cell_center(0, 0, 2, 8, config) == (425, 30)


def test_grid_lines_stay_inside_inner_border():
    config = Configuration(card_width_tenths=1587, card_height_tenths=635, border_spacing=0, outer_border=2)
    lines = grid_lines(0, 0, config)
    assert len(lines) == 8 + 2
    verticals, horizontals = lines[:8], lines[8:]
    assert [l[0] for l in verticals] == [50 * i for i in range(1, 9)]
    assert all(l[1] == 1 and l[3] == 179 for l in verticals)
    assert [l[1] for l in horizontals] == [60, 120]
    assert all(l[0] == 1 and l[2] == 449 for l in horizontals)
