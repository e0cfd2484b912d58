import pytest

from itembar.layout.commands import BlitImage, DrawRect, FillRect, PrintText
from itembar.layout.toolbar import layout_toolbar
from itembar.models.enums import FontSize
from itembar.models.palette import ToolbarColors


def of_type(layout, kind):
    return [c for c in layout.commands if isinstance(c, kind)]


@pytest.mark.parametrize("capacity", [0, 1, 3, 9])
def test_one_slot_per_capacity_at_stride_22(make_item, capacity):
    layout = layout_toolbar([make_item(), make_item()], capacity, 0, ToolbarColors())

    assert len(layout.slots) == capacity
    assert [s.x for s in layout.slots] == [22 * i for i in range(capacity)]
    assert [(r.x, r.y, r.width, r.height) for r in of_type(layout, DrawRect)] == [
        (22 * i, 0, 20, 20) for i in range(capacity)
    ]


def test_canvas_size(make_item):
    layout = layout_toolbar([make_item()], 3, 0, ToolbarColors())
    assert (layout.width, layout.height) == (64, 20)


@pytest.mark.parametrize("capacity", [0, -2])
def test_non_positive_capacity_is_degenerate(capacity):
    layout = layout_toolbar([], capacity, 0, ToolbarColors())
    assert layout.width == 0
    assert layout.height == 20
    assert layout.commands == []


def test_two_items_three_slots(make_item):
    a, b = make_item("A"), make_item("B")
    colors = ToolbarColors()
    layout = layout_toolbar([a, b], 3, 0, colors)

    backgrounds = of_type(layout, FillRect)
    blits = of_type(layout, BlitImage)
    borders = of_type(layout, DrawRect)

    assert len(backgrounds) == 3
    assert all(f.color == colors.background for f in backgrounds)
    assert [(bl.image, bl.x, bl.y) for bl in blits] == [(a.image, 2, 2), (b.image, 24, 2)]
    assert len(borders) == 3
    assert [r.color for r in borders] == [colors.selected_outline, colors.outline, colors.outline]


def test_slot_draw_order_background_image_border(make_item):
    layout = layout_toolbar([make_item()], 1, 0, ToolbarColors())
    kinds = [type(c) for c in layout.slots[0].commands]
    assert kinds == [FillRect, BlitImage, DrawRect]


def test_more_items_than_capacity_only_draws_capacity(make_item):
    items = [make_item(str(i)) for i in range(5)]
    layout = layout_toolbar(items, 2, 0, ToolbarColors())

    assert len(layout.slots) == 2
    assert [b.image for b in of_type(layout, BlitImage)] == [items[0].image, items[1].image]


def test_selected_slot_uses_selected_outline(make_item):
    colors = ToolbarColors(outline=1, selected_outline=2)
    layout = layout_toolbar([make_item(), make_item(), make_item()], 3, 1, colors)
    assert [s.border_color for s in layout.slots] == [1, 2, 1]


@pytest.mark.parametrize("selected", [-1, 2, 3, 100])
def test_out_of_range_selection_has_no_highlight(make_item, selected):
    colors = ToolbarColors(outline=1, selected_outline=2)
    layout = layout_toolbar([make_item(), make_item()], 4, selected, colors)
    assert all(r.color == 1 for r in of_type(layout, DrawRect))


def test_tooltip_right_aligned_to_slot_edge(make_item):
    colors = ToolbarColors()
    items = [make_item(), make_item(tooltip="12")]
    layout = layout_toolbar(items, 2, 0, colors)

    labels = of_type(layout, PrintText)
    assert len(labels) == 1
    assert labels[0].text == "12"
    assert labels[0].x == 22 + 20 - 12
    assert labels[0].font == FontSize.SMALL


def test_tooltips_can_be_turned_off(make_item):
    layout = layout_toolbar([make_item(tooltip="5")], 1, 0, ToolbarColors(), show_tooltips=False)
    assert of_type(layout, PrintText) == []


def test_slot_at(make_item):
    layout = layout_toolbar([make_item()], 3, 0, ToolbarColors())
    assert layout.slot_at(5, 5) == 0
    assert layout.slot_at(21, 5) == -1
    assert layout.slot_at(22, 0) == 1
    assert layout.slot_at(63, 19) == 2
    assert layout.slot_at(10, 25) == -1


def test_fractional_capacity_draws_every_index_below_it(make_item):
    layout = layout_toolbar([make_item()], 2.5, 0, ToolbarColors())

    assert [s.index for s in layout.slots] == [0, 1, 2]
    assert (layout.width, layout.height) == (64, 20)


@pytest.mark.parametrize("capacity", [None, "three", float("nan")])
def test_non_numeric_capacity_draws_nothing(capacity):
    layout = layout_toolbar([], capacity, 0, ToolbarColors())
    assert layout.width == 0
    assert layout.slots == []


def test_whole_float_selection_counts(make_item):
    colors = ToolbarColors(outline=1, selected_outline=2)
    layout = layout_toolbar([make_item(), make_item()], 2, 1.0, colors)
    assert [s.border_color for s in layout.slots] == [1, 2]


@pytest.mark.parametrize("selected", [None, 0.5, "0"])
def test_odd_selection_has_no_highlight(make_item, selected):
    colors = ToolbarColors(outline=1, selected_outline=2)
    layout = layout_toolbar([make_item()], 1, selected, colors)
    assert layout.slots[0].border_color == 1
