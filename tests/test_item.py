from itembar.components.item import Item
from itembar.factories import create_item
from itembar.models.enums import ItemTextAttribute, ToolbarNumberAttribute


def test_description_defaults_to_empty(icon):
    item = create_item("Sword", icon)
    assert item.description == ""
    assert item.tooltip == ""
    assert item.get_image() is icon


def test_set_and_get_text():
    item = Item("Sword", None, "Sharp")
    item.set_text(ItemTextAttribute.NAME, "Axe")
    item.set_text(ItemTextAttribute.DESCRIPTION, "Heavy")
    item.set_text(ItemTextAttribute.TOOLTIP, "x2")

    assert item.get_text(ItemTextAttribute.NAME) == "Axe"
    assert item.get_text(ItemTextAttribute.DESCRIPTION) == "Heavy"
    assert item.get_text(ItemTextAttribute.TOOLTIP) == "x2"


def test_unknown_text_attribute_is_ignored():
    item = Item("Sword", None, "Sharp")
    item.set_text(ToolbarNumberAttribute.MAX_ITEMS, "nope")
    item.set_text(7, "nope")

    assert item.name == "Sword"
    assert item.description == "Sharp"
    assert item.get_text(ToolbarNumberAttribute.MAX_ITEMS) == ""
    assert item.get_text(None) == ""


def test_set_image_keeps_reference(icon):
    item = Item("Sword", None)
    item.set_image(icon)
    assert item.image is icon


def test_items_compare_by_identity(icon):
    assert Item("A", icon) != Item("A", icon)
