import json

from itembar.models.config import WidgetConfig
from itembar.models.palette import InventoryColors, ToolbarColors


def test_defaults():
    config = WidgetConfig()
    assert config.toolbar_colors == ToolbarColors(12, 5, 13)
    assert config.inventory_colors == InventoryColors(12, 5, 13, 12)
    assert config.inventory_title == "Inventory"
    assert config.show_tooltips is True


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = WidgetConfig(toolbar_colors=ToolbarColors(outline=2),
                          inventory_title="Bag", show_tooltips=False)
    config.save(path)

    loaded = WidgetConfig.load(path)
    assert loaded == config


def test_missing_file_gives_defaults(tmp_path):
    assert WidgetConfig.load(tmp_path / "absent.json") == WidgetConfig()


def test_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert WidgetConfig.load(path) == WidgetConfig()
    assert "unreadable" in caplog.text


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"inventory_colors": {"text": 1}}))

    loaded = WidgetConfig.load(path)
    assert loaded.inventory_colors == InventoryColors(text=1)
    assert loaded.toolbar_colors == ToolbarColors()


def test_wrong_shape_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"toolbar_colors": {"outline": "red"}}))
    assert WidgetConfig.load(path) == WidgetConfig()
