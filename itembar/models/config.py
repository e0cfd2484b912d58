"""Widget defaults that can be kept on disk between sessions."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .palette import ToolbarColors, InventoryColors

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Inventory"


def default_config_path() -> Path:
    return Path.home() / ".itembar" / "config.json"


@dataclass
class WidgetConfig:
    """Default styling applied to newly created widgets."""

    toolbar_colors: ToolbarColors = field(default_factory=ToolbarColors)
    inventory_colors: InventoryColors = field(default_factory=InventoryColors)
    inventory_title: str = DEFAULT_TITLE
    show_tooltips: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "toolbar_colors": self.toolbar_colors.to_dict(),
            "inventory_colors": self.inventory_colors.to_dict(),
            "inventory_title": self.inventory_title,
            "show_tooltips": self.show_tooltips,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WidgetConfig":
        """Create from dictionary."""
        return cls(
            toolbar_colors=ToolbarColors.from_dict(data.get("toolbar_colors", {})),
            inventory_colors=InventoryColors.from_dict(data.get("inventory_colors", {})),
            inventory_title=str(data.get("inventory_title", DEFAULT_TITLE)),
            show_tooltips=bool(data.get("show_tooltips", True)),
        )

    def save(self, path: Optional[Path] = None) -> None:
        """Save to disk."""
        if path is None:
            path = default_config_path()

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "WidgetConfig":
        """Load from disk, or fall back to defaults if missing or unreadable."""
        if path is None:
            path = default_config_path()

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                return cls.from_dict(data)
            except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Ignoring unreadable widget config: %s", path)

        return cls()
