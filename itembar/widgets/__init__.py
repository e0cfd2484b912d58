from .base import Widget
from .toolbar import Toolbar
from .inventory import Inventory

__all__ = ['Widget', 'Toolbar', 'Inventory']
