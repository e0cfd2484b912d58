from .widget_factory import create_item, create_toolbar, create_inventory

__all__ = ['create_item', 'create_toolbar', 'create_inventory']
