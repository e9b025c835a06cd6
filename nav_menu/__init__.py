"""Многоуровневое навигационное меню для Django."""

from nav_menu.routing import RouteContext, is_item_active
from nav_menu.widget import Menu, MenuConfig

__all__ = ["Menu", "MenuConfig", "RouteContext", "is_item_active"]
