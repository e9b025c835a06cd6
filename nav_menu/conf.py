"""Настройки меню по умолчанию и их переопределение через settings.NAV_MENU."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS = {
    "ITEM_OPTIONS": {},
    "LINK_TEMPLATE": '<a href="{url}">{label}</a>',
    "LABEL_TEMPLATE": "{label}",
    "SUBMENU_TEMPLATE": "\n<ul>\n{items}\n</ul>\n",
    "ENCODE_LABELS": True,
    "ACTIVE_CSS_CLASS": "active",
    "ACTIVATE_ITEMS": True,
    "ACTIVATE_PARENTS": False,
    "HIDE_EMPTY_ITEMS": True,
    "OPTIONS": {},
    "FIRST_ITEM_CSS_CLASS": None,
    "LAST_ITEM_CSS_CLASS": None,
    "ALIASES": {},
}


def menu_settings() -> dict:
    """
    Возвращает DEFAULTS, поверх которых наложен словарь settings.NAV_MENU.
    Неизвестный ключ -- ошибка конфигурации.
    """
    overrides = getattr(settings, "NAV_MENU", {})
    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            "Unknown NAV_MENU keys: %s" % ", ".join(sorted(unknown))
        )
    return {**DEFAULTS, **overrides}
