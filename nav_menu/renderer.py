"""Отрисовка нормализованного дерева пунктов меню во вложенные HTML-списки."""

import re

from django.forms.utils import flatatt
from django.utils.html import escape, format_html
from django.utils.safestring import mark_safe

from nav_menu.routing import resolve_url


def substitute(template: str, replacements: dict) -> str:
    """
    Одновременная подстановка токенов ("{url}", "{label}", ...) в шаблон.
    Токены внутри подставленных значений повторно не раскрываются.
    """
    if not replacements:
        return template
    pattern = "|".join(re.escape(token) for token in sorted(replacements, key=len, reverse=True))
    return re.sub(pattern, lambda m: str(replacements[m.group(0)]), template)


def add_class(attrs: dict, classes) -> None:
    """Добавляет CSS-классы в attrs["class"] без повторов."""
    existing = attrs.get("class") or []
    if isinstance(existing, str):
        existing = existing.split()
    merged = list(existing)
    for css_class in classes:
        if css_class and css_class not in merged:
            merged.append(css_class)
    if merged:
        attrs["class"] = " ".join(merged)
    else:
        attrs.pop("class", None)


def build_tag(name, content: str, attrs: dict) -> str:
    """Оборачивает content в тег name; при пустом name возвращает content как есть."""
    if not name:
        return mark_safe(content)
    return format_html("<{}{}>{}</{}>", name, flatatt(attrs), mark_safe(content), name)


def render_item(item, config, context) -> str:
    """Содержимое одного пункта (без обёртки <li> и подменю)."""
    if item.get("url") is not None:
        template = item.get("template", config.link_template)
        return substitute(template, {
            "{url}": escape(resolve_url(item["url"], context)),
            "{label}": item["label"],
        })

    template = item.get("template", config.label_template)
    return substitute(template, {"{label}": item["label"]})


def render_items(items, config, context) -> str:
    """Рекурсивно отрисовывает пункты (без контейнерного тега)."""
    n = len(items)
    lines = []
    for i, item in enumerate(items):
        options = {**config.item_options, **(item.get("options") or {})}
        tag = options.pop("tag", "li")

        classes = []
        if item["active"]:
            classes.append(config.active_css_class)
        if i == 0 and config.first_item_css_class is not None:
            classes.append(config.first_item_css_class)
        if i == n - 1 and config.last_item_css_class is not None:
            classes.append(config.last_item_css_class)
        add_class(options, classes)

        menu = render_item(item, config, context)
        if item.get("items"):
            submenu_template = item.get("submenu_template", config.submenu_template)
            menu += substitute(submenu_template, {
                "{items}": render_items(item["items"], config, context),
            })
        lines.append(build_tag(tag, menu, options))

    return "\n".join(lines)
