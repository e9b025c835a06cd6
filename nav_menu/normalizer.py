"""Нормализация дерева пунктов меню: видимость, метки, активность, пустые ветки."""

import logging

from django.utils.html import escape

from nav_menu.routing import is_item_active

logger = logging.getLogger(__name__)


def _resolve_active(item, has_active_child, config, context, menu):
    """Возвращает итоговый флаг active пункта (всегда bool)."""
    active = item.get("active")

    if active is None:
        return bool(
            (config.activate_parents and has_active_child)
            or (config.activate_items and is_item_active(item, context))
        )

    if callable(active):
        return bool(active(item, has_active_child, is_item_active(item, context), menu))

    # Явно заданный флаг не перекрывается активностью потомков.
    return bool(active)


def normalize_items(items, config, context, menu=None):
    """
    Рекурсивно нормализует пункты меню.

    Возвращает кортеж (пункты, есть_активный), где пункты -- новые словари
    с обязательными label и active, а есть_активный -- True, если хотя бы
    один из оставшихся пунктов (или их потомков, при activate_parents)
    оказался активным. Исходные словари не изменяются.
    """
    if menu is None:
        menu = config

    normalized = []
    has_active = False

    for item in items:
        visible = item.get("visible")
        if visible is not None and not visible:
            logger.debug("Skipping invisible menu item %r", item.get("label"))
            continue

        result = dict(item)
        label = item.get("label")
        if label is None:
            label = ""
        encode = item.get("encode")
        if encode is None:
            encode = config.encode_labels
        result["label"] = escape(label) if encode else label

        child_active = False
        if item.get("items") is not None:
            children, child_active = normalize_items(item["items"], config, context, menu)
            if not children and config.hide_empty_items:
                result.pop("items")
                if item.get("url") is None:
                    logger.debug("Dropping empty menu item %r", label)
                    continue
            else:
                result["items"] = children

        result["active"] = _resolve_active(item, child_active, config, context, menu)
        if result["active"]:
            has_active = True

        normalized.append(result)

    return normalized, has_active
