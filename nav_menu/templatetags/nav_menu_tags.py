"""Шаблонный тег для отрисовки меню из списка пунктов."""

from django import template

from nav_menu.widget import Menu

register = template.Library()


@register.simple_tag(takes_context=True)
def nav_menu(context, items, **overrides):
    """
    Рендерит меню для текущего запроса.

    Использование:
        {% load nav_menu_tags %}
        {% nav_menu main_menu_items activate_parents=True first_item_css_class="first" %}

    items     -- список пунктов меню (словарей), обычно из контекста view;
    overrides -- любые поля MenuConfig, перекрывают settings.NAV_MENU.

    Без 'request' в контексте ни один пункт не активируется по маршруту.
    """
    request = context.get("request")
    return Menu.widget(request, items=items, **overrides).show()
