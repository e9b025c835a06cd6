"""
Виджет Menu: многоуровневое меню во вложенных HTML-списках.

Пример:

    menu = (
        Menu.widget(request)
        .items([
            {"label": "Home", "url": ("/index",)},
            {"label": "Blog", "url": ("/blog/post_list",), "items": [
                {"label": "Categories", "url": ("/blog/category_list",)},
            ]},
            {"label": "Login", "url": "/login/", "visible": not request.user.is_authenticated},
        ])
        .activate_parents(True)
    )
    html = menu.show()

Menu неизменяем: каждый сеттер возвращает новый экземпляр, поэтому
один раз настроенное меню можно безопасно разделять между потоками.
"""

from dataclasses import dataclass, field, replace

from nav_menu.conf import DEFAULTS, menu_settings
from nav_menu.normalizer import normalize_items
from nav_menu.renderer import build_tag, render_items
from nav_menu.routing import RouteContext


@dataclass(frozen=True)
class MenuConfig:
    """Параметры отрисовки меню. Значения по умолчанию берутся из nav_menu.conf.DEFAULTS."""

    items: tuple = ()
    item_options: dict = field(default_factory=lambda: dict(DEFAULTS["ITEM_OPTIONS"]))
    link_template: str = DEFAULTS["LINK_TEMPLATE"]
    label_template: str = DEFAULTS["LABEL_TEMPLATE"]
    submenu_template: str = DEFAULTS["SUBMENU_TEMPLATE"]
    encode_labels: bool = DEFAULTS["ENCODE_LABELS"]
    active_css_class: str = DEFAULTS["ACTIVE_CSS_CLASS"]
    activate_items: bool = DEFAULTS["ACTIVATE_ITEMS"]
    activate_parents: bool = DEFAULTS["ACTIVATE_PARENTS"]
    hide_empty_items: bool = DEFAULTS["HIDE_EMPTY_ITEMS"]
    options: dict = field(default_factory=lambda: dict(DEFAULTS["OPTIONS"]))
    first_item_css_class: str | None = DEFAULTS["FIRST_ITEM_CSS_CLASS"]
    last_item_css_class: str | None = DEFAULTS["LAST_ITEM_CSS_CLASS"]

    @classmethod
    def from_settings(cls, **overrides) -> "MenuConfig":
        """Конфигурация из settings.NAV_MENU с наложенными overrides."""
        values = {
            key.lower(): value
            for key, value in menu_settings().items()
            if key != "ALIASES"
        }
        values.update(overrides)
        values["items"] = tuple(values.get("items", ()))
        return cls(**values)


class Menu:
    """Неизменяемый fluent-построитель меню поверх MenuConfig и RouteContext."""

    def __init__(self, config: MenuConfig | None = None, context: RouteContext | None = None):
        self.config = config or MenuConfig()
        self.context = context or RouteContext.empty()

    @classmethod
    def widget(cls, request=None, **overrides) -> "Menu":
        """Меню с настройками из settings и контекстом текущего запроса (request может быть None)."""
        return cls(MenuConfig.from_settings(**overrides), RouteContext.from_request(request))

    def _with(self, **changes) -> "Menu":
        return Menu(replace(self.config, **changes), self.context)

    def route_context(self, value: RouteContext) -> "Menu":
        return Menu(self.config, value)

    def items(self, value) -> "Menu":
        return self._with(items=tuple(value))

    def item_options(self, value: dict) -> "Menu":
        return self._with(item_options=dict(value))

    def link_template(self, value: str) -> "Menu":
        return self._with(link_template=value)

    def label_template(self, value: str) -> "Menu":
        return self._with(label_template=value)

    def submenu_template(self, value: str) -> "Menu":
        return self._with(submenu_template=value)

    def encode_labels(self, value: bool) -> "Menu":
        return self._with(encode_labels=value)

    def active_css_class(self, value: str) -> "Menu":
        return self._with(active_css_class=value)

    def activate_items(self, value: bool) -> "Menu":
        return self._with(activate_items=value)

    def activate_parents(self, value: bool) -> "Menu":
        return self._with(activate_parents=value)

    def hide_empty_items(self, value: bool) -> "Menu":
        return self._with(hide_empty_items=value)

    def options(self, value: dict) -> "Menu":
        return self._with(options=dict(value))

    def first_item_css_class(self, value: str) -> "Menu":
        return self._with(first_item_css_class=value)

    def last_item_css_class(self, value: str) -> "Menu":
        return self._with(last_item_css_class=value)

    def normalize(self):
        """Нормализованные пункты и флаг наличия активного пункта."""
        return normalize_items(self.config.items, self.config, self.context, self)

    def show(self) -> str:
        """
        Отрисовывает меню целиком.
        Если после нормализации не осталось ни одного пункта, возвращает "".
        """
        items, _ = self.normalize()
        if not items:
            return ""

        options = dict(self.config.options)
        tag = options.pop("tag", "ul")
        return build_tag(tag, render_items(items, self.config, self.context), options)

    def __str__(self):
        return self.show()

    def __html__(self):
        return self.show()
