"""Контекст текущего маршрута и сопоставление пунктов меню с ним."""

import logging
from itertools import combinations
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from django.urls import NoReverseMatch, reverse

from nav_menu.conf import menu_settings

logger = logging.getLogger(__name__)

FRAGMENT_KEY = "#"


@dataclass(frozen=True)
class RouteContext:
    """
    Снимок текущего запроса, нужный для определения активных пунктов.

    route     -- текущий маршрут вида "namespace/view_name" (без ведущего "/");
    params    -- параметры запроса (GET + kwargs из URLconf);
    namespace -- пространство имён текущего view ("blog", "shop/admin"), либо None;
    aliases   -- словарь алиасов "@name" -> маршрут.
    """

    route: str = ""
    params: Mapping = field(default_factory=dict)
    namespace: str | None = None
    aliases: Mapping = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "RouteContext":
        """Контекст без текущего маршрута: ни один пункт не станет активным сам."""
        return cls()

    @classmethod
    def from_request(cls, request) -> "RouteContext":
        """Строит контекст по request.resolver_match и GET-параметрам; request может быть None."""
        aliases = menu_settings()["ALIASES"]
        match = getattr(request, "resolver_match", None)
        if match is None:
            return cls(aliases=aliases)

        params = {}
        query = getattr(request, "GET", None)
        if query is not None:
            params.update(query.dict())
        params.update(match.kwargs)

        return cls(
            route=(match.view_name or "").replace(":", "/"),
            params=params,
            namespace=match.namespace.replace(":", "/") or None,
            aliases=aliases,
        )

    def resolve_alias(self, token: str) -> str:
        """
        Раскрывает алиас вида "@blog/post_detail".
        Побеждает самый длинный совпавший префикс; неизвестный алиас
        возвращается как есть.
        """
        if not token.startswith("@"):
            return token

        for name in sorted(self.aliases, key=len, reverse=True):
            if token == name or token.startswith(name + "/"):
                return self.aliases[name] + token[len(name):]
        return token


def is_route_spec(url) -> bool:
    """RouteSpec -- это list/tuple, где нулевой элемент -- маршрут."""
    return isinstance(url, (list, tuple))


def split_route_spec(url):
    """Разбирает RouteSpec на (маршрут, словарь параметров)."""
    route = url[0] if url else None
    params = {}
    for extra in url[1:]:
        params.update(extra)
    return route, params


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _loose_equal(actual, expected) -> bool:
    """Нестрогое сравнение: параметры запроса приходят строками, а в меню -- числа."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return _as_bool(actual) == _as_bool(expected)

    if isinstance(actual, (int, float)) or isinstance(expected, (int, float)):
        try:
            return float(actual) == float(expected)
        except (TypeError, ValueError):
            return str(actual) == str(expected)

    return str(actual) == str(expected)


def _full_route(route: str, context: RouteContext) -> str:
    route = context.resolve_alias(route)
    if not route.startswith("/") and context.namespace:
        route = context.namespace + "/" + route
    return route


def is_item_active(item, context: RouteContext) -> bool:
    """
    Проверяет, совпадает ли маршрут пункта с текущим запросом.

    Участвуют только пункты, у которых url задан как RouteSpec с непустым
    маршрутом. Для каждого именованного параметра со значением, отличным
    от None, в запросе должен быть параметр с тем же именем и (нестрого)
    равным значением. Фрагмент "#" при сравнении игнорируется.
    """
    url = item.get("url")
    if not is_route_spec(url):
        return False

    route, params = split_route_spec(url)
    if not route:
        return False

    if _full_route(route, context).lstrip("/") != context.route:
        return False

    params.pop(FRAGMENT_KEY, None)
    for name, value in params.items():
        if value is None:
            continue
        if name not in context.params or not _loose_equal(context.params[name], value):
            return False

    logger.debug("Menu item %r matches route %r", item.get("label", ""), context.route)
    return True


def resolve_url(url, context: RouteContext) -> str:
    """
    Преобразует url пункта меню в конечную ссылку.

    Строка возвращается как есть. RouteSpec разворачивается через reverse():
    сначала параметры подставляются как kwargs, если не подошли -- уходят
    в query string. Если маршрут не разворачивается вовсе, возвращается "#".
    """
    if not is_route_spec(url):
        return url

    route, params = split_route_spec(url)
    fragment = params.pop(FRAGMENT_KEY, None)
    if not route:
        return "#"

    view_name = _full_route(route, context).lstrip("/").replace("/", ":")
    params = {name: value for name, value in params.items() if value is not None}

    reversed_ = _reverse_with_query(view_name, params)
    if reversed_ is None:
        logger.warning("Cannot reverse menu route %r", view_name)
        return "#"

    href, query = reversed_
    if query:
        logger.debug("Route %r does not accept %r, moving them to the query string",
                     view_name, sorted(query))
        href += "?" + urlencode(query)

    if fragment:
        href += "#" + quote(str(fragment))
    return href


def _reverse_with_query(view_name, params):
    """
    Подбирает самое большое подмножество params, с которым маршрут
    разворачивается; остальные параметры возвращает для query string.
    None -- маршрут не разворачивается ни с одним подмножеством.
    """
    names = list(params)
    for size in range(len(names), -1, -1):
        for kwarg_names in combinations(names, size):
            kwargs = {name: params[name] for name in kwarg_names}
            try:
                href = reverse(view_name, kwargs=kwargs)
            except NoReverseMatch:
                continue
            query = {name: value for name, value in params.items() if name not in kwargs}
            return href, query
    return None
