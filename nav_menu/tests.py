"""Набор тестов для нормализации, сопоставления маршрутов, отрисовки и шаблонного тега nav_menu."""

from django.core.exceptions import ImproperlyConfigured
from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase, override_settings
from django.urls import resolve

from .normalizer import normalize_items
from .renderer import add_class, build_tag, render_item, render_items, substitute
from .routing import RouteContext, is_item_active, resolve_url
from .widget import Menu, MenuConfig


def _request(path: str):
    """Запрос из RequestFactory с заполненным resolver_match, как после URL-резолвинга."""
    request = RequestFactory().get(path)
    request.resolver_match = resolve(request.path_info)
    return request


# =============================================================================
# 1. Тесты для routing.py
# =============================================================================

class RouteContextTests(SimpleTestCase):
    """Построение RouteContext из запроса и раскрытие алиасов."""

    def test_from_request_top_level_route(self):
        """Для корневого маршрута namespace отсутствует."""
        context = RouteContext.from_request(_request("/"))
        self.assertEqual(context.route, "index")
        self.assertIsNone(context.namespace)

    def test_from_request_namespaced_route_with_params(self):
        """kwargs из URLconf перекрывают GET-параметры, ':' заменяется на '/'."""
        context = RouteContext.from_request(_request("/blog/posts/7/?page=2&pk=1"))
        self.assertEqual(context.route, "blog/post_detail")
        self.assertEqual(context.namespace, "blog")
        self.assertEqual(context.params, {"page": "2", "pk": 7})

    def test_from_request_without_resolver_match(self):
        """Запрос без resolver_match даёт пустой маршрут."""
        context = RouteContext.from_request(RequestFactory().get("/"))
        self.assertEqual(context.route, "")
        self.assertEqual(context.params, {})

    def test_from_request_reads_aliases_from_settings(self):
        context = RouteContext.from_request(_request("/"))
        self.assertEqual(context.aliases, {"@blog": "/blog"})

    def test_resolve_alias(self):
        """Побеждает самый длинный алиас; неизвестные и обычные токены не меняются."""
        context = RouteContext(aliases={"@b": "/b", "@blog": "/blog"})
        self.assertEqual(context.resolve_alias("@blog/post_list"), "/blog/post_list")
        self.assertEqual(context.resolve_alias("@blog"), "/blog")
        self.assertEqual(context.resolve_alias("@b/x"), "/b/x")
        self.assertEqual(context.resolve_alias("@unknown/x"), "@unknown/x")
        self.assertEqual(context.resolve_alias("blog/post_list"), "blog/post_list")


class IsItemActiveTests(SimpleTestCase):
    """Сопоставление url пункта с текущим маршрутом и параметрами."""

    def setUp(self):
        self.context = RouteContext(
            route="blog/post_detail",
            params={"pk": "3", "page": "2"},
            namespace="blog",
            aliases={"@blog": "/blog"},
        )

    def test_exact_route_match(self):
        self.assertTrue(is_item_active({"url": ("/blog/post_detail",)}, self.context))

    def test_other_route_does_not_match(self):
        self.assertFalse(is_item_active({"url": ("/blog/post_list",)}, self.context))

    def test_relative_route_is_prefixed_with_namespace(self):
        """Маршрут без ведущего '/' считается относительным к namespace текущего view."""
        self.assertTrue(is_item_active({"url": ("post_detail",)}, self.context))
        self.assertFalse(is_item_active({"url": ("blog/post_detail",)}, self.context))

    def test_alias_route(self):
        self.assertTrue(is_item_active({"url": ("@blog/post_detail",)}, self.context))

    def test_string_and_missing_urls_never_match(self):
        self.assertFalse(is_item_active({"url": "/blog/posts/3/"}, self.context))
        self.assertFalse(is_item_active({"label": "No url"}, self.context))

    def test_malformed_route_spec_never_matches(self):
        self.assertFalse(is_item_active({"url": []}, self.context))
        self.assertFalse(is_item_active({"url": ("",)}, self.context))

    def test_params_compare_loosely(self):
        """Число 3 в меню равно строке "3" из запроса."""
        self.assertTrue(is_item_active({"url": ("/blog/post_detail", {"pk": 3})}, self.context))
        self.assertTrue(is_item_active({"url": ("/blog/post_detail", {"pk": "3", "page": 2})}, self.context))
        self.assertFalse(is_item_active({"url": ("/blog/post_detail", {"pk": 4})}, self.context))

    def test_missing_request_param_does_not_match(self):
        self.assertFalse(is_item_active({"url": ("/blog/post_detail", {"sort": "date"})}, self.context))

    def test_none_params_and_fragment_are_ignored(self):
        url = ("/blog/post_detail", {"pk": 3, "sort": None, "#": "comments"})
        self.assertTrue(is_item_active({"url": url}, self.context))

    def test_is_pure(self):
        """Повторные вызовы дают тот же результат и не меняют пункт."""
        params = {"pk": 3, "#": "comments"}
        item = {"url": ("/blog/post_detail", params)}
        results = {is_item_active(item, self.context) for _ in range(3)}
        self.assertEqual(results, {True})
        self.assertEqual(params, {"pk": 3, "#": "comments"})

    def test_empty_context_never_matches(self):
        self.assertFalse(is_item_active({"url": ("/index",)}, RouteContext.empty()))


class ResolveUrlTests(SimpleTestCase):
    """Преобразование url пункта в ссылку через reverse()."""

    def test_string_url_is_returned_as_is(self):
        self.assertEqual(resolve_url("site/index", RouteContext.empty()), "site/index")

    def test_route_with_kwargs_and_fragment(self):
        url = ("/blog/post_detail", {"pk": 3, "#": "comments"})
        self.assertEqual(resolve_url(url, RouteContext.empty()), "/blog/posts/3/#comments")

    def test_relative_route_uses_namespace(self):
        context = RouteContext(route="blog/post_list", namespace="blog")
        self.assertEqual(resolve_url(("post_detail", {"pk": 5}), context), "/blog/posts/5/")

    def test_extra_params_go_to_query_string(self):
        self.assertEqual(
            resolve_url(("/search", {"q": "django", "page": None}), RouteContext.empty()),
            "/search/?q=django",
        )

    def test_path_kwargs_and_extra_params(self):
        """Подходящие параметры идут в путь, остальные -- в query string."""
        url = ("/blog/post_detail", {"pk": 3, "page": 2})
        self.assertEqual(resolve_url(url, RouteContext.empty()), "/blog/posts/3/?page=2")

        context = RouteContext.from_request(_request("/blog/posts/3/?page=2"))
        self.assertTrue(is_item_active({"url": url}, context))
        self.assertEqual(resolve_url(url, context), "/blog/posts/3/?page=2")

    def test_fragment_is_quoted(self):
        url = ("/about", {"#": "team & jobs"})
        self.assertEqual(resolve_url(url, RouteContext.empty()), "/about/#team%20%26%20jobs")

    def test_unknown_route_gives_hash(self):
        with self.assertLogs("nav_menu.routing", level="WARNING"):
            self.assertEqual(resolve_url(("/no_such_route",), RouteContext.empty()), "#")
        self.assertEqual(resolve_url(("",), RouteContext.empty()), "#")


# =============================================================================
# 2. Тесты для normalizer.py
# =============================================================================

class NormalizeItemsTests(SimpleTestCase):
    """Фильтрация, экранирование меток, активность и удаление пустых веток."""

    def _normalize(self, items, context=None, **config):
        return normalize_items(items, MenuConfig(**config), context or RouteContext.empty())

    def test_invisible_items_are_dropped_with_subtree(self):
        """Невидимый пункт удаляется, даже если у него есть активные потомки."""
        items = [
            {"label": "Hidden", "visible": False, "items": [{"label": "Child", "active": True}]},
            {"label": "Shown", "url": "/shown/"},
        ]
        normalized, has_active = self._normalize(items)
        self.assertEqual([it["label"] for it in normalized], ["Shown"])
        self.assertFalse(has_active)

    def test_missing_label_defaults_to_empty_string(self):
        normalized, _ = self._normalize([{"url": "/x/"}])
        self.assertEqual(normalized[0]["label"], "")

    def test_labels_are_escaped_by_default(self):
        normalized, _ = self._normalize([{"label": "Tom & <Jerry>", "url": "/"}])
        self.assertEqual(normalized[0]["label"], "Tom &amp; &lt;Jerry&gt;")

    def test_item_encode_overrides_global_flag(self):
        items = [
            {"label": "<b>New</b>", "url": "/", "encode": False},
            {"label": "<i>Old</i>", "url": "/", "encode": True},
        ]
        normalized, _ = self._normalize(items, encode_labels=False)
        self.assertEqual(normalized[0]["label"], "<b>New</b>")
        self.assertEqual(normalized[1]["label"], "&lt;i&gt;Old&lt;/i&gt;")

    def test_active_is_always_bool(self):
        items = [
            {"label": "A", "url": "/a/"},
            {"label": "B", "url": "/b/", "active": 1},
            {"label": "C", "url": "/c/", "active": lambda *args: "yes"},
        ]
        normalized, _ = self._normalize(items)
        self.assertEqual([it["active"] for it in normalized], [False, True, True])

    def test_empty_branch_without_url_is_pruned(self):
        items = [{"label": "Section", "items": [{"label": "Gone", "visible": False}]}]
        normalized, _ = self._normalize(items)
        self.assertEqual(normalized, [])

    def test_empty_branch_kept_when_hide_empty_items_disabled(self):
        items = [{"label": "Section", "items": [{"label": "Gone", "visible": False}]}]
        normalized, _ = self._normalize(items, hide_empty_items=False)
        self.assertEqual(len(normalized), 1)
        self.assertEqual(normalized[0]["items"], [])

    def test_empty_branch_with_url_is_kept_without_items(self):
        items = [{"label": "Section", "url": "/section/", "items": []}]
        normalized, _ = self._normalize(items)
        self.assertEqual(len(normalized), 1)
        self.assertNotIn("items", normalized[0])

    def test_input_items_are_not_mutated(self):
        child = {"label": "<Child>", "url": "/child/"}
        items = [{"label": "<Parent>", "items": [child, {"label": "x", "visible": False}]}]
        normalized, _ = self._normalize(items)
        self.assertEqual(items[0]["label"], "<Parent>")
        self.assertEqual(len(items[0]["items"]), 2)
        self.assertNotIn("active", child)
        self.assertEqual(normalized[0]["items"][0]["label"], "&lt;Child&gt;")

    def test_route_match_activates_item(self):
        context = RouteContext(route="product/index")
        items = [
            {"label": "Home", "url": ("site/index",)},
            {"label": "Products", "url": ("product/index",), "items": [
                {"label": "New", "url": ("product/index/new",)},
            ]},
        ]
        normalized, has_active = self._normalize(items, context)
        self.assertFalse(normalized[0]["active"])
        self.assertTrue(normalized[1]["active"])
        self.assertFalse(normalized[1]["items"][0]["active"])
        self.assertTrue(has_active)

    def test_activate_items_disabled(self):
        context = RouteContext(route="product/index")
        normalized, has_active = self._normalize(
            [{"label": "Products", "url": ("product/index",)}], context, activate_items=False
        )
        self.assertFalse(normalized[0]["active"])
        self.assertFalse(has_active)

    def test_activate_parents_marks_every_ancestor(self):
        context = RouteContext(route="shop/item")
        items = [{"label": "Shop", "items": [
            {"label": "Catalog", "items": [
                {"label": "Item", "url": ("shop/item",)},
            ]},
        ]}]

        normalized, has_active = self._normalize(items, context, activate_parents=True)
        shop = normalized[0]
        catalog = shop["items"][0]
        self.assertTrue(shop["active"])
        self.assertTrue(catalog["active"])
        self.assertTrue(catalog["items"][0]["active"])
        self.assertTrue(has_active)

        normalized, has_active = self._normalize(items, context)
        shop = normalized[0]
        self.assertFalse(shop["active"])
        self.assertFalse(shop["items"][0]["active"])
        self.assertTrue(shop["items"][0]["items"][0]["active"])
        self.assertFalse(has_active)

    def test_explicit_false_is_not_overridden_by_active_child(self):
        items = [{"label": "Parent", "active": False, "items": [
            {"label": "Child", "url": "/child/", "active": True},
        ]}]
        normalized, has_active = self._normalize(items, activate_parents=True)
        self.assertFalse(normalized[0]["active"])
        self.assertTrue(normalized[0]["items"][0]["active"])
        self.assertFalse(has_active)

    def test_explicit_true_propagates_to_parent(self):
        items = [{"label": "Parent", "items": [
            {"label": "Child", "url": "/child/", "active": True},
        ]}]
        normalized, has_active = self._normalize(items, activate_parents=True)
        self.assertTrue(normalized[0]["active"])
        self.assertTrue(has_active)

    def test_active_predicate_arguments(self):
        """Предикат получает (item, has_active_child, is_item_active, menu)."""
        calls = []

        def predicate(item, has_active_child, item_active, menu):
            calls.append((item["label"], has_active_child, item_active, menu))
            return not item_active

        context = RouteContext(route="a/b")
        config = MenuConfig()
        items = [{"label": "Pred", "url": ("a/b",), "active": predicate, "items": [
            {"label": "Child", "url": "/c/", "active": True},
        ]}]
        normalized, has_active = normalize_items(items, config, context, "the-menu")

        self.assertEqual(calls, [("Pred", True, True, "the-menu")])
        self.assertFalse(normalized[0]["active"])
        self.assertFalse(has_active)

    def test_none_fields_count_as_absent(self):
        """label, encode и visible со значением None ведут себя как незаданные."""
        items = [
            {"label": None, "url": "/x/"},
            {"label": "<b>", "url": "/y/", "encode": None},
            {"label": "Kept", "url": "/z/", "visible": None},
        ]
        normalized, _ = self._normalize(items)
        self.assertEqual(
            [it["label"] for it in normalized],
            ["", "&lt;b&gt;", "Kept"],
        )

    def test_active_predicate_errors_propagate(self):
        def predicate(*args):
            raise ValueError("boom")

        with self.assertRaisesMessage(ValueError, "boom"):
            self._normalize([{"label": "Bad", "active": predicate}])


# =============================================================================
# 3. Тесты для renderer.py
# =============================================================================

class RendererUtilsTests(SimpleTestCase):
    """Подстановка токенов и работа с тегами/классами."""

    def test_substitute_is_simultaneous(self):
        result = substitute("{a}-{b}", {"{a}": "{b}", "{b}": "x"})
        self.assertEqual(result, "{b}-x")

    def test_add_class_union(self):
        attrs = {"class": "item active"}
        add_class(attrs, ["active", "first", None])
        self.assertEqual(attrs["class"], "item active first")

    def test_add_class_drops_empty_class(self):
        attrs = {"class": "", "id": "m"}
        add_class(attrs, [None])
        self.assertEqual(attrs, {"id": "m"})

    def test_empty_shared_class_is_not_rendered(self):
        config = MenuConfig(item_options={"class": ""})
        items, _ = normalize_items([{"label": "A", "url": "/a/"}], config, RouteContext.empty())
        self.assertEqual(
            render_items(items, config, RouteContext.empty()),
            '<li><a href="/a/">A</a></li>',
        )

    def test_add_class_nothing_to_add(self):
        attrs = {}
        add_class(attrs, [])
        self.assertEqual(attrs, {})

    def test_build_tag(self):
        self.assertEqual(build_tag("li", "<a>x</a>", {"id": "m"}), '<li id="m"><a>x</a></li>')
        self.assertEqual(build_tag(False, "<a>x</a>", {"id": "m"}), "<a>x</a>")


class RenderItemTests(SimpleTestCase):
    """Отрисовка содержимого одного пункта и списков пунктов."""

    def setUp(self):
        self.config = MenuConfig()
        self.context = RouteContext.empty()

    def _normalized(self, items, **config):
        config = MenuConfig(**config)
        return normalize_items(items, config, self.context)[0], config

    def test_link_with_default_template(self):
        items, config = self._normalized([{"label": "Home", "url": "site/index"}])
        self.assertEqual(render_item(items[0], config, self.context), '<a href="site/index">Home</a>')

    def test_url_is_escaped_label_is_not_reescaped(self):
        items, config = self._normalized([{"label": "Q & A", "url": "/faq/?a=1&b=2"}])
        self.assertEqual(
            render_item(items[0], config, self.context),
            '<a href="/faq/?a=1&amp;b=2">Q &amp; A</a>',
        )

    def test_label_without_url(self):
        items, config = self._normalized([{"label": "Title"}], hide_empty_items=False)
        self.assertEqual(render_item(items[0], config, self.context), "Title")

    def test_item_template_overrides_defaults(self):
        items, config = self._normalized([
            {"label": "Home", "url": "/", "template": '<a class="x" href="{url}">{label}</a>'},
            {"label": "Text", "template": "<span>{label} {url}</span>"},
        ], hide_empty_items=False)
        self.assertEqual(render_item(items[0], config, self.context), '<a class="x" href="/">Home</a>')
        self.assertEqual(render_item(items[1], config, self.context), "<span>Text {url}</span>")

    def test_route_spec_url_is_reversed(self):
        items, config = self._normalized([{"label": "About", "url": ("/about",)}])
        self.assertEqual(render_item(items[0], config, self.context), '<a href="/about/">About</a>')

    def test_first_active_last_classes(self):
        items, config = self._normalized(
            [
                {"label": "A", "url": "/a/"},
                {"label": "B", "url": "/b/", "active": True},
                {"label": "C", "url": "/c/"},
            ],
            first_item_css_class="first",
            last_item_css_class="last",
            active_css_class="active",
        )
        self.assertEqual(
            render_items(items, config, self.context),
            '<li class="first"><a href="/a/">A</a></li>\n'
            '<li class="active"><a href="/b/">B</a></li>\n'
            '<li class="last"><a href="/c/">C</a></li>',
        )

    def test_single_item_is_first_and_last(self):
        items, config = self._normalized(
            [{"label": "A", "url": "/a/", "active": True}],
            first_item_css_class="first",
            last_item_css_class="last",
        )
        self.assertEqual(
            render_items(items, config, self.context),
            '<li class="active first last"><a href="/a/">A</a></li>',
        )

    def test_item_options_merge_and_tag(self):
        items, config = self._normalized(
            [
                {"label": "A", "url": "/a/", "options": {"class": "special", "id": "a"}},
                {"label": "B", "url": "/b/", "options": {"tag": "div"}},
                {"label": "C", "url": "/c/", "options": {"tag": False}},
            ],
            item_options={"class": "item"},
        )
        self.assertEqual(
            render_items(items, config, self.context),
            '<li class="special" id="a"><a href="/a/">A</a></li>\n'
            '<div class="item"><a href="/b/">B</a></div>\n'
            '<a href="/c/">C</a>',
        )

    def test_submenu_templates(self):
        items, config = self._normalized([
            {"label": "A", "url": "/a/", "items": [{"label": "A1", "url": "/a/1/"}]},
            {"label": "B", "url": "/b/", "submenu_template": "<ol>{items}</ol>",
             "items": [{"label": "B1", "url": "/b/1/"}]},
        ])
        self.assertEqual(
            render_items(items, config, self.context),
            '<li><a href="/a/">A</a>\n<ul>\n<li><a href="/a/1/">A1</a></li>\n</ul>\n</li>\n'
            '<li><a href="/b/">B</a><ol><li><a href="/b/1/">B1</a></li></ol></li>',
        )

    def test_empty_kept_branch_has_no_submenu(self):
        items, config = self._normalized(
            [{"label": "Section", "items": []}], hide_empty_items=False
        )
        self.assertEqual(render_items(items, config, self.context), "<li>Section</li>")


# =============================================================================
# 4. Тесты для widget.py
# =============================================================================

class MenuWidgetTests(SimpleTestCase):
    """Fluent-настройка и итоговая отрисовка меню."""

    ITEMS = [
        {"label": "Home", "url": ("/index",)},
        {"label": "Blog", "url": ("/blog/post_list",), "items": [
            {"label": "Categories", "url": ("/blog/category_list",)},
        ]},
    ]

    def test_empty_menu_renders_nothing(self):
        self.assertEqual(Menu().show(), "")
        self.assertEqual(Menu().items([{"label": "x", "visible": False}]).show(), "")

    def test_setters_return_new_menu(self):
        menu = Menu()
        configured = menu.items(self.ITEMS).active_css_class("current").activate_parents(True)
        self.assertIsNot(menu, configured)
        self.assertEqual(menu.config.items, ())
        self.assertEqual(menu.config.active_css_class, "active")
        self.assertEqual(configured.config.active_css_class, "current")
        self.assertTrue(configured.config.activate_parents)
        self.assertEqual(len(configured.config.items), 2)

    def test_all_setters(self):
        menu = (
            Menu()
            .items([])
            .item_options({"class": "i"})
            .link_template("<a href='{url}'>{label}</a>")
            .label_template("<span>{label}</span>")
            .submenu_template("<ol>{items}</ol>")
            .encode_labels(False)
            .active_css_class("on")
            .activate_items(False)
            .activate_parents(True)
            .hide_empty_items(False)
            .options({"tag": "nav"})
            .first_item_css_class("first")
            .last_item_css_class("last")
        )
        self.assertEqual(menu.config, MenuConfig(
            items=(),
            item_options={"class": "i"},
            link_template="<a href='{url}'>{label}</a>",
            label_template="<span>{label}</span>",
            submenu_template="<ol>{items}</ol>",
            encode_labels=False,
            active_css_class="on",
            activate_items=False,
            activate_parents=True,
            hide_empty_items=False,
            options={"tag": "nav"},
            first_item_css_class="first",
            last_item_css_class="last",
        ))

    def test_end_to_end_for_request(self):
        """На '/blog/' активен только 'Blog', вложенный список отрисован."""
        html = Menu.widget(_request("/blog/")).items(self.ITEMS).show()
        self.assertEqual(
            html,
            '<ul><li><a href="/">Home</a></li>\n'
            '<li class="active"><a href="/blog/">Blog</a>\n'
            '<ul>\n<li><a href="/blog/categories/">Categories</a></li>\n</ul>\n'
            '</li></ul>',
        )

    def test_activate_parents_for_request(self):
        html = Menu.widget(_request("/blog/categories/"), activate_parents=True).items(self.ITEMS).show()
        self.assertInHTML(
            '<li class="active"><a href="/blog/categories/">Categories</a></li>', html
        )
        self.assertIn('<li class="active"><a href="/blog/">Blog</a>', html)
        self.assertInHTML('<li><a href="/">Home</a></li>', html)

    def test_container_options(self):
        menu = Menu().items([{"label": "A", "url": "/a/"}])
        self.assertEqual(
            menu.options({"tag": "nav", "class": "menu"}).show(),
            '<nav class="menu"><li><a href="/a/">A</a></li></nav>',
        )
        self.assertEqual(menu.options({"tag": None}).show(), '<li><a href="/a/">A</a></li>')

    def test_config_defaults_follow_settings_defaults(self):
        """Значения MenuConfig() совпадают с DEFAULTS при пустом NAV_MENU."""
        with override_settings(NAV_MENU={}):
            self.assertEqual(MenuConfig(), MenuConfig.from_settings())

    def test_str_delegates_to_show(self):
        menu = Menu().items([{"label": "A", "url": "/a/"}])
        self.assertEqual(str(menu), menu.show())

    @override_settings(NAV_MENU={"ACTIVE_CSS_CLASS": "current", "FIRST_ITEM_CSS_CLASS": "first"})
    def test_widget_uses_settings(self):
        html = Menu.widget(_request("/")).items(self.ITEMS).show()
        self.assertIn('<li class="current first"><a href="/">Home</a></li>', html)

    @override_settings(NAV_MENU={"ACTIVE_CLASS": "oops"})
    def test_unknown_setting_is_improperly_configured(self):
        with self.assertRaises(ImproperlyConfigured):
            Menu.widget()


# =============================================================================
# 5. Интеграционные тесты для тега nav_menu
# =============================================================================

class NavMenuTagTests(SimpleTestCase):
    """Шаблонный тег {% nav_menu %}."""

    ITEMS = [
        {"label": "Home", "url": ("/index",)},
        {"label": "Blog", "url": ("@blog/post_list",), "items": [
            {"label": "Post 3", "url": ("@blog/post_detail", {"pk": 3})},
            {"label": "Post 4", "url": ("@blog/post_detail", {"pk": 4})},
        ]},
        {"label": "Drafts", "visible": False, "url": "/drafts/"},
    ]

    def _render(self, source, request=None):
        template = Template("{% load nav_menu_tags %}" + source)
        context = {"items": self.ITEMS}
        if request is not None:
            context["request"] = request
        return template.render(Context(context))

    def test_active_post_and_parent(self):
        html = self._render("{% nav_menu items activate_parents=True %}", _request("/blog/posts/3/"))
        expected_blog = """
        <li class="active">
            <a href="/blog/">Blog</a>
            <ul>
                <li class="active"><a href="/blog/posts/3/">Post 3</a></li>
                <li><a href="/blog/posts/4/">Post 4</a></li>
            </ul>
        </li>
        """
        self.assertInHTML(expected_blog, html)
        self.assertInHTML('<li><a href="/">Home</a></li>', html)
        self.assertNotIn("Drafts", html)

    def test_output_is_not_autoescaped(self):
        html = self._render("{% nav_menu items %}", _request("/"))
        self.assertTrue(html.startswith("<ul><li class=\"active\">"))

    def test_without_request_nothing_is_active(self):
        html = self._render("{% nav_menu items %}")
        self.assertNotIn("active", html)
        self.assertIn("Home", html)

    def test_no_empty_class_attribute(self):
        for path in ["/", "/about/", "/blog/", "/blog/posts/4/"]:
            html = self._render("{% nav_menu items %}", _request(path))
            self.assertNotIn('class=""', html)
            self.assertNotIn('class=" "', html)

    def test_empty_items_render_nothing(self):
        template = Template("{% load nav_menu_tags %}{% nav_menu items %}")
        self.assertEqual(template.render(Context({"items": []})).strip(), "")
