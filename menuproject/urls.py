"""Главный файл маршрутов (urls) проекта: определяет пути и шаблоны страниц."""

from django.urls import include, path
from django.views.generic import TemplateView

blog_patterns = [
    path("", TemplateView.as_view(template_name="blog.html"), name="post_list"),
    path("categories/",
         TemplateView.as_view(template_name="blog_categories.html"),
         name="category_list"),
    path("posts/<int:pk>/",
         TemplateView.as_view(template_name="post_detail.html"),
         name="post_detail"),
]

urlpatterns = [
    path("", TemplateView.as_view(template_name="index.html"), name="index"),
    path("about/", TemplateView.as_view(template_name="about.html"), name="about"),
    path("search/", TemplateView.as_view(template_name="search.html"), name="search"),
    path("blog/", include((blog_patterns, "blog"))),
]
