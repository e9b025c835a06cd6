from django.apps import AppConfig


class NavMenuConfig(AppConfig):
    """Конфигурация приложения nav_menu."""
    name = "nav_menu"
    verbose_name = "Навигационное меню"
