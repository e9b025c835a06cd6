"""Настройки демонстрационного проекта menuproject (используются и в тестах)."""

SECRET_KEY = "menuproject-insecure-dev-key"
DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "nav_menu",
]

ROOT_URLCONF = "menuproject.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {}

USE_TZ = True

NAV_MENU = {
    "ALIASES": {"@blog": "/blog"},
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "nav_menu": {"handlers": ["console"], "level": "WARNING"},
    },
}
