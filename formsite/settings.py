"""
Django settings for the formsite project.

Only what the ``htmlform`` app needs to render forms and run its tests.
"""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = "django-insecure-htmlform-development-key"

DEBUG = True

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "htmlform",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

HTMLFORM_SKIN = None

HTMLFORM_SKINS = {}

HTMLFORM_ERROR_MESSAGES = {}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "loggers": {
        "htmlform": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    },
}
