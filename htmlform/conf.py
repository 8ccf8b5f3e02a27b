"""Project settings read by the app.

Settings are looked up on every call so ``override_settings`` works in tests.
"""

from django.conf import settings

DEFAULT_ERROR_MESSAGES = {}


def get_default_skin():
    return getattr(settings, "HTMLFORM_SKIN", None)


def get_extra_skins():
    return getattr(settings, "HTMLFORM_SKINS", {})


def get_error_messages():
    messages = dict(DEFAULT_ERROR_MESSAGES)
    messages.update(getattr(settings, "HTMLFORM_ERROR_MESSAGES", {}))
    return messages
