from __future__ import annotations

from django.core.exceptions import ValidationError
from django.utils.encoding import force_str

from .conf import get_error_messages


class ErrorMessageFormatter:
    """Turn a ``ValidationError`` into the text shown next to the field.

    ``messages`` maps error codes (``"required"``, ``"max_length"``, ...) to
    message templates that replace the field's own message.  Templates are
    interpolated with the error params, e.g. ``"At most %(limit_value)s."``.
    """

    def __init__(self, messages: dict | None = None):
        self.messages = get_error_messages()
        if messages:
            self.messages.update(messages)

    def format(self, error: ValidationError) -> str | None:
        message = self.messages.get(error.code) if error.code else None
        if message is None:
            message = error.message
        if error.params:
            message = message % error.params
        return force_str(message) or None
