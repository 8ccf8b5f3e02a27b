"""Errors raised while rendering form markup."""


class HtmlFormError(Exception):
    """Base class for every error raised by ``htmlform``."""


class PathResolutionError(HtmlFormError, LookupError):
    """The path does not lead to a field of the form."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class DateParseError(HtmlFormError, ValueError):
    """A field value could not be read as a date."""

    def __init__(self, value):
        super().__init__(f"Invalid date time string '{value}'")
        self.value = value
