"""Render form widgets as ``Html`` nodes.

Every method takes a field path (``"address/city"`` or ``["address", "city"]``)
and resolves it against the form before reading the field, so an invalid path
always raises ``PathResolutionError``.
"""

from __future__ import annotations

import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.utils import dateformat, numberformat
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import DateParseError
from .fields import FormItem
from .html import Html
from .messages import ErrorMessageFormatter
from .paths import make_name, resolve


class InputShortcuts:
    """Fixed-type wrappers around ``input``, ``input_checkable`` and ``input_checkables``."""

    def input_text(self, item_path):
        return self.input(item_path, "text")

    def input_number(self, item_path):
        return self.input(item_path, "number")

    def input_email(self, item_path):
        return self.input(item_path, "email")

    def input_tel(self, item_path):
        return self.input(item_path, "tel")

    def input_date(self, item_path):
        return self.input(item_path, "date")

    def input_time(self, item_path):
        return self.input(item_path, "time")

    def input_datetime_local(self, item_path):
        return self.input(item_path, "datetime-local")

    def input_search(self, item_path):
        return self.input(item_path, "search")

    def input_hidden(self, item_path):
        return self.input(item_path, "hidden")

    def input_password(self, item_path):
        return self.input(item_path, "password")

    def input_file(self, item_path):
        return self.input(item_path, "file")

    def input_url(self, item_path):
        return self.input(item_path, "url")

    def input_checkbox(self, item_path, value):
        return self.input_checkable(item_path, "checkbox", value)

    def input_radio(self, item_path, value):
        return self.input_checkable(item_path, "radio", value)

    def input_checkboxes(self, item_path):
        return self.input_checkables(item_path, "checkbox")

    def input_radios(self, item_path):
        return self.input_checkables(item_path, "radio")


def _parse_moment(value) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    text = str(value).strip()
    try:
        moment = parse_datetime(text)
        if moment is None:
            day = parse_date(text)
            if day is not None:
                moment = datetime.datetime.combine(day, datetime.time.min)
    except ValueError as e:
        raise DateParseError(value) from e
    if moment is None:
        raise DateParseError(value)
    return moment


def _to_decimal(value) -> Decimal | None:
    """Read ``value`` as a finite number, or ``None`` when it is not one."""
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


class HtmlForm(InputShortcuts):
    def __init__(self, form, error_formatter: ErrorMessageFormatter | None = None):
        self._form = form
        self.error_formatter = error_formatter or ErrorMessageFormatter()

    @property
    def form(self):
        return self._form

    def resolve(self, item_path) -> FormItem:
        return resolve(self._form, item_path)

    def make_name(self, item_path) -> str:
        return make_name(item_path)

    # Read-only values

    def value(self, item_path) -> Html:
        item = self.resolve(item_path)
        value = item.get_value()
        if item.is_multiple:
            # One text child per selected value.
            return Html().extend(value)
        if value == "":
            return Html()
        return Html().append(str(value))

    def format(self, item_path, fmt: str) -> Html:
        """Apply the printf-style ``fmt`` to the value.

        Numeric conversions (``%d``, ``%.2f``) on a value that is not a number
        give an empty node.
        """
        value = self.resolve(item_path).get_value()
        if value == "":
            return Html()
        try:
            text = fmt % (value,)
        except TypeError:
            number = _to_decimal(value)
            if number is None:
                return Html()
            text = fmt % (float(number),)
        return Html().append(text)

    def number(self, item_path, decimals: int = 0, decimal_sep: str = ".", thousand_sep: str = ",") -> Html:
        """Format the value with fixed decimals and grouped thousands.

        A value that is not a finite number gives an empty node, like an empty
        value does.
        """
        value = self.resolve(item_path).get_value()
        if value == "":
            return Html()
        number = _to_decimal(value)
        if number is None:
            return Html()
        number = number.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        text = numberformat.format(
            number,
            decimal_sep,
            decimal_pos=decimals,
            grouping=3,
            thousand_sep=thousand_sep,
            force_grouping=True,
            use_l10n=False,
        )
        return Html().append(str(text))

    def date(self, item_path, fmt: str) -> Html:
        """Format the value with PHP-style format characters (``"F d, Y"``)."""
        value = self.resolve(item_path).get_value()
        if value == "":
            return Html()
        return Html().append(str(dateformat.format(_parse_moment(value), fmt)))

    def selected(self, item_path):
        item = self.resolve(item_path)
        if item.is_multiple:
            return [Html().append(label) for label in item.get_selected_label()]
        return Html().append(item.get_selected_label())

    # Widgets

    def input(self, item_path, input_type: str) -> Html:
        item = self.resolve(item_path)
        h = Html("input").attr("type", input_type).attr("name", self.make_name(item_path))
        value = item.get_value()
        if not isinstance(value, (list, bool)):
            h.attr("value", value)
        return h.update_attrs(item.get_general_attributes())

    def textarea(self, item_path) -> Html:
        item = self.resolve(item_path)
        h = (
            Html("textarea")
            .attr("name", self.make_name(item_path))
            .update_attrs(item.get_general_attributes())
        )
        value = item.get_value()
        if value != "":
            h.append(str(value))
        return h

    def input_boolean(self, item_path, value: str = "1") -> Html:
        """Single checkbox bound to a boolean field."""
        item = self.resolve(item_path)
        h = self.input(item_path, "checkbox")
        h.attr("value", value)
        if item.get_value():
            h.attr("checked", True)
        return h

    def input_checkable(self, item_path, input_type: str, value) -> Html:
        h = self.input(item_path, input_type)
        item = self.resolve(item_path)
        selected = item.get_value()
        if item.is_multiple:
            h.attr("name", self.make_name(item_path) + "[]")
        else:
            selected = [str(selected)]
        h.attr("value", str(value))
        if str(value) in selected:
            h.attr("checked", True)
        return h

    def input_checkables(self, item_path, input_type: str) -> dict[str, Html]:
        inputs = {}
        for value, label in self.resolve(item_path).get_options().items():
            h = self.input_checkable(item_path, input_type, value)
            h.attr("title", label)
            if input_type == "checkbox":
                h.attr("required", False)
            inputs[value] = h
        return inputs

    def select(self, item_path) -> Html:
        item = self.resolve(item_path)
        h = (
            Html("select")
            .update_attrs(item.get_general_attributes())
            .extend(self.options(item_path))
        )
        if item.is_multiple:
            h.attr("name", self.make_name(item_path) + "[]")
            h.attr("multiple", True)
        else:
            h.attr("name", self.make_name(item_path))
        return h

    def options(self, item_path) -> list[Html]:
        item = self.resolve(item_path)
        value = item.get_value()
        selected = value if item.is_multiple else [str(value)]
        options = []
        for option_value, label in item.get_options().items():
            h = Html("option").attr("value", option_value).append(label)
            if option_value in selected:
                h.attr("selected", True)
            options.append(h)
        return options

    def error(self, item_paths) -> Html:
        """Collect the messages of one path or a list of paths, without duplicates."""
        if isinstance(item_paths, str):
            item_paths = [item_paths]
        messages = []
        for item_path in item_paths:
            error = self.resolve(item_path).get_error()
            if error is None:
                continue
            message = self.error_formatter.format(error)
            if message and message not in messages:
                messages.append(message)
        return Html().extend(Html("div").append(message) for message in messages)
