"""Read-only view of a Django bound field, as needed by the renderers."""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

from django import forms
from django.utils.encoding import force_str


@runtime_checkable
class HasLengthRange(Protocol):
    max_length: int | None
    min_length: int | None


@runtime_checkable
class HasNumericRange(Protocol):
    max_value: object
    min_value: object


def _flatten_choices(choices):
    for value, label in choices:
        if isinstance(label, (list, tuple)):
            # Optgroup: ``label`` holds the grouped (value, label) pairs.
            yield from _flatten_choices(label)
        else:
            yield value, label


class FormItem:
    """Wrap a ``BoundField`` with value, options and validation accessors."""

    def __init__(self, bound_field: forms.BoundField):
        self.bound_field = bound_field
        self.field = bound_field.field

    @property
    def name(self) -> str:
        return self.bound_field.name

    @property
    def is_multiple(self) -> bool:
        if getattr(self.field.widget, "allow_multiple_selected", False):
            return True
        return isinstance(self.field, (forms.MultipleChoiceField, forms.ModelMultipleChoiceField))

    def get_value(self):
        value = self.bound_field.value()
        if self.is_multiple:
            if value is None or value == "":
                return []
            if isinstance(value, (list, tuple)):
                return [force_str(item) for item in value]
            return [force_str(value)]
        if value is None:
            return ""
        return value

    def get_options(self) -> dict[str, str]:
        choices = getattr(self.field, "choices", None) or []
        return {
            force_str(value): force_str(label)
            for value, label in _flatten_choices(choices)
        }

    def get_selected_label(self):
        options = self.get_options()
        value = self.get_value()
        if self.is_multiple:
            return [options[item] for item in value if item in options]
        return options.get(force_str(value), "")

    def get_error(self):
        errors = self.bound_field.form.errors.as_data().get(self.name)
        if not errors:
            return None
        return errors[0]

    def is_required(self) -> bool:
        return bool(self.field.required)

    def is_readonly(self) -> bool:
        return bool(self.field.widget.attrs.get("readonly"))

    def is_disabled(self) -> bool:
        return bool(self.field.disabled)

    def length_range(self):
        """Return ``(min_length, max_length)`` or ``None`` without the capability."""
        if not isinstance(self.field, HasLengthRange):
            return None
        return self.field.min_length, self.field.max_length

    def numeric_range(self):
        """Return ``(min_value, max_value)`` or ``None`` without the capability."""
        if not isinstance(self.field, HasNumericRange):
            return None
        return self.field.min_value, self.field.max_value

    def get_general_attributes(self) -> dict:
        attrs = {}
        if self.is_required():
            attrs["required"] = True
        if self.is_readonly():
            attrs["readonly"] = True
        if self.is_disabled():
            attrs["disabled"] = True

        length_range = self.length_range()
        if length_range is not None:
            min_length, max_length = length_range
            if max_length is not None:
                attrs["maxlength"] = max_length
            if min_length is not None and min_length > 0:
                attrs["minlength"] = min_length

        numeric_range = self.numeric_range()
        if numeric_range is not None:
            min_value, max_value = numeric_range
            if max_value is not None and not _is_infinite(max_value):
                attrs["max"] = max_value
            if min_value is not None and not _is_infinite(min_value):
                attrs["min"] = min_value

        return attrs

    def __repr__(self) -> str:
        return f"<FormItem {self.bound_field.html_name!r}>"


def _is_infinite(value) -> bool:
    try:
        return math.isinf(value)
    except TypeError:
        return False
