"""CSS framework skins.

A skin is a table of class names.  ``SkinnedHtmlForm`` wraps a plain
``HtmlForm``, calls through to it and decorates the nodes it returns with the
classes of the skin, plus the invalid class when the field has an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from django.core.exceptions import ImproperlyConfigured

from .conf import get_default_skin, get_extra_skins
from .html import Html
from .renderer import HtmlForm, InputShortcuts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Skin:
    name: str
    input_classes: Mapping[str, str] = field(default_factory=dict)
    default_input_class: str = ""
    textarea_class: str = ""
    select_class: str = ""
    invalid_class: str = ""
    error_class: str = ""

    def __post_init__(self):
        object.__setattr__(self, "input_classes", MappingProxyType(dict(self.input_classes)))

    def class_for_input(self, input_type: str) -> str:
        return self.input_classes.get(input_type, self.default_input_class)


BOOTSTRAP4 = Skin(
    name="bootstrap4",
    input_classes={
        "file": "form-control-file",
        "checkbox": "form-check-input",
        "radio": "form-check-input",
        "hidden": "",
    },
    default_input_class="form-control",
    textarea_class="form-control",
    select_class="form-control",
    invalid_class="is-invalid",
    error_class="invalid-feedback",
)

BOOTSTRAP5 = Skin(
    name="bootstrap5",
    input_classes={
        "checkbox": "form-check-input",
        "radio": "form-check-input",
        "range": "form-range",
        "hidden": "",
    },
    default_input_class="form-control",
    textarea_class="form-control",
    select_class="form-select",
    invalid_class="is-invalid",
    error_class="invalid-feedback",
)

SKINS = {skin.name: skin for skin in (BOOTSTRAP4, BOOTSTRAP5)}


def get_skin(name: str) -> Skin:
    """Return the built-in skin ``name`` or one declared in ``HTMLFORM_SKINS``."""

    extra = get_extra_skins()
    if name in extra:
        options = extra[name]
        if isinstance(options, Skin):
            return options
        try:
            return Skin(name=name, **options)
        except TypeError as e:
            raise ImproperlyConfigured(f"Invalid HTMLFORM_SKINS entry '{name}': {e}") from e
    try:
        return SKINS[name]
    except KeyError:
        raise ImproperlyConfigured(f"Unknown form skin '{name}'") from None


class SkinnedHtmlForm(InputShortcuts):
    def __init__(self, base: HtmlForm, skin: Skin):
        self.base = base
        self.skin = skin

    def __getattr__(self, name):
        if name == "base":
            raise AttributeError(name)
        # Read-only helpers (value, number, date, options, ...) need no classes.
        return getattr(self.base, name)

    def input(self, item_path, input_type: str) -> Html:
        return self._decorate_input(self.base.input(item_path, input_type), item_path, input_type)

    def input_boolean(self, item_path, value: str = "1") -> Html:
        return self._decorate_input(self.base.input_boolean(item_path, value), item_path, "checkbox")

    def input_checkable(self, item_path, input_type: str, value) -> Html:
        return self._decorate_input(self.base.input_checkable(item_path, input_type, value), item_path, input_type)

    def input_checkables(self, item_path, input_type: str) -> dict[str, Html]:
        return {
            value: self._decorate_input(h, item_path, input_type)
            for value, h in self.base.input_checkables(item_path, input_type).items()
        }

    def textarea(self, item_path) -> Html:
        h = self.base.textarea(item_path).add_class(self.skin.textarea_class)
        return self._add_validation_class(h, item_path)

    def select(self, item_path) -> Html:
        h = self.base.select(item_path).add_class(self.skin.select_class)
        return self._add_validation_class(h, item_path)

    def error(self, item_paths) -> Html:
        return self.base.error(item_paths).set_tag("div").add_class(self.skin.error_class)

    def _decorate_input(self, h: Html, item_path, input_type: str) -> Html:
        h.add_class(self.skin.class_for_input(input_type))
        return self._add_validation_class(h, item_path)

    def _add_validation_class(self, h: Html, item_path) -> Html:
        if self.base.resolve(item_path).get_error() is not None:
            h.add_class(self.skin.invalid_class)
        return h


def html_form_for(form, skin=None, error_formatter=None):
    """Build a renderer for ``form``, skinned by ``skin`` or ``HTMLFORM_SKIN``."""

    renderer = HtmlForm(form, error_formatter=error_formatter)
    if skin is None:
        skin = get_default_skin()
    if not skin:
        return renderer
    if not isinstance(skin, Skin):
        skin = get_skin(skin)
    logger.debug("Rendering %s with skin %s", type(form).__name__, skin.name)
    return SkinnedHtmlForm(renderer, skin)
