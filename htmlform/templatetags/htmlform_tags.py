"""Template tags rendering form widgets by field path.

Usage::

    {% load htmlform_tags %}
    {% html_input form "address/city" "text" class="w-50" placeholder="City" %}
    {% html_select form "country" skin="bootstrap5" %}
    {% html_error form "address/city" "address/zip" %}

Extra keyword arguments become HTML attributes; ``class`` is appended to the
classes added by the skin instead of replacing them.
"""

from __future__ import annotations

from django import template

from htmlform.html import Html
from htmlform.skins import html_form_for

register = template.Library()


def _render(h: Html, attrs: dict) -> Html:
    if attrs:
        h.merge_attrs(attrs)
    return h


@register.simple_tag
def html_input(form, item_path, input_type="text", skin=None, **attrs):
    return _render(html_form_for(form, skin=skin).input(item_path, input_type), attrs)


@register.simple_tag
def html_textarea(form, item_path, skin=None, **attrs):
    return _render(html_form_for(form, skin=skin).textarea(item_path), attrs)


@register.simple_tag
def html_select(form, item_path, skin=None, **attrs):
    return _render(html_form_for(form, skin=skin).select(item_path), attrs)


@register.simple_tag
def html_boolean(form, item_path, value="1", skin=None, **attrs):
    return _render(html_form_for(form, skin=skin).input_boolean(item_path, value), attrs)


@register.simple_tag
def html_checkables(form, item_path, input_type="checkbox", skin=None, **attrs):
    """Render one checkbox or radio per option of the field, back to back."""

    inputs = html_form_for(form, skin=skin).input_checkables(item_path, input_type)
    return Html().extend(_render(h, attrs) for h in inputs.values())


@register.simple_tag
def html_error(form, *item_paths, skin=None):
    return html_form_for(form, skin=skin).error(list(item_paths))


@register.simple_tag
def html_value(form, item_path):
    return html_form_for(form, skin="").value(item_path)


@register.simple_tag
def html_number(form, item_path, decimals=0, decimal_sep=".", thousand_sep=","):
    return html_form_for(form, skin="").number(item_path, int(decimals), decimal_sep, thousand_sep)


@register.simple_tag
def html_date(form, item_path, fmt):
    return html_form_for(form, skin="").date(item_path, fmt)


@register.simple_tag
def html_selected(form, item_path, separator=", "):
    labels = html_form_for(form, skin="").selected(item_path)
    if isinstance(labels, Html):
        return labels
    joined = Html()
    for index, label in enumerate(labels):
        if index:
            joined.append(separator)
        joined.append(label)
    return joined
