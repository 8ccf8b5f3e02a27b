"""Field paths: ``"address/city"`` or ``["address", "city"]``."""

from __future__ import annotations

import logging

from django import forms

from .exceptions import PathResolutionError
from .fields import FormItem

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def split_path(path) -> list[str]:
    if isinstance(path, str):
        segments = path.split(SEPARATOR)
    else:
        segments = [str(segment) for segment in path]
    if not segments:
        raise PathResolutionError("Empty item path", path)
    return segments


def make_name(path) -> str:
    """Build the HTML ``name`` for ``path``: ``a/b/c`` becomes ``a[b][c]``."""

    first, *rest = split_path(path)
    return first + "".join(f"[{segment}]" for segment in rest)


def _get_item(container, segment):
    if hasattr(container, "get_item"):
        return container.get_item(segment)
    if segment in container.fields:
        return container[segment]
    return None


def resolve(form, path) -> FormItem:
    """Walk ``form`` along ``path`` and return the field it ends at."""

    current = form
    for segment in split_path(path):
        if not isinstance(current, forms.BaseForm):
            logger.debug("Cannot traverse %r at %r: not a form", path, segment)
            raise PathResolutionError(
                f"Cannot traverse path '{make_name(path)}': '{segment}' is below a field",
                path,
            )
        current = _get_item(current, segment)
        if current is None:
            logger.debug("Item %r of path %r not found", segment, path)
            raise PathResolutionError(f"Item '{segment}' not found in form", path)

    if not isinstance(current, forms.BoundField):
        raise PathResolutionError(
            f"Path '{make_name(path)}' does not resolve to a field", path
        )
    return FormItem(current)
