"""Small mutable HTML node used as the output of every renderer.

An ``Html`` node holds an optional tag name, an ordered mapping of attributes
and a list of children (plain strings or other nodes).  A node without a tag
is a fragment: it renders its children only.  Rendering goes through Django's
escaping helpers, so the result is a ``SafeString`` that templates embed as is.
"""

from __future__ import annotations

from django.forms.utils import flatatt
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString, mark_safe

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def _merge_attrs(original: dict, updates: dict) -> dict:
    """Return a new attribute dictionary combining ``original`` and ``updates``.

    ``class`` values are appended to the existing ones; every other attribute
    is overwritten.
    """

    merged = original.copy()
    for attr, value in updates.items():
        if attr == "class" and merged.get(attr) and value:
            merged[attr] = f"{merged[attr]} {value}".strip()
        else:
            merged[attr] = value
    return merged


class Html:
    def __init__(self, tag: str | None = None, attrs: dict | None = None, children=None):
        self.tag = tag
        self.attrs: dict = {}
        self.children: list = []
        if attrs:
            self.update_attrs(attrs)
        if children:
            self.extend(children)

    def set_tag(self, name: str | None) -> "Html":
        self.tag = name
        return self

    def attr(self, name: str, value) -> "Html":
        """Set ``name`` to ``value``; ``None`` and ``False`` remove it."""
        if value is None or value is False:
            self.attrs.pop(name, None)
        else:
            self.attrs[name] = value
        return self

    def update_attrs(self, attrs: dict) -> "Html":
        for name, value in attrs.items():
            self.attr(name, value)
        return self

    def merge_attrs(self, attrs: dict) -> "Html":
        merged = _merge_attrs(self.attrs, attrs)
        self.attrs = {}
        return self.update_attrs(merged)

    def append(self, *children) -> "Html":
        for child in children:
            if child is not None:
                self.children.append(child)
        return self

    def extend(self, children) -> "Html":
        return self.append(*children)

    def add_class(self, *names: str) -> "Html":
        classes = self.get_classes()
        for name in names:
            for chunk in (name or "").split():
                if chunk not in classes:
                    classes.append(chunk)
        if classes:
            self.attrs["class"] = " ".join(classes)
        return self

    def get_classes(self) -> list[str]:
        return str(self.attrs.get("class", "")).split()

    def has_class(self, name: str) -> bool:
        return name in self.get_classes()

    def get_tag(self) -> str | None:
        return self.tag

    def get_attr(self, name: str, default=None):
        return self.attrs.get(name, default)

    def get_children(self) -> list:
        return list(self.children)

    def render(self) -> SafeString:
        content = mark_safe("".join(conditional_escape(child) for child in self.children))
        if self.tag is None:
            return content
        attrs = flatatt(self.attrs)
        if self.tag in VOID_ELEMENTS:
            return format_html("<{}{}>", self.tag, attrs)
        return format_html("<{}{}>{}</{}>", self.tag, attrs, content, self.tag)

    def __html__(self) -> SafeString:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Html):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.attrs == other.attrs
            and self.children == other.children
        )

    def __repr__(self) -> str:
        return f"<Html tag={self.tag!r} attrs={self.attrs!r} children={len(self.children)}>"
