"""HTML tag construction on top of MarkupSafe.

``TagBuilder`` turns a tag name, body text and attribute mapping into markup.
Attribute order follows insertion order and values are escaped; ``None`` and
``False`` values are omitted, ``True`` renders a bare attribute, and ``class``
is always emitted once present so callers can tell an emptied class list from
a missing one.

Examples
--------
>>> from nice_partials.tags import TagBuilder
>>> str(TagBuilder().build("a", "Docs", {"href": "/docs"}))
'<a href="/docs">Docs</a>'
>>> str(TagBuilder().h2("yo", class_="title"))
'<h2 class="title">yo</h2>'
"""

from __future__ import annotations

import collections.abc as cabc
import functools
import re
import typing as typ

from markupsafe import Markup, escape

from ._constants import CLASS_ATTRIBUTE

TAG_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9]*$")

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


def normalise_attribute_name(name: str) -> str:
    """Map Python keyword names onto HTML attribute names.

    A trailing underscore is stripped so reserved words can be passed as
    keywords (``class_``), and remaining underscores become hyphens
    (``data_id`` becomes ``data-id``).
    """
    stripped = name[:-1] if name.endswith("_") and len(name) > 1 else name
    return stripped.replace("_", "-")


def normalise_attributes(attributes: cabc.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Return a copy of ``attributes`` with normalised keys."""
    return {normalise_attribute_name(key): value for key, value in attributes.items()}


def render_attributes(attributes: cabc.Mapping[str, typ.Any] | None) -> Markup:
    """Serialise ``attributes`` into a space-separated attribute string."""
    if not attributes:
        return Markup("")
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            if name != CLASS_ATTRIBUTE:
                continue
            value = ""
        if value is True:
            parts.append(str(escape(name)))
            continue
        parts.append(f'{escape(name)}="{escape(value)}"')
    return Markup(" ".join(parts))


class TagBuilder:
    """Build HTML elements from a tag name, body and attributes.

    Attribute access returns a builder for the tag of that name, so
    ``builder.div("body", class_="note")`` and
    ``builder.build("div", "body", {"class": "note"})`` are equivalent.
    """

    def build(
        self,
        tag_name: str,
        body: object = "",
        attributes: cabc.Mapping[str, typ.Any] | None = None,
    ) -> Markup:
        """Return markup for ``tag_name`` wrapping ``body``.

        Parameters
        ----------
        tag_name : str
            Element name such as ``"div"``.
        body : object, optional
            Inner content; plain strings are escaped, ``Markup`` is kept.
        attributes : Mapping[str, Any], optional
            Attribute values keyed by HTML attribute name.

        Returns
        -------
        Markup
            The serialised element. Void elements ignore ``body``.
        """
        if not tag_name:
            msg = "Tag name must not be empty."
            raise ValueError(msg)
        rendered = render_attributes(attributes)
        opening = f"<{tag_name} {rendered}>" if rendered else f"<{tag_name}>"
        if tag_name in VOID_ELEMENTS:
            return Markup(opening)
        inner = escape(body) if body is not None else Markup("")
        return Markup(f"{opening}{inner}</{tag_name}>")

    def attributes(self, attributes: cabc.Mapping[str, typ.Any] | None) -> Markup:
        """Return the serialised attribute string for ``attributes``."""
        return render_attributes(attributes)

    def __getattr__(self, tag_name: str) -> cabc.Callable[..., Markup]:
        """Return a builder bound to ``tag_name``."""
        if not TAG_NAME_PATTERN.match(tag_name):
            raise AttributeError(tag_name)
        return functools.partial(self._build_keywords, tag_name)

    def _build_keywords(
        self, tag_name: str, body: object = "", **attributes: typ.Any
    ) -> Markup:
        return self.build(tag_name, body, normalise_attributes(attributes))


__all__ = [
    "TAG_NAME_PATTERN",
    "VOID_ELEMENTS",
    "TagBuilder",
    "normalise_attribute_name",
    "normalise_attributes",
    "render_attributes",
]
