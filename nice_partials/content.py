"""Content units stored inside a partial section.

A section buffer is an ordered list of units. Each unit knows how to turn
itself into markup once a rendering context is available:

* ``Literal`` holds text appended verbatim.
* ``Deferred`` wraps a callable evaluated at resolution time with the view.
* ``Renderable`` wraps an object exposing ``render_in(view)``.
* ``Forwarded`` holds a snapshot taken from another section when appended.

Examples
--------
>>> from nice_partials.content import Literal, resolve_unit
>>> str(resolve_unit(Literal("a < b"), None))
'a &lt; b'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup, escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class Renderable(typ.Protocol):
    """Object that renders itself against a view context."""

    def render_in(self, view: typ.Any) -> str:  # pragma: no cover - protocol
        """Return the rendered markup for ``view``."""
        ...


@dc.dataclass(frozen=True, slots=True)
class Literal:
    """Text appended verbatim; plain strings are escaped on resolution."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Deferred:
    """Callable invoked with the view each time the section resolves."""

    closure: cabc.Callable[[typ.Any], object]


@dc.dataclass(frozen=True, slots=True)
class RenderableUnit:
    """Object resolved through its ``render_in`` capability."""

    obj: Renderable


@dc.dataclass(frozen=True, slots=True)
class Forwarded:
    """Snapshot of another section captured at append time."""

    text: Markup


ContentUnit = Literal | Deferred | RenderableUnit | Forwarded


def is_renderable(value: object) -> bool:
    """Return True when ``value`` exposes a callable ``render_in``."""
    return callable(getattr(value, "render_in", None))


def coerce_markup(value: object, view: typ.Any) -> Markup:
    """Turn a closure or helper result into markup.

    ``None`` becomes empty markup, renderables are rendered against ``view``,
    ``Markup`` passes through and any other value is escaped as text.
    """
    if value is None:
        return Markup("")
    if is_renderable(value):
        return Markup(typ.cast("Renderable", value).render_in(view))
    return escape(value)


def resolve_unit(unit: ContentUnit, view: typ.Any) -> Markup:
    """Return the markup produced by a single unit for ``view``."""
    match unit:
        case Literal(text=text):
            return escape(text)
        case Forwarded(text=text):
            return text
        case Deferred(closure=closure):
            return coerce_markup(closure(view), view)
        case RenderableUnit(obj=obj):
            return Markup(obj.render_in(view))
    msg = f"Unsupported content unit: {unit!r}"
    raise TypeError(msg)


__all__ = [
    "ContentUnit",
    "Deferred",
    "Forwarded",
    "Literal",
    "Renderable",
    "RenderableUnit",
    "coerce_markup",
    "is_renderable",
    "resolve_unit",
]
