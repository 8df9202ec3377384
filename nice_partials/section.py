"""Named content slots owned by a partial.

A ``Section`` is an append-only buffer of content units plus the attributes
written alongside that content. Writing never resolves closures or
renderables; resolution happens on every ``resolve`` call, in append order.
Passing one section into another snapshots the source at that moment.

Examples
--------
>>> from nice_partials.view import ViewContext
>>> from nice_partials.partial import Partial
>>> partial = Partial(ViewContext())
>>> partial.title("Hello", class_="post-title")
>>> str(partial.title)
'Hello'
>>> str(partial.title.h1())
'<h1 class="post-title">Hello</h1>'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from markupsafe import Markup

from .attributes import AttributeBag
from .content import (
    ContentUnit,
    Deferred,
    Forwarded,
    Literal,
    Renderable,
    RenderableUnit,
    coerce_markup,
    is_renderable,
    resolve_unit,
)
from .declaration import Policy, SectionDeclaration
from .tag_proxy import TagProxy
from .tags import normalise_attributes


class Section:
    """Ordered buffer of content for one named slot."""

    def __init__(self, name: str, view: typ.Any, fallback: object = None) -> None:
        """Create an empty section.

        Parameters
        ----------
        name : str
            Slot name, reported by required declarations.
        view : Any
            Rendering context handed to deferred closures and renderables.
        fallback : object, optional
            Local value used only while the section holds no units.
        """
        self.name = name
        self.view = view
        self.fallback = fallback
        self.options = AttributeBag()
        self._units: list[ContentUnit] = []
        self._pending: list[cabc.Callable[..., object]] = []

    @property
    def units(self) -> tuple[ContentUnit, ...]:
        """Return the appended units in order."""
        return tuple(self._units)

    def append(self, unit: ContentUnit) -> None:
        """Push ``unit`` onto the buffer."""
        self._units.append(unit)

    def write(self, *content: object, **attributes: typ.Any) -> None:
        """Append each content argument and merge ``attributes`` into options."""
        if attributes:
            self.options.update(normalise_attributes(attributes))
        for value in content:
            unit = self._to_unit(value)
            if unit is not None:
                self.append(unit)

    def __call__(self, *content: object, **attributes: typ.Any) -> Section | None:
        """Write when given arguments, otherwise return the section itself."""
        if not content and not attributes:
            return self
        self.write(*content, **attributes)
        return None

    def _to_unit(self, value: object) -> ContentUnit | None:
        match value:
            case None:
                return None
            case Section():
                snapshot = value.resolve()
                return Forwarded(snapshot) if snapshot else None
            case str():
                return Literal(value) if value else None
        if is_renderable(value):
            return RenderableUnit(typ.cast("Renderable", value))
        if callable(value):
            return Deferred(value)
        text = str(value)
        return Literal(text) if text else None

    def resolve(self, view: typ.Any = None) -> Markup:
        """Concatenate the resolved units, or return the local fallback.

        Every deferred closure and renderable is evaluated once per call.
        Units appended while resolving are kept for later calls but do not
        contribute to this one.
        """
        context = self.view if view is None else view
        units = tuple(self._units)
        if not units:
            if self.fallback is None:
                return Markup("")
            return coerce_markup(self.fallback, context)
        return Markup("").join([resolve_unit(unit, context) for unit in units])

    def is_present(self) -> bool:
        """Return True when the section would render something."""
        if self._units or self._pending:
            return True
        return self.fallback is not None and str(self.fallback) != ""

    def __bool__(self) -> bool:
        return self.is_present()

    def __str__(self) -> str:
        return str(self.resolve())

    def __html__(self) -> str:
        return str(self.resolve())

    def __repr__(self) -> str:
        return f"<Section {self.name!r} units={len(self._units)}>"

    def required(self) -> SectionDeclaration:
        """Declare that this section must have content when used."""
        return SectionDeclaration(self, Policy.REQUIRED)

    def optional(self) -> SectionDeclaration:
        """Declare that this section may be empty; gated calls then no-op."""
        return SectionDeclaration(self, Policy.OPTIONAL)

    @property
    def tag(self) -> TagProxy:
        """Return a tag proxy using this section as the element body."""
        return TagProxy(self)

    def render(self, obj: object, **locals_: typ.Any) -> None:
        """Render ``obj`` through the view now and append the output."""
        self.append(Literal(self.view.render(obj, **locals_)))

    def pending(self, block: cabc.Callable[..., object]) -> None:
        """Hold ``block`` until :meth:`yield_` supplies its arguments."""
        self._pending.append(block)

    def yield_(self, *arguments: object) -> Section:
        """Call each pending block with ``arguments`` and append the results.

        Pending blocks stay registered, so yielding again appends their
        output a second time.
        """
        for block in tuple(self._pending):
            rendered = coerce_markup(block(*arguments), self.view)
            if rendered:
                self.append(Literal(rendered))
        return self

    def __getattr__(self, name: str) -> cabc.Callable[..., typ.Any]:
        """Forward view helpers as writers and anything else to the tag proxy."""
        if name.startswith("_"):
            raise AttributeError(name)
        view = self.__dict__.get("view")
        has_helper = getattr(view, "has_helper", None)
        if has_helper is not None and has_helper(name):
            helper = getattr(view, name)

            def _append_helper(*args: typ.Any, **kwargs: typ.Any) -> None:
                self.append(Literal(helper(*args, **kwargs)))

            return _append_helper
        return getattr(self.tag, name)


__all__ = ["Section"]
