"""Rendering context shared by the partials of one render.

``ViewContext`` plays the part of the view: it owns the Jinja2 environment,
the tag builder, and a stack of partials currently being rendered. Deferred
closures and renderable components receive it, and sections forward to the
helpers it lists in ``HELPERS``.

Typical usage renders a template as a partial, filling its sections from the
caller first:

>>> from jinja2 import DictLoader, Environment
>>> env = Environment(loader=DictLoader({"card.jinja": "{{ partial.title.h1() }}"}))
>>> view = ViewContext(env)
>>> str(view.render_partial("card.jinja", block=lambda partial: partial.title("Hi")))
'<h1>Hi</h1>'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markdown import markdown as render_markdown
from markupsafe import Markup

from ._constants import PARTIAL_VARIABLE, VIEW_VARIABLE
from .content import Renderable, is_renderable
from .partial import Partial
from .tags import TagBuilder, normalise_attributes

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

HELPERS = frozenset({"link_to", "markdown"})


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used to render partial templates."""
    loader = FileSystemLoader(str(templates_dir)) if templates_dir else None
    return Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        extensions=["jinja2.ext.do"],
    )


class ViewContext:
    """Jinja-backed rendering context for partials and components."""

    def __init__(
        self,
        environment: Environment | None = None,
        *,
        templates_dir: Path | None = None,
        builder: TagBuilder | None = None,
    ) -> None:
        """Initialize the view.

        Parameters
        ----------
        environment : Environment, optional
            Jinja environment used for template lookups. When omitted, one is
            built with autoescape enabled and a ``FileSystemLoader`` over
            ``templates_dir``.
        templates_dir : Path, optional
            Directory containing partial templates; ignored when an
            environment is supplied.
        builder : TagBuilder, optional
            Tag builder used for elements and attribute serialisation.
        """
        self.env = environment or build_environment(templates_dir)
        self.tag = builder or TagBuilder()
        self._stack: list[Partial] = []

    @property
    def partial(self) -> Partial | None:
        """Return the partial whose template is rendering, if any."""
        return self._stack[-1] if self._stack else None

    def has_helper(self, name: str) -> bool:
        """Return True when sections may forward ``name`` to this view."""
        return name in HELPERS

    def render(self, obj: Renderable | str, **locals_: typ.Any) -> Markup:
        """Render a component or a partial template.

        Objects exposing ``render_in`` are rendered against this view; strings
        are treated as template names and rendered as partials with
        ``locals_``.
        """
        if is_renderable(obj):
            return Markup(typ.cast("Renderable", obj).render_in(self))
        if isinstance(obj, str):
            return self.render_partial(obj, locals_)
        msg = f"Cannot render object of type {type(obj).__name__}."
        raise TypeError(msg)

    def render_partial(
        self,
        template: str,
        locals_: cabc.Mapping[str, typ.Any] | None = None,
        *,
        block: cabc.Callable[..., object] | None = None,
    ) -> Markup:
        """Render ``template`` with a fresh partial in scope.

        Parameters
        ----------
        template : str
            Template name resolved by the Jinja loader.
        locals_ : Mapping[str, Any], optional
            Values exposed to the template and used as section fallbacks.
        block : Callable, optional
            Called with the partial before the template renders; it fills
            sections and its return value becomes the partial's captured body.

        Returns
        -------
        Markup
            Rendered template output.
        """
        partial = Partial(self, locals_)
        if block is not None:
            partial.capture(block)
        compiled = self.env.get_template(template)
        context = dict(partial.locals)
        context[PARTIAL_VARIABLE] = partial
        context[VIEW_VARIABLE] = self
        logger.debug("Rendering partial template %s", template)
        self._stack.append(partial)
        try:
            return Markup(compiled.render(**context))
        finally:
            self._stack.pop()

    def link_to(self, text: object, href: str, **attributes: typ.Any) -> Markup:
        """Return an anchor element pointing at ``href``."""
        return self.tag.build("a", text, {"href": href, **normalise_attributes(attributes)})

    def markdown(self, text: str) -> Markup:
        """Render ``text`` from Markdown into HTML."""
        return Markup(render_markdown(text, extensions=["tables", "sane_lists"]))


__all__ = ["HELPERS", "ViewContext", "build_environment"]
