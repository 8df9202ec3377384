"""Composable, named content sections for Jinja partial templates.

A partial template receives a ``partial`` object whose attributes are named
sections. Callers write to sections from any number of places, with text,
deferred closures, renderable components or other sections, and templates
read them back, optionally wrapped in tags or presence declarations.

Exports
-------
- ``Partial``: the per-render section container.
- ``Section``: one named content buffer.
- ``ViewContext``: the Jinja-backed rendering context.
- ``RequiredContentMissingError``: raised by required sections without content.

Examples
--------
>>> from nice_partials import Partial, ViewContext
>>> partial = Partial(ViewContext())
>>> partial.title("yo")
>>> str(partial.title.optional().if_present(lambda title: title.upper()))
'YO'
"""

from __future__ import annotations

from .declaration import Policy, RequiredContentMissingError, SectionDeclaration
from .partial import Partial
from .section import Section
from .view import ViewContext

__all__ = [
    "Partial",
    "Policy",
    "RequiredContentMissingError",
    "Section",
    "SectionDeclaration",
    "ViewContext",
]
