"""The partial object handed to a template while it renders.

A ``Partial`` maps slot names to :class:`~nice_partials.section.Section`
objects, created on first access. Templates and callers either use the
explicit API (``section``, ``write``, ``read``, ``has``) or attribute access,
where ``partial.title("x")`` writes and ``partial.title`` reads.

Locals supplied at construction act as fallbacks: a section with no appended
content resolves to its local value. Helper functions registered through
``helpers`` are reachable on the partial and nowhere else.

Examples
--------
>>> from nice_partials.partial import Partial
>>> from nice_partials.view import ViewContext
>>> partial = Partial(ViewContext(), {"title": "Hello there"})
>>> partial.byline("Some guy")
>>> partial.slice("title", "byline")
{'title': Markup('Hello there'), 'byline': Markup('Some guy')}
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import types
import typing as typ

from markupsafe import Markup

from .content import coerce_markup
from .section import Section

logger = logging.getLogger(__name__)

HelperFunction = cabc.Callable[..., typ.Any]


class Partial:
    """Named sections, locals and private helpers for one render.

    Attribute access only reaches sections whose names are not already
    attributes of the partial, so slots called ``view``, ``locals``,
    ``slice``, ``section`` or ``helpers`` must be used through
    ``section(name)``, ``write`` and ``read``.
    """

    def __init__(
        self, view: typ.Any, locals_: cabc.Mapping[str, typ.Any] | None = None
    ) -> None:
        """Create an empty partial bound to ``view``.

        Parameters
        ----------
        view : Any
            Rendering context passed to deferred closures and renderables.
        locals_ : Mapping[str, Any], optional
            Initial values, consulted only for sections without content. The
            mapping is copied so later changes by the caller are not seen.
        """
        self.view = view
        self.locals = types.MappingProxyType(dict(locals_ or {}))
        self._sections: dict[str, Section] = {}
        self._helpers: dict[str, HelperFunction] = {}
        self._captured = Markup("")

    # Explicit API

    def section(self, name: str) -> Section:
        """Return the section for ``name``, creating it when absent."""
        section = self._sections.get(name)
        if section is None:
            section = Section(name, self.view, self.locals.get(name))
            self._sections[name] = section
        return section

    def write(self, name: str, *content: object, **attributes: typ.Any) -> None:
        """Append ``content`` to the ``name`` section."""
        self.section(name).write(*content, **attributes)

    def read(self, name: str) -> Markup:
        """Return the resolved content of the ``name`` section."""
        return self.section(name).resolve()

    def has(self, name: str) -> bool:
        """Return True when the ``name`` section has content or a local."""
        return self.section(name).is_present()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def content_for(
        self, name: str, *content: object, **attributes: typ.Any
    ) -> Markup | None:
        """Write when ``content`` is given, otherwise read.

        Writes always return ``None``; call again without content to read
        the accumulated value. Reading a section with nothing to show also
        returns ``None``, unlike :meth:`read`.
        """
        if content or attributes:
            self.write(name, *content, **attributes)
            return None
        section = self.section(name)
        if not section.is_present():
            return None
        return section.resolve()

    def slice(self, *names: str) -> dict[str, Markup]:
        """Return the resolved content of each requested section by name."""
        return {name: self.read(name) for name in names}

    def content_from(
        self,
        source: Partial,
        *names: str | cabc.Mapping[str, str],
        **renames: str,
    ) -> None:
        """Copy sections from ``source`` into this partial.

        Each name is copied under the same name; mappings and keyword
        arguments copy ``source_name`` into ``target_name``. The source is
        resolved now and the snapshot appended, so later writes to either
        partial stay independent.
        """
        pairs: list[tuple[str, str]] = []
        for entry in names:
            if isinstance(entry, cabc.Mapping):
                pairs.extend((str(key), str(value)) for key, value in entry.items())
            else:
                pairs.append((entry, entry))
        pairs.extend(renames.items())
        for source_name, target_name in pairs:
            logger.debug("Copying section %r into %r", source_name, target_name)
            self.section(target_name).write(source.section(source_name))

    # Helpers

    def helpers(
        self, *functions: HelperFunction, **named: HelperFunction
    ) -> None:
        """Register helper functions on this partial only."""
        for function in functions:
            self._helpers[function.__name__] = function
        self._helpers.update(named)

    def helper(self, function: HelperFunction) -> HelperFunction:
        """Register ``function`` as a helper; usable as a decorator."""
        self.helpers(function)
        return function

    # Captured body

    def capture(self, block: cabc.Callable[..., object], *arguments: object) -> Markup:
        """Run ``block`` with ``arguments`` and this partial, keeping its output."""
        self._captured = coerce_markup(block(*arguments, self), self.view)
        return self._captured

    def yield_(self, *arguments: typ.Any) -> Markup | None:
        """Return the captured body, or act as ``content_for`` with arguments."""
        if not arguments:
            return self._captured
        return self.content_for(*arguments)

    def __getattr__(self, name: str) -> typ.Any:
        """Resolve helpers first, then treat ``name`` as a section."""
        if name.startswith("_"):
            raise AttributeError(name)
        helpers = self.__dict__.get("_helpers", {})
        if name in helpers:
            return helpers[name]
        return self.section(name)

    def __repr__(self) -> str:
        return f"<Partial sections={sorted(self._sections)!r}>"


__all__ = ["Partial"]
