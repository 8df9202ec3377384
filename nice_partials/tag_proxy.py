"""Build HTML elements whose body is a section's content."""

from __future__ import annotations

import functools
import typing as typ

from markupsafe import Markup

from .content import coerce_markup
from .tags import TAG_NAME_PATTERN

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .section import Section


class TagProxy:
    """Forward tag-name calls to the view's tag builder.

    Stored section attributes are merged with call-site attributes and the
    resolved section becomes the element body, followed by any extra content
    passed positionally.
    """

    def __init__(self, section: Section) -> None:
        self.section = section

    def build(
        self, tag_name: str, extra: object = None, /, **attributes: typ.Any
    ) -> Markup:
        """Return the ``tag_name`` element wrapping the section content.

        Parameters
        ----------
        tag_name : str
            Element name handed to the tag builder.
        extra : object, optional
            Content appended after the section body. Callables are invoked
            with the view; sections are snapshotted.
        **attributes : Any
            Call-site attributes; they win over stored attributes.

        Returns
        -------
        Markup
            Markup produced by the view's tag builder.
        """
        view = self.section.view
        body = self.section.resolve()
        if extra is not None:
            if callable(extra) and not hasattr(extra, "__html__"):
                extra = extra(view)
            body = body + coerce_markup(extra, view)
        merged = self.section.options.merge(attributes)
        return view.tag.build(tag_name, body, merged)

    def __getattr__(self, tag_name: str) -> cabc.Callable[..., Markup]:
        """Return a builder for ``tag_name`` bound to this section."""
        if not TAG_NAME_PATTERN.match(tag_name):
            raise AttributeError(tag_name)
        return functools.partial(self.build, tag_name)


__all__ = ["TagProxy"]
