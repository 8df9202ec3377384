"""Presence policies wrapped around a section.

``section.required()`` and ``section.optional()`` return a
``SectionDeclaration``. Every operation on a declaration that would render or
transform the section first checks whether the section has content:

* present: the operation runs against the resolved content;
* absent and optional: tag builders return empty markup, ``if_present``
  returns empty markup and ``run_if_present`` returns the declaration;
* absent and required: ``RequiredContentMissingError`` is raised.

Callbacks are never invoked for an absent section, whatever the policy.

Examples
--------
>>> from nice_partials.partial import Partial
>>> from nice_partials.view import ViewContext
>>> partial = Partial(ViewContext())
>>> str(partial.title.optional().div(class_="text-xs"))
''
>>> partial.title("yo")
>>> str(partial.title.required().div(class_="text-xs"))
'<div class="text-xs">yo</div>'
"""

from __future__ import annotations

import enum
import functools
import typing as typ

from markupsafe import Markup

from .tag_proxy import TagProxy
from .tags import TAG_NAME_PATTERN

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .section import Section


class RequiredContentMissingError(ValueError):
    """Raised when a required section is used without any content."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"Section '{name}' expected to have content, but none was supplied."
        super().__init__(msg)


class Policy(enum.Enum):
    """How a declaration treats an absent section."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class SectionDeclaration:
    """Section wrapper whose operations are gated on presence."""

    def __init__(self, section: Section, policy: Policy) -> None:
        self.section = section
        self.policy = policy

    def _check_present(self) -> bool:
        """Return True when present, raising for absent required sections."""
        if self.section.is_present():
            return True
        if self.policy is Policy.REQUIRED:
            raise RequiredContentMissingError(self.section.name)
        return False

    def build(
        self, tag_name: str, extra: object = None, /, **attributes: typ.Any
    ) -> Markup:
        """Build ``tag_name`` around the section, or return empty markup."""
        if not self._check_present():
            return Markup("")
        return TagProxy(self.section).build(tag_name, extra, **attributes)

    def if_present(self, callback: cabc.Callable[[Markup], object]) -> object:
        """Return ``callback(content)`` when present, otherwise empty markup."""
        if not self._check_present():
            return Markup("")
        return callback(self.section.resolve())

    def run_if_present(
        self, callback: cabc.Callable[[Markup], object]
    ) -> SectionDeclaration:
        """Call ``callback(content)`` when present; always return ``self``."""
        if self._check_present():
            callback(self.section.resolve())
        return self

    def __bool__(self) -> bool:
        return self.section.is_present()

    def __str__(self) -> str:
        if not self._check_present():
            return ""
        return str(self.section.resolve())

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"<SectionDeclaration {self.section.name!r} {self.policy.value}>"

    def __getattr__(self, tag_name: str) -> cabc.Callable[..., Markup]:
        """Return a presence-gated builder for ``tag_name``."""
        if not TAG_NAME_PATTERN.match(tag_name):
            raise AttributeError(tag_name)
        return functools.partial(self.build, tag_name)


__all__ = ["Policy", "RequiredContentMissingError", "SectionDeclaration"]
