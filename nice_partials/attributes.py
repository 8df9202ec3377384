"""Attribute bags stored on sections and merged into built tags.

The ``class`` attribute accepts a string, a (possibly nested) list of strings,
or a mapping of token to truthiness. It is normalised to a space-joined token
string whenever two bags are merged.

Examples
--------
>>> from nice_partials.attributes import AttributeBag, token_list
>>> token_list({"a": False, "b": True})
['b']
>>> AttributeBag({"class": "a"}).merge({"class": {"a": False, "b": True}})["class"]
'b'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ._constants import CLASS_ATTRIBUTE
from .tags import normalise_attributes, render_attributes


def token_list(value: object) -> list[str]:
    """Flatten a class-like value into an ordered list of unique tokens."""
    tokens: list[str] = []

    def _collect(candidate: object) -> None:
        match candidate:
            case None | False:
                return
            case str():
                tokens.extend(segment for segment in candidate.split() if segment)
            case cabc.Mapping():
                for key, enabled in candidate.items():
                    if enabled:
                        _collect(str(key))
            case list() | tuple() | set() | frozenset():
                for item in candidate:
                    _collect(item)
            case _:
                _collect(str(candidate))

    _collect(value)
    return list(dict.fromkeys(tokens))


class AttributeBag(dict[str, typ.Any]):
    """Mapping of attribute name to value with class-aware merging."""

    def merge(self, call_site: cabc.Mapping[str, typ.Any] | None) -> AttributeBag:
        """Return a new bag with ``call_site`` values layered over this one.

        Call-site values win for every key. The resulting ``class`` value is
        normalised to the truthy tokens of the winning value.
        """
        merged = AttributeBag(self)
        if call_site:
            merged.update(normalise_attributes(call_site))
        if CLASS_ATTRIBUTE in merged:
            merged[CLASS_ATTRIBUTE] = " ".join(token_list(merged[CLASS_ATTRIBUTE]))
        return merged

    def __str__(self) -> str:
        """Serialise the bag as an HTML attribute string."""
        return str(render_attributes(self.merge(None)))

    def __html__(self) -> str:
        """Expose the serialised attributes as safe markup to Jinja."""
        return str(self)


__all__ = [
    "CLASS_ATTRIBUTE",
    "AttributeBag",
    "token_list",
]
