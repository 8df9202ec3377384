"""Shared fixtures for the nice_partials test-suite.

The ``view`` fixture returns a ``ViewContext`` backed by an in-memory
``DictLoader`` so tests can register templates without touching the
filesystem. ``new_partial`` builds partials bound to that view.
"""

from __future__ import annotations

import typing as typ

import pytest
from jinja2 import DictLoader

from nice_partials import Partial, ViewContext
from nice_partials.view import build_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def templates() -> dict[str, str]:
    """Return the mutable template mapping served by the ``view`` fixture."""
    return {}


@pytest.fixture
def view(templates: dict[str, str]) -> ViewContext:
    """Return a view whose Jinja loader serves ``templates``."""
    environment = build_environment()
    environment.loader = DictLoader(templates)
    return ViewContext(environment)


@pytest.fixture
def new_partial(
    view: ViewContext,
) -> cabc.Callable[..., Partial]:
    """Return a factory creating partials bound to ``view``."""

    def _factory(locals_: cabc.Mapping[str, typ.Any] | None = None) -> Partial:
        return Partial(view, locals_)

    return _factory
