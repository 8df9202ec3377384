"""Typed dataclasses describing partial page site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path


class PartialsConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PageConfig:
    """One page rendered from a partial template.

    Attributes
    ----------
    key : str
        Identifier used on the command line (``--page``).
    template : str
        Template name relative to the site's templates directory.
    output : Path
        Destination file for the rendered HTML.
    locals : dict[str, Any]
        Values exposed to the template and used as section fallbacks.
    """

    key: str
    template: str
    output: Path
    locals: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class SiteConfig:
    """Top-level configuration for rendering partial pages."""

    templates_dir: Path
    output_dir: Path
    pages: dict[str, PageConfig]

    def get_page(self, key: str) -> PageConfig:
        """Return the page configuration identified by ``key``."""
        try:
            return self.pages[key]
        except KeyError as exc:
            msg = f"Unknown page '{key}'."
            raise PartialsConfigError(msg) from exc


__all__ = ["PageConfig", "PartialsConfigError", "SiteConfig"]
