"""Render configured pages from partial templates.

``PageRenderer`` turns one page entry from ``config/partials.yaml`` into a
static HTML file. It builds a :class:`~nice_partials.view.ViewContext` over the
site's templates directory, renders the page template as a partial with the
page locals in scope, and writes the result.

>>> from nice_partials.config import load_site_config
>>> site = load_site_config(Path("config/partials.yaml"))  # doctest: +SKIP
>>> PageRenderer(site, site.get_page("home")).run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .view import ViewContext

if typ.TYPE_CHECKING:
    from .config import PageConfig, SiteConfig

logger = logging.getLogger(__name__)


class PageRenderer:
    """Render a single configured page to disk."""

    def __init__(
        self,
        site: SiteConfig,
        page: PageConfig,
        *,
        output_dir: Path | None = None,
        view: ViewContext | None = None,
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration providing the templates directory.
        page : PageConfig
            Page entry to render.
        output_dir : Path, optional
            Directory overriding where the page file is written; the file name
            from the page entry is kept.
        view : ViewContext, optional
            Rendering context to reuse; a new one over ``site.templates_dir``
            is created when omitted.
        """
        self.site = site
        self.page = page
        self.output_dir = output_dir
        self.view = view or ViewContext(templates_dir=site.templates_dir)

    @property
    def output_path(self) -> Path:
        """Return the file the page is written to."""
        if self.output_dir is None:
            return self.page.output
        return self.output_dir / self.page.output.name

    def render(self) -> str:
        """Return the rendered HTML for the page, ending with a newline."""
        html = str(self.view.render_partial(self.page.template, self.page.locals))
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the page HTML, returning the output path."""
        output_path = self.output_path
        html = self.render()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("Wrote page %s to %s", self.page.key, output_path)
        return output_path


__all__ = ["PageRenderer"]
