"""Cyclopts CLI entrypoint for rendering partial-based pages.

The ``partials`` console script defined here reads ``config/partials.yaml``,
renders each configured page template with its locals, and writes the
resulting HTML files.

Examples
--------
Render all pages for the default configuration:

>>> from nice_partials.cli import main
>>> main()  # doctest: +SKIP

Render a single page into a custom directory:

>>> from nice_partials.cli import app
>>> app(["render", "--page", "home", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .renderer import PageRenderer

DEFAULT_CONFIG = Path("config/partials.yaml")

app = App(name="partials", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command(help="Render configured pages from partial templates.")
def render(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page identifier", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Enable debug logging")
    ] = False,
) -> None:
    """Render pages for the requested site configuration.

    Parameters
    ----------
    page : str or None, optional
        Specific page key to render; when ``None`` (default) all pages are
        rendered.
    config : Path, optional
        Path to the ``partials.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override output directory for single-page rendering.
    verbose : bool, optional
        Log debug records for each partial rendered.

    Raises
    ------
    ValueError
        If ``output_dir`` is supplied when more than one page is rendered.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)

    if page:
        target_pages = [site_config.get_page(page)]
    else:
        target_pages = list(site_config.pages.values())

    if len(target_pages) > 1 and output_dir:
        msg = "Cannot override output_dir when rendering multiple pages."
        raise ValueError(msg)

    for page_config in target_pages:
        written = PageRenderer(site_config, page_config, output_dir=output_dir).run()
        print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``partials`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
