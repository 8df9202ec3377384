"""Load and validate site configuration YAML for partial page builds.

This subpackage parses the project's ``partials.yaml`` file, resolves the
templates and output directories relative to it, and produces typed
dataclasses (:class:`SiteConfig`, :class:`PageConfig`) that the page renderer
consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from nice_partials.config import load_site_config
>>> site = load_site_config(Path("config/partials.yaml"))  # doctest: +SKIP
>>> site.get_page("home").template  # doctest: +SKIP
'home.jinja'
"""

from .loader import load_site_config
from .models import PageConfig, PartialsConfigError, SiteConfig

__all__ = [
    "PageConfig",
    "PartialsConfigError",
    "SiteConfig",
    "load_site_config",
]
