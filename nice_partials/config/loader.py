"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_OUTPUT_TEMPLATE
from .models import PageConfig, PartialsConfigError, SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the pages to render.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/partials.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with directories resolved against the config
        file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    PartialsConfigError
        If no pages are defined or a page entry is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> from nice_partials.config import load_site_config
    >>> config = load_site_config(Path("config/partials.yaml"))  # doctest: +SKIP
    >>> sorted(config.pages)  # doctest: +SKIP
    ['home']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.parent

    templates_dir = _resolve_dir(base_dir, defaults.get("templates_dir", "templates"))
    output_dir = _resolve_dir(base_dir, defaults.get("output_dir", "public"))

    pages_raw = raw.get("pages") or {}
    if not pages_raw:
        msg = "No pages defined in partials configuration."
        raise PartialsConfigError(msg)

    pages: dict[str, PageConfig] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                pages[str(key)] = _build_page_config(
                    key=str(key), payload=payload, output_dir=output_dir
                )
            case _:
                msg = f"Page '{key}' must be a mapping."
                raise PartialsConfigError(msg)

    return SiteConfig(templates_dir=templates_dir, output_dir=output_dir, pages=pages)


def _resolve_dir(base_dir: Path, value: object) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    candidate = Path(str(value))
    return candidate if candidate.is_absolute() else base_dir / candidate


def _build_page_config(
    *, key: str, payload: typ.Mapping[str, typ.Any], output_dir: Path
) -> PageConfig:
    """Build a PageConfig for a single page entry."""
    template = payload.get("template")
    if not template:
        msg = f"Page '{key}' is missing 'template'."
        raise PartialsConfigError(msg)

    locals_ = payload.get("locals") or {}
    if not isinstance(locals_, dict):
        msg = f"Page '{key}' has non-mapping 'locals'."
        raise PartialsConfigError(msg)

    output_name = payload.get("output") or DEFAULT_OUTPUT_TEMPLATE.format(key=key)
    return PageConfig(
        key=key,
        template=str(template),
        output=_resolve_dir(output_dir, output_name),
        locals={str(name): value for name, value in locals_.items()},
    )


__all__ = ["load_site_config"]
