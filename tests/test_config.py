"""Unit tests for loading ``partials.yaml`` site configuration."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from nice_partials.config import PartialsConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "partials.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_load_site_config_resolves_paths(tmp_path: Path) -> None:
    """Relative directories resolve against the config file location."""
    path = _write_config(
        tmp_path,
        """
        defaults:
          templates_dir: views
          output_dir: dist
        pages:
          home:
            template: home.jinja
            output: index.html
            locals:
              title: Welcome
          about:
            template: about.jinja
        """,
    )

    site = load_site_config(path)

    assert site.templates_dir == tmp_path / "views"
    assert site.output_dir == tmp_path / "dist"
    home = site.get_page("home")
    assert home.output == tmp_path / "dist" / "index.html"
    assert home.locals == {"title": "Welcome"}
    about = site.get_page("about")
    assert about.output == tmp_path / "dist" / "about.html", (
        "pages without 'output' default to '<key>.html'"
    )
    assert about.locals == {}


def test_load_site_config_defaults(tmp_path: Path) -> None:
    """Missing defaults fall back to ``templates`` and ``public``."""
    path = _write_config(
        tmp_path,
        """
        pages:
          home:
            template: home.jinja
        """,
    )

    site = load_site_config(path)

    assert site.templates_dir == tmp_path / "templates"
    assert site.output_dir == tmp_path / "public"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    """The top-level YAML value must be a mapping."""
    path = _write_config(tmp_path, "- just\n- a list")
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("defaults: {}", "No pages"),
        ("pages:\n  home:\n    output: x.html", "missing 'template'"),
        ("pages:\n  home:\n    template: t.jinja\n    locals: [1, 2]", "non-mapping"),
        ("pages:\n  home: home.jinja", "must be a mapping"),
    ],
)
def test_invalid_pages_raise(tmp_path: Path, body: str, message: str) -> None:
    """Structural problems raise PartialsConfigError."""
    path = _write_config(tmp_path, body)
    with pytest.raises(PartialsConfigError, match=message):
        load_site_config(path)


def test_unknown_page_raises(tmp_path: Path) -> None:
    """Looking up an undefined page raises PartialsConfigError."""
    path = _write_config(tmp_path, "pages:\n  home:\n    template: home.jinja")
    site = load_site_config(path)
    with pytest.raises(PartialsConfigError, match="Unknown page 'missing'"):
        site.get_page("missing")
