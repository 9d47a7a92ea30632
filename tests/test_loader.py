"""Unit tests for loading configuration files from disk."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from docsite_composer.config import (
    NavLink,
    SiteConfigError,
    ValidationError,
    load_fragment,
    load_site_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(path: Path, text: str) -> Path:
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_bundled_example_config_composes() -> None:
    """The example configuration shipped with the repository is valid."""
    site = load_site_config(REPO_ROOT / "config" / "site.yaml")
    assert site.metadata.title.startswith("BeeORM"), site.metadata.title
    assert [plugin.name for plugin in site.plugins] == ["google-analytics", "search"]
    assert site.plugins[0].options == {"id": "UA-195751907-1"}
    assert site.metadata.head[0].attrs == {"rel": "icon", "href": "/favicon.ico"}
    guide = site.theme.sidebar["/guide/"][0]
    assert guide.children[0] == NavLink(text="Introduction", link="/guide/")
    assert len(guide.children) == 20, f"unexpected child count {len(guide.children)}"


def test_load_fragment_reads_json(tmp_path: Path) -> None:
    """JSON documents load through the YAML 1.2 parser."""
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"title": "Docs", "plugins": ["search"]}), "utf-8")
    assert load_fragment(path) == {"title": "Docs", "plugins": ["search"]}


def test_empty_document_is_an_empty_fragment(tmp_path: Path) -> None:
    """An empty file contributes nothing."""
    path = _write(tmp_path / "empty.yaml", "# nothing yet")
    assert load_fragment(path) == {}


def test_missing_file_raises(tmp_path: Path) -> None:
    """Missing files surface as FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_fragment(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    """Top-level lists are not configuration fragments."""
    path = _write(tmp_path / "list.yaml", "- search\n- pwa")
    with pytest.raises(SiteConfigError, match="must be a mapping"):
        load_fragment(path)


def test_load_site_config_requires_a_path() -> None:
    """At least one file must be named."""
    with pytest.raises(SiteConfigError):
        load_site_config()


def test_later_files_override_earlier_ones(tmp_path: Path) -> None:
    """Fragments merge left to right before composition."""
    base = _write(
        tmp_path / "base.yaml",
        """
        title: Docs
        plugins: [search]
        theme:
          docsBranch: v2
          navbar:
            - {text: Guide, link: /guide/}
        """,
    )
    override = _write(
        tmp_path / "override.yaml",
        """
        title: BeeORM
        plugins:
          - name: google-analytics
            options: {id: UA-1}
        theme:
          docsBranch: v3
        """,
    )
    site = load_site_config(base, override)
    assert site.metadata.title == "BeeORM"
    assert [plugin.name for plugin in site.plugins] == ["search", "google-analytics"]
    assert site.theme.docs_branch == "v3"
    assert site.theme.navbar == (NavLink(text="Guide", link="/guide/"),)


def test_yaml_alias_cycle_is_rejected(tmp_path: Path) -> None:
    """A YAML anchor that refers to itself is reported as a cycle."""
    path = _write(
        tmp_path / "loop.yaml",
        """
        theme:
          sidebar:
            /loop/:
              - &loop
                title: Loop
                children:
                  - *loop
        """,
    )
    with pytest.raises(ValidationError, match="cycle") as excinfo:
        load_site_config(path)
    assert excinfo.value.path == 'theme.sidebar["/loop/"][0].children[0]'


def test_validation_error_carries_path(tmp_path: Path) -> None:
    """File-based errors keep the fragment path."""
    path = _write(
        tmp_path / "bad.yaml",
        """
        theme:
          navbar:
            - {text: Guide, link: /guide/}
            - {text: "", link: /plugins/}
        """,
    )
    with pytest.raises(ValidationError) as excinfo:
        load_site_config(path)
    error = typ.cast("ValidationError", excinfo.value)
    assert error.path == "theme.navbar[1].text"
    assert str(error) == "theme.navbar[1].text: must not be empty"


def test_malformed_yaml_raises_site_config_error(tmp_path: Path) -> None:
    """Parser failures are reported as configuration errors naming the file."""
    path = _write(tmp_path / "broken.yaml", "theme: [navbar\n")
    with pytest.raises(SiteConfigError, match="Could not parse") as excinfo:
        load_fragment(path)
    assert str(path) in str(excinfo.value)
