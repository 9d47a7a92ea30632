"""Unit tests for the ``site`` CLI commands.

The commands are called directly, or through ``app.parse_args`` when the
argument parsing itself is under test, so the tests do not depend on how the
installed Cyclopts version handles return values and exit codes.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import msgspec.json
import pytest
from ruamel.yaml import YAML

from docsite_composer import cli
from docsite_composer.config import compose

if typ.TYPE_CHECKING:
    from pathlib import Path

SITE_YAML = """
title: BeeORM
plugins:
  - name: google-analytics
    options: {id: UA-195751907-1}
  - search
theme:
  navbar:
    - {text: Guide, link: /guide/}
  sidebar:
    /guide:
      - title: Guide
        children: [registry, entities]
"""


@pytest.fixture
def site_file(tmp_path: Path) -> Path:
    """Write a small valid site configuration."""
    path = tmp_path / "site.yaml"
    path.write_text(dedent(SITE_YAML).lstrip(), encoding="utf-8")
    return path


def test_check_prints_summary(
    site_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``site check`` reports title, plugins and navigation counts."""
    cli.check(site_file)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "site: BeeORM [en-US]",
        "plugins: google-analytics, search",
        "navbar: 1 entries",
        "sidebar /guide/: 1 groups",
    ], f"unexpected summary {out!r}"


def test_check_reports_validation_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Invalid configuration exits with status 1 and a path-qualified error."""
    path = tmp_path / "bad.yaml"
    path.write_text("theme:\n  sidebar:\n    /a: []\n    /a/: []\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.check(path)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith('error: theme.sidebar["/a/"]: prefix'), err


def test_check_reports_missing_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Missing files are reported rather than raised."""
    with pytest.raises(SystemExit):
        cli.check(tmp_path / "absent.yaml")
    assert "not found" in capsys.readouterr().err


def test_dump_json_matches_normalized_form(
    site_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``site dump --format json`` prints the normalized raw configuration."""
    cli.dump(site_file, output_format="json")
    payload = msgspec.json.decode(capsys.readouterr().out)
    assert list(payload["theme"]["sidebar"]) == ["/guide/"]
    assert payload["plugins"][1] == {"name": "search", "options": {}}
    assert compose(payload) == compose(YAML(typ="safe").load(site_file))


def test_dump_yaml_round_trips(
    site_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """YAML output composes back to the same site."""
    cli.dump(site_file, output_format="yaml")
    dumped = YAML(typ="safe").load(capsys.readouterr().out)
    assert dumped["lang"] == "en-US", "defaults are written out explicitly"
    assert compose(dumped) == compose(YAML(typ="safe").load(site_file))


def test_verbose_logs_go_to_stderr(
    site_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Debug events are written to stderr so stdout stays parseable."""
    cli.dump(site_file, output_format="json", verbose=True)
    captured = capsys.readouterr()
    msgspec.json.decode(captured.out)
    assert "site_composed" in captured.err, captured.err


def test_check_reports_unparseable_files(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A YAML syntax error exits with status 1 instead of a traceback."""
    path = tmp_path / "broken.yaml"
    path.write_text("theme: [navbar\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.check(path)
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error: Could not parse")


@pytest.mark.parametrize(
    ("tokens", "env"),
    [
        (["dump", "{path}", "--format", "json"], {}),
        (["dump", "{path}"], {"INPUT_FORMAT": "json"}),
    ],
)
def test_app_parses_dump_arguments(
    site_file: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
    tokens: list[str],
    env: dict[str, str],
) -> None:
    """The Cyclopts app maps ``--format`` and ``INPUT_FORMAT`` onto ``dump``."""
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    command, bound, *_ = cli.app.parse_args(
        [token.format(path=site_file) for token in tokens]
    )
    assert command is cli.dump
    assert bound.arguments["output_format"] == "json"
    command(*bound.args, **bound.kwargs)
    payload = msgspec.json.decode(capsys.readouterr().out)
    assert payload["title"] == "BeeORM"
