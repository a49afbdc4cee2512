# Copyright 2026 specdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the specdoc CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from specdoc.cli.main import main

# ###############
# Helpers
# ###############

DOCUMENTED = """\
/* Records. */
module M {
    /* Record id. */
    typedef int Id;
    /* A record. */
    typedef structure { Id id; string name; } Rec;
    /* Fetch a record. */
    funcdef get(Id id) returns (Rec) authentication required;
}
"""


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["specdoc", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- init tests --------


def test_init_creates_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """init writes a default .specdoc.yaml."""
    assert _run(monkeypatch, "init", str(tmp_path)) == 0
    content = (tmp_path / ".specdoc.yaml").read_text()
    assert "build-directory: .specdoc-build" in content


def test_init_default_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "init") == 0
    assert (tmp_path / ".specdoc.yaml").exists()


def test_init_fails_if_config_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / ".specdoc.yaml", "build-directory: out\n")
    assert _run(monkeypatch, "init", str(tmp_path)) == 1


def test_init_fails_if_directory_does_not_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path / "missing")) == 1


# -------- check tests --------


def test_check_clean_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    spec = _write(tmp_path / "m.spec", DOCUMENTED)
    assert _run(monkeypatch, "check", str(spec)) == 0
    out = capsys.readouterr().out
    assert "Checking 1 specification file(s)..." in out
    assert "No errors found." in out
    assert "Warning" not in out


def test_check_reports_warnings_without_failing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    spec = _write(tmp_path / "m.spec", "module M { typedef int Id; }")
    assert _run(monkeypatch, "check", str(spec)) == 0
    out = capsys.readouterr().out
    assert "Type 'Id' is never referenced." in out
    assert "Type 'Id' has no description." in out


def test_check_syntax_error_exits_1(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    spec = _write(tmp_path / "bad.spec", "module M {\n  typedef Nope X;\n}")
    assert _run(monkeypatch, "check", str(spec)) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "Line 2, column 11: Undefined type 'Nope'" in err


def test_check_continues_after_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    bad = _write(tmp_path / "bad.spec", "module M {")
    good = _write(tmp_path / "good.spec", "module G { typedef int Id; }")
    assert _run(monkeypatch, "check", str(bad), str(good)) == 1
    assert "Type 'Id' is never referenced." in capsys.readouterr().out


def test_check_directory_uses_default_pattern(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "a.spec", DOCUMENTED)
    _write(tmp_path / "nested" / "b.spec", DOCUMENTED)
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "check") == 0
    assert "Checking 2 specification file(s)..." in capsys.readouterr().out


def test_check_directory_respects_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / ".specdoc.yaml", "build-directory: out\nsources: [api/*.spec]\n")
    _write(tmp_path / "api" / "a.spec", DOCUMENTED)
    _write(tmp_path / "drafts" / "broken.spec", "not a spec")
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    assert "Checking 1 specification file(s)..." in capsys.readouterr().out


def test_check_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / ".specdoc.yaml", "sources: []\n")
    assert _run(monkeypatch, "check", str(tmp_path)) == 1


def test_check_missing_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "check", str(tmp_path / "absent.spec")) == 1


def test_check_empty_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, "check", str(tmp_path)) == 0
    assert "No specification files found." in capsys.readouterr().out


# -------- build tests --------


def test_build_requires_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "build", str(tmp_path)) == 1


def test_build_writes_artifacts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / ".specdoc.yaml", "build-directory: out\n")
    _write(tmp_path / "specs" / "m.spec", DOCUMENTED)
    assert _run(monkeypatch, "build", str(tmp_path)) == 0
    assert (tmp_path / "out" / "specs" / "m.spec.json").exists()
    assert "Built 1 document(s)" in capsys.readouterr().out


def test_build_syntax_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / ".specdoc.yaml", "build-directory: out\n")
    _write(tmp_path / "m.spec", "module M { funcdef f() }")
    assert _run(monkeypatch, "build", str(tmp_path)) == 1


def test_build_verbose_logs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _write(tmp_path / ".specdoc.yaml", "build-directory: out\n")
    _write(tmp_path / "m.spec", DOCUMENTED)
    with caplog.at_level("DEBUG"):
        assert _run(monkeypatch, "--verbose", "build", str(tmp_path)) == 0
    assert "Wrote" in caplog.text


# -------- show tests --------


def test_show_prints_toc(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    spec = _write(tmp_path / "m.spec", DOCUMENTED)
    assert _run(monkeypatch, "show", str(spec)) == 0
    assert capsys.readouterr().out.splitlines() == [
        "module M",
        "Notes (#Notes)",
        "Types (#Types)",
        "  Rec (#type000005)",
        "  Id (#type000004)",
        "Functions (#Functions)",
        "  get (#func000001)",
    ]


def test_show_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    spec = _write(tmp_path / "m.spec", DOCUMENTED)
    assert _run(monkeypatch, "show", "--json", str(spec)) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "M"
    assert [t["name"] for t in payload["types"]] == ["Rec", "Id"]
    assert payload["functions"][0]["requires_authentication"] is True


def test_show_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "show", str(tmp_path / "absent.spec")) == 1
