import io
import json
import os
import sys
from pathlib import Path

import pytest

from bwd.cli import HELP_TEXT, VERSION, run
from bwd.errors import ClipboardError
from bwd.root import find_root


def _run(argv, copied=None):
    out, err = io.StringIO(), io.StringIO()
    copy = copied.append if copied is not None else (lambda text: None)
    code = run(argv, stdout=out, stderr=err, copy=copy)
    return code, out.getvalue(), err.getvalue()


@pytest.fixture
def project(tmp_path: Path, monkeypatch):
    home = tmp_path.resolve() / "home" / "user"
    root = home / "project"
    (root / "src").mkdir(parents=True)
    (root / ".git").mkdir()
    (home / "docs" / "x").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.chdir(root)
    return root


def test_default_prints_cwd(project: Path):
    code, out, err = _run([])
    assert code == 0
    assert out == f"{project}\n"
    assert err == ""


def test_short_under_home(project: Path):
    code, out, _ = _run(["-s", "../docs/x"])
    assert code == 0
    assert out == "$HOME/docs/x\n"


def test_root_relative_from_subdir(project: Path, monkeypatch):
    assert _run(["-r"])[1] == ".\n"
    monkeypatch.chdir(project / "src")
    assert _run(["-r"])[1] == "src\n"
    assert _run(["--root", "."])[1] == "src\n"


def test_root_not_found_exits_non_zero(tmp_path: Path, monkeypatch):
    lonely = tmp_path.resolve() / "lonely"
    lonely.mkdir()
    if find_root(lonely) is not None:
        pytest.skip("temporary directory sits inside a marked project")
    monkeypatch.chdir(lonely)
    code, out, err = _run(["-r"])
    assert code == 1
    assert out == ""
    assert err.startswith("[bwd error] No project root")


def test_json_is_single_line_and_ignores_other_flags(project: Path):
    code, out, _ = _run(["-j", "src"])
    assert code == 0
    assert out.count("\n") == 1
    doc = json.loads(out)
    assert doc == {"path": str(project / "src"), "short": "$HOME/project/src", "root": "src"}
    assert _run(["-j", "-s", "-r", "src"])[1] == out


def test_invalid_target(project: Path):
    code, out, err = _run(["nope"])
    assert code == 1
    assert out == ""
    assert err == "[bwd error] Invalid path: 'nope'\n"


def test_separator_target(project: Path):
    (project / "-notes").mkdir()
    code, out, _ = _run(["--", "-notes"])
    assert code == 0
    assert out == f"{project / '-notes'}\n"


def test_copy_uses_rendered_text(project: Path):
    copied = []
    _run(["-c", "-s"], copied)
    assert copied == ["$HOME/project"]
    copied.clear()
    _, out, _ = _run(["-c", "-j"], copied)
    assert copied == [out.rstrip("\n")]


def test_no_copy_without_flag(project: Path):
    copied = []
    _run([], copied)
    assert copied == []


def test_clipboard_failure_keeps_stdout(project: Path):
    def broken(text):
        raise ClipboardError("no clipboard available")

    out, err = io.StringIO(), io.StringIO()
    code = run(["-c"], stdout=out, stderr=err, copy=broken)
    assert code == 1
    assert out.getvalue() == f"{project}\n"
    assert err.getvalue() == "[bwd error] Clipboard Error: no clipboard available\n"


def test_help_and_version_skip_pipeline(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code, out, _ = _run(["missing-target", "--help"])
    assert code == 0
    assert out == HELP_TEXT + "\n"
    code, out, _ = _run(["-v"])
    assert code == 0
    assert out == f"bwd {VERSION}\n"


def test_help_after_separator_is_a_target(project: Path):
    code, _, err = _run(["--", "-h"])
    assert code == 1
    assert err == "[bwd error] Invalid path: '-h'\n"


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts non-UTF-8 names")
def test_non_utf8_directory_prints_replacement_char(tmp_path: Path, monkeypatch):
    bad = os.path.join(os.fsencode(tmp_path.resolve()), b"bad\xff")
    os.mkdir(bad)
    monkeypatch.chdir(bad)
    raw = io.BytesIO()
    out = io.TextIOWrapper(raw, encoding="utf-8", errors="strict", newline="\n")
    copied = []
    code = run(["-c"], stdout=out, stderr=io.StringIO(), copy=copied.append)
    out.flush()
    expected = f"{tmp_path.resolve()}/bad�"
    assert code == 0
    assert raw.getvalue().decode("utf-8") == expected + "\n"
    assert copied == [expected]


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts non-UTF-8 names")
def test_non_utf8_directory_json(tmp_path: Path, monkeypatch):
    bad = os.path.join(os.fsencode(tmp_path.resolve()), b"bad\xff")
    os.mkdir(bad)
    monkeypatch.chdir(bad)
    code, out, _ = _run(["-j"])
    assert code == 0
    assert json.loads(out)["path"] == f"{tmp_path.resolve()}/bad�"


def test_version_matches_package_metadata():
    from importlib.metadata import version

    assert VERSION == version("bwd")
