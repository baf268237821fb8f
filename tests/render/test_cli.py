"""Tests for the render CLI."""

import json
import logging

import pytest

from render.cli import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def notes(tmp_path, temp_git_repo, make_commit):
    first = make_commit(temp_git_repo, "first")
    second = make_commit(temp_git_repo, "second")
    notes_file = tmp_path / "notes.md"
    notes_file.write_text(
        f"# Changes\n\nSee {first[:8]}...{second[:8]} and `{first}..{second}`.\n",
        encoding="utf-8",
    )
    return notes_file, first, second


def base_args(notes_file, tmp_path):
    return [
        str(notes_file),
        "--project",
        "group/project",
        "--projects-root",
        str(tmp_path),
        "--base-url",
        "https://git.example.com",
    ]


def test_render_prints_linked_html(notes, tmp_path, capsys):
    notes_file, first, second = notes

    assert main(["render", *base_args(notes_file, tmp_path)]) == 0

    out = capsys.readouterr().out
    assert f'href="https://git.example.com/group/project/compare/{first}...{second}"' in out
    assert f"<code>{first}..{second}</code>" in out


def test_render_writes_output_file(notes, tmp_path):
    notes_file, _, _ = notes
    output = tmp_path / "notes.html"

    assert main(["render", *base_args(notes_file, tmp_path), "--only-path", "--output", str(output)]) == 0

    html = output.read_text(encoding="utf-8")
    assert 'href="/group/project/compare/' in html
    assert html.count("<a ") == 1


def test_refs_json(notes, tmp_path, capsys):
    notes_file, first, second = notes

    assert main(["refs", *base_args(notes_file, tmp_path), "--format", "json"]) == 0

    refs = json.loads(capsys.readouterr().out)
    assert refs == [
        {
            "text": f"{first[:8]}...{second[:8]}",
            "reference": f"{first}...{second}",
            "project": "group/project",
            "from": first,
            "to": second,
            "notation": "...",
            "compare_from": first,
            "compare_to": second,
        }
    ]


def test_unknown_project_fails(notes, tmp_path):
    notes_file, _, _ = notes
    args = ["render", str(notes_file), "--project", "nobody/nothing", "--projects-root", str(tmp_path)]

    assert main(args) == 1


def test_missing_project_fails(notes, tmp_path, monkeypatch):
    notes_file, _, _ = notes
    monkeypatch.delenv("GIT_REFS_DEFAULT_PROJECT", raising=False)

    assert main(["render", str(notes_file), "--projects-root", str(tmp_path)]) == 1


def test_missing_file_fails(tmp_path):
    args = ["render", str(tmp_path / "absent.md"), "--project", "group/project"]
    assert main(args) == 1


def test_refs_console_lists_short_ids(notes, tmp_path, capsys):
    notes_file, first, second = notes

    assert main(["refs", *base_args(notes_file, tmp_path)]) == 0

    out = capsys.readouterr().out
    assert f"group/project {first[:8]}...{second[:8]}" in out
