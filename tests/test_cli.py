# tests/test_cli.py
import io

import pytest

from apps.cli.solve_cli import cli


def test_file_with_unique_solution(tmp_path, capsys, classic_text):
    path = tmp_path / "puzzle.txt"
    path.write_text(classic_text + "\n", encoding="utf-8")
    assert cli(["-f", str(path), "--workers", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Found a unique solution")
    assert "║ 9 8 4 ║ 7 3 5 ║ 2 6 1 ║" in out


def test_stdin_with_no_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("55" + "0" * 79))
    assert cli(["-i", "--workers", "1"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "No solutions found"


def test_multiple_solutions_three_by_three(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("... ... ..."))
    assert cli(["-i", "--dimension", "3", "--workers", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Multiple solutions found")
    assert out.count("╔") == 12


def test_malformed_input_reports_error(tmp_path, capsys, classic_text):
    path = tmp_path / "short.txt"
    path.write_text(classic_text[:80], encoding="utf-8")
    assert cli(["-f", str(path)]) == 1
    assert "80 != 81" in capsys.readouterr().err


def test_bad_dimension_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0" * 16))
    assert cli(["-i", "--dimension", "4"]) == 1
    assert "invalid grid dimension" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert cli(["-f", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_source_is_required():
    with pytest.raises(SystemExit) as exc:
        cli([])
    assert exc.value.code == 2
