"""Tests for the command line entry point."""

from main import main


def test_writes_svg(box_font_path, tmp_path):
    out = tmp_path / "out.svg"
    assert main([str(box_font_path), "⿰口丨", "-o", str(out)]) == 0
    svg = out.read_text(encoding="utf-8")
    assert svg.startswith("<svg")
    assert svg.count("<path") == 2


def test_prints_svg(box_font_path, capsys):
    assert main([str(box_font_path), "口", "--size", "36"]) == 0
    out = capsys.readouterr().out
    assert 'width="36' in out


def test_missing_character_fails(box_font_path, capsys):
    assert main([str(box_font_path), "⿰口木"]) == 1
    assert "木" in capsys.readouterr().err


def test_malformed_ids_fails(box_font_path, capsys):
    assert main([str(box_font_path), "⿰口"]) == 1
    assert "error" in capsys.readouterr().err


def test_missing_font_fails(tmp_path, capsys):
    assert main([str(tmp_path / "nope.ttf"), "口"]) == 1
