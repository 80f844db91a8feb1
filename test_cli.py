#!/usr/bin/env python3
"""
End-to-end tests for the command-line interface
"""

import hashlib
import io
import logging
import os

import pytest

from sizescan.cli import main as cli
from sizescan.cli.report import render_duplicate_group, render_size_group
from sizescan.core.models import DuplicateEntry, DuplicateGroup, FileRecord, SizeGroup


def _write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.fixture
def scenario_a(tmp_path):
    _write(tmp_path / "a.txt", b"hello")
    _write(tmp_path / "b.txt", b"hello")
    _write(tmp_path / "c.txt", b"world")
    return tmp_path


@pytest.mark.parametrize("argv", [[], ["one", "two"]])
def test_wrong_argument_count_is_usage_error(argv, capsys):
    assert cli.main(argv) == 0
    assert capsys.readouterr().out == "Directory is not specified\n"


def test_interactive_scenario_a(scenario_a, monkeypatch, capsys):
    _stdin(monkeypatch, "\n1\nyes\n")

    assert cli.main([str(scenario_a)]) == 0

    out = capsys.readouterr().out
    a, b, c = (os.path.join(str(scenario_a), n) for n in ("a.txt", "b.txt", "c.txt"))
    assert "Enter file format:" in out
    assert "Size sorting options:\n1. Descending\n2. Ascending\nEnter a sorting option:" in out
    assert f"\n5 bytes\n{a}\n{b}\n{c}\n" in out
    assert "\nCheck for duplicates\n" in out
    digest = hashlib.md5(b"hello").hexdigest()
    assert f"\n5 bytes\nHash: {digest}\n1. {b}\n2. {a}\n\n" in out
    assert f". {c}" not in out


def test_scenario_b_single_file(tmp_path, capsys):
    _write(tmp_path / "only.bin", b"1234567")

    cli.main([str(tmp_path), "--format", "", "--sort", "asc", "--duplicates"])

    out = capsys.readouterr().out
    assert out.count("7 bytes") == 1
    assert "Hash:" not in out


def test_wrong_options_reprompt(scenario_a, monkeypatch, capsys):
    _stdin(monkeypatch, "txt\n3\nup\n2\nmaybe\nno\n")

    assert cli.main([str(scenario_a)]) == 0

    out = capsys.readouterr().out
    assert out.count("\nWrong option\n") == 3
    assert out.count("Enter a sorting option:") == 3
    assert "Hash:" not in out


def test_extension_filter_from_prompt(tmp_path, monkeypatch, capsys):
    _write(tmp_path / "x.txt", b"abc")
    _write(tmp_path / "x.md", b"abcd")
    _stdin(monkeypatch, "txt\n2\nno\n")

    cli.main([str(tmp_path)])

    out = capsys.readouterr().out
    assert "3 bytes" in out
    assert "4 bytes" not in out


def test_sort_order_option(tmp_path, capsys):
    _write(tmp_path / "small", b"1")
    _write(tmp_path / "big", b"1234")

    cli.main([str(tmp_path), "--format", "", "--sort", "desc", "--no-duplicates"])

    out = capsys.readouterr().out
    assert out.index("4 bytes") < out.index("1 bytes")


def test_legacy_matching_flag(scenario_a, capsys):
    cli.main([str(scenario_a), "--format", "", "--sort", "desc", "--duplicates", "--legacy-matching"])

    out = capsys.readouterr().out
    c = os.path.join(str(scenario_a), "c.txt")
    a = os.path.join(str(scenario_a), "a.txt")
    assert f"2. {c}" in out
    assert f"3. {a}" in out


def test_missing_root_prints_traversal_error(tmp_path, capsys):
    result = cli.main([str(tmp_path / "missing"), "--format", "", "--sort", "asc", "--duplicates"])

    assert result == 0
    assert capsys.readouterr().out == "error walking directory\n"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_read_failure_is_fatal(tmp_path, capsys):
    _write(tmp_path / "a.txt", b"fine")
    os.symlink(tmp_path / "nowhere", tmp_path / "broken.txt")

    result = cli.main([str(tmp_path), "--format", "", "--sort", "asc", "--duplicates"])

    assert result == 1
    assert "bytes" not in capsys.readouterr().out


def test_closed_stdin_aborts(tmp_path, monkeypatch, capsys):
    _write(tmp_path / "a.txt", b"x")
    _stdin(monkeypatch, "")

    assert cli.main([str(tmp_path)]) == 1


def test_invalid_chunk_size_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "--chunk-size", "16"])
    assert excinfo.value.code == 2


def test_help_exits_zero():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])
    assert excinfo.value.code == 0


def test_render_blocks():
    record = FileRecord(name="a", path="root/a", size=5, extension="", content_hash="abc")

    assert render_size_group(SizeGroup(size=5, files=(record,))) == "\n5 bytes\nroot/a"
    dup = DuplicateGroup(size=5, hash_val="abc", entries=(DuplicateEntry(file=record, number=4),))
    assert render_duplicate_group(dup) == "\n5 bytes\nHash: abc\n4. root/a\n"


def test_quiet_and_verbose_together_are_rejected(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path), "-q", "-v"])
    assert excinfo.value.code == 2


def test_quiet_suppresses_progress_logging(scenario_a, caplog):
    argv = [str(scenario_a), "--format", "", "--sort", "asc", "--no-duplicates"]

    with caplog.at_level(logging.DEBUG):
        cli.main(argv)
    assert "Scanning:" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.DEBUG):
        cli.main(argv + ["-q"])
    assert "Scanning:" not in caplog.text


def test_verbose_enables_debug_logging(tmp_path, caplog):
    _write(tmp_path / "only.bin", b"1234567")

    with caplog.at_level(logging.DEBUG):
        cli.main([str(tmp_path), "--format", "", "--sort", "asc", "--duplicates", "-v"])

    assert "Skipping size group" in caplog.text
