"""
Tests for the command-line runner.
"""

import json

import pytest
from ipsbench.cli.run_benchmark import main, parse_entry


def test_parse_entry_with_label():
    assert parse_entry("join='-'.join(['a', 'b'])") == ("join", "'-'.join(['a', 'b'])")


def test_parse_entry_without_label():
    assert parse_entry("sum(range(10))") == ("sum(range(10))", "sum(range(10))")


def test_parse_entry_equality_is_code():
    assert parse_entry("x == 1") == ("x == 1", "x == 1")


def test_main_runs_and_exports(tmp_path, capsys):
    out_path = tmp_path / "results.json"

    code = main([
        "-w", "0.01", "-t", "0.01", "-c",
        "-s", "data = list(range(50))",
        "-o", str(out_path),
        "summed=sum(data)",
        "maxed=max(data)",
    ])

    assert code == 0
    captured = capsys.readouterr()
    assert "i/100ms" in captured.out
    assert "Comparison:" in captured.out

    data = json.loads(out_path.read_text())
    assert [r['label'] for r in data['reports']] == ["summed", "maxed"]


def test_main_quiet(capsys):
    assert main(["-q", "-w", "0", "-t", "0.01", "1 + 1"]) == 0
    assert capsys.readouterr().out == ""


def test_main_bad_snippet(capsys):
    assert main(["-w", "0", "-t", "0", "broken=1 +"]) == 2
    assert "broken" in capsys.readouterr().err


def test_main_no_entries(capsys):
    assert main([]) == 2


def test_main_invalid_config_value(capsys):
    assert main(["-t", "-1", "pass"]) == 2


def test_main_config_file(tmp_path, capsys):
    config_path = tmp_path / "bench.yaml"
    config_path.write_text("warmup: 0\ntime: 0.01\nquiet: true\n")

    assert main(["--config", str(config_path), "pass"]) == 0
    assert capsys.readouterr().out == ""


def test_main_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml"), "pass"]) == 2


def test_main_compare_flag_with_setup(tmp_path):
    """-c takes no value; setup names are visible to every snippet."""
    out_path = tmp_path / "results.csv"

    code = main(["-w", "0", "-t", "0.01", "-q", "-c", "-s", "x = 3",
                 "-o", str(out_path), "-f", "csv", "double=x*2", "square=x**2"])

    assert code == 0
    assert "double" in out_path.read_text()
    assert "square" in out_path.read_text()
