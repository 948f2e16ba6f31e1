"""Integration tests for CLI functionality."""

import json
import subprocess
import sys

import pytest

from strcalc_pkg.cli import DEMO_INPUTS, _unescape, main_entry


def _run(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "strcalc_pkg.cli", *args],
        input=stdin,
        capture_output=True,
        text=True,
        timeout=10,
    )


def test_cli_version():
    """Test --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check():
    """Test --health-check command."""
    result = _run("--health-check")
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()


def test_cli_eval_json():
    """Test CLI evaluation with JSON output."""
    result = _run("--eval", "//[*][%]\\n1*2%3", "--format", "json")
    assert result.returncode == 0
    assert json.loads(result.stdout.strip()) == {"ok": True, "result": 6}


def test_cli_eval_human():
    """Test CLI evaluation with human output."""
    result = _run("--eval", "1\\n2,3")
    assert result.returncode == 0
    assert result.stdout.strip() == "6"


def test_cli_eval_negatives():
    """Test CLI reports negatives and exits non-zero."""
    result = _run("--eval", "1,-2,-3", "--format", "json")
    assert result.returncode == 1
    data = json.loads(result.stdout.strip())
    assert data["ok"] is False
    assert data["error"] == "negatives not allowed: -2, -3"


def test_cli_upper_bound():
    result = _run("--eval", "5,20", "--upper-bound", "10")
    assert result.returncode == 0
    assert result.stdout.strip() == "5"


def test_cli_demo():
    result = _run("--demo", "--format", "json")
    assert result.returncode == 0
    lines = [json.loads(line) for line in result.stdout.strip().splitlines()]
    assert len(lines) == len(DEMO_INPUTS)
    assert lines[2] == {"input": "1,2", "ok": True, "result": 3}


def test_cli_repl():
    """Test REPL evaluation, count and quit."""
    result = _run(stdin="1,2\n//;\\n3;4\ncount\nquit\n")
    assert result.returncode == 0
    output = result.stdout
    assert "3" in output
    assert "7" in output
    assert "2" in output


def test_cli_help():
    """Test --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()


def test_main_entry_in_process(capsys):
    assert main_entry(["--eval", "//[***]\\n1***2***3"]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_main_entry_debug_logs_listener(capsys):
    assert main_entry(["--eval", "1,2", "--log-level", "DEBUG"]) == 0
    captured = capsys.readouterr()
    assert "add occurred" in captured.err


def test_main_entry_rejects_negative_bound():
    with pytest.raises(SystemExit):
        main_entry(["--eval", "1", "--upper-bound", "-1"])


def test_unescape():
    assert _unescape("//;\\n1;2") == "//;\n1;2"


@pytest.mark.parametrize("bound", ["2", "5000"])
def test_health_check_ignores_upper_bound(bound, capsys):
    assert main_entry(["--health-check", "--upper-bound", bound]) == 0
    assert "[FAIL]" not in capsys.readouterr().out


def test_upper_bound_flag_does_not_change_config():
    from strcalc_pkg import config

    before = config.UPPER_BOUND
    assert main_entry(["--eval", "1", "--upper-bound", "3"]) == 0
    assert config.UPPER_BOUND == before
