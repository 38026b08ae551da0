# File: primerpair/tests/test_primers_cli.py
# Version: v0.1.0
"""
CLI: JSON on stdout, [ERROR] + exit 2 on failure.
"""

import io
import json

import pytest

from primerpair.app.cli import primers_cli

ARGS = [
    "--amplicon-min", "30", "--amplicon-max", "60",
    "--primer-min", "18", "--primer-max", "20",
    "--tm-min", "0", "--tm-max", "1000",
    "--tm-method", "Wallace", "--max-results", "3",
    "--log-level", "WARNING",
]


def test_cli_prints_ranked_pairs(seq60, capsys):
    primers_cli.main(["--sequence", seq60.lower(), *ARGS])
    data = json.loads(capsys.readouterr().out)
    assert data["cancelled"] is False
    assert [p["name"] for p in data["pairs"]] == ["Pair 1", "Pair 2", "Pair 3"]


def test_cli_reads_stdin(seq60, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(seq60 + "\n"))
    primers_cli.main(["--sequence", "-", *ARGS])
    data = json.loads(capsys.readouterr().out)
    assert len(data["pairs"]) == 3


def test_cli_error_exit_code(capsys):
    with pytest.raises(SystemExit) as exc:
        primers_cli.main(["--sequence", "ACGT", "--log-level", "WARNING"])
    assert exc.value.code == 2
    assert capsys.readouterr().err.startswith("[ERROR] ")
