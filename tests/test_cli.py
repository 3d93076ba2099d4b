"""
Tests for Payroll CLI
"""

import io
import json

import pytest

from payroll.cli import PROMPT, main


class TestCLI:
    """Tests for the command line entry point."""

    def test_salary_argument(self, capsys):
        """Test the report is printed for a salary argument."""
        assert main(["20000"]) == 0

        out = capsys.readouterr().out
        assert "Total Contributions        PHP 1400.00" in out
        assert "Net Pay After Deductions   PHP 18600.00" in out

    def test_prompts_when_salary_omitted(self, capsys, monkeypatch):
        """Test salary is read from stdin after the prompt."""
        monkeypatch.setattr("sys.stdin", io.StringIO("35000\n"))

        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith(PROMPT)
        assert "Income Tax                 PHP 2448.40" in out

    def test_json_output(self, capsys):
        assert main(["--json", "25000.50"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total_contributions"] == "1725.01"
        assert data["income_tax"] == "488.50"
        assert data["net_salary"] == "22786.99"

    @pytest.mark.parametrize("salary", ["abc", "-5000"])
    def test_invalid_salary(self, salary, capsys):
        """Test bad input exits with status 1 and an error on stderr."""
        assert main([salary]) == 1

        captured = capsys.readouterr()
        assert "Invalid salary" in captured.err
        assert captured.out == ""

    def test_empty_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main([]) == 1
        assert "no amount given" in capsys.readouterr().err
