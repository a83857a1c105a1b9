"""
Unit tests for the organisationsnummer command line.
"""

import json

import pytest

from organisationsnummer.cli import build_parser, main


class TestCli:
    """Tests for the command line entry point."""

    def test_valid_number(self, capsys):
        assert main(["556016-0680"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == (
            "The company with organization number 556016-0680 is a Aktiebolag "
            "and the vat number is SE556016068001"
        )

    def test_invalid_number(self, capsys):
        assert main(["556016-0681"]) == 1
        assert "invalid organization number provided" in capsys.readouterr().out

    def test_mixed_numbers_exit_non_zero(self, capsys):
        assert main(["5561034249", "556016-0681"]) == 1
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert "556103-4249" in lines[0]

    def test_json_output(self, capsys):
        assert main(["--json", "121212121212"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result == {
            "input": "121212121212",
            "valid": True,
            "long_format": "121212-1212",
            "short_format": "1212121212",
            "type": "Enskild firma",
            "vat_number": "SE121212121201",
            "is_personnummer": True,
        }

    def test_json_output_invalid(self, capsys):
        assert main(["--json", "abc"]) == 1
        assert json.loads(capsys.readouterr().out) == {"input": "abc", "valid": False}

    def test_log_level_option(self):
        args = build_parser().parse_args(["--log-level", "debug", "5561034249"])
        assert args.log_level == "DEBUG"
        assert args.numbers == ["5561034249"]

    def test_unknown_log_level_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", "5561034249"])
        assert exc_info.value.code == 2
        assert "Unknown log level: loud" in capsys.readouterr().err
