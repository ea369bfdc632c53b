"""
Tests for the command line entry point.
"""

import pytest

from serverconf.__main__ import main


def test_summary(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the summary lists the address, root and middleware."""
    path = write_config(
        "localhost:8080\n"
        "gzip\n"
        "ext .html\n"
        "root /srv/site\n"
    )

    assert main([str(path), "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "Server localhost:8080" in out
    assert "Root: /srv/site" in out
    assert "gzip: 1 occurrence(s), 1 token(s)" in out
    assert "ext: 1 occurrence(s), 2 token(s)" in out


def test_tokens_listing(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    """--tokens prints every collected token with its line."""
    path = write_config("localhost:80 {\n    log access.log\n}\n")

    assert main([str(path), "--tokens", "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "   2  access.log" in out


def test_warnings_are_reported(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    """Validation warnings are printed after the summary."""
    path = write_config("localhost:80\n")

    assert main([str(path), "-q"]) == 0

    out = capsys.readouterr().out
    assert "Middleware: (none)" in out
    assert "Configuration warnings (1):" in out


def test_parse_error_exit_code(write_config, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a parse error exits with status 1."""
    path = write_config("localhost:80 {\n    bogus\n}\n")

    assert main([str(path), "-q"]) == 1
    assert "Unexpected token 'bogus'" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a missing file is reported as a configuration error."""
    assert main([str(tmp_path / "nope.conf"), "-q"]) == 1
    assert "not found" in capsys.readouterr().err
