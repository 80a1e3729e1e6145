"""Smoke tests: imports work, CLI -h works."""

from click.testing import CliRunner

from soap.__main__ import main


def test_import():
    import soap

    assert soap.render_pyramid is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["-h"])
    assert result.exit_code == 0
    assert "Usage: soap" in result.output
