"""Unit tests for the version command."""

from typer.testing import CliRunner

from pomowise import __version__
from pomowise.main import app

runner = CliRunner()


def test_version_prints_package_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__
