"""Unit tests for SuggestingGroup."""

import typer
from typer.testing import CliRunner

from pomowise.utils.typer_helpers import SuggestingGroup

runner = CliRunner()

demo = typer.Typer(cls=SuggestingGroup)


@demo.command()
def themes():
    pass


@demo.command()
def fonts():
    pass


class TestSuggestingGroup:
    def test_known_command(self):
        assert runner.invoke(demo, ["themes"]).exit_code == 0

    def test_typo_suggests(self):
        result = runner.invoke(demo, ["themse"])
        assert result.exit_code == 2
        assert "themes" in result.output

    def test_no_close_match(self):
        result = runner.invoke(demo, ["xyz"])
        assert result.exit_code == 2
        assert "Did you mean" not in result.output
