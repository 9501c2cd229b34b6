"""Tests for the interactive menu through the CLI."""

from click.testing import CliRunner

from compatflags.cli.cli import cli
from compatflags.core.constants import COMPAT_FLAGS_KEY
from compatflags.core.context import CompatContext
from compatflags.core.time.fake import FakeTime
from tests.test_utils.registry_builders import EXE_PATH, empty_registry, installed_registry


def test_no_subcommand_opens_menu() -> None:
    runner = CliRunner()
    ctx = CompatContext.for_test(registry=empty_registry())

    result = runner.invoke(cli, [], obj=ctx, input="1\n")

    assert result.exit_code == 0, result.output
    assert "Daum게임 스타터 privilege manager" in result.output
    assert "1. Exit" in result.output


def test_menu_apply_then_exit() -> None:
    runner = CliRunner()
    registry = installed_registry()
    ctx = CompatContext.for_test(registry=registry)

    result = runner.invoke(cli, ["menu"], obj=ctx, input="1\n\n2\n")

    assert result.exit_code == 0, result.output
    assert "Run-as-invoker setting applied." in result.output
    assert "1. Remove setting (restore default)" in result.output
    assert registry.values_of(COMPAT_FLAGS_KEY)[EXE_PATH] == "~ RunAsInvoker"


def test_menu_invalid_selection_uses_configured_delay() -> None:
    runner = CliRunner()
    time = FakeTime()
    ctx = CompatContext.for_test(registry=empty_registry(), time=time)

    result = runner.invoke(cli, ["menu"], obj=ctx, input="5\n1\n")

    assert result.exit_code == 0, result.output
    assert "Invalid selection." in result.output
    assert time.sleep_calls == [1.0]
