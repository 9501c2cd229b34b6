"""Tests for the status command."""

import json

from click.testing import CliRunner

from compatflags.cli.cli import cli
from compatflags.core.context import CompatContext
from tests.test_utils.registry_builders import EXE_PATH, empty_registry, installed_registry


def test_status_reports_installed_and_flag_state() -> None:
    runner = CliRunner()
    ctx = CompatContext.for_test(registry=installed_registry(compat_data="~ RunAsInvoker"))

    result = runner.invoke(cli, ["status"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Target: Daum게임 스타터" in result.output
    assert "- Installed: ✅ yes" in result.output
    assert f"- Executable: {EXE_PATH}" in result.output
    assert "- Run as invoker: ✅ set" in result.output


def test_status_not_installed() -> None:
    runner = CliRunner()
    ctx = CompatContext.for_test(registry=empty_registry())

    result = runner.invoke(cli, ["status"], obj=ctx)

    assert result.exit_code == 0
    assert "- Installed: ❌ no" in result.output
    assert "Run as invoker" not in result.output


def test_status_json() -> None:
    runner = CliRunner()
    ctx = CompatContext.for_test(registry=installed_registry())

    result = runner.invoke(cli, ["--strategy", "enumerate", "status", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "target_display_name": "Daum게임 스타터",
        "search_strategy": "enumerate",
        "installed": True,
        "executable_path": EXE_PATH,
        "run_as_invoker": False,
    }


def test_status_target_override() -> None:
    runner = CliRunner()
    ctx = CompatContext.for_test(registry=installed_registry())

    result = runner.invoke(cli, ["--target", "7-Zip", "status"], obj=ctx)

    assert result.exit_code == 0
    assert "Target: 7-Zip" in result.output
    assert r"- Executable: C:\Program Files\7-Zip\7zFM.exe" in result.output
