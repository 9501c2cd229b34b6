"""Tests for subprocess wrapper with rich error context."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from compatflags.core.subprocess import format_command, run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("compatflags.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "success output"
        mock_result.stderr = ""
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["reg", "query", "HKCU\\Software"],
            operation_context="query software key",
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["reg", "query", "HKCU\\Software"],
            cwd=None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_extra_kwargs_are_forwarded() -> None:
    with patch("compatflags.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess, returncode=0)

        run_subprocess_with_context(
            "reg query HKCU", operation_context="query", shell=True, errors="replace"
        )

        assert mock_run.call_args.kwargs["shell"] is True
        assert mock_run.call_args.kwargs["errors"] == "replace"


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    error = subprocess.CalledProcessError(
        returncode=1,
        cmd="reg delete HKCU\\Layers /v x /f",
        stderr="ERROR: The system was unable to find the specified registry key or value.",
    )
    with patch("compatflags.core.subprocess.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(
                "reg delete HKCU\\Layers /v x /f",
                operation_context="delete value 'x'",
            )

    message = str(exc_info.value)
    assert "Failed to delete value 'x'" in message
    assert "Command: reg delete HKCU\\Layers /v x /f" in message
    assert "Exit code: 1" in message
    assert "stderr: ERROR: The system was unable to find" in message


def test_failure_with_stdout_only_includes_stdout() -> None:
    error = subprocess.CalledProcessError(returncode=5, cmd=["reg"], output="partial output\n")
    with patch("compatflags.core.subprocess.subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["reg"], operation_context="run reg")

    message = str(exc_info.value)
    assert "Exit code: 5" in message
    assert "stdout: partial output" in message
    assert "stderr" not in message


def test_missing_binary_raises_runtime_error() -> None:
    with patch("compatflags.core.subprocess.subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(RuntimeError, match="Command not found while trying to query: reg"):
            run_subprocess_with_context(["reg", "query"], operation_context="query")


def test_format_command_accepts_strings_and_lists() -> None:
    assert format_command("reg query HKCU") == "reg query HKCU"
    assert format_command(["reg", "query", "HKCU"]) == "reg query HKCU"
