"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from typing import Any

from compatflags.cli.output import machine_output


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    Routes JSON through machine_output() to ensure correct stream
    separation (data on stdout, human messages on stderr).

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2, ensure_ascii=False))
