"""Pydantic models for JSON command responses."""

from pydantic import BaseModel, ConfigDict


class StatusResponse(BaseModel):
    """Response of ``compatflags status --json``."""

    model_config = ConfigDict(strict=True)

    target_display_name: str
    search_strategy: str
    installed: bool
    executable_path: str | None
    run_as_invoker: bool
