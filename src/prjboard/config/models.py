"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, prjboard.toml only contains
overrides. A board runs with no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

# --- prjboard.toml sections ---


class UiConfig(BaseModel):
    """[ui] section."""

    model_config = {"frozen": True}

    host_id: str = "app"
    input_template: str = "project-input"
    list_template: str = "project-list"
    form_id: str = "user-input"
    template_dir: Path | None = None


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    people_min: int = 1
    people_max: int = 9
    alert_message: str = "Invalid input, please try again!"
