"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, docissue.toml only holds
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from pydantic import BaseModel


class TemplatesConfig(BaseModel):
    """[templates] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the directory holding docissue.toml.
    directory: Path | None = None


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    date: dt.date | None = None
