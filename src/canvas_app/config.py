"""
Configuration for the canvas engine.

Settings are read from the ``[engine]`` table of a TOML file. The file is
located through the explicit ``path`` argument or the ``CANVAS_APP_CONFIG``
environment variable; without either, built-in defaults are used.

Example::

    [engine]
    default_tax_rate = 30.0
    default_growth_rate = 15.0
    default_tax_region = "cameroon"
    log_level = "INFO"
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


CONFIG_ENV_VAR = "CANVAS_APP_CONFIG"


class EngineSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_tax_rate: float = Field(30.0, description="Rate applied when the selected tax region is unknown")
    default_growth_rate: float = 15.0
    default_tax_region: str = "cameroon"
    log_level: str = "INFO"


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return EngineSettings()
    with Path(path).open("rb") as handle:
        raw = tomllib.load(handle)
    return EngineSettings(**raw.get("engine", {}))
