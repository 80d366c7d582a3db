# skillgraph: Skill Manifest Validator & Dependency Graph Builder
# Copyright (C) 2026 skillgraph Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Configuration loaded from YAML.

Lookup order:
1. An explicit ``--config`` path (errors are fatal)
2. ``.skillgraph.yaml`` in the current directory
3. ``~/.skillgraph/config.yaml``

Implicit files that fail to load are logged and skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from skillgraph.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".skillgraph"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
LOCAL_CONFIG_NAME = ".skillgraph.yaml"

DEFAULT_ENTRY_POINT = "SKILL.md"
DEFAULT_PLATFORM_KEYS = ["claudecode", "opencode", "copilot", "codexcli", "geminicli"]

# Categories a caller may treat as a failing build
FAIL_ON_CHOICES = ("errors", "cycles", "conflicts")


class SkillGraphConfig(BaseModel):
    """Settings for manifest building and linting."""

    model_config = ConfigDict(extra="ignore")

    entry_point: str = DEFAULT_ENTRY_POINT
    platform_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_PLATFORM_KEYS))
    output: Optional[str] = None
    fail_on: list[str] = Field(default_factory=list)
    jobs: int = Field(default=1, ge=1)

    @field_validator("fail_on")
    @classmethod
    def _check_fail_on(cls, value: list[str]) -> list[str]:
        unknown = [c for c in value if c not in FAIL_ON_CHOICES]
        if unknown:
            raise ValueError(
                f"Unknown fail_on categories: {', '.join(unknown)} "
                f"(expected any of {', '.join(FAIL_ON_CHOICES)})"
            )
        return value


def _read_config_file(path: Path) -> SkillGraphConfig:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a YAML mapping")

    try:
        return SkillGraphConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def load_config(path: str | Path | None = None) -> SkillGraphConfig:
    """Load configuration, falling back to defaults when nothing is found.

    Raises:
        ConfigError: only when ``path`` was given explicitly and is unusable.
    """
    if path is not None:
        explicit = Path(path)
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        config = _read_config_file(explicit)
        logger.debug("Loaded config from %s", explicit)
        return config

    for candidate in (Path.cwd() / LOCAL_CONFIG_NAME, CONFIG_FILE):
        if not candidate.exists():
            continue
        try:
            config = _read_config_file(candidate)
        except ConfigError as e:
            logger.warning("Ignoring config: %s", e)
            continue
        logger.debug("Loaded config from %s", candidate)
        return config

    return SkillGraphConfig()
