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

"""Pydantic models for the skill manifest (skill-manifest.json).

Attributes are snake_case in Python and camelCase on the wire; dump with
``model_dump(by_alias=True)`` to get the serialized form.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MANIFEST_SCHEMA_VERSION = "1.0.0"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillEntry(_WireModel):
    """A successfully loaded skill."""

    name: str
    description: str = ""
    version: str = "0.0.1"
    tags: list[str] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)
    optional: list[str] = Field(default_factory=list)
    conflicts_with: list[str] = Field(default_factory=list)
    inferred_dependencies: list[str] = Field(default_factory=list)
    referenced_skills: list[str] = Field(default_factory=list)
    file_path: str = ""
    line_count: int = Field(default=0, ge=0)
    platforms: list[str] = Field(default_factory=lambda: ["*"])


class ManifestStats(_WireModel):
    """Aggregate counters over the finished manifest."""

    total_skills: int = 0
    with_dependencies: int = 0
    with_conflicts: int = 0
    errors: int = 0
    circular_dependencies: int = 0
    version_conflicts: int = 0


class ManifestError(_WireModel):
    """A skill folder that could not be loaded."""

    skill: str
    error: str


class ConflictType(str, Enum):
    """Kinds of conflict declaration problems."""

    MISSING_CONFLICT_TARGET = "missing_conflict_target"
    ASYMMETRIC_CONFLICT = "asymmetric_conflict"


class ConflictIssue(_WireModel):
    """An invalid or one-directional ``conflicts_with`` declaration."""

    skill: str
    type: ConflictType
    conflicts: list[str] = Field(default_factory=list)
    message: Optional[str] = None


class SkillManifest(_WireModel):
    """The complete manifest for a skills directory."""

    version: str = MANIFEST_SCHEMA_VERSION
    generated_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    skills: dict[str, SkillEntry] = Field(default_factory=dict)
    stats: ManifestStats = Field(default_factory=ManifestStats)
    errors: list[ManifestError] = Field(default_factory=list)
    circular_dependencies: list[list[str]] = Field(default_factory=list)
    version_conflicts: list[ConflictIssue] = Field(default_factory=list)
