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

"""Pydantic models for frontmatter lint results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class LintSeverity(str, Enum):
    """Severity of a lint issue. Only errors fail the run."""

    ERROR = "error"
    WARNING = "warning"


class ContentKind(str, Enum):
    """The content directories a rulesync-style root can hold."""

    SKILLS = "skills"
    SUBAGENTS = "subagents"
    RULES = "rules"
    COMMANDS = "commands"


class LintIssue(BaseModel):
    """A single problem found in one file."""

    file: str
    severity: LintSeverity
    rule: str  # e.g. "required-field", "invalid-reference"
    message: str


class LintReport(BaseModel):
    """All issues found under a content root."""

    root: str = ""
    skill_count: int = 0
    subagent_count: int = 0
    files_checked: int = 0
    issues: list[LintIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == LintSeverity.ERROR]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == LintSeverity.WARNING]

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> bool:
        return not self.errors
