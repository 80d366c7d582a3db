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

"""Conflict declaration checks.

Two problems are reported:
- a ``conflicts_with`` target that is not a loaded skill
- a conflict declared by one side only

Conflicts are not compared against dependencies; depending on and
conflicting with the same skill is allowed.
"""

from __future__ import annotations

import logging

from skillgraph.graph.builder import key_index, resolve, skill_key
from skillgraph.models.manifest import ConflictIssue, ConflictType, SkillEntry

logger = logging.getLogger(__name__)


def analyze_conflicts(skills: dict[str, SkillEntry]) -> list[ConflictIssue]:
    """Validate every ``conflicts_with`` declaration in the skill map."""
    index = key_index(skills)
    issues: list[ConflictIssue] = []

    for name, entry in skills.items():
        for target in entry.conflicts_with:
            other = resolve(skills, target, index)
            if other is None:
                issues.append(
                    ConflictIssue(
                        skill=name,
                        type=ConflictType.MISSING_CONFLICT_TARGET,
                        conflicts=[target],
                        message=f"{name} conflicts with unknown skill {target}",
                    )
                )
                continue

            reverse = {skill_key(c) for c in other.conflicts_with}
            if skill_key(name) not in reverse:
                issues.append(
                    ConflictIssue(
                        skill=name,
                        type=ConflictType.ASYMMETRIC_CONFLICT,
                        conflicts=[target],
                        message=f"{name} conflicts with {target} but not vice versa",
                    )
                )

    if issues:
        logger.debug("Found %d conflict issue(s)", len(issues))
    return issues
