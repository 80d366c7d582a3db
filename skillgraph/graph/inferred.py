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

"""Dependencies implied by ``[skill:x]`` references but not declared."""

from __future__ import annotations

from skillgraph.graph.builder import skill_key
from skillgraph.models.manifest import SkillEntry


def infer_dependencies(entry: SkillEntry) -> list[str]:
    """Referenced skills minus the skill itself minus declared dependencies."""
    excluded = {skill_key(entry.name)} | {skill_key(d) for d in entry.depends_on}
    inferred: list[str] = []
    for ref in entry.referenced_skills:
        key = skill_key(ref)
        if key in excluded:
            continue
        excluded.add(key)
        inferred.append(ref)
    return inferred


def resolve_inferred_dependencies(skills: dict[str, SkillEntry]) -> dict[str, SkillEntry]:
    """Return a copy of the map with ``inferred_dependencies`` filled in."""
    return {
        name: entry.model_copy(update={"inferred_dependencies": infer_dependencies(entry)})
        for name, entry in skills.items()
    }
