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

"""Skill map construction.

The dependency graph is implicit: each entry's ``depends_on`` list names its
outgoing edges. Keys are folder names compared case-insensitively.
Dependency targets are not validated here.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from skillgraph.models.manifest import SkillEntry
from skillgraph.scanner.loader import LoadResult

logger = logging.getLogger(__name__)


def skill_key(name: str) -> str:
    """Normalized lookup key for a skill name."""
    return name.casefold()


def key_index(skills: dict[str, SkillEntry]) -> dict[str, str]:
    """Map normalized key → stored key."""
    return {skill_key(name): name for name in skills}


def build_skill_map(results: Iterable[LoadResult]) -> dict[str, SkillEntry]:
    """Collect loaded entries keyed by folder name.

    A folder whose name matches an earlier one case-insensitively replaces
    it; the earlier entry is dropped with a warning.
    """
    skills: dict[str, SkillEntry] = {}
    index: dict[str, str] = {}

    for result in results:
        if result.entry is None:
            continue
        key = skill_key(result.folder)
        previous = index.get(key)
        if previous is not None:
            logger.warning(
                "Duplicate skill name %r replaces %r (case-insensitive match)",
                result.folder,
                previous,
            )
            del skills[previous]
        skills[result.folder] = result.entry
        index[key] = result.folder

    return skills


def resolve(
    skills: dict[str, SkillEntry],
    name: str,
    index: Optional[dict[str, str]] = None,
) -> Optional[SkillEntry]:
    """Case-insensitive lookup. Returns None for unknown names.

    Pass a prebuilt ``key_index`` when resolving many names against one map.
    """
    if index is None:
        index = key_index(skills)
    stored = index.get(skill_key(name))
    return skills[stored] if stored is not None else None
