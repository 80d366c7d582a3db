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

"""Circular dependency detection.

Iterative depth-first search over ``depends_on`` edges. Each node moves
through unvisited → in-progress → done, and becomes done only once all of
its edges have been followed. Reaching an in-progress node closes a loop,
which is reported from the repeated node back to itself, e.g.
``["a", "b", "a"]``. A self-dependency reports as ``["a", "a"]``.

Every edge that closes a loop yields one record, so loops sharing a node
(a → b → a and a → c → a) are both reported. Rotations of a loop are not
re-reported because its nodes are already done when a later start reaches
them.

``optional`` edges are never followed, and edges to unknown skills are
ignored.
"""

from __future__ import annotations

import logging
from typing import Iterator

from skillgraph.graph.builder import key_index, skill_key
from skillgraph.models.manifest import SkillEntry

logger = logging.getLogger(__name__)


def _edges(key: str, skills: dict[str, SkillEntry], index: dict[str, str]) -> Iterator[str]:
    entry = skills[index[key]]
    seen: set[str] = set()
    for dep in entry.depends_on:
        dep_key = skill_key(dep)
        if dep_key in index and dep_key not in seen:
            seen.add(dep_key)
            yield dep_key


def _walk(
    start: str,
    skills: dict[str, SkillEntry],
    index: dict[str, str],
    done: set[str],
) -> list[list[str]]:
    """Run one traversal from ``start``. Returns the loops it closes, as keys."""
    path = [start]
    on_path = {start}
    frames = [_edges(start, skills, index)]
    loops: list[list[str]] = []

    while frames:
        dep = next(frames[-1], None)
        if dep is None:
            frames.pop()
            finished = path.pop()
            on_path.discard(finished)
            done.add(finished)
            continue

        if dep in on_path:
            loops.append(path[path.index(dep):] + [dep])
            continue

        if dep in done:
            continue

        path.append(dep)
        on_path.add(dep)
        frames.append(_edges(dep, skills, index))

    return loops


def find_cycles(skills: dict[str, SkillEntry]) -> list[list[str]]:
    """Return every circular dependency found, as lists of skill keys."""
    index = key_index(skills)
    done: set[str] = set()
    cycles: list[list[str]] = []

    for name in skills:
        start = skill_key(name)
        if start in done:
            continue
        for loop in _walk(start, skills, index, done):
            names = [index[k] for k in loop]
            logger.debug("Circular dependency: %s", " -> ".join(names))
            cycles.append(names)

    return cycles
