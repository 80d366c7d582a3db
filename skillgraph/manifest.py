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

"""Manifest assembly.

Pipeline: load skills → build skill map → infer dependencies → detect cycles
→ check conflicts → count. Each phase returns a new value consumed by the
next; only the final SkillManifest is handed back to callers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillgraph.config import SkillGraphConfig
from skillgraph.graph.builder import build_skill_map
from skillgraph.graph.conflicts import analyze_conflicts
from skillgraph.graph.cycles import find_cycles
from skillgraph.graph.inferred import resolve_inferred_dependencies
from skillgraph.models.manifest import (
    ConflictIssue,
    ManifestError,
    ManifestStats,
    SkillEntry,
    SkillManifest,
)
from skillgraph.scanner.loader import load_skills

logger = logging.getLogger(__name__)


def compute_stats(
    skills: dict[str, SkillEntry],
    errors: list[ManifestError],
    cycles: list[list[str]],
    conflicts: list[ConflictIssue],
) -> ManifestStats:
    """Summary counters for a finished manifest."""
    return ManifestStats(
        total_skills=len(skills),
        with_dependencies=sum(1 for s in skills.values() if s.depends_on),
        with_conflicts=sum(1 for s in skills.values() if s.conflicts_with),
        errors=len(errors),
        circular_dependencies=len(cycles),
        version_conflicts=len(conflicts),
    )


def build_manifest(
    root: Path,
    config: SkillGraphConfig | None = None,
    jobs: int | None = None,
) -> SkillManifest:
    """Build the manifest for the skills directory at ``root``.

    Per-skill failures end up in ``errors``; structural findings end up in
    ``circular_dependencies`` and ``version_conflicts``. Neither aborts the
    build.

    Raises:
        FileNotFoundError / NotADirectoryError: ``root`` is unusable.
    """
    config = config or SkillGraphConfig()
    results = load_skills(Path(root), config, jobs=jobs or config.jobs)

    errors = [r.error for r in results if r.error is not None]
    skills = resolve_inferred_dependencies(build_skill_map(results))
    cycles = find_cycles(skills)
    conflicts = analyze_conflicts(skills)
    stats = compute_stats(skills, errors, cycles, conflicts)

    logger.info(
        "Manifest: %d skills, %d errors, %d cycles, %d conflict issues",
        stats.total_skills,
        stats.errors,
        stats.circular_dependencies,
        stats.version_conflicts,
    )

    return SkillManifest(
        skills=skills,
        stats=stats,
        errors=errors,
        circular_dependencies=cycles,
        version_conflicts=conflicts,
    )


def failing_categories(manifest: SkillManifest, fail_on: list[str]) -> list[str]:
    """Return which of the requested categories are non-empty in ``manifest``."""
    present = {
        "errors": bool(manifest.errors),
        "cycles": bool(manifest.circular_dependencies),
        "conflicts": bool(manifest.version_conflicts),
    }
    return [c for c in fail_on if present.get(c)]
