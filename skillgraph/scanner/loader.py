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

"""Skill loader: turns one skill directory into a SkillEntry or an error.

A missing SKILL.md or an unreadable header never stops the build. The
failure is returned as a ManifestError and the remaining skills load as
usual.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from skillgraph.config import SkillGraphConfig
from skillgraph.exceptions import SkillGraphError
from skillgraph.models.manifest import ManifestError, SkillEntry
from skillgraph.scanner.coordinator import discover_skill_dirs
from skillgraph.scanner.frontmatter import extract_frontmatter, get_string, get_string_list
from skillgraph.scanner.references import scan_skill_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one skill folder. Exactly one of entry/error is set."""

    folder: str
    entry: Optional[SkillEntry] = None
    error: Optional[ManifestError] = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


def detect_platforms(frontmatter: dict[str, Any], platform_keys: list[str]) -> list[str]:
    """Return the platform keys present in the frontmatter, or ``["*"]``."""
    platforms = [key for key in platform_keys if key in frontmatter]
    return platforms or ["*"]


def _display_path(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def build_skill_entry(
    folder: str,
    skill_file: Path,
    content: str,
    platform_keys: list[str],
) -> SkillEntry:
    """Build a SkillEntry from the raw text of a SKILL.md.

    Raises:
        FrontmatterError: the header is missing or malformed.
    """
    frontmatter = extract_frontmatter(content)
    referenced = scan_skill_references(content)

    return SkillEntry(
        name=get_string(frontmatter, "name", folder),
        description=get_string(frontmatter, "description", ""),
        version=get_string(frontmatter, "version", "0.0.1"),
        tags=get_string_list(frontmatter, "tags"),
        depends_on=get_string_list(frontmatter, "depends_on"),
        optional=get_string_list(frontmatter, "optional"),
        conflicts_with=get_string_list(frontmatter, "conflicts_with"),
        referenced_skills=referenced,
        file_path=_display_path(skill_file),
        line_count=content.count("\n") + 1,
        platforms=detect_platforms(frontmatter, platform_keys),
    )


def load_skill(skill_dir: Path, config: SkillGraphConfig | None = None) -> LoadResult:
    """Load a single skill directory."""
    config = config or SkillGraphConfig()
    folder = skill_dir.name
    skill_file = skill_dir / config.entry_point

    if not skill_file.is_file():
        logger.warning("Skipping %s: missing %s", folder, config.entry_point)
        return LoadResult(
            folder=folder,
            error=ManifestError(skill=folder, error=f"Missing {config.entry_point}"),
        )

    try:
        content = skill_file.read_text(encoding="utf-8")
        entry = build_skill_entry(folder, skill_file, content, config.platform_keys)
    except (SkillGraphError, OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping %s: %s", folder, e)
        return LoadResult(folder=folder, error=ManifestError(skill=folder, error=str(e)))

    logger.debug(
        "Loaded %s (deps=%d, conflicts=%d, refs=%d)",
        folder,
        len(entry.depends_on),
        len(entry.conflicts_with),
        len(entry.referenced_skills),
    )
    return LoadResult(folder=folder, entry=entry)


def load_skills(
    root: Path,
    config: SkillGraphConfig | None = None,
    jobs: int = 1,
) -> list[LoadResult]:
    """Load every skill under ``root``, in directory order.

    With ``jobs > 1`` folders are read on a thread pool. Results are
    gathered before returning, so callers always see the complete set.

    Raises:
        FileNotFoundError / NotADirectoryError: for a bad root.
    """
    config = config or SkillGraphConfig()
    skill_dirs = discover_skill_dirs(root)

    if jobs <= 1 or len(skill_dirs) <= 1:
        results = [load_skill(d, config) for d in skill_dirs]
    else:
        workers = min(jobs, len(skill_dirs))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order
            results = list(executor.map(lambda d: load_skill(d, config), skill_dirs))

    failed = sum(1 for r in results if not r.ok)
    logger.info("Loaded %d skills (%d failed)", len(results) - failed, failed)
    return results
