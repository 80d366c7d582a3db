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

"""Skill directory discovery.

Every immediate subdirectory of the skills root is one skill. Hidden
directories and common tooling folders are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Folders that can sit next to skills without being skills themselves
DEFAULT_IGNORE_DIRS = {
    "__pycache__",
    "node_modules",
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
}


def _should_ignore(path: Path) -> bool:
    return path.name.startswith(".") or path.name in DEFAULT_IGNORE_DIRS


def discover_skill_dirs(root: Path) -> list[Path]:
    """List skill directories under ``root`` in sorted name order.

    Raises:
        FileNotFoundError: ``root`` does not exist.
        NotADirectoryError: ``root`` is not a directory.
    """
    root = root.resolve()

    if not root.exists():
        raise FileNotFoundError(f"Skills directory does not exist: {root}")

    if not root.is_dir():
        raise NotADirectoryError(f"Skills path is not a directory: {root}")

    dirs = [p for p in sorted(root.iterdir()) if p.is_dir() and not _should_ignore(p)]
    logger.info("Discovered %d skill directories in %s", len(dirs), root)
    return dirs
