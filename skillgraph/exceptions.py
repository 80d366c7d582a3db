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

"""Exception hierarchy.

Per-skill problems (missing header, bad YAML) are raised as FrontmatterError
subclasses and converted into manifest errors by the loader. ConfigError is
the only one that escapes to the CLI.
"""

from __future__ import annotations


class SkillGraphError(Exception):
    """Base class for all skillgraph errors."""


class FrontmatterError(SkillGraphError):
    """The metadata header of a document could not be read."""


class MissingFrontmatterError(FrontmatterError):
    """The document does not start with a ``---`` delimited header."""

    def __init__(self, message: str = "Missing YAML frontmatter") -> None:
        super().__init__(message)


class MalformedFrontmatterError(FrontmatterError):
    """The header exists but is not a valid YAML mapping."""


class ConfigError(SkillGraphError):
    """A configuration file could not be loaded."""
