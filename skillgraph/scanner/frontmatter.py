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

"""YAML frontmatter extraction for SKILL.md and related documents.

The header must open on the very first line with ``---`` and close at the
next line that is exactly ``---``. Everything between is parsed as YAML.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

from skillgraph.exceptions import MalformedFrontmatterError, MissingFrontmatterError

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(.*?)^---[ \t]*$",
    re.DOTALL | re.MULTILINE,
)


def _normalize(text: str) -> str:
    return text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def frontmatter_block(text: str) -> str:
    """Return the raw header text without parsing it.

    Raises:
        MissingFrontmatterError: if the opening or closing marker is absent.
    """
    match = FRONTMATTER_PATTERN.match(_normalize(text))
    if not match:
        raise MissingFrontmatterError()
    return match.group(1)


def extract_frontmatter(text: str) -> dict[str, Any]:
    """Parse the frontmatter of a document into a property bag.

    Raises:
        MissingFrontmatterError: no ``---`` delimited header at the top.
        MalformedFrontmatterError: the header is not a YAML mapping.
    """
    header = frontmatter_block(text)
    # Constructors raise plain ValueError, e.g. for an impossible date
    try:
        data = yaml.safe_load(header)
    except (yaml.YAMLError, ValueError) as e:
        raise MalformedFrontmatterError(f"Invalid YAML frontmatter: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError(
            f"YAML frontmatter must be a mapping, got {type(data).__name__}"
        )
    return data


def get_string(frontmatter: dict[str, Any], key: str, default: str | None = None) -> str | None:
    """Read a scalar field, stringifying non-string values.

    ``default`` is returned only when the key is absent or null; an empty
    string is kept as is.
    """
    value = frontmatter.get(key)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def get_string_list(frontmatter: dict[str, Any], key: str) -> list[str]:
    """Read a list field. Non-list values yield an empty list; blank items are dropped."""
    value = frontmatter.get(key)
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if item is None:
            continue
        text = item if isinstance(item, str) else str(item)
        if text.strip():
            items.append(text)
    return items
