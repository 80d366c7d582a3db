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

"""Inline cross-reference scanning (``[skill:name]`` / ``[subagent:name]``)."""

from __future__ import annotations

import re

# Identifiers are lowercase kebab-ish: letters, digits, hyphens
SKILL_REFERENCE_PATTERN = re.compile(r"\[skill:([a-z0-9-]+)\]")

# Lint-time patterns accept anything up to the closing bracket so that
# malformed names can be reported instead of silently ignored
RAW_SKILL_REFERENCE_PATTERN = re.compile(r"\[skill:([^\]]+)\]")
RAW_SUBAGENT_REFERENCE_PATTERN = re.compile(r"\[subagent:([^\]]+)\]")


def _distinct(values: list[str]) -> list[str]:
    """Dedupe case-insensitively, keeping the first spelling and order."""
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        key = value.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(value)
    return out


def scan_skill_references(text: str) -> list[str]:
    """Return distinct skill identifiers referenced in ``text``, in order of first use."""
    return _distinct([m.group(1) for m in SKILL_REFERENCE_PATTERN.finditer(text)])


def scan_raw_skill_references(text: str) -> list[str]:
    """Every ``[skill:...]`` payload, including ones that are not valid identifiers."""
    return [m.group(1) for m in RAW_SKILL_REFERENCE_PATTERN.finditer(text)]


def scan_subagent_references(text: str) -> list[str]:
    """Every ``[subagent:...]`` payload, in document order."""
    return [m.group(1) for m in RAW_SUBAGENT_REFERENCE_PATTERN.finditer(text)]
