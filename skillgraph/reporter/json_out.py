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

"""JSON serialization for skill manifests and lint reports.

Models are dumped in their wire form (camelCase aliases, ISO strings,
enum values). Output is byte-stable for a given input: keys sorted,
2-space indent, LF line endings and a trailing newline.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel

from skillgraph.models.lint import LintReport
from skillgraph.models.manifest import SkillManifest

logger = logging.getLogger(__name__)


def to_wire(data: Union[BaseModel, dict[str, Any]]) -> dict[str, Any]:
    """Plain-JSON form of a model. Dicts pass through unchanged."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    return data


def to_canonical_json(data: Union[BaseModel, dict[str, Any]]) -> str:
    text = json.dumps(to_wire(data), sort_keys=True, indent=2, ensure_ascii=False)
    return text.replace("\r\n", "\n").replace("\r", "\n").rstrip("\n") + "\n"


def _write(content: str, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8", newline="\n")


def write_manifest(manifest: SkillManifest, output_path: Path) -> None:
    """Write ``skill-manifest.json``, creating parent directories as needed."""
    _write(to_canonical_json(manifest), output_path)
    logger.info(
        "Wrote manifest with %d skills to %s", manifest.stats.total_skills, output_path
    )


def write_lint_report(report: LintReport, output_path: Path) -> None:
    _write(to_canonical_json(report), output_path)
    logger.info("Wrote lint report (%d issues) to %s", len(report.issues), output_path)
