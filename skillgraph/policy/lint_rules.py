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

"""Frontmatter lint rules for skills, subagents, rules and commands.

Rule tables (required fields, recommended order, tool allow-lists) live in
``rules/lint_rules.yaml``. Checks, per file:

- header present and valid YAML
- required fields present, banned top-level fields absent
- recommended field order (warning)
- per-platform tool profiles (subagents only)
- ``[skill:x]`` / ``[subagent:x]`` references resolve
- kebab-case names for skills and subagents (warning)
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from skillgraph.config import SkillGraphConfig
from skillgraph.exceptions import MalformedFrontmatterError, MissingFrontmatterError
from skillgraph.models.lint import ContentKind, LintIssue, LintReport, LintSeverity
from skillgraph.scanner.coordinator import discover_skill_dirs
from skillgraph.scanner.frontmatter import extract_frontmatter
from skillgraph.scanner.references import scan_raw_skill_references, scan_subagent_references

logger = logging.getLogger(__name__)

KEBAB_CASE_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

DEFAULT_RULES_PATH = Path(__file__).parent.parent / "rules" / "lint_rules.yaml"


class LintRules(BaseModel):
    """Rule tables, keyed by content kind (``skills``, ``subagents``, ...)."""

    required_fields: dict[str, list[str]] = Field(default_factory=dict)
    field_order: dict[str, list[str]] = Field(default_factory=dict)
    banned_top_level_fields: list[str] = Field(default_factory=list)
    valid_tools: dict[str, list[str]] = Field(default_factory=dict)


class Catalog(BaseModel):
    """Names that cross-references may point at."""

    skills: set[str] = Field(default_factory=set)
    subagents: set[str] = Field(default_factory=set)

    @property
    def all_refs(self) -> set[str]:
        return self.skills | self.subagents


def load_lint_rules(rules_path: str | Path | None = None) -> LintRules:
    """Load lint rule tables from YAML (the bundled file by default)."""
    path = Path(rules_path) if rules_path else DEFAULT_RULES_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return LintRules(**data)


def build_catalog(root: Path) -> Catalog:
    """Collect skill folder names and subagent file stems under ``root``."""
    skills_dir = root / ContentKind.SKILLS.value
    subagents_dir = root / ContentKind.SUBAGENTS.value

    skills: set[str] = set()
    if skills_dir.is_dir():
        skills = {d.name for d in discover_skill_dirs(skills_dir)}

    subagents: set[str] = set()
    if subagents_dir.is_dir():
        subagents = {p.stem for p in subagents_dir.glob("*.md") if p.is_file()}

    return Catalog(skills=skills, subagents=subagents)


def _issue(file: str, severity: LintSeverity, rule: str, message: str) -> LintIssue:
    return LintIssue(file=file, severity=severity, rule=rule, message=message)


def check_required_fields(
    frontmatter: dict[str, Any], kind: ContentKind, rules: LintRules, file: str
) -> list[LintIssue]:
    return [
        _issue(file, LintSeverity.ERROR, "required-field", f"Missing required field '{field}'")
        for field in rules.required_fields.get(kind.value, [])
        if field not in frontmatter
    ]


def check_banned_fields(
    frontmatter: dict[str, Any], rules: LintRules, file: str
) -> list[LintIssue]:
    return [
        _issue(file, LintSeverity.ERROR, "banned-field", f"Banned field '{field}' at top level")
        for field in rules.banned_top_level_fields
        if field in frontmatter
    ]


def check_field_order(
    frontmatter: dict[str, Any], kind: ContentKind, rules: LintRules, file: str
) -> list[LintIssue]:
    """Warn when a recommended field appears after the field meant to follow it."""
    expected = rules.field_order.get(kind.value)
    if not expected:
        return []

    actual = [str(k) for k in frontmatter if not str(k).startswith("_")]
    position = {key: i for i, key in enumerate(actual)}
    issues = []
    for current, following in zip(expected, expected[1:]):
        current_idx = position.get(current, -1)
        following_idx = position.get(following, -1)
        if following_idx != -1 and current_idx > following_idx:
            issues.append(
                _issue(
                    file,
                    LintSeverity.WARNING,
                    "field-order",
                    f"Field '{following}' should come before '{current}' "
                    f"(recommended order: {', '.join(expected)})",
                )
            )
    return issues


def check_tool_profiles(
    frontmatter: dict[str, Any], rules: LintRules, file: str
) -> list[LintIssue]:
    """Validate tool names in claudecode/opencode/copilot profiles."""
    issues = []

    def invalid(platform: str, field: str, tools: list[Any]) -> None:
        allowed = rules.valid_tools.get(platform, [])
        for tool in tools:
            if str(tool) not in allowed:
                issues.append(
                    _issue(
                        file,
                        LintSeverity.ERROR,
                        "tool-profile",
                        f"Invalid tool '{tool}' in {platform}.{field}",
                    )
                )

    claudecode = frontmatter.get("claudecode")
    if isinstance(claudecode, dict) and isinstance(claudecode.get("allowed-tools"), list):
        invalid("claudecode", "allowed-tools", claudecode["allowed-tools"])

    opencode = frontmatter.get("opencode")
    if isinstance(opencode, dict) and isinstance(opencode.get("tools"), dict):
        invalid("opencode", "tools", list(opencode["tools"].keys()))

    copilot = frontmatter.get("copilot")
    if isinstance(copilot, dict) and isinstance(copilot.get("tools"), list):
        invalid("copilot", "tools", copilot["tools"])

    return issues


def check_references(content: str, catalog: Catalog, file: str) -> list[LintIssue]:
    issues = []
    valid_refs = catalog.all_refs
    for ref in scan_raw_skill_references(content):
        if ref not in valid_refs:
            issues.append(
                _issue(
                    file,
                    LintSeverity.ERROR,
                    "invalid-reference",
                    f"Invalid skill/subagent reference '{ref}'",
                )
            )
    for ref in scan_subagent_references(content):
        if ref not in catalog.subagents:
            issues.append(
                _issue(
                    file,
                    LintSeverity.ERROR,
                    "invalid-reference",
                    f"Invalid subagent reference '{ref}'",
                )
            )
    return issues


def check_kebab_case(name: str, file: str) -> Optional[LintIssue]:
    if KEBAB_CASE_PATTERN.match(name):
        return None
    return _issue(file, LintSeverity.WARNING, "kebab-case", f"Name '{name}' should be kebab-case")


def lint_document(
    content: str,
    kind: ContentKind,
    catalog: Catalog,
    rules: LintRules,
    file: str,
) -> list[LintIssue]:
    """Run every frontmatter check against one document's text."""
    try:
        frontmatter = extract_frontmatter(content)
    except MissingFrontmatterError:
        return [_issue(file, LintSeverity.ERROR, "frontmatter-missing", "Missing or invalid YAML frontmatter")]
    except MalformedFrontmatterError as e:
        return [_issue(file, LintSeverity.ERROR, "frontmatter-invalid", f"YAML parsing error: {e}")]

    issues: list[LintIssue] = []
    issues.extend(check_required_fields(frontmatter, kind, rules, file))
    issues.extend(check_banned_fields(frontmatter, rules, file))
    issues.extend(check_field_order(frontmatter, kind, rules, file))
    if kind == ContentKind.SUBAGENTS:
        issues.extend(check_tool_profiles(frontmatter, rules, file))
    issues.extend(check_references(content, catalog, file))
    return issues


def _documents(root: Path, kind: ContentKind, entry_point: str) -> list[Path]:
    directory = root / kind.value
    if not directory.is_dir():
        return []
    pattern = entry_point if kind == ContentKind.SKILLS else "*.md"
    return sorted(p for p in directory.rglob(pattern) if p.is_file())


def lint_content_root(
    root: Path,
    config: SkillGraphConfig | None = None,
    rules: LintRules | None = None,
) -> LintReport:
    """Lint every skill, subagent, rule and command document under ``root``.

    Raises:
        FileNotFoundError / NotADirectoryError: ``root`` is unusable.
    """
    config = config or SkillGraphConfig()
    rules = rules or load_lint_rules()
    root = root.resolve()

    if not root.exists():
        raise FileNotFoundError(f"Content root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Content root is not a directory: {root}")

    catalog = build_catalog(root)
    logger.info(
        "Found %d skills and %d subagents in catalog",
        len(catalog.skills),
        len(catalog.subagents),
    )

    report = LintReport(
        root=str(root),
        skill_count=len(catalog.skills),
        subagent_count=len(catalog.subagents),
    )

    for kind in ContentKind:
        for path in _documents(root, kind, config.entry_point):
            display = path.relative_to(root).as_posix()
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                report.issues.append(
                    _issue(display, LintSeverity.ERROR, "unreadable", f"Could not read file: {e}")
                )
                continue

            report.files_checked += 1
            report.issues.extend(lint_document(content, kind, catalog, rules, display))

            if kind == ContentKind.SKILLS:
                name = path.parent.name
            elif kind == ContentKind.SUBAGENTS:
                name = path.stem
            else:
                continue
            kebab = check_kebab_case(name, display)
            if kebab is not None:
                report.issues.append(kebab)

    logger.info(
        "Lint finished: %d file(s), %d error(s), %d warning(s)",
        report.files_checked,
        len(report.errors),
        len(report.warnings),
    )
    return report
