"""Tests for the frontmatter linter."""

from pathlib import Path

import pytest

from skillgraph.models.lint import ContentKind, LintSeverity
from skillgraph.policy.lint_rules import (
    Catalog,
    check_field_order,
    check_kebab_case,
    check_tool_profiles,
    lint_content_root,
    lint_document,
    load_lint_rules,
)

from conftest import FIXTURES


@pytest.fixture
def rules():
    return load_lint_rules()


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(skills={"core", "xunit"}, subagents={"reviewer"})


def _rules_hit(issues) -> list[str]:
    return sorted(i.rule for i in issues)


class TestLintDocument:
    def test_clean_skill(self, rules, catalog):
        text = "---\nname: xunit\ndescription: d\ntargets: ['*']\n---\nSee [skill:core].\n"
        assert lint_document(text, ContentKind.SKILLS, catalog, rules, "f") == []

    def test_missing_frontmatter(self, rules, catalog):
        issues = lint_document("# nothing", ContentKind.SKILLS, catalog, rules, "f")
        assert _rules_hit(issues) == ["frontmatter-missing"]
        assert issues[0].severity == LintSeverity.ERROR

    def test_invalid_yaml(self, rules, catalog):
        issues = lint_document("---\nname: [x\n---\n", ContentKind.SKILLS, catalog, rules, "f")
        assert _rules_hit(issues) == ["frontmatter-invalid"]

    def test_impossible_date_is_invalid(self, rules, catalog):
        text = "---\nname: x\ncreated: 2024-02-30\n---\n"
        issues = lint_document(text, ContentKind.SKILLS, catalog, rules, "f")
        assert _rules_hit(issues) == ["frontmatter-invalid"]

    def test_bad_date_does_not_stop_root_lint(self, tmp_path: Path):
        for name, created in (("bad", "2024-02-30"), ("good", "2024-02-28")):
            skill = tmp_path / "skills" / name
            skill.mkdir(parents=True)
            (skill / "SKILL.md").write_text(
                f"---\nname: {name}\ndescription: d\ntargets: ['*']\ncreated: {created}\n---\n"
            )
        report = lint_content_root(tmp_path)
        assert report.files_checked == 2
        assert [(i.file, i.rule) for i in report.errors] == [("skills/bad/SKILL.md", "frontmatter-invalid")]

    def test_required_fields_per_kind(self, rules, catalog):
        text = "---\nname: x\n---\n"
        skill = lint_document(text, ContentKind.SKILLS, catalog, rules, "f")
        assert {i.message for i in skill} == {
            "Missing required field 'description'",
            "Missing required field 'targets'",
        }
        command = lint_document("---\ndescription: d\n---\n", ContentKind.COMMANDS, catalog, rules, "f")
        assert [i.message for i in command] == ["Missing required field 'targets'"]

    def test_banned_fields(self, rules, catalog):
        text = "---\ndescription: d\ntargets: ['*']\nmodel: big\ntools: [x]\n---\n"
        issues = lint_document(text, ContentKind.COMMANDS, catalog, rules, "f")
        assert _rules_hit(issues) == ["banned-field", "banned-field"]

    def test_invalid_references(self, rules, catalog):
        text = (
            "---\ndescription: d\ntargets: ['*']\n---\n"
            "[skill:core] [skill:ghost] [skill:reviewer] [subagent:reviewer] [subagent:core]\n"
        )
        issues = lint_document(text, ContentKind.COMMANDS, catalog, rules, "f")
        assert [i.message for i in issues] == [
            "Invalid skill/subagent reference 'ghost'",
            "Invalid subagent reference 'core'",
        ]

    def test_tool_profiles_only_checked_for_subagents(self, rules, catalog):
        text = (
            "---\nname: r\ndescription: d\ntargets: ['*']\n"
            "claudecode:\n  allowed-tools: [Read, Fly]\n---\n"
        )
        assert lint_document(text, ContentKind.SKILLS, catalog, rules, "f") == []
        issues = lint_document(text, ContentKind.SUBAGENTS, catalog, rules, "f")
        assert [i.message for i in issues] == ["Invalid tool 'Fly' in claudecode.allowed-tools"]


class TestIndividualChecks:
    def test_field_order_warning(self, rules):
        fm = {"description": "d", "name": "n", "targets": ["*"]}
        issues = check_field_order(fm, ContentKind.SKILLS, rules, "f")
        assert len(issues) == 1
        assert issues[0].severity == LintSeverity.WARNING
        assert issues[0].message.startswith("Field 'description' should come before 'name'")

    def test_field_order_ignores_absent_fields(self, rules):
        fm = {"targets": ["*"], "description": "d", "globs": []}
        assert check_field_order(fm, ContentKind.RULES, rules, "f") == []

    def test_opencode_and_copilot_tools(self, rules):
        fm = {
            "opencode": {"tools": {"bash": True, "webfetch": True}},
            "copilot": {"tools": ["read", "browse"]},
        }
        issues = check_tool_profiles(fm, rules, "f")
        assert [i.message for i in issues] == [
            "Invalid tool 'webfetch' in opencode.tools",
            "Invalid tool 'browse' in copilot.tools",
        ]

    def test_kebab_case(self):
        assert check_kebab_case("dotnet-xunit", "f") is None
        assert check_kebab_case("v2", "f") is None
        issue = check_kebab_case("Dotnet_XUnit", "f")
        assert issue.rule == "kebab-case"
        assert issue.severity == LintSeverity.WARNING


class TestLintContentRoot:
    def test_fixture_root(self):
        report = lint_content_root(FIXTURES / "rulesync")
        assert report.skill_count == 5
        assert report.subagent_count == 1
        assert report.files_checked == 7
        assert not report.passed
        assert sorted((i.file, i.rule) for i in report.errors) == [
            ("skills/broken-header/SKILL.md", "frontmatter-missing"),
            ("subagents/test-reviewer.md", "tool-profile"),
        ]
        assert report.warnings == []

    def test_clean_root_passes(self, tmp_path: Path):
        skill = tmp_path / "skills" / "core"
        skill.mkdir(parents=True)
        (skill / "SKILL.md").write_text("---\nname: core\ndescription: d\ntargets: ['*']\n---\n")
        report = lint_content_root(tmp_path)
        assert report.passed
        assert report.files_checked == 1

    def test_kebab_case_warning_does_not_fail(self, tmp_path: Path):
        skill = tmp_path / "skills" / "Bad_Name"
        skill.mkdir(parents=True)
        (skill / "SKILL.md").write_text("---\nname: x\ndescription: d\ntargets: ['*']\n---\n")
        report = lint_content_root(tmp_path)
        assert report.passed
        assert [i.rule for i in report.warnings] == ["kebab-case"]

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            lint_content_root(tmp_path / "nope")
