"""Tests for skill discovery and loading."""

from pathlib import Path

import pytest

from skillgraph.config import SkillGraphConfig
from skillgraph.scanner.coordinator import discover_skill_dirs
from skillgraph.scanner.loader import detect_platforms, load_skill, load_skills

from conftest import FIXTURES, write_skill


class TestDiscoverSkillDirs:
    def test_lists_subdirectories_sorted(self, skills_root: Path):
        for name in ("zeta", "alpha", "mid"):
            (skills_root / name).mkdir()
        (skills_root / "notes.md").write_text("not a skill")
        dirs = discover_skill_dirs(skills_root)
        assert [d.name for d in dirs] == ["alpha", "mid", "zeta"]

    def test_skips_hidden_and_tooling_dirs(self, skills_root: Path):
        for name in (".git", ".cache", "__pycache__", "real"):
            (skills_root / name).mkdir()
        assert [d.name for d in discover_skill_dirs(skills_root)] == ["real"]

    def test_nonexistent_root_raises(self):
        with pytest.raises(FileNotFoundError):
            discover_skill_dirs(Path("/nonexistent/skills"))

    def test_file_root_raises(self, tmp_path: Path):
        f = tmp_path / "SKILL.md"
        f.write_text("x")
        with pytest.raises(NotADirectoryError):
            discover_skill_dirs(f)


class TestLoadSkill:
    def test_full_entry(self, skills_root: Path):
        write_skill(
            skills_root,
            "xunit",
            {
                "name": "xunit-basics",
                "description": "xUnit tests",
                "version": "2.0.0",
                "tags": ["testing"],
                "depends_on": ["core"],
                "optional": ["mocking"],
                "conflicts_with": ["nunit"],
                "claudecode": {"allowed-tools": ["Read"]},
                "geminicli": {},
            },
            body="Use [skill:core] and [skill:fixtures].\n",
        )
        result = load_skill(skills_root / "xunit")
        assert result.ok
        assert result.error is None
        e = result.entry
        assert e.name == "xunit-basics"
        assert e.description == "xUnit tests"
        assert e.version == "2.0.0"
        assert e.tags == ["testing"]
        assert e.depends_on == ["core"]
        assert e.optional == ["mocking"]
        assert e.conflicts_with == ["nunit"]
        assert e.referenced_skills == ["core", "fixtures"]
        assert e.platforms == ["claudecode", "geminicli"]
        assert e.inferred_dependencies == []
        assert e.file_path.endswith("xunit/SKILL.md")

    def test_defaults_from_folder_name(self, make_skill):
        path = make_skill("bare", {})
        result = load_skill(path.parent)
        assert result.entry.name == "bare"
        assert result.entry.description == ""
        assert result.entry.version == "0.0.1"
        assert result.entry.platforms == ["*"]
        assert result.entry.depends_on == []

    def test_line_count_counts_separators_plus_one(self, skills_root: Path):
        skill_dir = skills_root / "lines"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_text("---\nname: lines\n---\nbody\n")
        assert load_skill(skill_dir).entry.line_count == 5

    def test_missing_entry_point(self, skills_root: Path):
        (skills_root / "empty").mkdir()
        result = load_skill(skills_root / "empty")
        assert not result.ok
        assert result.error.skill == "empty"
        assert result.error.error == "Missing SKILL.md"

    def test_missing_frontmatter_becomes_error(self, make_skill):
        path = make_skill("nohdr", None, body="# No header\n")
        result = load_skill(path.parent)
        assert result.entry is None
        assert result.error.error == "Missing YAML frontmatter"

    def test_malformed_frontmatter_becomes_error(self, skills_root: Path):
        skill_dir = skills_root / "badyaml"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_text("---\nname: [oops\n---\n")
        result = load_skill(skill_dir)
        assert result.entry is None
        assert result.error.skill == "badyaml"
        assert "Invalid YAML frontmatter" in result.error.error

    def test_impossible_date_becomes_error(self, skills_root: Path):
        skill_dir = skills_root / "baddate"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_text("---\nname: baddate\nversion: 2024-13-45\n---\n")
        result = load_skill(skill_dir)
        assert result.entry is None
        assert result.error.skill == "baddate"
        assert "Invalid YAML frontmatter" in result.error.error

    def test_empty_name_is_kept(self, make_skill):
        path = make_skill("folder", {"name": "", "description": ""})
        entry = load_skill(path.parent).entry
        assert entry.name == ""
        assert entry.description == ""

    def test_null_name_falls_back_to_folder(self, make_skill):
        path = make_skill("folder", {"name": None})
        assert load_skill(path.parent).entry.name == "folder"

    def test_undecodable_file_becomes_error(self, skills_root: Path):
        skill_dir = skills_root / "binary"
        skill_dir.mkdir()
        (skill_dir / "SKILL.md").write_bytes(b"---\nname: \xff\xfe\n---\n")
        result = load_skill(skill_dir)
        assert result.entry is None
        assert result.error.skill == "binary"

    def test_custom_entry_point(self, skills_root: Path):
        write_skill(skills_root, "custom", {"name": "custom"}, entry_point="skill.md")
        config = SkillGraphConfig(entry_point="skill.md")
        assert load_skill(skills_root / "custom", config).ok


class TestDetectPlatforms:
    KEYS = ["claudecode", "opencode", "copilot", "codexcli", "geminicli"]

    def test_keeps_known_order(self):
        assert detect_platforms({"copilot": 1, "claudecode": 1}, self.KEYS) == ["claudecode", "copilot"]

    def test_wildcard_when_none(self):
        assert detect_platforms({"name": "x"}, self.KEYS) == ["*"]


class TestLoadSkills:
    def test_fixture_registry(self):
        results = load_skills(FIXTURES / "rulesync" / "skills")
        by_folder = {r.folder: r for r in results}
        assert [r.folder for r in results] == sorted(by_folder)
        assert by_folder["dotnet-xunit"].ok
        assert by_folder["broken-header"].error.error == "Missing YAML frontmatter"
        assert by_folder["missing-entry"].error.error == "Missing SKILL.md"

    def test_parallel_matches_sequential(self, make_skill):
        for i in range(12):
            make_skill(f"skill-{i:02d}", {"depends_on": [f"skill-{(i + 1) % 12:02d}"]})
        make_skill("broken", None, body="nothing")
        root = make_skill("x", {}).parent.parent
        sequential = load_skills(root, jobs=1)
        parallel = load_skills(root, jobs=4)
        assert [r.folder for r in parallel] == [r.folder for r in sequential]
        assert [r.entry for r in parallel] == [r.entry for r in sequential]
        assert [r.error for r in parallel] == [r.error for r in sequential]
