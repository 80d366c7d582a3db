"""Shared helpers for building skill trees on disk."""

from pathlib import Path
from typing import Any, Callable, Optional

import pytest
import yaml

from skillgraph.models.manifest import SkillEntry

FIXTURES = Path(__file__).parent / "fixtures"


def write_skill(
    root: Path,
    folder: str,
    frontmatter: Optional[dict[str, Any]] = None,
    body: str = "",
    entry_point: str = "SKILL.md",
) -> Path:
    """Create ``root/folder/SKILL.md``. ``frontmatter=None`` writes no header."""
    skill_dir = root / folder
    skill_dir.mkdir(parents=True, exist_ok=True)
    if frontmatter is None:
        text = body
    else:
        header = yaml.safe_dump(frontmatter, sort_keys=False) if frontmatter else ""
        text = f"---\n{header}---\n{body}"
    path = skill_dir / entry_point
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def make_skill(skills_root: Path) -> Callable[..., Path]:
    def _make(folder: str, frontmatter: Optional[dict[str, Any]] = None, body: str = "") -> Path:
        return write_skill(skills_root, folder, frontmatter, body)

    return _make


def entry(name: str, **fields: Any) -> SkillEntry:
    """In-memory SkillEntry for graph tests."""
    return SkillEntry(name=name, **fields)


def skill_map(*entries: SkillEntry) -> dict[str, SkillEntry]:
    return {e.name: e for e in entries}
