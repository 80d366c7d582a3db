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

"""Rich terminal output for manifests and lint results."""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from skillgraph.models.lint import LintReport, LintSeverity
from skillgraph.models.manifest import ConflictType, SkillManifest


def _make_console() -> Console:
    """Console with soft wrap. No fixed width; uses live terminal size."""
    return Console(soft_wrap=True)


console = _make_console()

ICON_PASS = "[bold green][OK][/bold green]"
ICON_WARN = "[bold yellow][WARN][/bold yellow]"
ICON_DANGER = "[bold red][ALERT][/bold red]"
ICON_INFO = "[bold blue][INFO][/bold blue]"

UNICODE_OK = "utf" in (sys.stdout.encoding or "").lower()
ARROW = "→" if UNICODE_OK else "->"


def _safe_print(*args: Any, **kwargs: Any) -> None:
    kwargs.setdefault("crop", False)
    kwargs.setdefault("overflow", "fold")
    console.print(*args, **kwargs)


def _panel(body: str, title: str, border: str) -> Panel:
    return Panel(
        body,
        border_style=border,
        title=f"[bold {border}]{title}[/bold {border}]",
        title_align="left",
        expand=True,
        safe_box=True,
    )


def print_error(message: str) -> None:
    _safe_print(f"[red]Error: {escape(message)}[/red]")


def print_stats(manifest: SkillManifest) -> None:
    """Print the counters table."""
    stats = manifest.stats
    table = Table(title="Skill Manifest", title_justify="left", show_header=True)
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_row("Skills", str(stats.total_skills))
    table.add_row("With dependencies", str(stats.with_dependencies))
    table.add_row("With conflicts", str(stats.with_conflicts))
    table.add_row("Load errors", str(stats.errors))
    table.add_row("Circular dependencies", str(stats.circular_dependencies))
    table.add_row("Conflict issues", str(stats.version_conflicts))
    _safe_print(table)


def print_load_errors(manifest: SkillManifest) -> None:
    if not manifest.errors:
        return
    lines = [f"  {ICON_WARN}  {escape(e.skill)}: {escape(e.error)}" for e in manifest.errors]
    lines.append("")
    lines.append("  [dim]These folders were skipped. All other skills are in the manifest.[/dim]")
    _safe_print(_panel("\n".join(lines), "Load Errors", "yellow"))


def print_cycles(manifest: SkillManifest) -> None:
    if not manifest.circular_dependencies:
        return
    lines = [
        f"  {ICON_DANGER}  {escape(f' {ARROW} '.join(cycle))}"
        for cycle in manifest.circular_dependencies
    ]
    _safe_print(_panel("\n".join(lines), "Circular Dependencies", "red"))


def print_conflicts(manifest: SkillManifest) -> None:
    if not manifest.version_conflicts:
        return
    lines = []
    for issue in manifest.version_conflicts:
        icon = ICON_WARN if issue.type == ConflictType.ASYMMETRIC_CONFLICT else ICON_DANGER
        lines.append(f"  {icon}  {escape(issue.message or issue.skill)} [dim]({issue.type.value})[/dim]")
    _safe_print(_panel("\n".join(lines), "Conflict Issues", "yellow"))


def print_inferred_dependencies(manifest: SkillManifest) -> None:
    """List undeclared dependencies found through [skill:x] references (verbose only)."""
    rows = [(name, s.inferred_dependencies) for name, s in sorted(manifest.skills.items())]
    rows = [(name, deps) for name, deps in rows if deps]
    if not rows:
        return
    lines = [f"  {ICON_INFO}  {escape(name)}: {escape(', '.join(deps))}" for name, deps in rows]
    lines.append("")
    lines.append("  [dim]Referenced in the document body but missing from depends_on.[/dim]")
    _safe_print(_panel("\n".join(lines), "Inferred Dependencies", "blue"))


def print_manifest_summary(
    manifest: SkillManifest,
    output_path: str | None = None,
    verbose: bool = False,
    failed_on: list[str] | None = None,
) -> None:
    """Print the full build summary."""
    _safe_print()
    print_stats(manifest)
    print_load_errors(manifest)
    print_cycles(manifest)
    print_conflicts(manifest)
    if verbose:
        print_inferred_dependencies(manifest)

    parts = []
    if output_path:
        parts.append(f"  Manifest: [white]{escape(output_path)}[/white]")
    if failed_on:
        parts.append(f"  {ICON_DANGER}  [red]Build failed on: {', '.join(failed_on)}[/red]")
        border = "red"
    elif manifest.errors or manifest.circular_dependencies or manifest.version_conflicts:
        parts.append(f"  {ICON_WARN}  [yellow]Manifest written with findings.[/yellow]")
        border = "yellow"
    else:
        parts.append(f"  {ICON_PASS}  [green]All skills loaded cleanly.[/green]")
        border = "green"
    _safe_print(_panel("\n".join(parts), "Build Complete", border))


def print_lint_report(report: LintReport) -> None:
    """Print lint issues grouped by severity, then the verdict."""
    _safe_print(
        f"Found {report.skill_count} skills and {report.subagent_count} subagents in catalog "
        f"({report.files_checked} file(s) checked)"
    )

    if report.issues:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Severity")
        table.add_column("File")
        table.add_column("Rule")
        table.add_column("Message")
        ordered = sorted(
            report.issues,
            key=lambda i: (i.severity != LintSeverity.ERROR, i.file, i.rule),
        )
        for issue in ordered:
            color = "red" if issue.severity == LintSeverity.ERROR else "yellow"
            table.add_row(
                f"[{color}]{issue.severity.value}[/{color}]",
                escape(issue.file),
                issue.rule,
                escape(issue.message),
            )
        _safe_print(table)

    summary = f"  Errors: {len(report.errors)}    Warnings: {len(report.warnings)}"
    if report.passed:
        _safe_print(_panel(f"{summary}\n\n  {ICON_PASS}  Frontmatter validation passed.", "Lint", "green"))
    else:
        _safe_print(_panel(f"{summary}\n\n  {ICON_DANGER}  Frontmatter validation failed.", "Lint", "red"))
