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

"""skillgraph CLI: Typer entry point.

Commands:
- skillgraph build <skills-dir>  : build skill-manifest.json
- skillgraph lint <content-root> : validate frontmatter and references
- skillgraph version             : print the version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from skillgraph import __version__
from skillgraph.config import FAIL_ON_CHOICES, SkillGraphConfig, load_config
from skillgraph.exceptions import ConfigError
from skillgraph.manifest import build_manifest, failing_categories
from skillgraph.policy.lint_rules import lint_content_root
from skillgraph.reporter.console_out import (
    console,
    print_error,
    print_lint_report,
    print_manifest_summary,
)
from skillgraph.reporter.json_out import to_canonical_json, write_lint_report, write_manifest

app = typer.Typer(
    name="skillgraph",
    help=(
        "skillgraph: build a dependency manifest for a skills directory and "
        "lint skill frontmatter. Run 'skillgraph <command> --help' for flags."
    ),
    add_completion=False,
)

logger = logging.getLogger("skillgraph")

DEFAULT_OUTPUT_NAME = Path("manifest") / "skill-manifest.json"


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)


def _load_config_or_exit(config_path: Optional[str]) -> SkillGraphConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _resolve_root_or_exit(path: str) -> Path:
    root = Path(path).resolve()
    if not root.exists():
        print_error(f"Directory not found: {root}")
        raise typer.Exit(code=1)
    if not root.is_dir():
        print_error(f"Not a directory: {root}")
        raise typer.Exit(code=1)
    return root


def _resolve_output(root: Path, output: Optional[str], config: SkillGraphConfig) -> Path:
    """--output, then config ``output``, then ``<root>/../manifest/skill-manifest.json``."""
    if output:
        return Path(output).resolve()
    if config.output:
        return Path(config.output).resolve()
    return root.parent / DEFAULT_OUTPUT_NAME


@app.command()
def build(
    path: str = typer.Argument(".", help="Skills directory (one subdirectory per skill)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Manifest path (default: <path>/../manifest/skill-manifest.json)"),
    output_json: bool = typer.Option(False, "--json", help="Print the manifest JSON to stdout instead of the summary"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Load skills on N threads"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 on load errors, cycles or conflict issues"),
    fail_on: Optional[list[str]] = typer.Option(
        None, "--fail-on", help=f"Exit 1 when this category is non-empty ({', '.join(FAIL_ON_CHOICES)}); repeatable",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a skillgraph YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging and inferred dependency listing"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all output except errors"),
) -> None:
    """Build the skill manifest and report structural issues.

    One broken skill never stops the build. By default the command exits 0
    even when the manifest has findings; use --strict or --fail-on for CI.
    """
    _configure_logging(verbose=verbose, quiet=quiet or output_json)
    config = _load_config_or_exit(config_path)
    root = _resolve_root_or_exit(path)

    categories = list(FAIL_ON_CHOICES) if strict else list(fail_on or config.fail_on)
    unknown = [c for c in categories if c not in FAIL_ON_CHOICES]
    if unknown:
        print_error(f"Unknown --fail-on category: {', '.join(unknown)}")
        raise typer.Exit(code=2)

    manifest = build_manifest(root, config, jobs=jobs)
    output_path = _resolve_output(root, output, config)
    write_manifest(manifest, output_path)

    failed = failing_categories(manifest, categories)

    if output_json:
        print(to_canonical_json(manifest), end="")
    elif not quiet:
        print_manifest_summary(
            manifest,
            output_path=str(output_path),
            verbose=verbose,
            failed_on=failed,
        )

    if failed:
        raise typer.Exit(code=1)


@app.command()
def lint(
    path: str = typer.Argument(".", help="Content root holding skills/, subagents/, rules/, commands/"),
    output_json: bool = typer.Option(False, "--json", help="Output the lint report as JSON"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Also write the lint report as JSON to this path"),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a skillgraph YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Validate frontmatter fields, tool profiles and cross-references.

    Exits 1 when any error-severity issue is found. Warnings never fail.
    """
    _configure_logging(verbose=verbose, quiet=output_json)
    config = _load_config_or_exit(config_path)
    root = _resolve_root_or_exit(path)

    report = lint_content_root(root, config)
    if output:
        write_lint_report(report, Path(output).resolve())

    if output_json:
        print(to_canonical_json(report), end="")
    else:
        print_lint_report(report)

    if not report.passed:
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show the skillgraph version."""
    console.print(f"skillgraph v{__version__}")


if __name__ == "__main__":
    app()
