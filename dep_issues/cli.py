"""CLI entry point: a single Click command.

    dep-issues [OPTIONS] PARENT_POM PROJECT_ROOT LOCAL_REPO

Scans the project's poms, resolves dependency versions against the parent
pom's properties, looks each dependency up in the local Maven repository and
prints those that declare an issue tracker, with open GitHub issues.
"""

import json
import sys
from typing import Any

import click

from dep_issues import __version__
from dep_issues.config import DEFAULT_CONFIG_PATH


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_tracker(config_path: str, verbose: bool):
    """Load config and return a ready IssueTracker. Exits on error."""
    from dep_issues.client import GitHubClient
    from dep_issues.config import ConfigError, load
    from dep_issues.tracker import IssueTracker

    try:
        config = load(config_path)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    client = GitHubClient(url=config.url, token=config.token, timeout=config.timeout)
    if verbose:
        mode = "authenticated" if client.authenticated else "anonymous"
        click.echo(f"[verbose] Using GitHub API at {config.url} ({mode})", err=True)
    return IssueTracker(client)


def _emit(text: str, output_path: str | None) -> None:
    """Write *text* to stdout or to *output_path*."""
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        click.echo(f"Report written to '{output_path}'", err=True)
    else:
        click.echo(text)


def _to_json(data: Any, pretty: bool) -> str:
    return json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command()
@click.argument("parent_pom", type=click.Path(exists=True, dir_okay=False))
@click.argument("project_root", type=click.Path(exists=True, file_okay=False))
@click.argument("local_repo", type=click.Path())
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, show_default=True,
              help="Path to the configuration file (optional).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", show_default=True, help="Report format.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON output.")
@click.option("--output", "output_path", default=None,
              help="Write the report to a file instead of stdout.")
@click.option("--no-fetch", is_flag=True, default=False,
              help="List tracker URLs without querying GitHub.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="dep-issues")
def cli(parent_pom: str, project_root: str, local_repo: str, config_path: str,
        output_format: str, pretty: bool, output_path: str | None,
        no_fetch: bool, verbose: bool) -> None:
    """List dependency issue trackers and their open GitHub issues."""
    from dep_issues.pipeline import run

    tracker = None if no_fetch else _make_tracker(config_path, verbose)

    def progress(message: str) -> None:
        if verbose:
            click.echo(f"[verbose] {message}", err=True)

    entries = run(parent_pom, project_root, local_repo, tracker, on_progress=progress)

    if output_format == "json":
        from dep_issues.report import build_document
        document = build_document(
            entries,
            parent_pom=parent_pom,
            project_root=project_root,
            local_repo=local_repo,
        )
        _emit(_to_json(document, pretty), output_path)
    else:
        from dep_issues.report import render_text
        if entries or output_path:
            _emit(render_text(entries), output_path)
        elif verbose:
            click.echo("[verbose] No dependency declares an issue tracker", err=True)
