# src/searchview/cli/app.py
"""Command-line interface for searchview.

Subcommands read saved JSON payloads through ``searchview.commands``
and render the outcome as a Rich table, as plain lines (``--plain``) or as
JSON (``--json``). Failures print ``Error: ...`` and exit with status 1.
"""

from __future__ import annotations

import json
import logging
from typing import Any

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install searchview[cli]"
    ) from e

from searchview import __version__
from searchview.commands import config_cmd, results, token_info, tree, windows
from searchview.commands.base import CommandResult
from searchview.config import load_env_file
from searchview.models.results import CodeResult, FileResult, NormalizedResult, RepoResult

app = typer.Typer(
    name="searchview",
    help="searchview - shape code-search payloads into render-ready views.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"searchview {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    elif verbose:
        root_logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log dropped records and other details.",
    ),
) -> None:
    """searchview - shape code-search payloads into render-ready views."""
    load_env_file()
    _configure_logging(verbose)


def _fail(result: CommandResult, plain: bool) -> None:
    if plain:
        console.print(f"Error: {result.error}")
    else:
        console.print(f"[red]Error: {escape(result.error or '')}[/red]")
    raise typer.Exit(1)


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _describe(result: NormalizedResult) -> tuple[str, str]:
    """Return (location, detail) columns for a result row."""
    if isinstance(result, RepoResult):
        return result.repository, f"{len(result.highlights)} highlights"
    if isinstance(result, CodeResult):
        return (
            f"{result.repo_path}:{result.relative_path}",
            f"{len(result.snippets)} snippets",
        )
    if isinstance(result, FileResult):
        return f"{result.repo_path}:{result.relative_path}", result.language or ""
    extra = result.model_extra or {}
    return str(extra.get("data", "")), ""


# Common options
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config file")
PLAIN_OPTION = typer.Option(False, "--plain", help="Plain output (no colors/formatting)")
JSON_OPTION = typer.Option(False, "--json", help="Print the mapped models as JSON")


@app.command(name="results")
def results_cmd(
    path: str = typer.Argument(..., help="JSON file with a search response"),
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Normalize a saved search response."""
    result = results.results(path, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if as_json:
        _print_json([r.model_dump(mode="json") for r in result.results])
        return

    if not result.results:
        if plain:
            console.print("No results.")
        else:
            console.print("[yellow]No results.[/yellow]")
        raise typer.Exit(0)

    if plain:
        for r in result.results:
            location, detail = _describe(r)
            console.print(f"  [{r.id}] {r.type.value} {location} {detail}".rstrip(), markup=False)
    else:
        table = Table(title=f"Results ({len(result.results)})")
        table.add_column("Id", justify="right")
        table.add_column("Type", style="cyan")
        table.add_column("Location")
        table.add_column("Detail", style="dim")
        for r in result.results:
            location, detail = _describe(r)
            table.add_row(str(r.id), r.type.value, escape(location), escape(detail))
        console.print(table)

    if result.dropped:
        console.print(f"Dropped {result.dropped} unrecognized record(s).")


@app.command(name="windows")
def windows_cmd(
    path: str = typer.Argument(..., help="JSON file with citations (and optionally the file)"),
    margin: int = typer.Option(None, "--margin", "-m", help="Context lines around citations"),
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Compute display windows for citations into one file."""
    result = windows.windows(path, margin=margin, config_path=config_file)
    if not result.success or result.layout is None:
        _fail(result, plain)

    layout = result.layout
    if as_json:
        payload = layout.model_dump(mode="json")
        if result.excerpts:
            payload["excerpts"] = [
                {
                    "i": excerpt.window.i,
                    "lines": [line.line_number for line in excerpt.lines],
                }
                for excerpt in result.excerpts
            ]
        _print_json(payload)
        return

    if plain:
        for w in layout.windows:
            console.print(
                f"  [{w.i}] lines {w.start_line}-{w.end_line} -> "
                f"window {w.window_start}-{w.window_end}",
                markup=False,
            )
    else:
        table = Table(title=f"Citation windows (margin {result.margin})")
        table.add_column("#", justify="right")
        table.add_column("Lines", style="cyan")
        table.add_column("Window", style="green")
        table.add_column("Comment", style="dim")
        for w in layout.windows:
            table.add_row(
                str(w.i),
                f"{w.start_line}-{w.end_line}",
                f"{w.window_start}-{w.window_end}",
                escape(w.comment),
            )
        console.print(table)

    for excerpt in result.excerpts:
        console.print(f"\n[{excerpt.window.i}] {excerpt.window.comment}", markup=False)
        for line in excerpt.lines:
            text = "".join(token.token for token in line.tokens)
            console.print(f"{line.line_number:>5} {text}", markup=False, highlight=False)

    state = "collapsed" if layout.is_overflowing else "expanded"
    console.print(f"Total height: {layout.total_height}px ({state})")


@app.command(name="tree")
def tree_cmd(
    path: str = typer.Argument(..., help="JSON file with a directory or file record"),
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """List a directory record or a file's siblings."""
    result = tree.tree(path, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if as_json:
        _print_json([node.model_dump(mode="json") for node in result.nodes])
        return

    if not result.nodes:
        console.print("No entries.")
        raise typer.Exit(0)

    if plain:
        console.print(f"{result.repo_name}:{result.relative_path}", markup=False)
        for node in result.nodes:
            marker = "*" if node.selected else " "
            suffix = "/" if node.is_dir else ""
            console.print(f" {marker} {node.name}{suffix}", markup=False)
    else:
        table = Table(title=escape(f"{result.repo_name}:{result.relative_path}"))
        table.add_column("Name", style="cyan")
        table.add_column("Type")
        table.add_column("Language", style="dim")
        table.add_column("Path", style="dim")
        for node in result.nodes:
            name = escape(node.name)
            if node.selected:
                name = f"[bold]{name}[/bold]"
            table.add_row(name, node.type.value, escape(node.lang or ""), escape(node.path))
        console.print(table)


@app.command(name="token-info")
def token_info_cmd(
    path: str = typer.Argument(..., help="JSON file with a token-info response"),
    plain: bool = PLAIN_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    """Group references and definitions by file."""
    result = token_info.token_info(path)
    if not result.success or result.group is None:
        _fail(result, plain)

    group = result.group
    if as_json:
        _print_json(group.model_dump(mode="json"))
        return

    if group.is_empty:
        console.print("No references or definitions.")
        raise typer.Exit(0)

    for title, files in (("Definitions", group.definitions), ("References", group.references)):
        if not files:
            continue
        if plain:
            console.print(f"{title}:")
        else:
            console.print(f"[bold]{title}:[/bold]")
        for entry in files:
            console.print(f"  {entry.file} ({len(entry.data)})", markup=False)
            for item in entry.data:
                console.print(f"      {item.snippet.data}", markup=False, highlight=False)


@app.command(name="config")
def config_cmd_handler(
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _fail(result, plain=False)

    table = Table(title="searchview Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, escape(setting.value), setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]{escape(warning)}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {escape(result.config_path)}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > preset > default[/dim]")
