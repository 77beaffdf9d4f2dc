# src/scout/cli/app.py
"""Command-line interface for Project Scout.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from scout import __version__
from scout.commands import config_cmd, list_cmd, load, review, search
from scout.config import load_env_file
from scout.models import ScoredProject, SearchResult

app = typer.Typer(
    name="scout",
    help="Project Scout - find showcase projects that solve your problem.",
    no_args_is_help=True,
)
console = Console()

STATUS_STYLES = {
    "approved": "green",
    "pending": "yellow",
    "rejected": "red",
}

DATA_DIR_OPTION = typer.Option(
    None, "--data-dir", "-d", help="Data directory (default: from config)"
)
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config file")
PLAIN_OPTION = typer.Option(False, "--plain", help="Plain output (no colors/formatting)")


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if not verbose:
        # LiteLLM is chatty at INFO
        logging.getLogger("LiteLLM").setLevel(logging.WARNING)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"scout {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Project Scout - find showcase projects that solve your problem."""
    configure_logging(verbose)
    load_env_file()


def _render_projects(projects: list[ScoredProject], plain: bool) -> None:
    for i, project in enumerate(projects, 1):
        if plain:
            console.print(f"{i}. {project.title} (/projects/{project.slug})")
            console.print(f"   {project.description}")
        else:
            console.print(
                Panel(
                    project.description,
                    title=f"[bold]{i}. {project.title}[/bold]",
                    title_align="left",
                    subtitle=f"/projects/{project.slug}  score {project.score:g}",
                    subtitle_align="right",
                    border_style="#87d787",
                    padding=(0, 1),
                )
            )


def _render_search_result(result: SearchResult, plain: bool) -> None:
    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.data:
        if plain:
            console.print("No matching projects found.")
        else:
            console.print("[yellow]No matching projects found.[/yellow]")
        return

    _render_projects(result.data, plain)


@app.command(name="search")
def search_cmd(
    problem: str = typer.Argument(..., help="Problem you are trying to solve"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the raw SearchResult as JSON",
    ),
) -> None:
    """Find projects that solve a problem."""
    result = search.search_project_solutions(
        problem,
        data_dir=data_dir,
        config_path=config_file,
    )

    if as_json:
        console.print_json(result.model_dump_json())
        if not result.success:
            raise typer.Exit(1)
        return

    _render_search_result(result, plain)


@app.command(name="chat")
def chat_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Open the interactive chat."""
    from scout.tui.app import ScoutTUI

    ScoutTUI(data_dir=data_dir, config_path=config_file).run()


@app.command(name="load")
def load_cmd(
    path: str = typer.Argument(..., help="YAML or JSON file with projects"),
    approve: bool = typer.Option(
        False,
        "--approve",
        help="Mark every loaded project as approved",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Load projects from a file into the database."""
    result = load.load_projects(
        path,
        approve=approve,
        data_dir=data_dir,
        config_path=config_file,
    )

    for label, error in result.errors:
        console.print(f"[yellow]Skipped {label}: {error}[/yellow]")

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Loaded {result.loaded} projects from {result.path}[/green]")
    if result.failed:
        console.print(f"[dim]{result.failed} entries skipped[/dim]")


@app.command(name="list")
def list_cmd_handler(
    status: str = typer.Option(
        None,
        "--status",
        "-s",
        help="Only show projects with this status (pending, approved, rejected)",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List stored projects."""
    if status is not None and status not in STATUS_STYLES:
        console.print(f"[red]Error: Unknown status '{status}'[/red]")
        raise typer.Exit(1)

    result = list_cmd.list_projects(
        status=status,  # type: ignore[arg-type]
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.projects:
        console.print("No projects found.")
        return

    if plain:
        for project in result.projects:
            console.print(f"{project.id}\t{project.status}\t{project.title}")
        return

    table = Table(title="Projects")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Status")
    table.add_column("Categories", style="dim")

    for project in result.projects:
        style = STATUS_STYLES.get(project.status, "")
        table.add_row(
            project.id,
            project.title,
            f"[{style}]{project.status}[/{style}]",
            ", ".join(project.categories),
        )

    console.print(table)


REVIEW_DECISIONS = {
    "approve": "approved",
    "reject": "rejected",
    "reset": "pending",
}


@app.command(name="review")
def review_cmd(
    project: str = typer.Argument(..., help="Project ID or slug"),
    decision: str = typer.Argument(..., help="approve, reject or reset"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
) -> None:
    """Approve or reject a project. Only approved projects appear in searches."""
    status = REVIEW_DECISIONS.get(decision.lower())
    if status is None:
        console.print(f"[red]Error: Unknown decision '{decision}'[/red]")
        console.print(f"Use one of: {', '.join(REVIEW_DECISIONS)}")
        raise typer.Exit(1)

    result = review.review(
        project,
        status,  # type: ignore[arg-type]
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success or result.project is None:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    style = STATUS_STYLES[status]
    console.print(
        f"{result.project.title}: {result.previous_status} -> [{style}]{status}[/{style}]"
    )


@app.command(name="config")
def config_cmd_handler(
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    console.print(f"[bold]Config file:[/bold] {result.config_path or 'none'}")
    console.print(f"[bold]Data directory:[/bold] {result.data_dir}")
    if result.ai_enabled:
        console.print(
            f"[bold]AI recommender:[/bold] [green]on[/green] "
            f"({result.llm_model}, key from {result.api_key_source})"
        )
    else:
        console.print("[bold]AI recommender:[/bold] [yellow]off[/yellow] (keyword ranking only)")

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)
