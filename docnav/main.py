#!/usr/bin/env python3
"""
Main CLI entry point for docnav
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from docnav import __version__
from docnav.config.constants import EXPANDED_GROUPS_KEY, SIDEBAR_SCROLL_KEY
from docnav.config.ui_config import (
    COLOR_SCHEMES,
    get_color_scheme,
    get_element_ids,
    get_search_shortcut,
    get_theme,
)
from docnav.exceptions import DocnavError
from docnav.nav.controller import NavigationTreeController
from docnav.nav.html_surface import HtmlNavigationSurface
from docnav.nav.state import ancestors_of
from docnav.storage import FileSessionStorage, KeyValueStorage, MemoryStorage
from docnav.utils.logging_utils import setup_cli_logging

app = typer.Typer(help="Persistent navigation trees for documentation sites.")
console = Console()


def _check_scheme(color_scheme: Optional[str]) -> str:
    if color_scheme is None:
        return get_color_scheme()
    if color_scheme not in COLOR_SCHEMES:
        console.print(
            f"[red]Error: color scheme must be one of {', '.join(COLOR_SCHEMES)}[/red]"
        )
        raise typer.Exit(1)
    return color_scheme


def _split_ids(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """
    docnav - persistent navigation trees for documentation sites

    [bold]Examples:[/bold]

    Browse a site manifest in the terminal:
        [cyan]docnav browse site.yml[/cyan]

    Show the navigation tree of a rendered page:
        [cyan]docnav inspect _site/intro/index.html[/cyan]

    Pre-expand a page's sidebar for a remembered session:
        [cyan]docnav apply page.html --expanded intro,setup -o out.html[/cyan]
    """
    setup_cli_logging(verbose)


@app.command()
def version():
    """Show docnav version"""
    typer.echo(f"docnav version {__version__}")


@app.command()
def browse(
    manifest: Path = typer.Argument(..., help="YAML site manifest"),
    session: str = typer.Option("default", "--session", "-s", help="Session to restore"),
    theme: Optional[str] = typer.Option(
        None, "--theme", "-t", help="Theme to use (docnav-dark, docnav-light)"
    ),
    color_scheme: Optional[str] = typer.Option(
        None, "--color-scheme", help="auto, light or dark"
    ),
    start: Optional[str] = typer.Option(None, "--open", help="Document id to open first"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level file logging"),
):
    """Browse a documentation site in the terminal."""
    from docnav.site import load_site
    from docnav.ui.app import DocnavApp
    from docnav.ui.themes import DOCNAV_THEMES
    from docnav.utils.logging_utils import setup_tui_logging

    scheme = _check_scheme(color_scheme)
    theme = theme or get_theme()
    if theme is not None and theme not in DOCNAV_THEMES:
        console.print(f"[red]Error: unknown theme {theme!r}[/red]")
        raise typer.Exit(1)

    try:
        site = load_site(manifest)
    except DocnavError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    logger = setup_tui_logging(__name__, verbose=verbose)
    logger.info("Browsing %s (session %s)", manifest, session)

    docnav_app = DocnavApp(
        site,
        FileSessionStorage(session=session),
        search_shortcut=get_search_shortcut(),
        color_scheme=scheme,
        theme_name=theme,
        elements=get_element_ids(),
        start_doc_id=start,
    )
    try:
        docnav_app.run()
    except KeyboardInterrupt:
        pass


@app.command()
def inspect(
    page: Path = typer.Argument(..., help="Rendered HTML page"),
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json"),
):
    """Show the navigation structure of a rendered page."""
    try:
        surface = HtmlNavigationSurface.from_path(page, get_element_ids())
    except DocnavError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    active = surface.active_node_id()
    info = {
        "first_group": surface.first_group_id(),
        "active": active,
        "ancestors": ancestors_of(active, surface) if active else [],
        "groups": [
            {
                "id": group_id,
                "parent": surface.parent_group_of(group_id),
                "expanded": surface.is_group_expanded(group_id),
            }
            for group_id in surface.group_ids()
        ],
    }

    if format == "json":
        print(json.dumps(info, indent=2))
        return

    console.print(f"First group: [cyan]{info['first_group'] or '-'}[/cyan]")
    console.print(f"Active node: [cyan]{active or '-'}[/cyan]")
    if info["ancestors"]:
        console.print(f"Ancestors:   [cyan]{' → '.join(info['ancestors'])}[/cyan]")

    if not info["groups"]:
        console.print("[yellow]No menu groups found[/yellow]")
        return

    table = Table(title=f"Menu groups in {page.name}")
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("Parent", style="magenta")
    table.add_column("Expanded", justify="center")
    for group in info["groups"]:
        table.add_row(
            group["id"],
            group["parent"] or "",
            "[green]yes[/green]" if group["expanded"] else "[dim]no[/dim]",
        )
    console.print(table)


@app.command()
def apply(
    page: Path = typer.Argument(..., help="Rendered HTML page"),
    expanded: Optional[str] = typer.Option(
        None, "--expanded", "-e", help="Comma-separated group ids remembered as open"
    ),
    scroll: Optional[float] = typer.Option(None, "--scroll", help="Remembered sidebar offset"),
    session: Optional[str] = typer.Option(
        None, "--session", "-s", help="Read remembered state from a saved session instead"
    ),
    color_scheme: Optional[str] = typer.Option(
        None, "--color-scheme", help="auto, light or dark"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout"),
):
    """Restore a session's navigation state onto a rendered page."""
    scheme = _check_scheme(color_scheme)

    storage: KeyValueStorage
    if session and (expanded is not None or scroll is not None):
        console.print("[red]Error: --session cannot be combined with --expanded/--scroll[/red]")
        raise typer.Exit(1)
    if session:
        storage = FileSessionStorage(session=session)
    else:
        storage = MemoryStorage()
        if expanded is not None:
            storage.set_item(EXPANDED_GROUPS_KEY, json.dumps(_split_ids(expanded)))
        if scroll is not None:
            storage.set_item(SIDEBAR_SCROLL_KEY, str(scroll))

    try:
        surface = HtmlNavigationSurface.from_path(page, get_element_ids())
        controller = NavigationTreeController(
            surface,
            storage,
            search_shortcut=get_search_shortcut(),
            color_scheme=scheme,
        )
        controller.initialize()
        if output is None:
            print(surface.render())
        else:
            surface.write(output)
            console.print(
                f"[green]✅ Wrote {output}[/green] "
                f"[dim](expanded: {', '.join(controller.expanded_groups) or 'none'})[/dim]"
            )
    except DocnavError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
