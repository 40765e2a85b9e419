#!/usr/bin/env python3
"""
Main CLI entry point for accordion
"""

from typing import Optional

import typer
from rich.table import Table

from accordion import __build_id__, __version__
from accordion.config.models import AccordionConfig
from accordion.config.ui_config import (
    get_accordion_defaults,
    get_theme,
    get_ui_config_path,
    set_accordion_defaults,
    set_theme,
)
from accordion.exceptions import ConfigurationError
from accordion.utils.output import console, print_error

app = typer.Typer(
    help="accordion - collapsible panels with an optional one-at-a-time policy",
    no_args_is_help=True,
)


@app.command()
def version():
    """Show accordion version"""
    typer.echo(f"accordion version {__version__}")
    typer.echo(f"Build ID: {__build_id__}")


@app.command()
def demo(
    one_at_a_time: Optional[bool] = typer.Option(
        None,
        "--one-at-a-time/--independent",
        help="Close other panels when one opens (default: from config)",
    ),
    gap: Optional[str] = typer.Option(None, "--gap", "-g", help="Blank cells between panels"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Textual theme name"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every toggle and event"),
):
    """Run the three-panel demo in the terminal."""
    defaults = get_accordion_defaults()
    try:
        config = AccordionConfig(
            one_at_a_time=defaults.one_at_a_time if one_at_a_time is None else one_at_a_time,
            layout_gap=gap if gap is not None else defaults.layout_gap,
        )
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    from accordion.ui.demo import run_demo

    try:
        run_demo(config, theme=theme or get_theme(), verbose=verbose)
    except KeyboardInterrupt:
        pass


@app.command("config")
def config_command(
    one_at_a_time: Optional[bool] = typer.Option(
        None, "--one-at-a-time/--independent", help="Default exclusivity for the demo"
    ),
    gap: Optional[str] = typer.Option(None, "--gap", "-g", help="Default gap between panels"),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Default Textual theme"),
):
    """Show or change the demo defaults."""
    current = get_accordion_defaults()
    if one_at_a_time is not None or gap is not None:
        try:
            updated = AccordionConfig(
                one_at_a_time=current.one_at_a_time if one_at_a_time is None else one_at_a_time,
                layout_gap=current.layout_gap if gap is None else gap,
            )
        except ConfigurationError as e:
            print_error(str(e))
            raise typer.Exit(1) from e
        set_accordion_defaults(updated)
        current = updated
    if theme is not None:
        set_theme(theme)

    table = Table(title=str(get_ui_config_path()))
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("one_at_a_time", str(current.one_at_a_time))
    table.add_row("layout_gap", current.layout_gap)
    table.add_row("theme", get_theme())
    console.print(table)


if __name__ == "__main__":
    app()
