#!/usr/bin/env python3
"""
Portfolio Site CLI

Builds the static portfolio site from the site config and previews the
headline effect in the terminal.

Commands:
    build   - Render every page and copy static assets to the output directory
    check   - Load and validate the site config without writing anything
    preview - Play the text-reveal effect in the terminal
    history - Show recent builds from the build event log

Examples:\n

    build_site.py build                                  # Build with defaults from .env

    build_site.py build --output public --clean          # Fresh build into ./public

    build_site.py check --content my_site.yaml           # Validate a config

    build_site.py preview "hello world" --delay 300      # Terminal preview
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.content import ContentValidationError, load_site_config
from folio.contexts.effects import play
from folio.contexts.rendering import build_site
from folio.utils.event_logging import get_recent_events
from folio.utils.timestamp import format_timestamp

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Build the static portfolio site and preview its headline effect",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    content: Annotated[
        Optional[Path],
        typer.Option("--content", "-c", help="Site config YAML (default: CONTENT_PATH)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory (default: OUTPUT_PATH)"),
    ] = None,
    static: Annotated[
        Optional[Path],
        typer.Option("--static", help="Static assets directory (default: STATIC_PATH)"),
    ] = None,
    clean: Annotated[
        bool,
        typer.Option("--clean", help="Remove the output directory before building"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every warning"),
    ] = False,
):
    """
    Build the static site.

    Examples:\n

        $ build_site.py build

        $ build_site.py build -o public --clean
    """
    typer.secho("\nBuilding site", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        result = build_site(
            content_path=content,
            output_dir=output,
            static_dir=static,
            clean=clean,
            verbose=verbose,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {', '.join(result.pages)}")
        typer.echo(f"  Assets: {len(result.assets)}")
        typer.echo(f"  Output: {display_path(result.output_dir)}")
        if result.warnings:
            typer.secho(f"  Warnings: {len(result.warnings)}", fg=typer.colors.YELLOW)
            for warning in result.warnings:
                typer.echo(f"    - {warning}")
    else:
        typer.secho(f"✗ Build failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'build.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("check")
def check_command(
    content: Annotated[
        Optional[Path],
        typer.Option("--content", "-c", help="Site config YAML (default: CONTENT_PATH)"),
    ] = None,
):
    """
    Validate the site config without building.

    Examples:\n

        $ build_site.py check

        $ build_site.py check -c my_site.yaml
    """
    try:
        config = load_site_config(content)
    except (FileNotFoundError, ContentValidationError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Site config is valid", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  {config.personal.name} ({config.personal.title})")
    typer.echo(
        f"  {len(config.skills)} skills, {len(config.experience)} jobs, "
        f"{len(config.projects)} projects, {len(config.awards)} awards"
    )


@app.command("preview")
def preview_command(
    text: Annotated[
        Optional[str],
        typer.Argument(help="Text to reveal (default: the home page headline)"),
    ] = None,
    delay: Annotated[
        Optional[int],
        typer.Option("--delay", "-d", help="Milliseconds per character", min=1),
    ] = None,
    interval: Annotated[
        int,
        typer.Option("--interval", "-i", help="Milliseconds between glyph changes", min=1),
    ] = 50,
):
    """
    Play the text-reveal effect in the terminal.

    Examples:\n

        $ build_site.py preview

        $ build_site.py preview "hello" --delay 200
    """
    if text is None or delay is None:
        try:
            headline = load_site_config().site.headline
        except (FileNotFoundError, ContentValidationError) as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        text = headline.text if text is None else text
        delay = headline.delay_ms if delay is None else delay

    def show(frame):
        typer.echo(f"\r{frame.text}", nl=False)

    try:
        asyncio.run(play(text, delay_ms=delay, glyph_interval_ms=interval, on_frame=show))
    except KeyboardInterrupt:
        # asyncio.run cancels the task; the animation disposes its timer on exit
        typer.echo("")
        raise typer.Exit(code=130)
    typer.echo("")


@app.command("history")
def history_command(
    n: Annotated[int, typer.Option("-n", help="Number of builds to show", min=1)] = 10,
):
    """Show recent builds from the build event log."""
    events = [
        e
        for e in get_recent_events(n * 3)
        if e.get("event_type") in ("build_completed", "build_failed")
    ][-n:]

    if not events:
        typer.echo("No builds recorded yet.")
        return

    for event in events:
        when = format_timestamp(event["timestamp"], relative=True)
        if event["event_type"] == "build_completed":
            typer.secho(f"✓ {when}", fg=typer.colors.GREEN, nl=False)
            typer.echo(
                f"  {len(event.get('pages', []))} pages, "
                f"{event.get('warning_count', 0)} warnings, {event.get('build_time_s')}s"
            )
        else:
            typer.secho(f"✗ {when}", fg=typer.colors.RED, nl=False)
            typer.echo(f"  {len(event.get('errors', []))} errors")


if __name__ == "__main__":
    app()
