"""Command Line Interface for SearchLight."""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .config import DEFAULT_CONFIG_PATH, SearchLightConfig, get_config, load_config, save_config
from .search import EmptyQueryPolicy, highlight_match, load_candidates, match_query
from .util import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def setup_cli_logging(verbose: bool = False):
    """Setup logging for CLI."""
    level = "DEBUG" if verbose else "INFO"
    setup_logging(level=level, console=Console(stderr=True))


def _get_config(ctx: click.Context) -> SearchLightConfig:
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = get_config()
    return ctx.obj["config"]


def _resolve_candidates(ctx: click.Context, file: Optional[Path]):
    if file:
        return load_candidates(file)
    return tuple(_get_config(ctx).candidates)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "-c", type=click.Path(exists=True, path_type=Path), help="Configuration file path")
@click.pass_context
def cli(ctx, verbose: bool, config: Optional[Path]):
    """SearchLight - filter a list of strings with highlighted matches."""
    setup_cli_logging(verbose)
    ctx.ensure_object(dict)

    if config:
        try:
            ctx.obj["config"] = load_config(config)
        except (ValidationError, YAMLError) as e:
            console.print(f"[red]Invalid configuration {config}: {escape(str(e))}[/red]")
            sys.exit(1)


@cli.command("find")
@click.argument("needle", required=False, default="")
@click.option("--regex/--literal", default=None, help="Interpret regex syntax in the query")
@click.option("--file", "-f", "file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read candidates from a file, one per line")
@click.option("--empty-query", type=click.Choice([p.value for p in EmptyQueryPolicy]),
              help="Whether an empty query matches all candidates or none")
@click.option("--markup", is_flag=True, help="Print the raw highlighted markup")
@click.pass_context
def find(ctx, needle: str, regex: Optional[bool], file: Optional[Path],
         empty_query: Optional[str], markup: bool):
    """Show the candidates matching NEEDLE."""
    config = _get_config(ctx)

    try:
        candidates = _resolve_candidates(ctx, file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read candidates: {escape(str(e))}[/red]")
        sys.exit(1)

    regex_enabled = config.search.regex_enabled if regex is None else regex
    policy = EmptyQueryPolicy(empty_query or config.search.empty_query)

    outcome = match_query(candidates, needle, regex_enabled, policy)

    if not outcome.valid:
        console.print(Text(str(outcome.error), style="yellow"))
        return

    if markup:
        for result in outcome.results:
            click.echo(highlight_match(result, config.highlight.open_tag, config.highlight.close_tag))
        return

    if not outcome.results:
        console.print("[yellow]No matches[/yellow]")
        return

    title = f"Matches for {needle!r}" + (" (regex)" if regex_enabled else "")
    table = Table(title=Text(title))
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Candidate", style="white")
    table.add_column("Matches", style="green", justify="right")

    for index, result in enumerate(outcome.results, start=1):
        text = Text(result.candidate)
        for start, end in result.spans:
            text.stylize("bold", start, end)
        table.add_row(str(index), text, str(len(result.spans)))

    console.print(table)
    console.print(f"{len(outcome.results)} of {len(candidates)} candidates matched")


@cli.command("candidates")
@click.option("--file", "-f", "file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read candidates from a file, one per line")
@click.pass_context
def candidates_list(ctx, file: Optional[Path]):
    """List the candidate set."""
    try:
        candidates = _resolve_candidates(ctx, file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read candidates: {escape(str(e))}[/red]")
        sys.exit(1)

    if not candidates:
        console.print("[yellow]No candidates[/yellow]")
        return

    for candidate in candidates:
        console.print(Text(candidate))


@cli.group()
def config():
    """Configuration commands."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx):
    """Show the active configuration."""
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.dump(_get_config(ctx).model_dump(mode="json"), sys.stdout)


@config.command("init")
@click.option("--path", "-p", type=click.Path(dir_okay=False, path_type=Path),
              default=DEFAULT_CONFIG_PATH, show_default=True, help="Where to write the configuration")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config_init(path: Path, force: bool):
    """Write a default configuration file."""
    if path.exists() and not force:
        console.print(f"[yellow]Configuration already exists: {path}[/yellow]")
        console.print("Use --force to overwrite it.")
        sys.exit(1)

    save_config(SearchLightConfig(), path)
    logger.info(f"Wrote default configuration to {path}")
    console.print(f"[green]Configuration written to {path}[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
