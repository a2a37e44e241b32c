"""Command-line interface for flashdeck."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .core.config import Config, load_config
from .core.exceptions import FlashdeckError
from .persistence import read_cards
from .session import CommandLoop, Transcript

logger = logging.getLogger(__name__)


def _setup_logging(cfg: Config) -> None:
    logging.basicConfig(
        level=cfg.log_level_value,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(cfg.log_level_value)


def _load(config: str) -> Config:
    try:
        return load_config(config) if config else Config()
    except FlashdeckError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__)
def cli():
    """flashdeck - Learn term/definition pairs from the terminal.

    \b
    QUICK START:
        flashdeck run
        flashdeck run --import capitals.txt --export capitals.txt

    \b
    DECK FILES:
        One card per line: term##definition##misses
    """
    pass


@cli.command()
@click.option('--import', '-import', 'import_path', type=click.Path(),
              help='Deck file to load before the first prompt')
@click.option('--export', '-export', 'export_path', type=click.Path(),
              help='Deck file to save to when you exit')
@click.option('-c', '--config', type=click.Path(exists=True), help='Config file path')
@click.option('--seed', type=int, help='Seed for random card selection')
@click.option('-v', '--verbose', is_flag=True, help='Verbose logging on stderr')
def run(import_path: str, export_path: str, config: str, seed: int, verbose: bool):
    """Start an interactive flashcard session.

    Type one of the actions (add, remove, import, export, ask, exit, log,
    hardest card, reset stats) at the prompt.
    """
    cfg = _load(config)

    # Override with CLI options
    if import_path:
        cfg.session.import_path = import_path
    if export_path:
        cfg.session.export_path = export_path
    if seed is not None:
        cfg.session.seed = seed
    if verbose:
        cfg.verbose = True

    _setup_logging(cfg)
    logger.debug(f"Session settings: {cfg.to_dict()}")

    loop = CommandLoop(
        transcript=Transcript(Console()),
        config=cfg,
    )
    loop.startup()
    loop.run()


@cli.command()
@click.argument('deck_file', type=click.Path())
@click.option('-c', '--config', type=click.Path(exists=True), help='Config file path')
def show(deck_file: str, config: str):
    """Print the cards in a deck file."""
    cfg = _load(config)
    console = Console()

    try:
        cards = read_cards(deck_file, cfg.encoding)
    except FlashdeckError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    table = Table(title=escape(Path(deck_file).name))
    table.add_column("Term", style="cyan")
    table.add_column("Definition", style="white")
    table.add_column("Misses", style="yellow", justify="right")

    for card in cards:
        table.add_row(escape(card.term), escape(card.definition), str(card.missed))

    console.print(table)
    console.print(f"{len(cards)} cards")


@cli.command()
@click.argument('output_path', type=click.Path())
def init_config(output_path: str):
    """Create a sample configuration file."""
    sample_config = """# flashdeck configuration

session:
  # import_path: deck.txt   # loaded before the first prompt
  # export_path: deck.txt   # saved when you exit
  # seed: 42                # repeatable quiz order

# encoding: utf-8           # deck/log file encoding (default: platform)
log_level: WARNING          # DEBUG, INFO, WARNING, ERROR
verbose: false
"""
    with open(output_path, 'w') as f:
        f.write(sample_config)

    console = Console()
    console.print(f"[green]✓[/green] Created config file: [cyan]{output_path}[/cyan]")
    console.print("  Edit this file and run: [dim]flashdeck run -c config.yaml[/dim]")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
