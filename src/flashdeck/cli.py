"""Main entry point for the flashcards shell.

Example usage:
    flashdeck
    flashdeck --import_from capitals.txt --export_to capitals.txt
    flashdeck -import_from=capitals.txt --seed 7
"""
import logging
import random
import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .classes.settings import Config
from .errors import FlashcardError
from .manager import Flashcards
from .shell import FlashcardShell

logger = logging.getLogger(__name__)

error_console = Console(stderr=True)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@click.command()
@click.option('--import_from', '-import_from', 'import_from', default=None,
              help='Deck file to import before the first prompt.')
@click.option('--export_to', '-export_to', 'export_to', default=None,
              help='Deck file to export to on exit.')
@click.option('--log-level', default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Diagnostic log level (default: WARNING).')
@click.option('--seed', type=int, default=None,
              help='Seed for choosing quiz cards.')
def main(import_from: str, export_to: str, log_level: str, seed: int) -> None:
    """
    Run an interactive flashcard session.

    Args:
        import_from (str): Deck file to import at startup.
        export_to (str): Deck file to export to at exit.
        log_level (str): Diagnostic log level.
        seed (int): Seed for the quiz card picker.
    """
    load_dotenv()
    config = Config.from_env(import_from=import_from, export_to=export_to,
                             log_level=log_level, seed=seed)
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info("Starting flashcard session")

    rng = random.Random(config.seed) if config.seed is not None else None
    shell = FlashcardShell(Flashcards(rng=rng), config=config)
    try:
        shell.run()
    except FlashcardError as e:
        logger.error(f"Session aborted: {str(e)}")
        error_console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)
    logger.info("Session finished")


if __name__ == "__main__":
    main()
