"""Handles storage operations for flashcards.

Decks are stored one card per line:

    ("term":"definition"):(mistakes)

Quotes can't be escaped, so terms and definitions containing ``"`` do not
survive a round trip.
"""
import logging
import re
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Union

from typeguard import typechecked

from .deck import Deck
from .errors import DeckFileNotFoundError, DeckFormatError, FlashcardLoadError, FlashcardSaveError
from .stats import StatsTracker

logger = logging.getLogger(__name__)

CARD_LINE_PATTERN = re.compile(r'^\("([^"]+)":"([^"]+)"\):\((\d+)\)$', re.ASCII)


class CardRecord(NamedTuple):
    term: str
    definition: str
    mistakes: int


def encode_card(term: str, definition: str, mistakes: int) -> str:
    """Format a single card as a line, without the trailing newline."""
    if '"' in term or '"' in definition:
        logger.warning(f"Card {term!r} contains a quote and won't import back cleanly")
    return f'("{term}":"{definition}"):({mistakes})'


def encode(deck: Deck, stats: StatsTracker) -> List[str]:
    """Encode the deck as lines sorted by term."""
    return [encode_card(term, deck.lookup(term), stats.get(term))
            for term in sorted(deck.terms())]


def decode_line(line: str, line_number: Optional[int] = None) -> CardRecord:
    match = CARD_LINE_PATTERN.match(line)
    if match is None:
        raise DeckFormatError(line, line_number)
    term, definition, mistakes = match.groups()
    return CardRecord(term, definition, int(mistakes))


def decode(lines: Iterable[str]) -> List[CardRecord]:
    """
    Parse every non-empty line.

    Raises:
        DeckFormatError: On the first line that does not match the card format.
    """
    records = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        records.append(decode_line(line, line_number))
    return records


def apply_records(records: Iterable[CardRecord], deck: Deck, stats: StatsTracker) -> int:
    """Upsert decoded cards, overwriting their mistake counts."""
    count = 0
    for record in records:
        deck.upsert_card(record.term, record.definition)
        stats.set_count(record.term, record.mistakes)
        count += 1
    return count


class StorageManager:
    @staticmethod
    @typechecked
    def load_from_file(file_path: Union[str, Path], deck: Deck, stats: StatsTracker) -> int:
        """
        Import cards from a deck file into the deck and stats.

        The whole file is parsed before anything is applied, so a malformed
        line leaves the deck untouched.

        Args:
            file_path (str | Path): Path to the deck file.
            deck (Deck): Deck to upsert cards into.
            stats (StatsTracker): Stats whose counts are overwritten.

        Returns:
            int: Number of cards loaded.

        Raises:
            DeckFileNotFoundError: If the file does not exist.
            DeckFormatError: If any line is malformed.
            FlashcardLoadError: If the file can't be read or isn't UTF-8.
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                records = decode(file)
        except FileNotFoundError:
            logger.error(f"File not found: {file_path}")
            raise DeckFileNotFoundError(str(file_path))
        except DeckFormatError as e:
            logger.error(f"Invalid deck file {file_path}: {str(e)}")
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading flashcards from {file_path}: {str(e)}")
            raise FlashcardLoadError(f"Error loading flashcards from {file_path}: {str(e)}") from e

        loaded = apply_records(records, deck, stats)
        logger.info(f"Loaded {loaded} cards from {file_path}")
        return loaded

    @staticmethod
    @typechecked
    def save_to_file(file_path: Union[str, Path], deck: Deck, stats: StatsTracker) -> int:
        """Save the deck to a file, overwriting it.

        Args:
            file_path (str | Path): Path to the deck file to write.
            deck (Deck): Cards to save.
            stats (StatsTracker): Mistake counts saved next to each card.

        Returns:
            int: Number of cards saved.

        Raises:
            FlashcardSaveError: If there is an error writing to the file
        """
        lines = encode(deck, stats)
        try:
            with open(file_path, 'w', encoding='utf-8') as file:
                for line in lines:
                    file.write(line + "\n")
        except OSError as e:
            logger.error(f"Error saving flashcards to {file_path}: {str(e)}")
            raise FlashcardSaveError(f"Error saving flashcards to {file_path}: {str(e)}") from e
        logger.info(f"Saved {len(lines)} flashcards to {file_path}")
        return len(lines)
