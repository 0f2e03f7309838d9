"""Manages flashcard operations for one session."""
import logging
import random
from pathlib import Path
from typing import Optional, Union

from .deck import Deck
from .hardest import HardestCards, find_hardest
from .quiz import QuizEngine
from .stats import StatsTracker
from .storage import StorageManager
from .transcript import TranscriptLog

# Logging setup
logger = logging.getLogger(__name__)


class Flashcards:
    """
    Owns the deck, the mistake counters and the transcript of a session.

    Removing a card from the deck drops its counter as well, whichever way
    the removal happens.
    """

    def __init__(self, transcript: Optional[TranscriptLog] = None,
                 rng: Optional[random.Random] = None):
        self.stats = StatsTracker()
        self.deck = Deck(on_remove=self.stats.drop_term)
        self.transcript = transcript or TranscriptLog()
        self.quiz = QuizEngine(rng)

    def add_card(self, term: str, definition: str) -> None:
        self.deck.add_card(term, definition)
        self.stats.track(term)

    def remove_card(self, term: str) -> None:
        self.deck.remove_card(term)

    def load_from_file(self, file_path: Union[str, Path]) -> int:
        """Import cards from a deck file."""
        return StorageManager.load_from_file(file_path, self.deck, self.stats)

    def save_to_file(self, file_path: Union[str, Path]) -> int:
        """Export cards to a deck file."""
        return StorageManager.save_to_file(file_path, self.deck, self.stats)

    def save_log(self, file_path: Union[str, Path]) -> None:
        self.transcript.save(file_path)

    def reset_stats(self) -> None:
        self.stats.reset()

    def hardest_cards(self) -> HardestCards:
        return find_hardest(self.stats)
