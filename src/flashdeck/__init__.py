"""Flashdeck - an interactive flashcard shell."""

from flashdeck.deck import Deck
from flashdeck.errors import (
    CardNotFoundError,
    DeckFileNotFoundError,
    DeckFormatError,
    DuplicateCardError,
    EmptyDeckError,
    EmptyFieldError,
    FlashcardError,
    FlashcardLoadError,
    FlashcardSaveError,
    InvalidInputError,
)
from flashdeck.hardest import HardestCards, find_hardest
from flashdeck.manager import Flashcards
from flashdeck.quiz import QuizEngine, QuizOutcome
from flashdeck.stats import StatsTracker
from flashdeck.storage import StorageManager

__all__ = [
    'Deck',
    'StatsTracker',
    'HardestCards',
    'find_hardest',
    'QuizEngine',
    'QuizOutcome',
    'StorageManager',
    'Flashcards',
    'FlashcardError',
    'EmptyFieldError',
    'DuplicateCardError',
    'CardNotFoundError',
    'EmptyDeckError',
    'InvalidInputError',
    'FlashcardLoadError',
    'DeckFileNotFoundError',
    'DeckFormatError',
    'FlashcardSaveError',
]
