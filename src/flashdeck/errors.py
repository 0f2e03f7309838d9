"""Exception types raised by the deck, storage and quiz layers."""
from typing import Optional


class FlashcardError(Exception):
    """Base exception class for Flashcard-related errors."""
    pass


class EmptyFieldError(FlashcardError):
    """Exception raised when a term or definition is empty."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Empty {kind}s are not allowed.")


class DuplicateCardError(FlashcardError):
    """Exception raised when a term or definition already exists in the deck."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f'The {kind} "{value}" already exists.')


class CardNotFoundError(FlashcardError):
    """Exception raised when a requested flashcard is not found."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f'Can\'t remove "{term}": there is no such card.')


class EmptyDeckError(FlashcardError):
    """Exception raised when a quiz is requested on a deck with no cards."""
    pass


class InvalidInputError(FlashcardError):
    """Exception raised when user input can't be interpreted."""
    pass


class FlashcardLoadError(FlashcardError):
    """Exception raised when there's an error loading flashcards."""
    pass


class DeckFileNotFoundError(FlashcardLoadError):
    """Exception raised when the file to import from does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class DeckFormatError(FlashcardLoadError):
    """Exception raised when a line of a deck file is malformed."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Malformed card line{location}: {line!r}")


class FlashcardSaveError(FlashcardError):
    """Exception raised when there's an error saving flashcards."""
    pass
