"""Bidirectional term/definition store."""
import logging
from typing import Callable, Dict, List, Optional

from typeguard import typechecked

from .errors import CardNotFoundError, DuplicateCardError, EmptyFieldError

logger = logging.getLogger(__name__)

TERM = "term"
DEFINITION = "definition"


class Deck:
    """
    Holds every card as two mappings, term -> definition and definition -> term.

    The two mappings are always mutual inverses. Removing a card notifies
    ``on_remove`` with the removed term so dependent state (mistake counters)
    can follow.
    """

    def __init__(self, on_remove: Optional[Callable[[str], None]] = None) -> None:
        self._definitions: Dict[str, str] = {}
        self._terms: Dict[str, str] = {}
        self.on_remove = on_remove

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, term: object) -> bool:
        return term in self._definitions

    def size(self) -> int:
        return len(self._definitions)

    def has_term(self, term: str) -> bool:
        return term in self._definitions

    def has_definition(self, definition: str) -> bool:
        return definition in self._terms

    def lookup(self, term: str) -> Optional[str]:
        return self._definitions.get(term)

    def reverse_lookup(self, definition: str) -> Optional[str]:
        return self._terms.get(definition)

    def terms(self) -> List[str]:
        """Return all terms in insertion order."""
        return list(self._definitions)

    @typechecked
    def add_card(self, term: str, definition: str) -> None:
        """
        Add a new card to the deck.

        Args:
            term (str): The front of the card.
            definition (str): The back of the card.

        Raises:
            EmptyFieldError: If either side is an empty string.
            DuplicateCardError: If the term or the definition is already used.
        """
        if not term:
            raise EmptyFieldError(TERM)
        if not definition:
            raise EmptyFieldError(DEFINITION)
        if term in self._definitions:
            raise DuplicateCardError(TERM, term)
        if definition in self._terms:
            raise DuplicateCardError(DEFINITION, definition)

        self._definitions[term] = definition
        self._terms[definition] = term
        logger.info(f'Added card ("{term}":"{definition}")')

    @typechecked
    def remove_card(self, term: str) -> str:
        """
        Remove a card and return its definition.

        Raises:
            CardNotFoundError: If the term is not in the deck.
        """
        if term not in self._definitions:
            logger.warning(f"Attempted to remove unknown card: {term}")
            raise CardNotFoundError(term)
        definition = self._unlink(term)
        logger.info(f"Removed card: {term}")
        return definition

    @typechecked
    def upsert_card(self, term: str, definition: str) -> List[str]:
        """
        Insert or overwrite a card, as done when importing.

        A previous definition of ``term`` is replaced. If ``definition``
        already belonged to a different term, that other card is removed.

        Returns:
            List[str]: Terms of cards that were removed to make room.
        """
        if not term:
            raise EmptyFieldError(TERM)
        if not definition:
            raise EmptyFieldError(DEFINITION)

        displaced: List[str] = []
        previous_owner = self._terms.get(definition)
        if previous_owner is not None and previous_owner != term:
            self._unlink(previous_owner)
            displaced.append(previous_owner)
            logger.info(f'Card "{previous_owner}" displaced by import of "{term}"')

        old_definition = self._definitions.get(term)
        if old_definition is not None and old_definition != definition:
            del self._terms[old_definition]

        self._definitions[term] = definition
        self._terms[definition] = term
        return displaced

    def _unlink(self, term: str) -> str:
        definition = self._definitions.pop(term)
        del self._terms[definition]
        if self.on_remove is not None:
            self.on_remove(term)
        return definition
