"""Quizzes the user on random cards and scores the answers."""
import logging
import random
import re
from typing import Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from .deck import Deck
from .errors import EmptyDeckError, InvalidInputError
from .stats import StatsTracker

logger = logging.getLogger(__name__)


class QuizOutcome(BaseModel):
    """Result of asking a single card.

    Attributes:
        term: The card that was asked
        expected_definition: The right answer
        user_answer: What the user typed
        correct: Whether the answer matched exactly
        cross_match_term: Another card whose definition the answer matches, if any
    """

    term: str
    expected_definition: str
    user_answer: str
    correct: bool
    cross_match_term: Optional[str] = None


COUNT_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)


def parse_count(text: str) -> int:
    """Parse the number of questions to ask; only ASCII digits with an optional sign."""
    if not COUNT_PATTERN.fullmatch(text):
        raise InvalidInputError(f"Expected a whole number of questions, got {text!r}")
    count = int(text)
    if count < 0:
        raise InvalidInputError(f"Number of questions can't be negative: {count}")
    return count


class QuizEngine:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    @staticmethod
    def snapshot(deck: Deck) -> Tuple[str, ...]:
        """Freeze the terms to draw from for one quiz session."""
        return tuple(deck.terms())

    def ask_once(self, deck: Deck, stats: StatsTracker, term_pool: Sequence[str],
                 answer_fn: Callable[[str], str]) -> QuizOutcome:
        """
        Ask one random card from ``term_pool``.

        ``answer_fn`` receives the term and returns the user's answer. A wrong
        answer adds a mistake to the asked term only.
        """
        if not term_pool:
            raise EmptyDeckError("There are no cards to ask.")
        term = term_pool[self.rng.randrange(len(term_pool))]
        expected = deck.lookup(term)
        answer = answer_fn(term)

        if answer == expected:
            return QuizOutcome(term=term, expected_definition=expected,
                               user_answer=answer, correct=True)

        stats.record_mistake(term)
        return QuizOutcome(term=term, expected_definition=expected, user_answer=answer,
                           correct=False, cross_match_term=deck.reverse_lookup(answer))

    def ask(self, times: int, deck: Deck, stats: StatsTracker,
            answer_fn: Callable[[str], str],
            on_outcome: Optional[Callable[[QuizOutcome], None]] = None) -> List[QuizOutcome]:
        """Ask ``times`` questions drawn from a single snapshot of the deck."""
        if times < 0:
            raise InvalidInputError(f"Number of questions can't be negative: {times}")
        term_pool = self.snapshot(deck)
        if times and not term_pool:
            raise EmptyDeckError("There are no cards to ask.")

        outcomes = []
        for _ in range(times):
            outcome = self.ask_once(deck, stats, term_pool, answer_fn)
            if on_outcome is not None:
                on_outcome(outcome)
            outcomes.append(outcome)
        logger.info(f"Quiz finished: {sum(o.correct for o in outcomes)}/{times} correct")
        return outcomes
