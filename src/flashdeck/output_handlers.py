"""Module for formatting messages shown to the user."""
from .hardest import HardestCards
from .quiz import QuizOutcome


class OutputProcessor:
    """Formats results into user-facing lines."""

    @staticmethod
    def format_added(term: str, definition: str) -> str:
        return f'The pair ("{term}":"{definition}") has been added.'

    @staticmethod
    def format_duplicate(kind: str, value: str) -> str:
        label = "card" if kind == "term" else kind
        return f'The {label} "{value}" already exists. Try again:'

    @staticmethod
    def format_empty(kind: str) -> str:
        return f"Empty {kind}s are not allowed. Try again:"

    @staticmethod
    def format_outcome(outcome: QuizOutcome) -> str:
        """Format the verdict on a single quiz answer."""
        if outcome.correct:
            return "Correct!"
        message = f'Wrong. The right answer is "{outcome.expected_definition}"'
        if outcome.cross_match_term is not None:
            message += f', but your definition is correct for "{outcome.cross_match_term}"'
        return message + "."

    @staticmethod
    def format_hardest(result: HardestCards) -> str:
        if not result.terms:
            return "There are no cards with errors."
        if len(result.terms) == 1:
            return (f'The hardest card is "{result.terms[0]}". '
                    f'You have {result.count} errors answering it.')
        quoted = ", ".join(f'"{term}"' for term in result.terms)
        return f"The hardest cards are {quoted}. You have {result.count} errors answering them."
