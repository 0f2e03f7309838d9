"""Interactive command loop."""
import logging
from typing import Callable, Dict, Optional

from .classes.commands import MENU_PROMPT, Command, CommandType
from .classes.settings import Config
from .deck import DEFINITION, TERM
from .errors import CardNotFoundError, DeckFileNotFoundError, EmptyDeckError
from .input_handlers import UserInputHandler
from .manager import Flashcards
from .output_handlers import OutputProcessor
from .quiz import parse_count

logger = logging.getLogger(__name__)


class FlashcardShell:
    """
    Reads commands one line at a time and runs them against a session.

    Every handler returns True when the shell should stop. Recoverable
    problems are reported and the loop continues; anything else propagates.
    """

    def __init__(self, session: Flashcards, input_handler: Optional[UserInputHandler] = None,
                 config: Optional[Config] = None):
        self.session = session
        self.input_handler = input_handler or UserInputHandler(session.transcript)
        self.config = config or Config()
        self.command_handlers: Dict[CommandType, Callable[[], bool]] = {
            CommandType.ADD: self.add_card,
            CommandType.REMOVE: self.remove_card,
            CommandType.IMPORT: self.import_cards,
            CommandType.EXPORT: self.export_cards,
            CommandType.ASK: self.ask,
            CommandType.EXIT: self.exit,
            CommandType.LOG: self.save_log,
            CommandType.HARDEST_CARD: self.hardest_card,
            CommandType.RESET_STATS: self.reset_stats,
        }

    def say(self, text: str = "") -> None:
        self.session.transcript.write(text)

    def read(self, prompt: Optional[str] = None) -> str:
        return self.input_handler.get_input(prompt)

    def run(self) -> None:
        """Import the startup deck if configured, then dispatch until exit."""
        import_from = (self.config.import_from or "").strip()
        if import_from:
            self._import_from(import_from)

        while True:
            command = Command(self.read(MENU_PROMPT))
            if not command.is_valid:
                logger.debug(f"Unknown command: {command.command!r}")
                self.say("No valid input")
                self.say()
                continue
            if self.command_handlers[command.type]():
                return

    def _read_field(self, kind: str, exists: Callable[[str], bool]) -> str:
        while True:
            value = self.read()
            if not value:
                self.say(OutputProcessor.format_empty(kind))
            elif exists(value):
                self.say(OutputProcessor.format_duplicate(kind, value))
            else:
                return value

    def add_card(self) -> bool:
        deck = self.session.deck
        self.say("The card:")
        term = self._read_field(TERM, deck.has_term)
        self.say("The definition of the card:")
        definition = self._read_field(DEFINITION, deck.has_definition)
        self.session.add_card(term, definition)
        self.say(OutputProcessor.format_added(term, definition))
        self.say()
        return False

    def remove_card(self) -> bool:
        term = self.read("Which card?")
        try:
            self.session.remove_card(term)
            self.say("The card has been removed.")
        except CardNotFoundError as e:
            self.say(str(e))
        self.say()
        return False

    def _import_from(self, file_path: str) -> None:
        try:
            loaded = self.session.load_from_file(file_path)
            self.say(f"{loaded} cards have been loaded.")
        except DeckFileNotFoundError:
            self.say("File not found.")
        self.say()

    def import_cards(self) -> bool:
        self._import_from(self.read("File name:"))
        return False

    def export_cards(self) -> bool:
        saved = self.session.save_to_file(self.read("File name:"))
        self.say(f"{saved} cards have been saved.")
        self.say()
        return False

    def _answer(self, term: str) -> str:
        return self.read(f'Print the definition of "{term}":')

    def ask(self) -> bool:
        times = parse_count(self.read("How many times to ask?"))
        try:
            self.session.quiz.ask(
                times, self.session.deck, self.session.stats, self._answer,
                on_outcome=lambda outcome: self.say(OutputProcessor.format_outcome(outcome)))
        except EmptyDeckError as e:
            self.say(str(e))
        self.say()
        return False

    def exit(self) -> bool:
        self.say("Bye bye!")
        export_to = (self.config.export_to or "").strip()
        if export_to:
            saved = self.session.save_to_file(export_to)
            self.say(f"{saved} cards have been saved.")
        return True

    def save_log(self) -> bool:
        self.session.save_log(self.read("File name:"))
        self.say("The log has been saved.")
        self.say()
        return False

    def hardest_card(self) -> bool:
        self.say(OutputProcessor.format_hardest(self.session.hardest_cards()))
        self.say()
        return False

    def reset_stats(self) -> bool:
        self.session.reset_stats()
        self.say("Card statistics have been reset.")
        self.say()
        return False
