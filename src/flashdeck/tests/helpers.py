"""Shared builders for scripted sessions."""
import io
import random
from typing import Callable, Iterable, Optional, Tuple

from rich.console import Console

from flashdeck.classes.settings import Config
from flashdeck.input_handlers import UserInputHandler
from flashdeck.manager import Flashcards
from flashdeck.shell import FlashcardShell
from flashdeck.transcript import TranscriptLog


def scripted(lines: Iterable[str]) -> Callable[[], str]:
    """Return a read_line callable that behaves like input() on a fixed script."""
    feed = iter(lines)

    def read_line() -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError
    return read_line


def quiet_transcript() -> Tuple[TranscriptLog, io.StringIO]:
    screen = io.StringIO()
    return TranscriptLog(Console(file=screen, width=200)), screen


def make_shell(lines: Iterable[str], config: Optional[Config] = None,
               seed: int = 0) -> Tuple[FlashcardShell, io.StringIO]:
    transcript, screen = quiet_transcript()
    session = Flashcards(transcript=transcript, rng=random.Random(seed))
    handler = UserInputHandler(transcript, read_line=scripted(lines))
    return FlashcardShell(session, handler, config), screen
