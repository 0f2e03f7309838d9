"""Module for handling user input."""
from typing import Callable, Optional

from .errors import InvalidInputError
from .transcript import TranscriptLog


class UserInputHandler:
    """Reads lines from the user and records them in the transcript."""

    def __init__(self, transcript: TranscriptLog, read_line: Callable[[], str] = input):
        self.transcript = transcript
        self.read_line = read_line

    def get_input(self, prompt: Optional[str] = None) -> str:
        """Show an optional prompt, then return the next line trimmed of spaces."""
        if prompt is not None:
            self.transcript.write(prompt)
        try:
            raw = self.read_line()
        except EOFError:
            raise InvalidInputError("Input ended before the session was closed")
        self.transcript.record_input(raw)
        return raw.strip(" \r\n")
