"""Tee of everything shown to and typed by the user."""
import logging
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from .errors import FlashcardSaveError

logger = logging.getLogger(__name__)


class TranscriptLog:
    """
    Prints user-facing lines to the console and keeps a verbatim copy.

    Input lines are recorded with ``record_input`` so the saved log reads
    exactly like the terminal session.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._chunks: List[str] = []

    def write(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
        self._chunks.append(text + "\n")

    def record_input(self, line: str) -> None:
        self._chunks.append(line + "\n")

    def text(self) -> str:
        return "".join(self._chunks)

    def save(self, file_path: Union[str, Path]) -> None:
        """Write the transcript so far to ``file_path``, overwriting it."""
        try:
            with open(file_path, 'w', encoding='utf-8') as file:
                file.write(self.text())
        except OSError as e:
            logger.error(f"Error saving log to {file_path}: {str(e)}")
            raise FlashcardSaveError(f"Error saving log to {file_path}: {str(e)}") from e
        logger.info(f"Saved {len(self._chunks)} transcript lines to {file_path}")
