from typing import Optional
from enum import Enum


class CommandType(Enum):
    """Shell command types.

    Values:
        ADD: Add a card interactively
        REMOVE: Remove a card by its term
        IMPORT: Load cards from a deck file
        EXPORT: Save cards to a deck file
        ASK: Quiz on random cards
        EXIT: Say goodbye and quit, exporting if configured
        LOG: Save the session transcript
        HARDEST_CARD: Report the most missed cards
        RESET_STATS: Zero every mistake counter
    """

    ADD = 'add'
    REMOVE = 'remove'
    IMPORT = 'import'
    EXPORT = 'export'
    ASK = 'ask'
    EXIT = 'exit'
    LOG = 'log'
    HARDEST_CARD = 'hardest card'
    RESET_STATS = 'reset stats'


MENU_PROMPT = (
    'Input the action ('
    + ', '.join(command.value for command in CommandType)
    + '):'
)


class Command:
    """Shell command parser and validator.

    Commands are matched exactly and are case-sensitive.

    Attributes:
        command: The trimmed raw command

    Properties:
        is_valid: Whether command is recognized
        type: Parsed command type
    """

    def __init__(self, raw_input: str):
        self.command = raw_input.strip()

    @property
    def is_valid(self) -> bool:
        return self.type is not None

    @property
    def type(self) -> Optional[CommandType]:
        try:
            return CommandType(self.command)
        except ValueError:
            return None
