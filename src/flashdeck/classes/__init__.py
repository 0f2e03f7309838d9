from flashdeck.classes.commands import Command, CommandType, MENU_PROMPT
from flashdeck.classes.settings import Config

__all__ = ['Command', 'CommandType', 'MENU_PROMPT', 'Config']
