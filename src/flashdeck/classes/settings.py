import os
from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    """Startup configuration.

    Attributes:
        import_from: Deck file imported once before the first prompt (default: None)
        export_to: Deck file written when the session exits (default: None)
        log_level: Level for diagnostic logging on stderr (default: "WARNING")
        seed: Seed for picking quiz cards, random when unset (default: None)
    """

    import_from: Optional[str] = None
    export_to: Optional[str] = None
    log_level: str = 'WARNING'
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, **overrides) -> 'Config':
        """Build a config from FLASHDECK_* variables, letting non-None overrides win."""
        values = {
            'import_from': os.getenv('FLASHDECK_IMPORT_FROM') or None,
            'export_to': os.getenv('FLASHDECK_EXPORT_TO') or None,
            'log_level': os.getenv('FLASHDECK_LOG_LEVEL') or 'WARNING',
            'seed': os.getenv('FLASHDECK_SEED') or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        values['log_level'] = values['log_level'].upper()
        return cls(**values)
