"""Per-term mistake counters."""
import logging
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)


class StatsTracker:
    """Counts wrong answers per term since the last reset."""

    def __init__(self) -> None:
        self._mistakes: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._mistakes)

    def __contains__(self, term: object) -> bool:
        return term in self._mistakes

    def track(self, term: str) -> None:
        """Start tracking a term at zero; keep an existing count."""
        self._mistakes.setdefault(term, 0)

    def record_mistake(self, term: str) -> int:
        self._mistakes[term] = self._mistakes.get(term, 0) + 1
        logger.debug(f"Mistake recorded for {term}: {self._mistakes[term]}")
        return self._mistakes[term]

    def set_count(self, term: str, count: int) -> None:
        if count < 0:
            raise ValueError(f"Mistake count can't be negative: {count}")
        self._mistakes[term] = count

    def reset(self) -> None:
        for term in self._mistakes:
            self._mistakes[term] = 0
        logger.info(f"Reset mistake counters for {len(self._mistakes)} terms")

    def drop_term(self, term: str) -> None:
        self._mistakes.pop(term, None)

    def get(self, term: str) -> int:
        return self._mistakes.get(term, 0)

    def all_entries(self) -> List[Tuple[str, int]]:
        return list(self._mistakes.items())
