"""State shared by every request to the course service."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from sqlalchemy.engine import Engine


@dataclass
class AppState:
    """The health message, a visit counter and the database engine."""

    health_check_response: str
    db: Engine
    visit_count: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def next_visit(self) -> int:
        """Return the current visit count and add one to it, atomically."""
        with self._lock:
            count = self.visit_count
            self.visit_count += 1
            return count