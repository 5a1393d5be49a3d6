"""Clock port: the only source of mutation timestamps in the shelf core."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock(Clock):
    """Deterministic clock for tests and replays.

    Returns the same instant until moved with ``advance()`` or ``set()``.
    """

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, **delta) -> datetime:
        self._instant = self._instant + timedelta(**delta)
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant
