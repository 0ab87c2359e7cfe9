"""Clock implementations supplying "now" to the engine's callers"""

from datetime import datetime


class SystemClock:
    """Local wall-clock time"""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same instant; used for tests and replaying a past day"""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
