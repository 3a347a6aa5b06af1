"""Clock capability used by the time-dependent rules."""

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local wall-clock time."""
    return datetime.now()


def fixed_clock(moment: datetime) -> Clock:
    """Build a clock that always returns ``moment``."""

    def _clock() -> datetime:
        return moment

    return _clock
