from datetime import datetime, timezone


class Clock:
    """Server-side time source injected into the session engine."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on DateTime(timezone=True) columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


system_clock = SystemClock()
