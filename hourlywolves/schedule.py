"""Cron schedules for webhook dispatch.

Expressions put the seconds field first, with an optional trailing year:

    sec  min  hour  day-of-month  month  day-of-week  [year]

The default ``0 30 * * * * *`` fires at second 0 of minute 30 of every hour.
Field syntax and ranges are those of croniter (day-of-week 0-6, Sunday = 0).
"""
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from croniter import croniter
from loguru import logger

from hourlywolves.exceptions import InvalidScheduleError
from hourlywolves.utils.dt import as_utc, get_utc_now

DEFAULT_SCHEDULE = '0 30 * * * * *'


def _to_croniter_expression(expression: str) -> str:
    """Reorder ``sec min hour dom mon dow [year]`` into croniter's field order."""
    fields = expression.split()
    if len(fields) not in (6, 7):
        raise InvalidScheduleError(
            f"Expected 6 or 7 fields (sec min hour day month weekday [year]), "
            f"got {len(fields)}: {expression!r}"
        )

    seconds, rest = fields[0], fields[1:]
    # croniter: min hour dom mon dow sec [year]
    reordered = rest[:5] + [seconds] + rest[5:]
    if len(reordered) == 7 and reordered[6] == '*':
        reordered = reordered[:6]
    return ' '.join(reordered)


@dataclass(frozen=True)
class Schedule:
    """A parsed cron expression producing upcoming UTC occurrences."""

    expression: str
    croniter_expression: str

    @classmethod
    def from_expression(cls, expression: str) -> "Schedule":
        """
        Parse a cron expression.

        :param expression: Six or seven field expression, seconds first
        :return: The parsed schedule
        :raises InvalidScheduleError: If the expression is malformed
        """
        croniter_expression = _to_croniter_expression(expression)
        if not croniter.is_valid(croniter_expression):
            raise InvalidScheduleError(f"Invalid cron expression: {expression!r}")
        try:
            croniter(croniter_expression, get_utc_now())
        except (ValueError, KeyError) as e:
            raise InvalidScheduleError(f"Invalid cron expression: {expression!r}") from e

        logger.debug(f"Parsed schedule {expression!r} as croniter {croniter_expression!r}")
        return cls(expression=expression, croniter_expression=croniter_expression)

    def upcoming(self, after: datetime | None = None) -> Iterator[datetime]:
        """
        Lazily yield every occurrence strictly after ``after`` (default now).

        The sequence is infinite and strictly increasing, and the same
        schedule and reference instant always yield the same sequence.
        """
        base = as_utc(after) if after is not None else get_utc_now()
        iterator = croniter(self.croniter_expression, base)
        while True:
            yield as_utc(iterator.get_next(datetime))

    def matches(self, dt: datetime) -> bool:
        """Whether ``dt`` is an occurrence of this schedule."""
        dt = as_utc(dt)
        if dt.microsecond:
            return False
        return next(self.upcoming(dt - timedelta(seconds=1))) == dt


def single_shot(now: datetime | None = None) -> Iterator[datetime]:
    """Yield one occurrence at the current instant, bypassing any schedule."""
    yield as_utc(now) if now is not None else get_utc_now()
