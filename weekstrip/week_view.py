import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from .utils.clock import Clock, SystemClock
from .utils.dates import (
    DAYS_IN_WEEK,
    CalendarSystem,
    CalendarUnit,
    compute_week_dates,
    start_of_month,
    to_datetime,
)

logger = logging.getLogger(__name__)


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            return None


@dataclass(frozen=True)
class WeekCallbacks:
    """The four pieces a week strip is drawn from.

    day(date)      -> one day cell; the callback decides highlighting
    header(date)   -> one weekday label
    title(month)   -> the month/period title
    switcher(month)-> the previous/next controls
    """

    day: Callable[[datetime], Any]
    header: Callable[[datetime], Any]
    title: Callable[[datetime], Any]
    switcher: Callable[[datetime], Any]


@dataclass(frozen=True)
class WeekLayout:
    title: Any
    switcher: Any
    headers: tuple
    days: tuple


class WeekView:
    def __init__(self, calendar: CalendarSystem, clock: Clock | None = None, selected_date=None):
        self.calendar = calendar
        self.clock = clock or SystemClock()
        if selected_date is None:
            selected_date = self.clock.now()
        self.selected_date = to_datetime(selected_date)

    @property
    def week_dates(self) -> tuple[datetime, ...]:
        return compute_week_dates(self.calendar, self.selected_date)

    @property
    def month(self) -> datetime:
        return start_of_month(self.calendar, self.selected_date)

    def select_day(self, d) -> datetime:
        self.selected_date = to_datetime(d)
        logger.debug("Selected %s", self.selected_date)
        return self.selected_date

    def shift_week(self, direction) -> datetime:
        parsed = Direction.parse(direction)
        if parsed is None:
            raise ValueError(f"Unknown direction: {direction!r}")

        moved = self.calendar.add(CalendarUnit.WEEK, parsed.value, self.selected_date)
        if moved is None:
            logger.warning("Cannot shift %s from %s", parsed.name.lower(), self.selected_date)
            return self.selected_date

        self.selected_date = moved
        logger.debug("Shifted %s to %s", parsed.name.lower(), moved)
        return moved

    def is_selected(self, d) -> bool:
        return self.calendar.is_same_day(d, self.selected_date)

    def render(self, callbacks: WeekCallbacks) -> WeekLayout:
        month = self.month
        days = self.week_dates
        return WeekLayout(
            title=callbacks.title(month),
            switcher=callbacks.switcher(month),
            headers=tuple(callbacks.header(d) for d in days[:DAYS_IN_WEEK]),
            days=tuple(callbacks.day(d) for d in days),
        )
