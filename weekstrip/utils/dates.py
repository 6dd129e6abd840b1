import calendar as _calendar
import logging
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from enum import Enum

from .clock import Clock, SystemClock

logger = logging.getLogger(__name__)

# Python weekday: Mon=0 ... Sun=6
WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}
SUNDAY = WEEKDAYS["sunday"]

DAYS_IN_WEEK = 7
ONE_TICK = timedelta(microseconds=1)


class CalendarUnit(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class DateInterval:
    """Half-open [start, end) span of time."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class DateComponents:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0


def to_datetime(d) -> datetime:
    if isinstance(d, datetime):
        return d
    return datetime.combine(d, time.min)


def parse_weekday(name) -> int:
    """Map a weekday name ("sunday") or number (6) to a Python weekday.

    Unknown values map to -1, which GregorianCalendar treats as a malformed
    configuration instead of raising.
    """
    if isinstance(name, int):
        return name
    value = (name or "").strip().lower()
    if value.isdigit():
        return int(value)
    return WEEKDAYS.get(value, -1)


class CalendarSystem:
    """Date arithmetic used by the week strip.

    Every method that can fail returns None instead of raising.
    """

    def interval(self, unit: CalendarUnit, moment: datetime) -> DateInterval | None:
        raise NotImplementedError

    def start_of(self, unit: CalendarUnit, moment: datetime) -> datetime | None:
        found = self.interval(unit, moment)
        return found.start if found else None

    def add(self, unit: CalendarUnit, value: int, moment: datetime) -> datetime | None:
        raise NotImplementedError

    def components(self, moment: datetime) -> DateComponents:
        return DateComponents(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
        )

    def next_matching(self, after: datetime, matching: DateComponents) -> datetime | None:
        raise NotImplementedError

    def is_same_day(self, a: datetime, b: datetime) -> bool:
        return to_datetime(a).date() == to_datetime(b).date()

    def is_today(self, moment: datetime) -> bool:
        raise NotImplementedError


class GregorianCalendar(CalendarSystem):
    def __init__(self, first_weekday: int = SUNDAY, clock: Clock | None = None):
        self.first_weekday = first_weekday
        self.clock = clock or SystemClock()

    def __repr__(self):
        return f"GregorianCalendar(first_weekday={self.first_weekday})"

    def interval(self, unit, moment):
        moment = to_datetime(moment)
        try:
            if unit is CalendarUnit.DAY:
                start = datetime.combine(moment.date(), time.min, moment.tzinfo)
                return DateInterval(start, start + timedelta(days=1))

            if unit is CalendarUnit.WEEK:
                if not 0 <= self.first_weekday < DAYS_IN_WEEK:
                    logger.warning("Invalid first weekday %r", self.first_weekday)
                    return None
                day = datetime.combine(moment.date(), time.min, moment.tzinfo)
                delta = (day.weekday() - self.first_weekday) % DAYS_IN_WEEK
                start = day - timedelta(days=delta)
                return DateInterval(start, start + timedelta(days=DAYS_IN_WEEK))

            if unit is CalendarUnit.MONTH:
                start = datetime(moment.year, moment.month, 1, tzinfo=moment.tzinfo)
                return DateInterval(start, self._add_months(start, 1))
        except (OverflowError, ValueError):
            logger.warning("Cannot resolve %s interval for %s", unit.value, moment)
            return None

        return None

    def add(self, unit, value, moment):
        moment = to_datetime(moment)
        try:
            if unit is CalendarUnit.DAY:
                return moment + timedelta(days=value)
            if unit is CalendarUnit.WEEK:
                return moment + timedelta(weeks=value)
            if unit is CalendarUnit.MONTH:
                return self._add_months(moment, value)
        except (OverflowError, ValueError):
            logger.warning("Cannot add %s %s to %s", value, unit.value, moment)
            return None

        return None

    def next_matching(self, after, matching):
        # next-time policy: the first moment strictly after `after` whose
        # time of day equals the matching components
        after = to_datetime(after)
        try:
            candidate = after.replace(
                hour=matching.hour,
                minute=matching.minute,
                second=matching.second,
                microsecond=0,
            )
            if candidate <= after:
                candidate += timedelta(days=1)
        except (OverflowError, ValueError):
            return None
        return candidate

    def is_today(self, moment):
        return self.is_same_day(moment, self.clock.now())

    @staticmethod
    def _add_months(moment: datetime, months: int) -> datetime:
        index = moment.month - 1 + months
        year = moment.year + index // 12
        month = index % 12 + 1
        last_day = _calendar.monthrange(year, month)[1]
        return moment.replace(year=year, month=month, day=min(moment.day, last_day))


def start_of_month(calendar: CalendarSystem, moment) -> datetime:
    moment = to_datetime(moment)
    return calendar.start_of(CalendarUnit.MONTH, moment) or moment


def generate_dates(calendar: CalendarSystem, interval: DateInterval, matching: DateComponents):
    dates = [interval.start]
    current = interval.start
    while True:
        candidate = calendar.next_matching(current, matching)
        if candidate is None or candidate >= interval.end:
            break
        dates.append(candidate)
        current = candidate
    return dates


def generate_days(calendar: CalendarSystem, interval: DateInterval):
    return generate_dates(calendar, interval, calendar.components(interval.start))


def compute_week_dates(calendar: CalendarSystem, anchor) -> tuple[datetime, ...]:
    """Dates of the week containing `anchor`, in order.

    Returns an empty tuple when the calendar cannot resolve the week.
    """
    anchor = to_datetime(anchor)
    first_week = calendar.interval(CalendarUnit.WEEK, anchor)
    if first_week is None:
        logger.warning("No week interval for %s using %r", anchor, calendar)
        return ()

    last_week = calendar.interval(CalendarUnit.WEEK, first_week.end - ONE_TICK)
    if last_week is None:
        logger.warning("No closing week interval for %s using %r", anchor, calendar)
        return ()

    week = DateInterval(first_week.start, first_week.end)
    return tuple(generate_days(calendar, week))

