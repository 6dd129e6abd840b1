from datetime import datetime, timedelta

import pytest

from weekstrip.utils.dates import GregorianCalendar
from weekstrip.week_view import Direction, WeekCallbacks, WeekView


def recording_callbacks(calls):
    def record(kind):
        def callback(d):
            calls.append((kind, d))
            return f"{kind}:{d:%Y-%m-%d}"
        return callback

    return WeekCallbacks(
        day=record("day"),
        header=record("header"),
        title=record("title"),
        switcher=record("switcher"),
    )


def test_initial_selection_comes_from_clock(calendar, clock):
    view = WeekView(calendar, clock=clock)
    assert view.selected_date == datetime(2022, 3, 9, 10, 30)


def test_select_then_next_week(calendar, clock):
    view = WeekView(calendar, clock=clock)
    view.select_day(datetime(2022, 3, 10))
    view.shift_week(Direction.NEXT)

    assert view.selected_date == datetime(2022, 3, 17)
    assert view.week_dates[0] == datetime(2022, 3, 13)
    assert view.week_dates[-1] == datetime(2022, 3, 19)


def test_shift_round_trip_keeps_time_of_day(calendar, clock):
    view = WeekView(calendar, clock=clock)
    start = view.selected_date

    view.shift_week("next")
    assert view.selected_date == start + timedelta(weeks=1)
    view.shift_week("previous")
    assert view.selected_date == start


def test_previous_week_crosses_month(calendar, clock):
    view = WeekView(calendar, clock=clock, selected_date=datetime(2022, 3, 2))
    view.shift_week(Direction.PREVIOUS)
    assert view.selected_date == datetime(2022, 2, 23)
    assert view.month == datetime(2022, 2, 1)


def test_failed_shift_is_a_no_op(calendar, clock):
    last = datetime(9999, 12, 30)
    view = WeekView(calendar, clock=clock, selected_date=last)
    assert view.shift_week(Direction.NEXT) == last
    assert view.selected_date == last


def test_unknown_direction_raises(calendar, clock):
    view = WeekView(calendar, clock=clock)
    with pytest.raises(ValueError):
        view.shift_week("sideways")


@pytest.mark.parametrize("value, expected", [
    ("next", Direction.NEXT),
    ("PREVIOUS", Direction.PREVIOUS),
    (Direction.NEXT, Direction.NEXT),
    ("up", None),
])
def test_direction_parse(value, expected):
    assert Direction.parse(value) is expected


def test_week_dates_follow_selection(calendar, clock):
    view = WeekView(calendar, clock=clock)
    before = view.week_dates
    view.select_day(datetime(2022, 3, 12))
    assert view.week_dates == before
    view.select_day(datetime(2022, 3, 13))
    assert view.week_dates[0] == datetime(2022, 3, 13)


def test_render_invokes_each_callback(calendar, clock):
    calls = []
    view = WeekView(calendar, clock=clock)
    layout = view.render(recording_callbacks(calls))

    assert layout.title == "title:2022-03-01"
    assert layout.switcher == "switcher:2022-03-01"
    assert layout.headers[0] == "header:2022-03-06"
    assert len(layout.headers) == 7
    assert layout.days == tuple(f"day:2022-03-{n:02d}" for n in range(6, 13))
    assert [kind for kind, _ in calls].count("day") == 7


def test_render_with_malformed_calendar(clock):
    calls = []
    view = WeekView(GregorianCalendar(first_weekday=-1, clock=clock), clock=clock)
    layout = view.render(recording_callbacks(calls))

    assert layout.days == ()
    assert layout.headers == ()
    assert layout.title == "title:2022-03-01"


def test_is_selected(calendar, clock):
    view = WeekView(calendar, clock=clock)
    assert view.is_selected(datetime(2022, 3, 9))
    assert not view.is_selected(datetime(2022, 3, 8))
