import logging
from datetime import datetime

from flask import abort, jsonify, redirect, render_template, request, session, url_for
from markupsafe import Markup

from . import week_bp
from ..extensions import get_weekstrip
from ..utils.formatting import day_number, iso_day, month_day, narrow_weekday
from ..week_view import Direction, WeekCallbacks, WeekView

logger = logging.getLogger(__name__)

SESSION_KEY = "selected_date"


def parse_ymd(s: str | None):
    if not s:
        return None
    try:
        return datetime.strptime(s.strip(), "%Y-%m-%d")
    except ValueError:
        logger.warning("Ignoring malformed date %r", s)
        return None


def load_view() -> WeekView:
    """Rebuild the week view from the session, or from the clock's now."""
    strip = get_weekstrip()
    selected = None
    stored = session.get(SESSION_KEY)
    if stored:
        try:
            selected = datetime.fromisoformat(stored)
        except ValueError:
            logger.warning("Discarding stored selection %r", stored)
    return WeekView(strip.calendar, clock=strip.clock, selected_date=selected)


def save_view(view: WeekView) -> None:
    session[SESSION_KEY] = view.selected_date.isoformat()


def html_callbacks(view: WeekView) -> WeekCallbacks:
    calendar = view.calendar

    def day(d):
        return Markup(render_template(
            "week/_day.html",
            date=d,
            selected=view.is_selected(d),
            today=calendar.is_today(d),
        ))

    def header(d):
        return Markup(render_template("week/_header.html", date=d))

    # the title shows the selected day, not the month it is handed
    def title(month):
        return Markup(render_template("week/_title.html", month=month, selected=view.selected_date))

    def switcher(month):
        return Markup(render_template("week/_switcher.html", month=month))

    return WeekCallbacks(day=day, header=header, title=title, switcher=switcher)


@week_bp.route("/", methods=["GET"])
def strip():
    view = load_view()

    qdate = parse_ymd(request.args.get("date"))
    if qdate is not None:
        view.select_day(qdate)
        save_view(view)

    layout = view.render(html_callbacks(view))
    return render_template("week/index.html", layout=layout, selected=view.selected_date)


@week_bp.post("/select")
def select():
    view = load_view()
    d = parse_ymd(request.form.get("date"))
    if d is not None:
        view.select_day(d)
        save_view(view)
    return redirect(url_for("week.strip"))


@week_bp.post("/shift/<direction>")
def shift(direction):
    parsed = Direction.parse(direction)
    if parsed is None:
        abort(404)

    view = load_view()
    view.shift_week(parsed)
    save_view(view)
    return redirect(url_for("week.strip"))


@week_bp.post("/today")
def today():
    session.pop(SESSION_KEY, None)
    return redirect(url_for("week.strip"))


@week_bp.get("/api")
def api():
    view = load_view()

    qdate = parse_ymd(request.args.get("date"))
    if qdate is not None:
        view.select_day(qdate)

    calendar = view.calendar

    def day(d):
        return {
            "date": iso_day(d),
            "day": day_number(d),
            "weekday": narrow_weekday(d),
            "selected": view.is_selected(d),
            "today": calendar.is_today(d),
        }

    callbacks = WeekCallbacks(
        day=day,
        header=narrow_weekday,
        title=lambda month: month_day(view.selected_date),
        switcher=lambda month: {
            "previous": url_for("week.shift", direction="previous"),
            "next": url_for("week.shift", direction="next"),
        },
    )
    layout = view.render(callbacks)

    return jsonify(
        selected=view.selected_date.isoformat(),
        month=iso_day(view.month),
        switcher=layout.switcher,
        title=layout.title,
        headers=list(layout.headers),
        days=list(layout.days),
    )
