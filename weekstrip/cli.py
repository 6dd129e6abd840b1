import click
from flask.cli import with_appcontext

from .extensions import get_weekstrip
from .utils.dates import GregorianCalendar, parse_weekday
from .utils.formatting import day_number, month_day, narrow_weekday
from .week_view import WeekCallbacks, WeekView


@click.command("print-week")
@click.argument("day", required=False, type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--first-weekday", default=None, help="Weekday the week starts on, e.g. monday.")
@with_appcontext
def print_week(day, first_weekday):
    """Print the week strip for DAY (default: today)."""
    strip = get_weekstrip()
    calendar = strip.calendar
    if first_weekday:
        weekday = parse_weekday(first_weekday)
        if weekday == -1:
            raise click.BadParameter(f"unknown weekday {first_weekday!r}", param_hint="--first-weekday")
        calendar = GregorianCalendar(first_weekday=weekday, clock=strip.clock)

    view = WeekView(calendar, clock=strip.clock, selected_date=day)

    def cell(d):
        text = day_number(d).rjust(2)
        return f"[{text}]" if view.is_selected(d) else f" {text} "

    layout = view.render(WeekCallbacks(
        day=cell,
        header=lambda d: f"  {narrow_weekday(d)} ",
        title=lambda month: month_day(view.selected_date),
        switcher=lambda month: "<  >",
    ))

    if not layout.days:
        click.echo("Week could not be resolved.")
        return

    click.echo(f"{layout.title}  {layout.switcher}")
    click.echo("".join(layout.headers))
    click.echo("".join(layout.days))
