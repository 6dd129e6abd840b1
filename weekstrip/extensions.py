from flask import current_app

from .utils.clock import Clock, SystemClock
from .utils.dates import GregorianCalendar, parse_weekday

EXTENSION_KEY = "weekstrip"


class WeekStrip:
    """Calendar and clock shared by the blueprints of one app."""

    def __init__(self, app=None, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self.calendar = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        first_weekday = parse_weekday(app.config.get("FIRST_WEEKDAY"))
        if first_weekday == -1:
            app.logger.warning("Unknown FIRST_WEEKDAY %r", app.config.get("FIRST_WEEKDAY"))
        self.calendar = GregorianCalendar(first_weekday=first_weekday, clock=self.clock)
        app.extensions[EXTENSION_KEY] = self


def get_weekstrip() -> WeekStrip:
    return current_app.extensions[EXTENSION_KEY]
