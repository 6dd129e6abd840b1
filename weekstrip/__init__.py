from flask import Flask, redirect, url_for

from .extensions import WeekStrip
from .utils import formatting


def create_app(test_config=None, clock=None):
    app = Flask(__name__)

    # ------------------
    # Config
    # ------------------
    app.config.from_object("weekstrip.config.Config")
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # ------------------
    # Extensions
    # ------------------
    WeekStrip(app, clock=clock)

    app.add_template_filter(formatting.month_day, "month_day")
    app.add_template_filter(formatting.day_number, "day_number")
    app.add_template_filter(formatting.narrow_weekday, "narrow_weekday")
    app.add_template_filter(formatting.iso_day, "iso_day")

    # ------------------
    # Blueprints
    # ------------------
    from .week import week_bp

    app.register_blueprint(week_bp)

    @app.get("/")
    def index():
        return redirect(url_for("week.strip"))

    # ------------------
    # CLI Commands
    # ------------------
    from .cli import print_week
    app.cli.add_command(print_week)

    return app
