from flask import Blueprint

week_bp = Blueprint(
    "week",
    __name__,
    url_prefix="/week"
)

from . import routes  # noqa
