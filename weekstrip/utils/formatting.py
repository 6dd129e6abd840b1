from datetime import datetime

# en-US narrow weekday symbols, indexed by Python weekday (Mon=0 ... Sun=6)
NARROW_WEEKDAYS = ["M", "T", "W", "T", "F", "S", "S"]


def month_day(d: datetime) -> str:
    return d.strftime("%m/%d")


def day_number(d: datetime) -> str:
    return str(d.day)


def narrow_weekday(d: datetime) -> str:
    return NARROW_WEEKDAYS[d.weekday()]


def iso_day(d: datetime) -> str:
    return d.strftime("%Y-%m-%d")
