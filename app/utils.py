import datetime
import re

from dateutil import parser as date_parser

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    text = (text or "").lower()
    return _NON_ALNUM.sub("-", text).strip("-")


def truncate(text: str, length: int) -> str:
    return (text or "")[:length]


def convert_date_to_string(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def date_sort_key(value) -> datetime.date:
    """Calendar date of a post date in any common format; unparseable dates sort last."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return date_parser.parse(str(value)).date()
    except (ValueError, OverflowError):
        return datetime.date.min
