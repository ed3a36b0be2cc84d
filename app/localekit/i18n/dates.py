"""Date parsing and strftime-style formatting with translated names."""

import re
from datetime import date as date_type
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from numbers import Real
from typing import Any, List, Mapping, Union

from localekit.i18n.lookup import lookup
from localekit.i18n.models import I18nContext
from localekit.i18n.options import prepare_options
from localekit.logging import get_module_logger

logger = get_module_logger()

DATE = {
    "day_names": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    "abbr_day_names": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    "month_names": [None, "January", "February", "March", "April", "May", "June",
                    "July", "August", "September", "October", "November", "December"],
    "abbr_month_names": [None, "Jan", "Feb", "Mar", "Apr", "May", "Jun",
                         "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "meridian": ["AM", "PM"],
}

ISO_DATE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:[ T](\d{2}):(\d{2}):(\d{2})([.,]\d{1,3})?)?"
    r"(Z|[+-]\d{2}:?\d{2})?"
)

# `Wed Jul 20 13:03:39 +0000 2011`
TEXTUAL_DATE = re.compile(
    r"([A-Z][a-z]{2}) ([A-Z][a-z]{2}) (\d+) (\d+:\d+:\d+) ([+-]\d{4}) (\d{4})"
)

DIRECTIVE = re.compile(r"%(-?)([aAbBdeHImMpSwyYz])")


class InvalidDate:
    """Result of parsing a value that is not a date."""

    def __str__(self) -> str:
        return "Invalid Date"

    def __repr__(self) -> str:
        return "INVALID_DATE"

    def __bool__(self) -> bool:
        return False


INVALID_DATE = InvalidDate()

ParsedDate = Union[datetime, InvalidDate]


def _offset(value: str) -> timezone:
    if value == "Z":
        return timezone.utc
    sign = -1 if value[0] == "-" else 1
    digits = value[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
    return timezone(sign * delta)


def parse_date(value: Any) -> ParsedDate:
    """Convert a value into a datetime.

    Accepted input:
        - ``datetime``: returned unchanged
        - ``date``: midnight of that day
        - int/float: UNIX timestamp in milliseconds (UTC)
        - ``yyyy-mm-dd[ T]hh:mm:ss[.fff][Z|+hh:mm]``: UTC when a zone is
          given, naive local time otherwise
        - ``Wed Jul 20 13:03:39 +0000 2011``
        - other ISO 8601 and RFC 2822 strings

    Returns:
        A datetime, or INVALID_DATE when the value can't be parsed.
    """
    if isinstance(value, (datetime, InvalidDate)):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, Real) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning("invalid_date", value=repr(value))
            return INVALID_DATE
    if not isinstance(value, str):
        logger.warning("invalid_date", value=repr(value))
        return INVALID_DATE

    try:
        return _parse_string(value)
    except ValueError:
        logger.warning("invalid_date", value=value)
        return INVALID_DATE


def _parse_string(value: str) -> datetime:
    matches = ISO_DATE.search(value)
    if matches:
        year, month, day, hour, minute, second = (
            int(part or 0) for part in matches.groups()[:6]
        )
        fraction = matches.group(7)
        microsecond = 0
        if fraction:
            milliseconds = round(float("0." + fraction[1:]) * 1000)
            microsecond = milliseconds * 1000

        zone = matches.group(8)
        if zone:
            parsed = datetime(year, month, day, hour, minute, second, microsecond, tzinfo=_offset(zone))
            return parsed.astimezone(timezone.utc)
        return datetime(year, month, day, hour, minute, second, microsecond)

    textual = TEXTUAL_DATE.search(value)
    if textual:
        return datetime.strptime(textual.group(0), "%a %b %d %H:%M:%S %z %Y")

    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is None:
        raise ValueError(f"Unrecognized date: {value}")
    return parsed


def meridian(context: I18nContext) -> List[str]:
    """Return the AM/PM labels.

    Reads ``time.am``/``time.pm`` first, then ``date.meridian``, then the
    built-in defaults.
    """
    time_options = lookup(context, "time")
    date_options = lookup(context, "date")

    if isinstance(time_options, Mapping) and time_options.get("am") and time_options.get("pm"):
        return [time_options["am"], time_options["pm"]]
    if isinstance(date_options, Mapping) and date_options.get("meridian"):
        return list(date_options["meridian"])
    return DATE["meridian"]


def _padding(number: int) -> str:
    return f"0{number}"[-2:]


def _timezone_offset(value: datetime) -> str:
    offset = value.utcoffset() if value.tzinfo else value.astimezone().utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def strftime(context: I18nContext, value: datetime, format: str) -> str:
    """Format a datetime with translated day and month names.

    Directives:
        %a  - The abbreviated weekday name (Sun)
        %A  - The full weekday name (Sunday)
        %b  - The abbreviated month name (Jan)
        %B  - The full month name (January)
        %d  - Day of the month (01..31)
        %-d - Day of the month (1..31)
        %e  - Day of the month (1..31)
        %H  - Hour of the day, 24-hour clock (00..23)
        %-H - Hour of the day, 24-hour clock (0..23)
        %I  - Hour of the day, 12-hour clock (01..12)
        %-I - Hour of the day, 12-hour clock (1..12)
        %m  - Month of the year (01..12)
        %-m - Month of the year (1..12)
        %M  - Minute of the hour (00..59)
        %-M - Minute of the hour (0..59)
        %p  - Meridian indicator (AM or PM)
        %S  - Second of the minute (00..60)
        %-S - Second of the minute (0..60)
        %w  - Day of the week (Sunday is 0, 0..6)
        %y  - Year without a century (00..99)
        %-y - Year without a century (0..99)
        %Y  - Year with century
        %z  - Timezone offset (+0545)

    Any other text, including unknown directives, is copied as is.
    """
    if isinstance(value, InvalidDate):
        return str(value)

    options = prepare_options(lookup(context, "date"), DATE)
    meridian_options = meridian(context)

    week_day = (value.weekday() + 1) % 7
    day = value.day
    year = value.year
    month = value.month
    hour = value.hour
    hour12 = hour
    if hour12 > 12:
        hour12 -= 12
    elif hour12 == 0:
        hour12 = 12

    padded = {
        "d": _padding(day),
        "H": _padding(hour),
        "I": _padding(hour12),
        "m": _padding(month),
        "M": _padding(value.minute),
        "S": _padding(value.second),
        "y": _padding(year % 100),
    }
    plain = {
        "a": lambda: options["abbr_day_names"][week_day],
        "A": lambda: options["day_names"][week_day],
        "b": lambda: options["abbr_month_names"][month],
        "B": lambda: options["month_names"][month],
        "e": lambda: day,
        "p": lambda: meridian_options[1 if hour > 11 else 0],
        "w": lambda: week_day,
        "Y": lambda: year,
        "z": lambda: _timezone_offset(value),
    }

    def replace(match) -> str:
        unpadded, directive = match.groups()
        if directive in padded:
            text = padded[directive]
            return str(int(text)) if unpadded else text
        if unpadded:
            return match.group(0)
        return str(plain[directive]())

    return DIRECTIVE.sub(replace, format)


def to_time(context: I18nContext, scope: str, value: Any) -> str:
    """Parse value and format it with the format stored under scope."""
    parsed = parse_date(value)
    format = lookup(context, scope)

    if isinstance(parsed, InvalidDate):
        return str(parsed)
    if not format or not isinstance(format, str):
        return str(parsed)

    return strftime(context, parsed, format)
