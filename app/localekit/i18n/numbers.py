"""Locale-aware number, currency, percentage and size formatting.

Options are merged from the caller, the locale's ``number.*.format`` scopes
and the defaults below, in that order.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any, Mapping, Optional

from localekit.i18n.lookup import lookup
from localekit.i18n.models import I18nContext
from localekit.i18n.options import prepare_options
from localekit.i18n.translation import translate

NUMBER_FORMAT = {
    "precision": 3,
    "separator": ".",
    "delimiter": ",",
    "strip_insignificant_zeros": False,
}

CURRENCY_FORMAT = {
    "unit": "$",
    "precision": 2,
    "format": "%u%n",
    "sign_first": True,
    "delimiter": ",",
    "separator": ".",
}

PERCENTAGE_FORMAT = {
    "unit": "%",
    "precision": 3,
    "format": "%n%u",
    "separator": ".",
    "delimiter": "",
}

SIZE_UNITS = ["byte", "kb", "mb", "gb", "tb"]

# Used when the store carries no storage unit labels.
DEFAULT_STORAGE_UNITS = {
    "byte": {"one": "Byte", "other": "Bytes"},
    "kb": "KB",
    "mb": "MB",
    "gb": "GB",
    "tb": "TB",
}


def _fixed(number: Any, precision: int) -> str:
    """Round half-up to precision digits and render without exponent."""
    quantum = Decimal(1).scaleb(-precision)
    value = Decimal(str(number)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{value:f}"


def _group(digits: str, delimiter: str) -> str:
    buffer = []
    while digits:
        buffer.insert(0, digits[-3:])
        digits = digits[:-3]
    return delimiter.join(buffer)


def _digits(number: Any, options: Mapping[str, Any]) -> str:
    """Render abs(number) with grouping, separator and precision applied."""
    precision = int(options["precision"])
    parts = _fixed(abs(number), precision).split(".")
    integer = parts[0]
    fraction = parts[1] if len(parts) > 1 else ""

    formatted = _group(integer, options.get("delimiter") or "")

    if options.get("strip_insignificant_zeros") and fraction:
        fraction = fraction.rstrip("0")

    if precision > 0 and fraction:
        formatted += (options.get("separator") or "") + fraction

    return formatted


def to_number(
    context: I18nContext,
    number: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Format a number.

    Options: ``precision``, ``separator``, ``delimiter``,
    ``strip_insignificant_zeros``, ``format`` (``%n`` number, ``%u`` unit,
    ``%s`` sign), ``unit`` and ``sign_first``.

        to_number(ctx, 1234.5, {"precision": 2})   # "1,234.50"

    Infinite values render as ``Infinity`` and NaN as ``NaN``, placed into
    the format like any other number.

    Raises:
        TypeError: If number is not a real number.
    """
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise TypeError(f"Cannot format {number!r} as a number")

    options = prepare_options(options, lookup(context, "number.format"), NUMBER_FORMAT)

    if math.isnan(number):
        negative = False
        formatted = "NaN"
    else:
        negative = number < 0
        formatted = "Infinity" if math.isinf(number) else _digits(number, options)

    number_format = options.get("format") or "%n"
    sign = "-" if negative else ""

    if options.get("sign_first"):
        number_format = "%s" + number_format
    else:
        number_format = number_format.replace("%n", "%s%n", 1)

    unit = options.get("unit")
    return (
        number_format.replace("%u", "" if unit is None else str(unit), 1)
        .replace("%n", formatted, 1)
        .replace("%s", sign, 1)
    )


def to_currency(
    context: I18nContext,
    number: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Format a currency amount (``number.currency.format`` scope)."""
    options = prepare_options(
        options,
        lookup(context, "number.currency.format"),
        lookup(context, "number.format"),
        CURRENCY_FORMAT,
    )
    return to_number(context, number, options)


def to_percentage(
    context: I18nContext,
    number: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Format a percentage (``number.percentage.format`` scope)."""
    options = prepare_options(
        options,
        lookup(context, "number.percentage.format"),
        lookup(context, "number.format"),
        PERCENTAGE_FORMAT,
    )
    return to_number(context, number, options)


def to_human_size(
    context: I18nContext,
    number: Any,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Format a byte count as a readable size (1024-based, up to TB).

        to_human_size(ctx, 1024)        # "1KB"
        to_human_size(ctx, 1536)        # "1.5KB"
    """
    kb = 1024
    size = number
    iterations = 0

    while size >= kb and iterations < 4:
        size = size / kb
        iterations += 1

    unit_name = SIZE_UNITS[iterations]
    scope = f"number.human.storage_units.units.{unit_name}"
    default_unit = DEFAULT_STORAGE_UNITS[unit_name]

    if iterations == 0:
        unit = translate(context, scope, {"count": size, "default_value": default_unit})
        precision = 0
    else:
        unit = translate(context, scope, {"default_value": default_unit})
        precision = 0 if not math.isfinite(size) or size == int(size) else 1

    options = prepare_options(
        options,
        {"unit": unit, "precision": precision, "format": "%n%u", "delimiter": ""},
    )
    return to_number(context, size, options)
