"""
Standalone helpers
------------------
Lambdas that are not bound to a field. Except for ``selected``, each renders
its section text in the current scope before transforming it.

{{#currency}}{{amount}}{{/currency}}          — £10, £10.50; non-numbers unchanged
{{#date}}{{dob}}|D MMM YYYY{{/date}}          — moment-style format, default "D MMMM YYYY"
{{#hyphenate}}{{name}}{{/hyphenate}}          — "Full Name" → "full-name"
{{#uppercase}}..{{/uppercase}}  {{#lowercase}}..{{/lowercase}}
{{#selected}}contact=email{{/selected}}       — ' checked="checked"' when values match
{{#time}}Arrive by 12:00pm{{/time}}           — 12:00am/12:00pm → midnight/midday
{{#t}}buttons.back{{/t}}                      — translate
{{#url}}./next-step{{/url}}                   — resolve against the request base path

Format tokens (moment-compatible subset):
  YYYY YY  MMMM MMM MM M  Do DD D  dddd ddd  HH H hh h  mm ss  A a  [literal]
"""

from __future__ import annotations

import calendar
import logging
import posixpath
import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

from .context import as_string
from .params import Render, split_assignment, split_pipe

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

_MOMENT_TOKEN = re.compile(
    r'\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|HH|H|hh|h|mm|ss|A|a'
)


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_FORMAT_TOKENS = {
    "YYYY": lambda dt: f"{dt.year:04d}",
    "YY":   lambda dt: f"{dt.year % 100:02d}",
    "MMMM": lambda dt: calendar.month_name[dt.month],
    "MMM":  lambda dt: calendar.month_abbr[dt.month],
    "MM":   lambda dt: f"{dt.month:02d}",
    "M":    lambda dt: str(dt.month),
    "Do":   lambda dt: _ordinal(dt.day),
    "DD":   lambda dt: f"{dt.day:02d}",
    "D":    lambda dt: str(dt.day),
    "dddd": lambda dt: calendar.day_name[dt.weekday()],
    "ddd":  lambda dt: calendar.day_abbr[dt.weekday()],
    "HH":   lambda dt: f"{dt.hour:02d}",
    "H":    lambda dt: str(dt.hour),
    "hh":   lambda dt: f"{_hour12(dt):02d}",
    "h":    lambda dt: str(_hour12(dt)),
    "mm":   lambda dt: f"{dt.minute:02d}",
    "ss":   lambda dt: f"{dt.second:02d}",
    "A":    lambda dt: "AM" if dt.hour < 12 else "PM",
    "a":    lambda dt: "am" if dt.hour < 12 else "pm",
}


def format_date(dt: datetime, fmt: str) -> str:
    """Replace moment-style tokens in *fmt* with values from *dt*."""
    def token(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return _FORMAT_TOKENS[match.group(0)](dt)
    return _MOMENT_TOKEN.sub(token, fmt)


def format_currency(text: str, symbol: str = "£") -> str:
    match = _LEADING_NUMBER.match(text or "")
    if not match:
        return text
    value = float(match.group(1))
    if value % 1 == 0:
        amount = str(int(value))
    else:
        amount = f"{value:.2f}"
    return f"{symbol}{amount}"


def humanise_time(text: str) -> str:
    text = re.sub(r'12:00am', "midnight", text, flags=re.IGNORECASE)
    text = re.sub(r'12:00pm', "midday", text, flags=re.IGNORECASE)
    text = re.sub(r'^midnight', "Midnight", text)
    return re.sub(r'^midday', "Midday", text)


def _render(text: Optional[str], render: Optional[Render]) -> str:
    text = text or ""
    return render(text) if render is not None else text


# -----------------------------------------------------------------------------

def register(registry) -> None:

    @registry.register("currency")
    def currency(ctx, text, render=None):
        return format_currency(_render(text, render), ctx.settings.currency_symbol)

    @registry.register("date")
    def date(ctx, text, render=None):
        value, fmt = split_pipe(text)
        value = _render(value, render).strip()
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            logger.debug("date: unparseable value %r", value)
            return value
        return format_date(parsed, fmt or ctx.settings.default_date_format)

    @registry.register("hyphenate")
    def hyphenate(ctx, text, render=None):
        return re.sub(r'\s+', "-", _render(text, render).strip().lower())

    @registry.register("uppercase")
    def uppercase(ctx, text, render=None):
        return _render(text, render).upper()

    @registry.register("lowercase")
    def lowercase(ctx, text, render=None):
        return _render(text, render).lower()

    @registry.register("selected")
    def selected(ctx, text, render=None):
        name, expected = split_assignment(text)
        if ctx.has_value(name) and as_string(ctx.value(name)) == expected:
            return ' checked="checked"'
        return ""

    @registry.register("time")
    def time(ctx, text, render=None):
        return humanise_time(_render(text, render))

    @registry.register("t")
    def t(ctx, text, render=None):
        return ctx.translator.t(_render(text, render).strip())

    @registry.register("url")
    def url(ctx, text, render=None):
        target = _render(text, render).strip()
        if ctx.base_url:
            return posixpath.normpath(posixpath.join(ctx.base_url, target))
        return target
