from __future__ import annotations

import re
from datetime import date, time
from decimal import Decimal, InvalidOperation
from enum import Enum

from .errors import unparseable

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)
_AMOUNT_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)

# Keeps every rule inside the default 28-digit decimal context.
MAX_AMOUNT = Decimal("1000000000000")

# LENIENT fallbacks: the zero value of each field type.
ZERO_AMOUNT = Decimal("0")
ZERO_DATE = date.min  # 0001-01-01, day 1
ZERO_TIME = time.min  # 00:00


class ParsePolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


def parse_amount(field: str, raw: str, policy: ParsePolicy = ParsePolicy.STRICT) -> Decimal:
    """
    Parse a monetary amount exactly.

    STRICT accepts only plain ASCII text like ``12`` or ``12.25`` no larger
    than MAX_AMOUNT. LENIENT substitutes zero for anything that does not
    parse or is out of range; a negative amount is returned as-is and left
    to the rules to clamp.
    """
    text = raw.strip()
    if policy is ParsePolicy.STRICT and not _AMOUNT_RE.fullmatch(text):
        raise unparseable(field, raw, "is not a plain decimal amount")

    try:
        value = Decimal(text)
    except InvalidOperation:
        if policy is ParsePolicy.LENIENT:
            return ZERO_AMOUNT
        raise unparseable(field, raw, "is not a decimal amount")

    if not value.is_finite() or abs(value) > MAX_AMOUNT:
        if policy is ParsePolicy.LENIENT:
            return ZERO_AMOUNT
        raise unparseable(field, raw, f"must not exceed {MAX_AMOUNT}")
    return value


def parse_purchase_date(raw: str, policy: ParsePolicy = ParsePolicy.STRICT) -> date:
    if _DATE_RE.fullmatch(raw):
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
    if policy is ParsePolicy.LENIENT:
        return ZERO_DATE
    raise unparseable("purchaseDate", raw, "is not a YYYY-MM-DD date")


def parse_purchase_time(raw: str, policy: ParsePolicy = ParsePolicy.STRICT) -> time:
    if _TIME_RE.fullmatch(raw):
        try:
            return time.fromisoformat(raw)
        except ValueError:
            pass
    if policy is ParsePolicy.LENIENT:
        return ZERO_TIME
    raise unparseable("purchaseTime", raw, "is not a 24-hour HH:MM time")
