from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import Any, Dict, Iterable

from .models import Item, Receipt
from .parsing import ParsePolicy, parse_amount, parse_purchase_date, parse_purchase_time

ALNUM_RE = re.compile(r"[A-Za-z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


@dataclass(frozen=True)
class PointsBreakdown:
    """Per-rule contributions for one receipt. ``total`` is the score."""

    retailer: int
    round_dollar: int
    quarter_multiple: int
    item_pairs: int
    descriptions: int
    odd_day: int
    afternoon: int

    @property
    def total(self) -> int:
        return (
            self.retailer
            + self.round_dollar
            + self.quarter_multiple
            + self.item_pairs
            + self.descriptions
            + self.odd_day
            + self.afternoon
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "retailer": self.retailer,
            "round_dollar": self.round_dollar,
            "quarter_multiple": self.quarter_multiple,
            "item_pairs": self.item_pairs,
            "descriptions": self.descriptions,
            "odd_day": self.odd_day,
            "afternoon": self.afternoon,
            "total": self.total,
        }


# ----------------------------
# Rules
# ----------------------------
def retailer_points(retailer: str) -> int:
    return len(ALNUM_RE.findall(retailer))


def round_dollar_points(total: Decimal) -> int:
    return ROUND_DOLLAR_POINTS if total == total.to_integral_value() else 0


def quarter_multiple_points(total: Decimal) -> int:
    # a multiple of 0.25 is one where total * 4 is whole
    quarters = total * 4
    return QUARTER_MULTIPLE_POINTS if quarters == quarters.to_integral_value() else 0


def item_pair_points(item_count: int) -> int:
    return (item_count // 2) * ITEM_PAIR_POINTS


def description_points(items: Iterable[Item], policy: ParsePolicy = ParsePolicy.STRICT) -> int:
    """
    ceil(price * 0.2) for each item whose trimmed description length is a
    positive multiple of 3. An empty description earns nothing. Every price
    is parsed so STRICT rejects a bad price on any item.
    """
    points = 0
    for idx, item in enumerate(items):
        price = parse_amount(f"items[{idx}].price", item.price, policy)
        length = len(item.short_description.strip())
        if length == 0 or length % 3 != 0:
            continue
        points += max(0, math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER))
    return points


def odd_day_points(day: int) -> int:
    return ODD_DAY_POINTS if day % 2 == 1 else 0


def afternoon_points(purchase_time: time) -> int:
    # both bounds exclusive
    return AFTERNOON_POINTS if AFTERNOON_START < purchase_time < AFTERNOON_END else 0


# ----------------------------
# Entry points
# ----------------------------
def score_breakdown(receipt: Receipt, policy: ParsePolicy = ParsePolicy.STRICT) -> PointsBreakdown:
    total = parse_amount("total", receipt.total, policy)
    purchase_date = parse_purchase_date(receipt.purchase_date, policy)
    purchase_time = parse_purchase_time(receipt.purchase_time, policy)

    return PointsBreakdown(
        retailer=retailer_points(receipt.retailer),
        round_dollar=round_dollar_points(total),
        quarter_multiple=quarter_multiple_points(total),
        item_pairs=item_pair_points(len(receipt.items)),
        descriptions=description_points(receipt.items, policy),
        odd_day=odd_day_points(purchase_date.day),
        afternoon=afternoon_points(purchase_time),
    )


def score_receipt(receipt: Receipt, policy: ParsePolicy = ParsePolicy.STRICT) -> int:
    """
    Score a receipt against the seven points rules.

    Deterministic and side-effect free. Under ``ParsePolicy.STRICT`` an
    unparseable total, price, date or time raises ``UnparseableFieldError``;
    under ``ParsePolicy.LENIENT`` it is read as its zero value.
    """
    return score_breakdown(receipt, policy).total
