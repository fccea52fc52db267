from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(eq=False)
class PointsError(Exception):
    """
    Core-level receipt points error.

    code: stable machine-readable code
    http_status: intended mapping (400/404)
    detail: human readable
    meta: optional structured diagnostics
    """

    code: str
    http_status: int
    detail: str
    meta: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.detail}"


class MalformedReceiptError(PointsError):
    """Payload cannot be turned into a Receipt."""


class UnparseableFieldError(MalformedReceiptError):
    """A total/price/date/time field failed to parse while scoring (strict policy)."""


class ReceiptNotFoundError(PointsError):
    pass


def malformed(detail: str, meta: Optional[Dict[str, Any]] = None) -> MalformedReceiptError:
    return MalformedReceiptError(code="RECEIPT_MALFORMED", http_status=400, detail=detail, meta=meta)


def unparseable(field: str, value: Any, reason: str) -> UnparseableFieldError:
    return UnparseableFieldError(
        code="RECEIPT_FIELD_UNPARSEABLE",
        http_status=400,
        detail=f"{field} {reason}",
        meta={"field": field, "value": value},
    )


def not_found(receipt_id: str) -> ReceiptNotFoundError:
    return ReceiptNotFoundError(
        code="RECEIPT_NOT_FOUND",
        http_status=404,
        detail="No receipt found for that id.",
        meta={"receipt_id": receipt_id},
    )
