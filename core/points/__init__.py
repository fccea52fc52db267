from .errors import (
    MalformedReceiptError,
    PointsError,
    ReceiptNotFoundError,
    UnparseableFieldError,
)
from .models import Item, Receipt, ScoreRecord
from .parsing import ParsePolicy
from .scorer import PointsBreakdown, score_breakdown, score_receipt
from .store import InMemoryScoreStore, ScoreStore, new_receipt_id
from .service import PointsService

__all__ = [
    "MalformedReceiptError",
    "PointsError",
    "ReceiptNotFoundError",
    "UnparseableFieldError",
    "Item",
    "Receipt",
    "ScoreRecord",
    "ParsePolicy",
    "PointsBreakdown",
    "score_breakdown",
    "score_receipt",
    "InMemoryScoreStore",
    "ScoreStore",
    "new_receipt_id",
    "PointsService",
]
