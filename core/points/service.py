from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import Receipt
from .parsing import ParsePolicy
from .scorer import score_breakdown
from .store import ScoreStore

logger = logging.getLogger(__name__)


@dataclass
class PointsService:
    """
    Use-case orchestrator for scoring and lookup.

    Adapter provides the store; this service guarantees:
      - a receipt that fails to score never reaches the store
      - error codes/HTTP mapping stability via PointsError
      - no dependency on FastAPI
    """

    store: ScoreStore
    policy: ParsePolicy = ParsePolicy.STRICT

    def process_receipt(self, receipt: Receipt) -> str:
        breakdown = score_breakdown(receipt, self.policy)
        receipt_id = self.store.put(breakdown.total)
        logger.info("receipt processed id=%s points=%d", receipt_id, breakdown.total)
        logger.debug("receipt %s breakdown %s", receipt_id, breakdown.as_dict())
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        return self.store.get(receipt_id)
