from __future__ import annotations

from fastapi import APIRouter, Depends

from core.points import PointsService
from infra.api.deps import get_points_service
from infra.api.schemas import PointsOut, ReceiptIdOut, ReceiptIn

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ReceiptIdOut)
def process_receipt(body: ReceiptIn, service: PointsService = Depends(get_points_service)) -> ReceiptIdOut:
    """
    Score a receipt and remember the result.

    Returns the generated id; a receipt that fails to score is rejected
    before anything is stored.
    """
    receipt_id = service.process_receipt(body.to_receipt())
    return ReceiptIdOut(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=PointsOut)
def get_points(receipt_id: str, service: PointsService = Depends(get_points_service)) -> PointsOut:
    return PointsOut(points=service.get_points(receipt_id))
