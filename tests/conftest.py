from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from core.points import InMemoryScoreStore, Item, ParsePolicy, Receipt
from infra.api.app import create_app
from infra.api.settings import Settings


def _make_receipt(
    *,
    retailer: str = "Target",
    purchase_date: str = "2022-01-02",
    purchase_time: str = "13:01",
    items: Optional[List[Dict[str, str]]] = None,
    total: str = "35.35",
) -> Receipt:
    """Receipt that scores only what the caller changes (defaults earn retailer points only)."""
    items = items if items is not None else []
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        items=tuple(Item(short_description=i["shortDescription"], price=i["price"]) for i in items),
        total=total,
    )


@pytest.fixture
def make_receipt():
    return _make_receipt


TARGET_RECEIPT: Dict[str, Any] = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

MM_CORNER_RECEIPT: Dict[str, Any] = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_payload() -> Dict[str, Any]:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def mm_corner_payload() -> Dict[str, Any]:
    return copy.deepcopy(MM_CORNER_RECEIPT)

@pytest.fixture
def store() -> InMemoryScoreStore:
    return InMemoryScoreStore()


@pytest.fixture
def client(store):
    app = create_app(Settings(parse_policy=ParsePolicy.STRICT), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def lenient_client(store):
    app = create_app(Settings(parse_policy=ParsePolicy.LENIENT), store=store)
    with TestClient(app) as c:
        yield c
