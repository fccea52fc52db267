from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_description: str
    price: str


class Receipt(BaseModel):
    """
    A purchase receipt as submitted. The camelCase wire form lives in
    infra/api/schemas.py; this model only knows the domain names.

    Amounts, date and time stay as text here; they are parsed while scoring
    so the parse policy decides what an unparseable value means.
    """

    model_config = ConfigDict(frozen=True)

    retailer: str
    purchase_date: str
    purchase_time: str
    items: Tuple[Item, ...] = ()
    total: str


class ScoreRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    receipt_id: str
    points: int = Field(ge=0)
