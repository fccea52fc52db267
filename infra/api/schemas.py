from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from core.points import Item, Receipt


class ItemIn(BaseModel):
    shortDescription: str
    price: str


class ReceiptIn(BaseModel):
    retailer: str = Field(min_length=1)
    purchaseDate: str
    purchaseTime: str
    items: List[ItemIn] = Field(default_factory=list)
    total: str

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchaseDate,
            purchase_time=self.purchaseTime,
            items=tuple(Item(short_description=i.shortDescription, price=i.price) for i in self.items),
            total=self.total,
        )


class ReceiptIdOut(BaseModel):
    id: str


class PointsOut(BaseModel):
    points: int
