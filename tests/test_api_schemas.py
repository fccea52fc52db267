from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.points import Receipt
from infra.api.schemas import ReceiptIn


def test_receipt_in_maps_wire_names_to_domain(target_payload):
    receipt = ReceiptIn.model_validate(target_payload).to_receipt()

    assert receipt.purchase_date == "2022-01-01"
    assert receipt.purchase_time == "13:01"
    assert receipt.items[1].short_description == "Emils Cheese Pizza"
    assert receipt.items[1].price == "12.25"
    assert len(receipt.items) == 5


def test_domain_receipt_does_not_accept_wire_names(target_payload):
    with pytest.raises(ValidationError):
        Receipt.model_validate(target_payload)


def test_domain_receipt_is_frozen(target_payload):
    receipt = ReceiptIn.model_validate(target_payload).to_receipt()
    with pytest.raises(ValidationError):
        receipt.total = "0.00"
