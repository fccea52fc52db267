from __future__ import annotations

import uuid
from typing import Callable, Dict, Protocol

from .errors import not_found
from .models import ScoreRecord
from .rwlock import ReadWriteLock

IdFactory = Callable[[], str]


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ScoreStore(Protocol):
    def put(self, points: int) -> str: ...
    def get(self, receipt_id: str) -> int: ...


class InMemoryScoreStore:
    """
    Process-lifetime map of receipt id -> ScoreRecord.

    Policy:
    - put() issues a fresh id and records it in one write section
    - get() never mutates; unknown id => ReceiptNotFoundError
    - no update, no delete
    """

    def __init__(self, id_factory: IdFactory = new_receipt_id) -> None:
        self._id_factory = id_factory
        self._lock = ReadWriteLock()
        self._records: Dict[str, ScoreRecord] = {}

    def put(self, points: int) -> str:
        with self._lock.write():
            receipt_id = self._id_factory()
            while receipt_id in self._records:
                receipt_id = self._id_factory()
            self._records[receipt_id] = ScoreRecord(receipt_id=receipt_id, points=points)
            return receipt_id

    def get(self, receipt_id: str) -> int:
        with self._lock.read():
            record = self._records.get(receipt_id)
        if record is None:
            raise not_found(receipt_id)
        return record.points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock.read():
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)
