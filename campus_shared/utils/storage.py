"""
Record storage for the backend services

RecordStore is the interface handlers talk to; InMemoryRecordStore keeps
records for the lifetime of the process.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_record_id(raw: Any) -> Optional[int]:
    """
    Plain decimal ids such as "42" or "-3" become ints; anything else is None

    int() alone would also accept "1_0", "+5", " 5" and non-ASCII digits.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw)


class RecordStore(ABC, Generic[RecordT]):
    """Keyed collection of records with integer ids and an owner field"""

    @abstractmethod
    async def insert(self, record: RecordT) -> RecordT:
        """Store a record, assigning it the next id"""

    @abstractmethod
    async def find_by_id(self, record_id: int) -> Optional[RecordT]:
        """Return the record with this id, if any"""

    @abstractmethod
    async def find_by_owner(self, owner_id: int) -> List[RecordT]:
        """Return every record owned by owner_id"""

    @abstractmethod
    async def find_one(self, **fields: Any) -> Optional[RecordT]:
        """Return the first record whose attributes equal all of fields"""

    @abstractmethod
    async def list_all(self) -> List[RecordT]:
        """Return every record in insertion order"""

    @abstractmethod
    async def update(self, record_id: int, **changes: Any) -> Optional[RecordT]:
        """Apply changes to a record and return the updated copy"""

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Remove a record; False when it did not exist"""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored records"""


class InMemoryRecordStore(RecordStore[RecordT]):
    """
    Dict-backed store

    Records must be pydantic models with an ``id`` field. Copies are
    handed out so stored state only changes through update().
    """

    def __init__(self, model: Type[RecordT], owner_field: Optional[str] = None):
        self.model = model
        self.owner_field = owner_field
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def insert(self, record: RecordT) -> RecordT:
        async with self._lock:
            stored = record.model_copy(update={"id": self._next_id}, deep=True)
            self._records[self._next_id] = stored
            self._next_id += 1
        logger.debug("Record inserted", model=self.model.__name__, record_id=stored.id)
        return stored.model_copy(deep=True)

    async def find_by_id(self, record_id: int) -> Optional[RecordT]:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    async def find_by_owner(self, owner_id: int) -> List[RecordT]:
        if self.owner_field is None:
            raise TypeError(f"{self.model.__name__} records have no owner field")
        return [
            record.model_copy(deep=True)
            for record in self._records.values()
            if getattr(record, self.owner_field) == owner_id
        ]

    async def find_one(self, **fields: Any) -> Optional[RecordT]:
        for record in self._records.values():
            if all(getattr(record, key) == value for key, value in fields.items()):
                return record.model_copy(deep=True)
        return None

    async def list_all(self) -> List[RecordT]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    async def update(self, record_id: int, **changes: Any) -> Optional[RecordT]:
        async with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            updated = record.model_copy(update=changes, deep=True)
            self._records[record_id] = updated
        return updated.model_copy(deep=True)

    async def delete(self, record_id: int) -> bool:
        async with self._lock:
            return self._records.pop(record_id, None) is not None

    async def count(self) -> int:
        return len(self._records)
