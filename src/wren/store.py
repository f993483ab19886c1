"""In-memory record store.

One ``threading.Lock`` guards the whole collection. Every public
operation takes the lock for exactly one logical step (a full list,
create, delete, or update) and releases it before returning, so callers
render from a snapshot and never hold the lock across string formatting.

Free-threading note (3.14t):
    The lock is the only synchronization; the underlying list is never
    handed out. ``list()`` returns a fresh copy taken under the lock.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from wren.errors import WrenError

logger = logging.getLogger("wren.store")


@dataclass(frozen=True, slots=True)
class Record:
    """A to-do item. Identity is ``id``; ``text`` is free-form."""

    id: int
    text: str


class StoreError(WrenError):
    """Base for record store failures."""


class DuplicateRecord(StoreError):
    """A record with this id already exists."""

    def __init__(self, record_id: int) -> None:
        self.record_id = record_id
        super().__init__(f"Record {record_id} already exists")


class RecordNotFound(StoreError):
    """No record has this id."""

    def __init__(self, record_id: int) -> None:
        self.record_id = record_id
        super().__init__(f"Record {record_id} not found")


class RecordStore:
    """Thread-safe, insertion-ordered collection of unique records.

    Operations are O(n) linear scans; the collection is expected to stay
    small. Failures raise ``DuplicateRecord`` / ``RecordNotFound`` and leave
    the collection untouched. Nothing is retried.

    Usage::

        store = RecordStore()
        store.create(Record(1, "buy milk"))
        store.update(1, Record(1, "buy oat milk"))
        store.list()  # [Record(id=1, text='buy oat milk')]
    """

    __slots__ = ("_lock", "_records")

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._lock = threading.Lock()
        self._records: list[Record] = []
        for record in records:
            self.create(record)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({self.list()!r})"

    def list(self) -> list[Record]:
        """Snapshot of every record, in insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: int) -> Record:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
        raise RecordNotFound(record_id)

    def create(self, new: Record) -> None:
        """Append *new*. Raises ``DuplicateRecord`` if its id is taken."""
        with self._lock:
            if any(record.id == new.id for record in self._records):
                logger.debug("create rejected: id %d exists", new.id)
                raise DuplicateRecord(new.id)
            self._records.append(new)
        logger.debug("created record %d", new.id)

    def delete(self, record_id: int) -> None:
        """Remove the record with *record_id*. Raises ``RecordNotFound``."""
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    del self._records[index]
                    break
            else:
                logger.debug("delete rejected: id %d not found", record_id)
                raise RecordNotFound(record_id)
        logger.debug("deleted record %d", record_id)

    def update(self, record_id: int, new: Record) -> None:
        """Replace the record addressed by *record_id* with *new*, in place.

        ``new.id`` is stored as given and need not equal *record_id*.
        Raises ``RecordNotFound`` if no record has *record_id*, and
        ``DuplicateRecord`` if ``new.id`` belongs to a different record.
        """
        with self._lock:
            index = next(
                (i for i, record in enumerate(self._records) if record.id == record_id),
                None,
            )
            if index is None:
                logger.debug("update rejected: id %d not found", record_id)
                raise RecordNotFound(record_id)
            if new.id != record_id and any(r.id == new.id for r in self._records):
                logger.debug("update rejected: id %d exists", new.id)
                raise DuplicateRecord(new.id)
            self._records[index] = new
        logger.debug("updated record %d", record_id)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
