"""In-memory registry for aggregates keyed by an auto-incrementing id.

Every directory in the system (catalog, artists, dressing rooms, requests,
shopping lists) stores its aggregates in one of these. The registry never
raises for a missing id; it returns ``None`` / ``False`` and leaves the
choice of error to the application service that owns it.
"""

from __future__ import annotations

import copy
from typing import Callable, Generic, Protocol, TypeVar


class HasId(Protocol):
    id: int


T = TypeVar("T", bound=HasId)


class EntityRegistry(Generic[T]):

    def __init__(self) -> None:
        self._records: list[T] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """The id the next ``create`` call will assign."""
        return self._next_id

    def create(self, factory: Callable[[int], T]) -> int:
        """Build a record with the next id and store it.

        *factory* receives the new id and is expected to validate its
        inputs. If it raises, nothing is stored and the id is not consumed.
        Ids are never reused, even after deletion.
        """
        record = factory(self._next_id)
        self._records.append(record)
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def find_by_id(self, record_id: int) -> T | None:
        """Return the stored record (a live reference), or None."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_by(self, predicate: Callable[[T], bool]) -> list[T]:
        """Live references to every record matching *predicate*, in registration order."""
        return [record for record in self._records if predicate(record)]

    def delete_by_id(self, record_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        return len(self._records) != before

    def list_all(self, where: Callable[[T], bool] | None = None) -> list[T]:
        """Snapshot copies of the stored records.

        Mutating the returned objects never affects the registry.
        """
        return [
            copy.deepcopy(record)
            for record in self._records
            if where is None or where(record)
        ]

    def update(self, record_id: int, mutate: Callable[[T], None]) -> bool:
        """Apply *mutate* to the stored record. Returns False if absent."""
        record = self.find_by_id(record_id)
        if record is None:
            return False
        mutate(record)
        return True

    def __len__(self) -> int:
        return len(self._records)
