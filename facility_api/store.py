"""
In-memory record store and the FastAPI dependency that provides it.

There is no database: every record lives in process memory and disappears
when the process exits. Key components:

  - Registry: keyed store that hands out auto-incrementing integer IDs
  - FacilityStore: the members, employees and keycards of one facility
  - get_store(): FastAPI dependency returning the process-wide store

ID counters:
  Each Registry owns its own counter, starting at 1. IDs are never reused
  after a record is removed. Only clear() resets the counter, together with
  the records. There is no module-level counter shared between registries,
  so a test that builds its own FacilityStore starts from ID 1.

Keycards are keyed by their card number rather than a generated ID, so they
are held in a plain dict.
"""

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from facility_api.models.employee import Employee
from facility_api.models.keycard import KeyCard
from facility_api.models.member import Member

T = TypeVar("T")


class Registry(Generic[T]):
    """Keyed collection of records with monotonically increasing integer IDs."""

    def __init__(self) -> None:
        self._records: dict[int, T] = {}
        self._next_id = 1

    def add(self, factory: Callable[[int], T]) -> T:
        """
        Create and store a record under the next free ID.

        The factory receives the new ID and returns the record. If it raises,
        nothing is stored and the ID is not consumed.
        """
        record = factory(self._next_id)
        self._records[self._next_id] = record
        self._next_id += 1
        return record

    def get(self, record_id: int) -> T | None:
        return self._records.get(record_id)

    def remove(self, record_id: int) -> T | None:
        return self._records.pop(record_id, None)

    def values(self) -> list[T]:
        return list(self._records.values())

    def clear(self) -> None:
        self._records.clear()
        self._next_id = 1

    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records


class FacilityStore:
    """All records of one facility."""

    def __init__(self) -> None:
        self.members: Registry[Member] = Registry()
        self.employees: Registry[Employee] = Registry()
        self.keycards: dict[str, KeyCard] = {}

    def clear(self) -> None:
        self.members.clear()
        self.employees.clear()
        self.keycards.clear()


# Process-wide store used by the API. Tests override get_store instead of
# touching this instance.
_store = FacilityStore()


def get_store() -> FacilityStore:
    """
    FastAPI dependency that provides the facility store.

    Usage in a route:
        @router.get("/items")
        async def list_items(store: FacilityStore = Depends(get_store)):
            ...
    """
    return _store
