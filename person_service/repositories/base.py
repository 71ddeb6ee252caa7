# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository port: the persistence contract for Person records.
Controllers depend on this interface, never on a concrete store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from person_service.models.domain import Person


class PersonRepository(ABC):
    """Storage port for Person records, keyed by store-assigned ``id``."""

    @abstractmethod
    def find_all(self) -> list[Person]:
        """Return every persisted record. Order is unspecified."""

    @abstractmethod
    def find_by_id(self, person_id: int) -> Optional[Person]:
        """Return the record, or ``None`` when no record has that id."""

    @abstractmethod
    def save(self, person: Person) -> Person:
        """Insert when ``person.id`` is None, otherwise overwrite the record with that id.

        Returns the persisted record, carrying its id.
        """

    @abstractmethod
    def exists_by_id(self, person_id: int) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, person_id: int) -> None:
        """Remove the record if present. Absent ids are a no-op."""

    def verify_connection(self) -> None:
        """Raise if the backing store cannot be reached."""
