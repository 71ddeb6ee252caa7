# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package — re-exports the port and its implementations."""
from person_service.repositories.base import PersonRepository
from person_service.repositories.memory_person_repository import InMemoryPersonRepository
from person_service.repositories.sql_person_repository import SqlPersonRepository

__all__ = ["PersonRepository", "InMemoryPersonRepository", "SqlPersonRepository"]
