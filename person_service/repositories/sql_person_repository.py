# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for persons on a relational store."""
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from person_service.core.logging import get_logger
from person_service.models.domain import Person
from person_service.repositories.base import PersonRepository

logger = get_logger(__name__)

PERSON_COLS = "id, name, email"


def _row_to_person(row) -> Person:
    return Person(id=row[0], name=row[1], email=row[2])


class SqlPersonRepository(PersonRepository):
    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Read ───────────────────────────────────────────────────────────

    def find_all(self) -> List[Person]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                text(f"SELECT {PERSON_COLS} FROM person ORDER BY id")
            ).fetchall()
        return [_row_to_person(r) for r in rows]

    def find_by_id(self, person_id: int) -> Optional[Person]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {PERSON_COLS} FROM person WHERE id = :id"),
                {"id": person_id},
            ).fetchone()
        return _row_to_person(row) if row else None

    def exists_by_id(self, person_id: int) -> bool:
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT 1 FROM person WHERE id = :id"), {"id": person_id}
            ).fetchone()
        return row is not None

    # ── Write ──────────────────────────────────────────────────────────

    def save(self, person: Person) -> Person:
        params: Dict[str, Any] = {"name": person.name, "email": person.email}
        with self._engine.begin() as conn:
            if person.id is None:
                new_id = conn.execute(
                    text("INSERT INTO person (name, email) VALUES (:name, :email) RETURNING id"),
                    params,
                ).scalar_one()
                logger.info("Person created id=%s", new_id)
                return Person(id=new_id, name=person.name, email=person.email)

            params["id"] = person.id
            result = conn.execute(
                text("UPDATE person SET name = :name, email = :email WHERE id = :id"),
                params,
            )
            if result.rowcount == 0:
                conn.execute(
                    text("INSERT INTO person (id, name, email) VALUES (:id, :name, :email)"),
                    params,
                )
                self._advance_id_sequence(conn)
                logger.info("Person inserted with caller id=%s", person.id)
            else:
                logger.info("Person updated id=%s", person.id)
        return person.model_copy()

    def delete_by_id(self, person_id: int) -> None:
        with self._engine.begin() as conn:
            deleted = conn.execute(
                text("DELETE FROM person WHERE id = :id"), {"id": person_id}
            ).rowcount
        if deleted:
            logger.info("Person deleted id=%s", person_id)
        else:
            logger.debug("Delete skipped, no person with id=%s", person_id)

    # ── Ops ────────────────────────────────────────────────────────────

    def verify_connection(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ── Private ────────────────────────────────────────────────────────

    def _advance_id_sequence(self, conn) -> None:
        """Move the serial sequence past explicitly inserted ids.

        SQLite assigns MAX(rowid) + 1 on its own; PostgreSQL keeps drawing from
        the sequence and would hand out an id that is already taken.
        """
        if conn.dialect.name != "postgresql":
            return
        conn.execute(text(
            "SELECT setval(pg_get_serial_sequence('person', 'id'), "
            "(SELECT MAX(id) FROM person))"
        ))
