"""Persistence for pending authentication codes."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from player_auth.errors import StorageError, UniqueViolation
from player_auth.models import AuthCode

logger = logging.getLogger(__name__)


class CodeStore:
    """CRUD over the auth_codes table.

    Uniqueness of both columns is enforced by the database. Each call runs
    in its own session, so a store can be shared between threads.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                yield session
        except IntegrityError as exc:
            raise UniqueViolation(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            logger.error("Auth code storage failure: %s", exc)
            raise StorageError(
                f"Auth code storage failure ({type(exc).__name__})"
            ) from exc

    def list_all(self) -> list[AuthCode]:
        """Return every pending code."""
        with self._session() as session:
            return list(session.exec(select(AuthCode)).all())

    def find_by_player(self, player_id: str) -> Optional[AuthCode]:
        """Return the pending code of a player, or None."""
        with self._session() as session:
            return session.exec(
                select(AuthCode).where(AuthCode.player_id == player_id)
            ).first()

    def find_by_code(self, code: str) -> Optional[AuthCode]:
        """Return the record for a code, or None."""
        with self._session() as session:
            return session.get(AuthCode, code)

    def insert(self, auth_code: AuthCode) -> AuthCode:
        """Persist a new code. Raises UniqueViolation if the code or player is taken."""
        with self._session() as session:
            session.add(auth_code)
            session.commit()
            return auth_code

    def delete_by_code(self, code: str) -> int:
        """Delete a code. Returns the number of rows removed (0 or 1)."""
        with self._session() as session:
            result = session.connection().execute(
                delete(AuthCode).where(AuthCode.auth_code == code)
            )
            session.commit()
            return result.rowcount

    def take_by_code(self, code: str) -> Optional[AuthCode]:
        """Atomically look up and delete a code.

        Only the caller whose DELETE removed the row gets it back; a
        concurrent take of the same code returns None.
        """
        with self._session() as session:
            found = session.get(AuthCode, code)
            if found is None:
                return None
            result = session.connection().execute(
                delete(AuthCode).where(AuthCode.auth_code == code)
            )
            session.commit()
            if result.rowcount != 1:
                return None
            return AuthCode(auth_code=found.auth_code, player_id=found.player_id)
