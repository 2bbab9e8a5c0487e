"""
Record storage utilities.
Each service owns one table and reaches it only through `RecordStore`, which offers the
insert-or-update, find-by-id and find-all operations the services rely on.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import Integer, create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


class IdentifiedRecord:
    """Mixin for records keyed by a server-assigned integer id."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


ModelT = TypeVar("ModelT", bound=IdentifiedRecord)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; SQLite URLs are made safe for the server's worker threads."""

    if database_url.startswith("sqlite"):
        in_memory = database_url in {"sqlite://", "sqlite:///:memory:"} or ":memory:" in database_url
        if in_memory:
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                future=True,
            )
        return create_engine(database_url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(database_url, pool_pre_ping=True, future=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, class_=Session
    )


class RecordStore(Generic[ModelT]):
    """Single-table keyed storage for one record type."""

    def __init__(self, *, model: type[ModelT], engine: Engine) -> None:
        self._model = model
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine, tables=[self._model.__table__])  # type: ignore[attr-defined]

    def can_connect(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def save(self, record: ModelT) -> ModelT:
        """Insert when `record.id` is unset, otherwise replace the row with that id."""

        with self._session_factory() as session, session.begin():
            if record.id is None:
                session.add(record)
                session.flush()
                persisted = record
            else:
                persisted = session.merge(record)
        return persisted

    def find_by_id(self, record_id: int) -> ModelT | None:
        with self._session_factory() as session:
            return session.get(self._model, record_id)

    def find_all(self) -> list[ModelT]:
        with self._session_factory() as session:
            return list(session.scalars(select(self._model).order_by(self._model.id)).all())
