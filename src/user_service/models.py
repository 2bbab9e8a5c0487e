# This file maps user records onto the user table.
# The department reference is a plain integer column: the department lives in another service's
# database, so there is no foreign key and nothing checks it at write time.

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.common.db import Base, IdentifiedRecord


class User(IdentifiedRecord, Base):
    __tablename__ = "user_account"

    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(32), nullable=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    department_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
