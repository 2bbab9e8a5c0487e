# This file maps department records onto the department table.
# It exists so storage details stay out of the service and router code.

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.common.db import Base, IdentifiedRecord


class Department(IdentifiedRecord, Base):
    __tablename__ = "department"

    department_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
