# This file defines the user payload exchanged with clients.
# It exists so the wire shape (camelCase) and the storage row stay decoupled.
# `department` is response-only: it is never stored and is filled only on single-user reads.

from __future__ import annotations

from src.common.schemas import ObjectEnvelope, RecordModel
from src.department_service.schemas import DepartmentDTO
from src.user_service.models import User


class UserDTO(RecordModel):
    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    age: int = 0
    department_id: int | None = None
    department: DepartmentDTO | None = None

    @classmethod
    def from_record(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            gender=user.gender,
            age=user.age,
            department_id=user.department_id,
        )

    def to_record(self) -> User:
        """Build a storage row; the id and the transient department are never copied."""

        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            age=self.age,
            department_id=self.department_id,
        )


UserResponseV1 = ObjectEnvelope[UserDTO]
UserListResponseV1 = ObjectEnvelope[list[UserDTO]]
