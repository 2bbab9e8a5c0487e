# This file defines the department payload exchanged with clients and with the user service.
# It exists so the wire shape (camelCase) and the storage row stay decoupled.
# The user service parses lookups with this same model, which keeps both sides in step.

from __future__ import annotations

from src.common.schemas import ObjectEnvelope, RecordModel
from src.department_service.models import Department


class DepartmentDTO(RecordModel):
    id: int | None = None
    department_name: str | None = None

    @classmethod
    def from_record(cls, department: Department) -> DepartmentDTO:
        return cls(id=department.id, department_name=department.department_name)

    def to_record(self) -> Department:
        """Build a storage row; the id is always assigned by the caller or by storage."""

        return Department(department_name=self.department_name)


DepartmentResponseV1 = ObjectEnvelope[DepartmentDTO]
DepartmentListResponseV1 = ObjectEnvelope[list[DepartmentDTO]]
