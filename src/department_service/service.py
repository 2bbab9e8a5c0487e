# This file implements create, update, and read operations for department records.
# It exists so routers stay thin and validation rules live next to the storage calls they guard.
# Validation and not-found errors are raised before any write; storage faults become internal errors.
# Updates are full replacements by id, and concurrent updates to one id resolve as last write wins.

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.common.db import RecordStore
from src.common.errors import InternalServerError, InvalidRequestError, ResourceNotFoundError
from src.department_service.models import Department
from src.department_service.schemas import DepartmentDTO

LOGGER = logging.getLogger("department_service")


class DepartmentService:
    """Business operations over the department record store."""

    def __init__(self, *, store: RecordStore[Department]) -> None:
        self.store = store

    def add_department(self, payload: DepartmentDTO | None) -> DepartmentDTO:
        LOGGER.info("Adding department.")
        if payload is None:
            raise InvalidRequestError("Request is null.")
        try:
            department = self.store.save(payload.to_record())
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while adding department.")
            raise InternalServerError("Exception while add department.") from exc
        LOGGER.info("Added department id=%s.", department.id)
        return DepartmentDTO.from_record(department)

    def update_department(self, department_id: int, payload: DepartmentDTO | None) -> DepartmentDTO:
        LOGGER.info("Updating department id=%s.", department_id)
        department = self._validate_update_request(department_id, payload).to_record()
        department.id = department_id
        try:
            department = self.store.save(department)
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while updating department id=%s.", department_id)
            raise InternalServerError("Exception while update department.") from exc
        LOGGER.info("Updated department id=%s.", department_id)
        return DepartmentDTO.from_record(department)

    def get_departments(self) -> list[DepartmentDTO]:
        LOGGER.info("Listing departments.")
        try:
            departments = self.store.find_all()
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while listing departments.")
            raise InternalServerError("Exception while get all department.") from exc
        return [DepartmentDTO.from_record(department) for department in departments]

    def get_department_by_id(self, department_id: int) -> DepartmentDTO:
        LOGGER.info("Fetching department id=%s.", department_id)
        department = self._find(department_id)
        if department is None:
            raise ResourceNotFoundError(f"Department not found by departmentId : {department_id}")
        return DepartmentDTO.from_record(department)

    def _validate_update_request(
        self, department_id: int, payload: DepartmentDTO | None
    ) -> DepartmentDTO:
        if payload is None:
            raise InvalidRequestError("Request is null.")
        if payload.id != department_id:
            raise InvalidRequestError("DepartmentId is not match with request.")
        if self._find(department_id) is None:
            raise ResourceNotFoundError(f"Department not found by departmentId : {department_id}")
        return payload

    def _find(self, department_id: int) -> Department | None:
        try:
            return self.store.find_by_id(department_id)
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while loading department id=%s.", department_id)
            raise InternalServerError("Exception while get department.") from exc
