# This file implements create, update, and read operations for user records.
# It exists so routers stay thin and the department enrichment rules live in one place.
# Writes never consult the department service; only a single-user read resolves the reference.
# Lookup policy is strict: a missing department leaves `department` unset, a failed lookup fails the read.

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.common.db import RecordStore
from src.common.errors import (
    DependentServiceError,
    InternalServerError,
    InvalidRequestError,
    ResourceNotFoundError,
)
from src.common.metrics import DEPARTMENT_LOOKUPS_TOTAL
from src.common.trace_context import current_trace_id
from src.department_service.schemas import DepartmentDTO
from src.user_service.department_client import DepartmentClient, DepartmentServiceUnavailableError
from src.user_service.models import User
from src.user_service.schemas import UserDTO

LOGGER = logging.getLogger("user_service")


class UserService:
    """Business operations over the user record store."""

    def __init__(self, *, store: RecordStore[User], department_client: DepartmentClient) -> None:
        self.store = store
        self.department_client = department_client

    def add_user(self, payload: UserDTO | None) -> UserDTO:
        LOGGER.info("Adding user.")
        if payload is None:
            raise InvalidRequestError("Request is null.")
        try:
            user = self.store.save(payload.to_record())
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while adding user.")
            raise InternalServerError("Exception while add user.") from exc
        LOGGER.info("Added user id=%s.", user.id)
        return UserDTO.from_record(user)

    def update_user(self, user_id: int, payload: UserDTO | None) -> UserDTO:
        LOGGER.info("Updating user id=%s.", user_id)
        user = self._validate_update_request(user_id, payload).to_record()
        user.id = user_id
        try:
            user = self.store.save(user)
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while updating user id=%s.", user_id)
            raise InternalServerError("Exception while update user.") from exc
        LOGGER.info("Updated user id=%s.", user_id)
        return UserDTO.from_record(user)

    def get_users(self) -> list[UserDTO]:
        LOGGER.info("Listing users.")
        try:
            users = self.store.find_all()
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while listing users.")
            raise InternalServerError("Exception while get all users.") from exc
        return [UserDTO.from_record(user) for user in users]

    def get_user_by_id(self, user_id: int, *, trace_id: str | None = None) -> UserDTO:
        """Load a user and attach its department as currently stored by the department service.

        The user is loaded first; an unknown id stops here without any outbound call.
        `trace_id` defaults to the id bound for the current request.
        """

        LOGGER.info("Fetching user id=%s.", user_id)
        user = self._find(user_id)
        if user is None:
            raise ResourceNotFoundError(f"User not found by userId : {user_id}")

        user_dto = UserDTO.from_record(user)
        if user.department_id is not None:
            user_dto.department = self._resolve_department(
                user.department_id, trace_id=trace_id or current_trace_id()
            )
        return user_dto

    def _resolve_department(self, department_id: int, *, trace_id: str | None) -> DepartmentDTO | None:
        try:
            department = self.department_client.get_department(department_id, trace_id=trace_id)
        except DepartmentServiceUnavailableError as exc:
            DEPARTMENT_LOOKUPS_TOTAL.labels(outcome="failed").inc()
            LOGGER.error("Department lookup failed for departmentId=%s: %s", department_id, exc)
            raise DependentServiceError("Exception while get department for user.") from exc

        DEPARTMENT_LOOKUPS_TOTAL.labels(outcome="found" if department is not None else "missing").inc()
        if department is None:
            LOGGER.warning("User references unknown departmentId=%s.", department_id)
        return department

    def _validate_update_request(self, user_id: int, payload: UserDTO | None) -> UserDTO:
        if payload is None:
            raise InvalidRequestError("Request is null.")
        if payload.id != user_id:
            raise InvalidRequestError("UserId is not match with request.")
        if self._find(user_id) is None:
            raise ResourceNotFoundError(f"User not found by userId : {user_id}")
        return payload

    def _find(self, user_id: int) -> User | None:
        try:
            return self.store.find_by_id(user_id)
        except SQLAlchemyError as exc:
            LOGGER.exception("Storage failure while loading user id=%s.", user_id)
            raise InternalServerError("Exception while get user.") from exc
