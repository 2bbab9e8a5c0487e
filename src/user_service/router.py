# This file defines user endpoints under the versioned API path.
# It mirrors the department route shape so generic clients can treat both services alike.
# Only the single-user read carries the resolved department in its payload.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request

from src.common.response_envelope import build_object_envelope
from src.common.schemas import ObjectEnvelope
from src.common.settings import ServiceConfig
from src.user_service.dependencies import get_config, get_user_service
from src.user_service.schemas import UserDTO, UserListResponseV1, UserResponseV1
from src.user_service.service import UserService

router = APIRouter(tags=["user"])
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ConfigDep = Annotated[ServiceConfig, Depends(get_config)]
UserBody = Annotated[UserDTO | None, Body()]


def _envelope(request: Request, config: ServiceConfig, data: object) -> dict[str, object]:
    return build_object_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        trace_id=request.state.trace_id,
        data=data,
    )


@router.get("/hello", response_model=ObjectEnvelope[str])
def hello(request: Request, config: ConfigDep) -> dict[str, object]:
    return _envelope(request, config, "Hello")


@router.post("/user", response_model=UserResponseV1)
def add_user(
    request: Request,
    service: UserServiceDep,
    config: ConfigDep,
    payload: UserBody = None,
) -> dict[str, object]:
    return _envelope(request, config, service.add_user(payload))


@router.put("/user/{user_id}", response_model=UserResponseV1)
def update_user(
    user_id: int,
    request: Request,
    service: UserServiceDep,
    config: ConfigDep,
    payload: UserBody = None,
) -> dict[str, object]:
    return _envelope(request, config, service.update_user(user_id, payload))


@router.get("/user", response_model=UserListResponseV1)
def get_users(
    request: Request,
    service: UserServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return _envelope(request, config, service.get_users())


@router.get("/user/{user_id}", response_model=UserResponseV1)
def get_user(
    user_id: int,
    request: Request,
    service: UserServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    user = service.get_user_by_id(user_id, trace_id=request.state.trace_id)
    return _envelope(request, config, user)
