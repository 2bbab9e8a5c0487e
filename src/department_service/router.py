# This file defines department endpoints under the versioned API path.
# It exists so clients and the user service reach department records through one stable route shape.
# Handlers only call the service and wrap results; error kinds are translated by the shared handlers.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request

from src.common.response_envelope import build_object_envelope
from src.common.schemas import ObjectEnvelope
from src.common.settings import ServiceConfig
from src.department_service.dependencies import get_config, get_department_service
from src.department_service.schemas import (
    DepartmentDTO,
    DepartmentListResponseV1,
    DepartmentResponseV1,
)
from src.department_service.service import DepartmentService

router = APIRouter(tags=["department"])
DepartmentServiceDep = Annotated[DepartmentService, Depends(get_department_service)]
ConfigDep = Annotated[ServiceConfig, Depends(get_config)]
DepartmentBody = Annotated[DepartmentDTO | None, Body()]


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


@router.post("/department", response_model=DepartmentResponseV1)
def add_department(
    request: Request,
    service: DepartmentServiceDep,
    config: ConfigDep,
    payload: DepartmentBody = None,
) -> dict[str, object]:
    return _envelope(request, config, service.add_department(payload))


@router.put("/department/{department_id}", response_model=DepartmentResponseV1)
def update_department(
    department_id: int,
    request: Request,
    service: DepartmentServiceDep,
    config: ConfigDep,
    payload: DepartmentBody = None,
) -> dict[str, object]:
    return _envelope(request, config, service.update_department(department_id, payload))


@router.get("/department", response_model=DepartmentListResponseV1)
def get_departments(
    request: Request,
    service: DepartmentServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return _envelope(request, config, service.get_departments())


@router.get("/department/{department_id}", response_model=DepartmentResponseV1)
def get_department(
    department_id: int,
    request: Request,
    service: DepartmentServiceDep,
    config: ConfigDep,
) -> dict[str, object]:
    return _envelope(request, config, service.get_department_by_id(department_id))
