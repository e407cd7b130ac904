"""
Employees router — the staff registry over HTTP.

Endpoints:
  POST   /employees                 — Add an employee
  GET    /employees                 — List employees (optionally by department)
  GET    /employees/{employee_id}   — Get an employee
  PATCH  /employees/{employee_id}   — Partially update an employee
  DELETE /employees/{employee_id}   — Delete an employee
"""

from fastapi import APIRouter, Depends, Query, status

from facility_api.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeUpdateRequest,
)
from facility_api.services import employee_service
from facility_api.store import FacilityStore, get_store

router = APIRouter()


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an employee",
)
async def create_employee(
    request: EmployeeCreateRequest,
    store: FacilityStore = Depends(get_store),
):
    return employee_service.add_employee(store, **request.model_dump())


@router.get(
    "",
    response_model=list[EmployeeResponse],
    summary="List employees",
)
async def list_employees(
    department: str | None = Query(None, description="Filter by department (case-insensitive)"),
    store: FacilityStore = Depends(get_store),
):
    if department is not None:
        return employee_service.find_employees_by_department(store, department)
    return employee_service.list_employees(store)


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get an employee",
)
async def get_employee(employee_id: int, store: FacilityStore = Depends(get_store)):
    return employee_service.get_employee(store, employee_id)


@router.patch(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update employee fields",
)
async def update_employee(
    employee_id: int,
    updates: EmployeeUpdateRequest,
    store: FacilityStore = Depends(get_store),
):
    """Only fields present in the body are changed; null keeps the current value."""
    return employee_service.update_employee(
        store, employee_id, **updates.model_dump(exclude_unset=True)
    )


@router.delete(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Delete an employee",
)
async def delete_employee(employee_id: int, store: FacilityStore = Depends(get_store)):
    return employee_service.delete_employee(store, employee_id)
