"""
Pydantic schemas for Employee endpoints.

Salary is a Decimal end to end; in JSON responses Pydantic renders it as a
string (e.g. "50000.00") so no precision is lost on the way out.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field

from facility_api.models.employee import WorkStatus


class EmployeeCreateRequest(BaseModel):
    """Request body for POST /employees."""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    department: str = Field("", max_length=100)
    position: str = Field("", max_length=100)
    salary: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    hire_date: date | None = None
    work_status: WorkStatus = WorkStatus.ACTIVE


class EmployeeUpdateRequest(BaseModel):
    """Request body for PATCH /employees/{id} (all fields optional)."""
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    department: str | None = Field(None, max_length=100)
    position: str | None = Field(None, max_length=100)
    salary: Decimal | None = Field(None, ge=0, decimal_places=2)
    hire_date: date | None = None
    work_status: WorkStatus | None = None


class EmployeeResponse(BaseModel):
    """Public representation of an employee."""
    employee_id: int
    first_name: str
    last_name: str
    full_name: str
    email: str | None
    phone: str | None
    department: str
    position: str
    salary: Decimal
    hire_date: date
    work_status: WorkStatus

    model_config = {"from_attributes": True}
