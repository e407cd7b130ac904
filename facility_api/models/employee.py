"""
Employee model — a facility staff record.

Employees are created by the employee registry (services/employee_service.py)
with auto-incrementing integer IDs. Salary is held as a Decimal so payroll
figures never pick up floating-point noise.
"""

import enum
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from facility_api.models.identity import HolderKind


class WorkStatus(str, enum.Enum):
    ACTIVE = "active"
    ON_LEAVE = "on_leave"
    TERMINATED = "terminated"


@dataclass
class Employee:
    employee_id: int
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    department: str = ""
    position: str = ""
    salary: Decimal = Decimal("0")
    hire_date: date = field(default_factory=date.today)
    work_status: WorkStatus = WorkStatus.ACTIVE

    @property
    def kind(self) -> HolderKind:
        return HolderKind.EMPLOYEE

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
