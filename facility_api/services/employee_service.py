"""
Employee service — the staff registry's business logic.

Employees are created with auto-incrementing integer IDs and can be looked
up, updated, deleted, and filtered by department. Unlike members, the
registry does not insist on contact details; staff records usually come
from HR with whatever they have.
"""

import logging
from dataclasses import fields
from datetime import date
from decimal import Decimal

from facility_api.exceptions import EmployeeNotFoundError, InvalidArgumentError
from facility_api.models.employee import Employee, WorkStatus
from facility_api.store import FacilityStore

logger = logging.getLogger(__name__)

# Dataclass fields a PATCH may touch; properties like full_name are derived
_UPDATABLE_FIELDS = frozenset(f.name for f in fields(Employee)) - {"employee_id"}


def add_employee(
    store: FacilityStore,
    first_name: str,
    last_name: str,
    email: str | None = None,
    phone: str | None = None,
    department: str = "",
    position: str = "",
    salary: Decimal = Decimal("0"),
    hire_date: date | None = None,
    work_status: WorkStatus = WorkStatus.ACTIVE,
) -> Employee:
    """
    Register a new employee.

    Raises:
        InvalidArgumentError: If first or last name is blank.
    """
    if not first_name or not first_name.strip():
        raise InvalidArgumentError("First name is required", field="first_name")
    if not last_name or not last_name.strip():
        raise InvalidArgumentError("Last name is required", field="last_name")

    employee = store.employees.add(
        lambda employee_id: Employee(
            employee_id=employee_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            department=department,
            position=position,
            salary=Decimal(salary),
            hire_date=hire_date or date.today(),
            work_status=work_status,
        )
    )
    logger.info(
        "Added employee %d (%s, %s)",
        employee.employee_id, employee.full_name, employee.department or "no department",
    )
    return employee


def get_employee(store: FacilityStore, employee_id: int) -> Employee:
    """
    Get an employee by ID.

    Raises:
        EmployeeNotFoundError: If no employee has that ID.
    """
    employee = store.employees.get(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return employee


def update_employee(store: FacilityStore, employee_id: int, **updates) -> Employee:
    """
    Partially update an employee.

    Only the keyword arguments given are applied (typically the output of a
    Pydantic model_dump(exclude_unset=True)). A value of None keeps the
    current value, as in member_service.update_member. Only stored fields
    can be updated; unknown names and derived properties are rejected.

    Raises:
        EmployeeNotFoundError: If no employee has that ID.
        InvalidArgumentError: If an unknown field is given or a name is blanked.
    """
    employee = get_employee(store, employee_id)

    for field, value in updates.items():
        if field not in _UPDATABLE_FIELDS:
            raise InvalidArgumentError(f"Unknown employee field: {field}", field=field)
        if field in ("first_name", "last_name") and value is not None and not value.strip():
            raise InvalidArgumentError(f"{field} cannot be blank", field=field)

    for field, value in updates.items():
        if value is None:
            continue
        if field == "salary":
            value = Decimal(value)
        setattr(employee, field, value)

    return employee


def delete_employee(store: FacilityStore, employee_id: int) -> Employee:
    """
    Delete an employee.

    Returns:
        The removed Employee.

    Raises:
        EmployeeNotFoundError: If no employee has that ID.
    """
    employee = store.employees.remove(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    logger.info("Deleted employee %d (%s)", employee_id, employee.full_name)
    return employee


def list_employees(store: FacilityStore) -> list[Employee]:
    return store.employees.values()


def find_employees_by_department(store: FacilityStore, department: str) -> list[Employee]:
    """Employees whose department matches, ignoring case."""
    wanted = department.casefold()
    return [e for e in store.employees if e.department.casefold() == wanted]


def clear_employees(store: FacilityStore) -> None:
    """Remove every employee and restart IDs at 1."""
    store.employees.clear()
    logger.info("Cleared employee registry")
