"""
Custom exception classes and FastAPI exception handlers.

Why custom exceptions?
  The keycard core and the registry services raise domain-specific errors
  (like KeyCardNotFoundError) without importing HTTP concepts. The handler
  layer then translates these into proper HTTP responses.

  This separation means:
    - Service code is testable without HTTP
    - Error responses are consistent across all endpoints
    - Adding new error types is straightforward

Exception hierarchy:
    FacilityAPIError (base)
    ├── InvalidArgumentError      — malformed input (blank card number, missing names)
    ├── MemberNotFoundError       — requested member doesn't exist
    ├── EmployeeNotFoundError     — requested employee doesn't exist
    ├── KeyCardNotFoundError      — no card with that number has been issued
    └── DuplicateCardNumberError  — card number already issued to someone
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class FacilityAPIError(Exception):
    """Base exception for all Facility API domain errors."""

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class InvalidArgumentError(FacilityAPIError):
    """
    Raised when a caller supplies malformed parameters.

    This is the only error the keycard core raises itself (a blank card
    number at issuance). The member registry uses it for its own field
    validation as well.
    """

    def __init__(self, detail: str, field: str | None = None):
        self.field = field
        super().__init__(detail)


class MemberNotFoundError(FacilityAPIError):
    """Raised when a requested member does not exist."""

    def __init__(self, member_id: int):
        self.member_id = member_id
        super().__init__(f"Member with ID {member_id} not found")


class EmployeeNotFoundError(FacilityAPIError):
    """Raised when a requested employee does not exist."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee with ID {employee_id} not found")


class KeyCardNotFoundError(FacilityAPIError):
    """Raised when no keycard with the given number has been issued."""

    def __init__(self, card_number: str):
        self.card_number = card_number
        super().__init__(f"Keycard {card_number} not found")


class DuplicateCardNumberError(FacilityAPIError):
    """Raised when issuing a card number that is already in use."""

    def __init__(self, card_number: str):
        self.card_number = card_number
        super().__init__(f"Keycard {card_number} has already been issued")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    Each handler maps a domain exception to an HTTP status code and
    consistent JSON response format: {"detail": "error message", "error_type": ...}

    This is called once during app startup in main.py.
    """

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,  # Same status FastAPI uses for schema validation failures
            content={
                "detail": exc.detail,
                "error_type": "invalid_argument",
                "field": exc.field,
            },
        )

    @app.exception_handler(MemberNotFoundError)
    async def member_not_found_handler(
        request: Request, exc: MemberNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail, "error_type": "member_not_found"},
        )

    @app.exception_handler(EmployeeNotFoundError)
    async def employee_not_found_handler(
        request: Request, exc: EmployeeNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail, "error_type": "employee_not_found"},
        )

    @app.exception_handler(KeyCardNotFoundError)
    async def keycard_not_found_handler(
        request: Request, exc: KeyCardNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail, "error_type": "keycard_not_found"},
        )

    @app.exception_handler(DuplicateCardNumberError)
    async def duplicate_card_number_handler(
        request: Request, exc: DuplicateCardNumberError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,  # Conflict: the card number is already taken
            content={"detail": exc.detail, "error_type": "duplicate_card_number"},
        )
