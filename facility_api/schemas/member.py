"""
Pydantic schemas for Member endpoints.

Field-level checks (types, lengths, email format) happen here, so FastAPI
rejects malformed bodies with 422 before the service runs. Rules that
span fields, like "email or phone is required", live in member_service.
"""

from datetime import date

from pydantic import BaseModel, EmailStr, Field

from facility_api.models.member import MembershipStatus, MembershipType, PaymentOption


class MemberCreateRequest(BaseModel):
    """Request body for POST /members."""
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    membership_type: MembershipType = MembershipType.BASIC
    payment_option: PaymentOption = PaymentOption.CASH
    membership_status: MembershipStatus = MembershipStatus.ACTIVE


class MemberUpdateRequest(BaseModel):
    """Request body for PATCH /members/{id} (all fields optional)."""
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=20)
    membership_type: MembershipType | None = None
    payment_option: PaymentOption | None = None
    membership_status: MembershipStatus | None = None


class MemberResponse(BaseModel):
    """Public representation of a member."""
    member_id: int
    first_name: str
    last_name: str
    full_name: str
    email: str | None
    phone: str | None
    membership_date: date
    membership_status: MembershipStatus
    membership_type: MembershipType
    payment_option: PaymentOption
    payment_overdue: bool
    last_payment_date: date | None
    years_of_membership: int

    model_config = {"from_attributes": True}
