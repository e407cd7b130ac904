"""
Pydantic schemas for Keycard endpoints.

KeyCard keeps its validity as methods (is_valid(), is_expired()) that are
re-evaluated against today's date on every call. from_attributes cannot
call methods, so KeyCardResponse.from_card() reads them explicitly at
serialization time.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from facility_api.models.identity import HolderKind
from facility_api.models.keycard import CardStatus, KeyCard, KeyCardType


class KeyCardIssueRequest(BaseModel):
    """Request body for POST /keycards."""
    card_number: str = Field(min_length=1, max_length=64)
    holder_type: HolderKind
    holder_id: int = Field(gt=0)
    expiration_date: date | None = Field(
        None, description="Last valid day; defaults to one year from today"
    )


class KeyCardExtendRequest(BaseModel):
    """Request body for POST /keycards/{card_number}/extend."""
    months: int = Field(description="Calendar months to add (negative shortens)")


class AccessRequest(BaseModel):
    """Request body for POST /keycards/{card_number}/access."""
    location: str = Field(min_length=1, max_length=100)


class KeyCardResponse(BaseModel):
    """Public representation of a keycard, with validity computed at read time."""
    card_number: str
    card_type: KeyCardType
    holder_id: int | None
    holder_name: str
    holder_email: str | None
    holder_phone: str | None
    issue_date: date
    expiration_date: date
    is_active: bool
    is_expired: bool
    is_valid: bool
    status: CardStatus
    days_until_expiration: int
    last_access_time: datetime | None
    last_access_location: str | None

    @classmethod
    def from_card(cls, card: KeyCard) -> "KeyCardResponse":
        return cls(
            card_number=card.card_number,
            card_type=card.card_type,
            holder_id=card.holder_id,
            holder_name=card.card_holder_name,
            holder_email=card.card_holder_email,
            holder_phone=card.card_holder_phone,
            issue_date=card.issue_date,
            expiration_date=card.expiration_date,
            is_active=card.is_active(),
            is_expired=card.is_expired(),
            is_valid=card.is_valid(),
            status=card.status,
            days_until_expiration=card.days_until_expiration(),
            last_access_time=card.last_access_time,
            last_access_location=card.last_access_location,
        )


class AccessDecisionResponse(BaseModel):
    """Outcome of an access attempt. Denied attempts are recorded too."""
    card_number: str
    location: str
    granted: bool
    reason: str | None
    timestamp: datetime

    model_config = {"from_attributes": True}
