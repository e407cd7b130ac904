"""
KeyCard model — a physical access credential issued to a member or employee.

A keycard binds a SNAPSHOT of its holder's identity to validity and audit
fields. At issuance the holder's display name, email, phone and kind are
copied onto the card; the card keeps no reference to the holder record, so
later edits to the member/employee do not show up on cards already issued.

Validity has two independent axes:

    active   administrative flag, flipped by activate()/deactivate()
    expired  derived from today's date and expiration_date, never stored

    is_valid() == is_active() and not is_expired()

is_valid() is the only check access decisions should use. A card can be
"active" and still invalid once its expiration date has passed.

The expiration check reads the wall clock on EVERY call. Nothing is cached,
so a card can turn invalid between two calls without any mutation (for
example across midnight in a long-running process).

Access recording:
  record_access() stores the time and location of the latest swipe whether
  or not the card is currently valid. It is an audit trail of attempts, not
  of grants.

Card numbers are not checked for uniqueness here; the keycard service does
that when cards are registered (services/keycard_service.py).
"""

import calendar
import enum
from datetime import date, datetime, timezone

from facility_api.config import settings
from facility_api.exceptions import InvalidArgumentError
from facility_api.models.identity import HolderKind, IdentityHolder, display_name


class KeyCardType(str, enum.Enum):
    """Which kind of holder a card was issued to. Mirrors HolderKind."""
    MEMBER = "member"
    EMPLOYEE = "employee"


class CardStatus(str, enum.Enum):
    """Presentation summary of the two validity axes."""
    ACTIVE = "active"       # active and not expired (valid)
    EXPIRED = "expired"     # active but past its expiration date
    REVOKED = "revoked"     # deactivated, whatever the date


def _today() -> date:
    return date.today()


def _now() -> datetime:
    return datetime.now(timezone.utc)


def add_months(start: date, months: int) -> date:
    """
    Shift a date by a number of calendar months (negative moves backwards).

    The day is clamped to the last day of the target month, so Jan 31 + 1
    month is Feb 28 (or Feb 29 in a leap year).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


class KeyCard:
    def __init__(
        self,
        card_number: str,
        holder_name: str,
        card_type: KeyCardType,
        holder_email: str | None = None,
        holder_phone: str | None = None,
        expiration_date: date | None = None,
        holder_id: int | None = None,
    ):
        if card_number is None or not str(card_number).strip():
            raise InvalidArgumentError("Card number is required", field="card_number")

        self._card_number = str(card_number).strip()
        self._holder_name = holder_name
        self._holder_email = holder_email
        self._holder_phone = holder_phone
        self._card_type = KeyCardType(card_type)
        self._holder_id = holder_id

        self._issue_date = _today()
        if expiration_date is None:
            expiration_date = add_months(
                self._issue_date, 12 * settings.DEFAULT_CARD_VALIDITY_YEARS
            )
        self._expiration_date = expiration_date

        self._active = True
        self._last_access_time: datetime | None = None
        self._last_access_location: str | None = None

    @classmethod
    def issue(
        cls,
        card_number: str,
        holder: IdentityHolder,
        expiration_date: date | None = None,
        holder_id: int | None = None,
    ) -> "KeyCard":
        """
        Issue a new card for a holder.

        Snapshots the holder's display name, email, phone and kind. The card
        starts active with issue_date = today.

        Args:
            card_number: Caller-supplied identifier printed on the card.
            holder: Any IdentityHolder (Member, Employee, ...).
            expiration_date: Last day the card is valid. Defaults to one
                year after issuance.
            holder_id: Registry ID of the holder, kept for lookups only.

        Raises:
            InvalidArgumentError: If card_number is missing or blank.
        """
        return cls(
            card_number=card_number,
            holder_name=display_name(holder),
            card_type=KeyCardType(HolderKind(holder.kind).value),
            holder_email=holder.email,
            holder_phone=holder.phone,
            expiration_date=expiration_date,
            holder_id=holder_id,
        )

    # ------------------------------------------------------------------
    # Snapshot accessors
    # ------------------------------------------------------------------

    @property
    def card_number(self) -> str:
        return self._card_number

    @property
    def card_holder_name(self) -> str:
        return self._holder_name

    @property
    def card_holder_email(self) -> str | None:
        return self._holder_email

    @property
    def card_holder_phone(self) -> str | None:
        return self._holder_phone

    @property
    def card_type(self) -> KeyCardType:
        return self._card_type

    @property
    def holder_id(self) -> int | None:
        return self._holder_id

    @property
    def issue_date(self) -> date:
        return self._issue_date

    @property
    def expiration_date(self) -> date:
        return self._expiration_date

    @property
    def last_access_time(self) -> datetime | None:
        return self._last_access_time

    @property
    def last_access_location(self) -> str | None:
        return self._last_access_location

    def is_member_card(self) -> bool:
        return self._card_type == KeyCardType.MEMBER

    def is_employee_card(self) -> bool:
        return self._card_type == KeyCardType.EMPLOYEE

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def is_active(self) -> bool:
        """The administrative flag only. Says nothing about expiration."""
        return self._active

    def is_expired(self) -> bool:
        # The expiration date itself is still a valid day
        return _today() > self._expiration_date

    def is_valid(self) -> bool:
        return self._active and not self.is_expired()

    def days_until_expiration(self) -> int:
        """Days left before expiry: 0 on the last valid day, negative once expired."""
        return (self._expiration_date - _today()).days

    @property
    def status(self) -> CardStatus:
        if not self._active:
            return CardStatus.REVOKED
        if self.is_expired():
            return CardStatus.EXPIRED
        return CardStatus.ACTIVE

    # ------------------------------------------------------------------
    # Mutations (none of these raise)
    # ------------------------------------------------------------------

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    def extend_expiration(self, months: int) -> None:
        """
        Move the expiration date by a number of calendar months.

        Negative values shorten the card's life. No bound is enforced and
        the card's current state does not matter.
        """
        self._expiration_date = add_months(self._expiration_date, months)

    def record_access(self, location: str) -> None:
        """Record a swipe at a location, whether or not the card is valid."""
        self._last_access_time = _now()
        self._last_access_location = location

    def __repr__(self) -> str:
        return (
            f"KeyCard(card_number={self._card_number!r}, "
            f"holder={self._holder_name!r}, type={self._card_type.value}, "
            f"status={self.status.value})"
        )
