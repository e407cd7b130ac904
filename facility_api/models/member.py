"""
Member model — a facility member (customer) record.

A Member is created by the member registry (services/member_service.py),
which assigns an auto-incrementing integer ID. Besides the contact details
every identity holder has, a member carries membership bookkeeping:

  - membership_type:   BASIC, PREMIUM or VIP tier
  - membership_status: ACTIVE or INACTIVE (administrative, like a card's flag)
  - payment_option:    how dues are paid
  - payment_overdue:   set when dues are missed, cleared by record_payment()

None of the membership fields affect keycards. A card snapshots only the
display name, email and phone at issuance (see models/keycard.py).
"""

import enum
from dataclasses import dataclass, field
from datetime import date

from facility_api.models.identity import HolderKind


class MembershipType(str, enum.Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    VIP = "vip"


class MembershipStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PaymentOption(str, enum.Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"


@dataclass
class Member:
    member_id: int
    first_name: str
    last_name: str
    email: str | None = None
    phone: str | None = None
    membership_date: date = field(default_factory=date.today)
    membership_status: MembershipStatus = MembershipStatus.ACTIVE
    membership_type: MembershipType = MembershipType.BASIC
    payment_option: PaymentOption = PaymentOption.CASH
    payment_overdue: bool = False
    last_payment_date: date | None = None

    @property
    def kind(self) -> HolderKind:
        return HolderKind.MEMBER

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.membership_status == MembershipStatus.ACTIVE

    @property
    def years_of_membership(self) -> int:
        """Whole years elapsed since the membership date."""
        today = date.today()
        years = today.year - self.membership_date.year
        if (today.month, today.day) < (self.membership_date.month, self.membership_date.day):
            years -= 1
        return max(years, 0)

    def activate(self) -> None:
        self.membership_status = MembershipStatus.ACTIVE

    def deactivate(self) -> None:
        self.membership_status = MembershipStatus.INACTIVE

    def record_payment(self) -> None:
        """Record a dues payment made today; clears any overdue flag."""
        self.payment_overdue = False
        self.last_payment_date = date.today()

    def mark_payment_overdue(self) -> None:
        self.payment_overdue = True
