"""
Domain models package.

Records live in process memory (see store.py); these are plain Python
classes rather than ORM models. Everything is re-exported here so other
modules can import from facility_api.models directly.
"""

from facility_api.models.identity import HolderKind, IdentityHolder  # noqa: F401
from facility_api.models.member import (  # noqa: F401
    Member,
    MembershipStatus,
    MembershipType,
    PaymentOption,
)
from facility_api.models.employee import Employee, WorkStatus  # noqa: F401
from facility_api.models.keycard import CardStatus, KeyCard, KeyCardType  # noqa: F401
