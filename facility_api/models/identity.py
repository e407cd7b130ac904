"""
Identity holder capability — what a keycard needs to know about its owner.

Both Member and Employee records can hold a keycard. Rather than teaching the
KeyCard about each concrete record type, the keycard depends only on this
small capability:

    first_name, last_name   combined into a display name ("John Doe")
    email, phone            optional contact details
    kind                    HolderKind.MEMBER or HolderKind.EMPLOYEE

Any object exposing those attributes satisfies IdentityHolder structurally
(typing.Protocol), so a future record kind (contractor, guest, ...) needs no
change to the keycard code.
"""

import enum
from typing import Protocol, runtime_checkable


class HolderKind(str, enum.Enum):
    """
    The kind of identity record a keycard was issued for.

    Inherits from str so the enum value serializes naturally to JSON.
    The keycard's card type uses the same values.
    """
    MEMBER = "member"       # Facility member (customer)
    EMPLOYEE = "employee"   # Facility staff


@runtime_checkable
class IdentityHolder(Protocol):
    first_name: str
    last_name: str
    email: str | None
    phone: str | None

    @property
    def kind(self) -> HolderKind: ...


def display_name(holder: IdentityHolder) -> str:
    """Space-joined first and last name, as printed on the card."""
    return f"{holder.first_name} {holder.last_name}"
