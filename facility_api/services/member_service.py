"""
Member service — the member registry's business logic.

This module handles:
  - Member creation (with field validation and auto-incrementing IDs)
  - Retrieval, search by name, and filtered listing
  - Partial updates and removal
  - Membership status (activate/deactivate) and dues bookkeeping

Validation rules on creation:
  - first_name and last_name are required (non-blank)
  - at least one of email or phone must be provided
  - membership type, payment option and status default to
    BASIC / CASH / ACTIVE when omitted

Lookups of unknown IDs raise MemberNotFoundError, which the exception
handlers turn into a 404.
"""

import logging

from facility_api.exceptions import InvalidArgumentError, MemberNotFoundError
from facility_api.models.member import (
    Member,
    MembershipStatus,
    MembershipType,
    PaymentOption,
)
from facility_api.store import FacilityStore

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def add_member(
    store: FacilityStore,
    first_name: str,
    last_name: str,
    email: str | None = None,
    phone: str | None = None,
    membership_type: MembershipType | None = None,
    payment_option: PaymentOption | None = None,
    membership_status: MembershipStatus | None = None,
) -> Member:
    """
    Register a new member.

    Args:
        store: The facility store.
        first_name: Required, non-blank.
        last_name: Required, non-blank.
        email: Optional, but email or phone must be given.
        phone: Optional, but email or phone must be given.
        membership_type: Defaults to BASIC.
        payment_option: Defaults to CASH.
        membership_status: Defaults to ACTIVE.

    Returns:
        The newly created Member with its assigned ID.

    Raises:
        InvalidArgumentError: If a required field is missing.
    """
    if _is_blank(first_name):
        raise InvalidArgumentError("First name is required", field="first_name")
    if _is_blank(last_name):
        raise InvalidArgumentError("Last name is required", field="last_name")
    if _is_blank(email) and _is_blank(phone):
        raise InvalidArgumentError("Either email or phone number must be provided")

    member = store.members.add(
        lambda member_id: Member(
            member_id=member_id,
            first_name=first_name,
            last_name=last_name,
            email=None if _is_blank(email) else email,
            phone=None if _is_blank(phone) else phone,
            membership_status=membership_status or MembershipStatus.ACTIVE,
            membership_type=membership_type or MembershipType.BASIC,
            payment_option=payment_option or PaymentOption.CASH,
        )
    )
    logger.info("Added member %d (%s)", member.member_id, member.full_name)
    return member


def add_member_with_contact(
    store: FacilityStore,
    first_name: str,
    last_name: str,
    contact_info: str | None,
) -> Member:
    """
    Register a member from a single contact string.

    A contact containing "@" is taken as an email address, anything else as
    a phone number. All membership fields take their defaults.
    """
    if contact_info is not None and "@" in contact_info:
        return add_member(store, first_name, last_name, email=contact_info)
    return add_member(store, first_name, last_name, phone=contact_info)


def get_member(store: FacilityStore, member_id: int) -> Member:
    """
    Get a member by ID.

    Raises:
        MemberNotFoundError: If no member has that ID.
    """
    member = store.members.get(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member


def update_member(
    store: FacilityStore,
    member_id: int,
    first_name: str | None = None,
    last_name: str | None = None,
    email: str | None = None,
    phone: str | None = None,
    membership_type: MembershipType | None = None,
    payment_option: PaymentOption | None = None,
    membership_status: MembershipStatus | None = None,
) -> Member:
    """
    Partially update a member.

    None means "keep the current value". Blank first/last names are ignored
    rather than stored, so a member can never lose their name. Email and
    phone may be set to "" to clear them.

    Keycards already issued to the member keep the details they were issued
    with.

    Raises:
        MemberNotFoundError: If no member has that ID.
    """
    member = get_member(store, member_id)

    if not _is_blank(first_name):
        member.first_name = first_name
    if not _is_blank(last_name):
        member.last_name = last_name
    if email is not None:
        member.email = email or None
    if phone is not None:
        member.phone = phone or None
    if membership_type is not None:
        member.membership_type = membership_type
    if payment_option is not None:
        member.payment_option = payment_option
    if membership_status is not None:
        member.membership_status = membership_status

    return member


def remove_member(store: FacilityStore, member_id: int) -> Member:
    """
    Remove a member from the registry.

    Returns:
        The removed Member.

    Raises:
        MemberNotFoundError: If no member has that ID (including a second
            removal of the same member).
    """
    member = store.members.remove(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    logger.info("Removed member %d (%s)", member_id, member.full_name)
    return member


def find_members_by_name(store: FacilityStore, name: str | None) -> list[Member]:
    """
    Case-insensitive substring search over first, last and full name.

    A blank or missing search term matches nobody.
    """
    if _is_blank(name):
        return []

    term = name.strip().lower()
    return [
        member for member in store.members
        if term in member.first_name.lower()
        or term in member.last_name.lower()
        or term in member.full_name.lower()
    ]


def list_members(
    store: FacilityStore,
    status: MembershipStatus | None = None,
) -> list[Member]:
    """List all members, optionally only those with the given status."""
    if status is None:
        return store.members.values()
    return [m for m in store.members if m.membership_status == status]


def count_members(store: FacilityStore) -> int:
    return len(store.members)


def activate_member(store: FacilityStore, member_id: int) -> Member:
    member = get_member(store, member_id)
    member.activate()
    return member


def deactivate_member(store: FacilityStore, member_id: int) -> Member:
    member = get_member(store, member_id)
    member.deactivate()
    return member


def record_member_payment(store: FacilityStore, member_id: int) -> Member:
    """Record a dues payment for today and clear the overdue flag."""
    member = get_member(store, member_id)
    member.record_payment()
    return member


def mark_member_payment_overdue(store: FacilityStore, member_id: int) -> Member:
    member = get_member(store, member_id)
    member.mark_payment_overdue()
    logger.info("Member %d marked payment overdue", member_id)
    return member


def list_overdue_members(store: FacilityStore) -> list[Member]:
    return [m for m in store.members if m.payment_overdue]


def clear_members(store: FacilityStore) -> None:
    """Remove every member and restart IDs at 1."""
    store.members.clear()
    logger.info("Cleared member registry")
