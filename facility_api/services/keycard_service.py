"""
Keycard service — issuing, looking up and managing access credentials.

When a card is issued:
  1. The holder is resolved through the member or employee registry
     (MemberNotFoundError / EmployeeNotFoundError if it doesn't exist)
  2. KeyCard.issue() trims the card number and snapshots the holder's
     name, email and phone
  3. The trimmed number is checked against every card already issued
     (DuplicateCardNumberError if taken)
  4. The card is stored under its card number

The KeyCard itself does not enforce unique card numbers; this service is
the registry layer that does.

Access checks:
  check_access() records the swipe on the card FIRST and then decides.
  Denied attempts are logged like granted ones, so the card's last-access
  fields describe the latest attempt, not the latest successful entry.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from facility_api.exceptions import DuplicateCardNumberError, KeyCardNotFoundError
from facility_api.models.identity import HolderKind, IdentityHolder
from facility_api.models.keycard import CardStatus, KeyCard, KeyCardType
from facility_api.services import employee_service, member_service
from facility_api.store import FacilityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of one access attempt at a door or reader."""
    card_number: str
    location: str
    granted: bool
    reason: str | None
    timestamp: datetime


def _resolve_holder(
    store: FacilityStore,
    holder_type: HolderKind,
    holder_id: int,
) -> IdentityHolder:
    if HolderKind(holder_type) == HolderKind.MEMBER:
        return member_service.get_member(store, holder_id)
    return employee_service.get_employee(store, holder_id)


def issue_card(
    store: FacilityStore,
    card_number: str,
    holder_type: HolderKind,
    holder_id: int,
    expiration_date: date | None = None,
) -> KeyCard:
    """
    Issue a new keycard to a member or employee.

    Args:
        store: The facility store.
        card_number: Identifier printed on the card; must be unused.
        holder_type: Which registry holder_id refers to.
        holder_id: The member or employee ID.
        expiration_date: Last valid day. Defaults to one year from today.

    Returns:
        The issued KeyCard (active, issued today).

    Raises:
        MemberNotFoundError / EmployeeNotFoundError: Unknown holder.
        DuplicateCardNumberError: The card number is already in use.
        InvalidArgumentError: The card number is blank.
    """
    holder = _resolve_holder(store, holder_type, holder_id)

    # Uniqueness is checked on the trimmed number KeyCard stores
    card = KeyCard.issue(
        card_number,
        holder,
        expiration_date=expiration_date,
        holder_id=holder_id,
    )
    if card.card_number in store.keycards:
        raise DuplicateCardNumberError(card.card_number)

    store.keycards[card.card_number] = card

    logger.info(
        "Issued %s card %s to %s (expires %s)",
        card.card_type.value, card.card_number, card.card_holder_name,
        card.expiration_date.isoformat(),
    )
    return card


def get_card(store: FacilityStore, card_number: str) -> KeyCard:
    """
    Get a keycard by its number.

    Raises:
        KeyCardNotFoundError: If no card with that number was issued.
    """
    card = store.keycards.get(card_number)
    if card is None:
        raise KeyCardNotFoundError(card_number)
    return card


def list_cards(
    store: FacilityStore,
    holder_type: HolderKind | None = None,
    holder_id: int | None = None,
    valid: bool | None = None,
) -> list[KeyCard]:
    """
    List issued cards, optionally filtered.

    Filters combine with AND. holder_id on its own is ambiguous (member 1
    and employee 1 both exist), so callers normally pass it with holder_type.
    The valid filter is evaluated against today's date at call time.
    """
    cards = list(store.keycards.values())
    if holder_type is not None:
        card_type = KeyCardType(HolderKind(holder_type).value)
        cards = [c for c in cards if c.card_type == card_type]
    if holder_id is not None:
        cards = [c for c in cards if c.holder_id == holder_id]
    if valid is not None:
        cards = [c for c in cards if c.is_valid() == valid]
    return cards


def activate_card(store: FacilityStore, card_number: str) -> KeyCard:
    card = get_card(store, card_number)
    card.activate()
    logger.info("Activated card %s", card_number)
    return card


def deactivate_card(store: FacilityStore, card_number: str) -> KeyCard:
    """Revoke a card. It stays on record and can be reactivated."""
    card = get_card(store, card_number)
    card.deactivate()
    logger.info("Deactivated card %s", card_number)
    return card


def extend_card(store: FacilityStore, card_number: str, months: int) -> KeyCard:
    """Move a card's expiration date by `months` (negative shortens it)."""
    card = get_card(store, card_number)
    card.extend_expiration(months)
    logger.info(
        "Extended card %s by %d month(s), now expires %s",
        card_number, months, card.expiration_date.isoformat(),
    )
    return card


def record_access(store: FacilityStore, card_number: str, location: str) -> KeyCard:
    """Record an attempt at `location` on the card, whether or not it is valid."""
    card = get_card(store, card_number)
    card.record_access(location)
    return card


def check_access(store: FacilityStore, card_number: str, location: str) -> AccessDecision:
    """
    Record an access attempt and decide whether to let the holder in.

    The attempt is recorded on the card before the decision is made, so
    denials show up in the card's last-access fields too.

    Raises:
        KeyCardNotFoundError: If the card number is unknown. Unknown cards
            have nowhere to record the attempt.
    """
    card = record_access(store, card_number, location)

    status = card.status
    granted = status == CardStatus.ACTIVE
    reason = None if granted else status.value

    if not granted:
        logger.info("Denied card %s at %s: %s", card_number, location, reason)

    return AccessDecision(
        card_number=card.card_number,
        location=location,
        granted=granted,
        reason=reason,
        timestamp=card.last_access_time,
    )


def remove_card(store: FacilityStore, card_number: str) -> KeyCard:
    """
    Remove a card from the store. Its number becomes available again.

    Raises:
        KeyCardNotFoundError: If no card with that number was issued.
    """
    card = store.keycards.pop(card_number, None)
    if card is None:
        raise KeyCardNotFoundError(card_number)
    logger.info("Removed card %s", card_number)
    return card
