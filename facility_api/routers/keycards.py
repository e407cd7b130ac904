"""
Keycards router — issuing and managing access credentials.

Endpoints:
  POST   /keycards                              — Issue a card to a member or employee
  GET    /keycards                              — List cards (filter by holder or validity)
  GET    /keycards/{card_number}                — Get one card
  DELETE /keycards/{card_number}                — Remove a card record
  POST   /keycards/{card_number}/activate       — Re-enable a card
  POST   /keycards/{card_number}/deactivate     — Revoke a card
  POST   /keycards/{card_number}/extend         — Move the expiration date by N months
  POST   /keycards/{card_number}/access         — Record a swipe and decide access

Validity (is_valid, is_expired, status) is computed when each response is
built, from today's date. Two reads of the same card on different days can
disagree without anything having been changed.

The access endpoint always returns 200 with granted true/false. A denial is
a normal outcome of a swipe, not an error; only an unknown card number
produces a 404.
"""

from fastapi import APIRouter, Depends, Query, status

from facility_api.dependencies import get_keycard
from facility_api.models.identity import HolderKind
from facility_api.models.keycard import KeyCard
from facility_api.schemas.keycard import (
    AccessDecisionResponse,
    AccessRequest,
    KeyCardExtendRequest,
    KeyCardIssueRequest,
    KeyCardResponse,
)
from facility_api.services import keycard_service
from facility_api.store import FacilityStore, get_store

router = APIRouter()


@router.post(
    "",
    response_model=KeyCardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Issue a keycard",
)
async def issue_card(
    request: KeyCardIssueRequest,
    store: FacilityStore = Depends(get_store),
):
    """
    Issue a new keycard.

    - The holder's name, email and phone are copied onto the card
    - The card number must not already be in use (409)
    - Expiration defaults to one year from today
    """
    card = keycard_service.issue_card(
        store,
        card_number=request.card_number,
        holder_type=request.holder_type,
        holder_id=request.holder_id,
        expiration_date=request.expiration_date,
    )
    return KeyCardResponse.from_card(card)


@router.get(
    "",
    response_model=list[KeyCardResponse],
    summary="List keycards",
)
async def list_cards(
    holder_type: HolderKind | None = Query(None, description="Only member or employee cards"),
    holder_id: int | None = Query(None, description="Only cards issued to this holder ID"),
    valid: bool | None = Query(None, description="Only currently valid (or invalid) cards"),
    store: FacilityStore = Depends(get_store),
):
    cards = keycard_service.list_cards(
        store, holder_type=holder_type, holder_id=holder_id, valid=valid
    )
    return [KeyCardResponse.from_card(card) for card in cards]


@router.get(
    "/{card_number}",
    response_model=KeyCardResponse,
    summary="Get a keycard",
)
async def get_card(card: KeyCard = Depends(get_keycard)):
    return KeyCardResponse.from_card(card)


@router.delete(
    "/{card_number}",
    response_model=KeyCardResponse,
    summary="Remove a keycard record",
)
async def remove_card(card_number: str, store: FacilityStore = Depends(get_store)):
    """Remove the card from the store. The number can be issued again afterwards."""
    return KeyCardResponse.from_card(keycard_service.remove_card(store, card_number))


@router.post(
    "/{card_number}/activate",
    response_model=KeyCardResponse,
    summary="Activate a keycard",
)
async def activate_card(card_number: str, store: FacilityStore = Depends(get_store)):
    """Re-enable a card. Idempotent; an expired card stays invalid."""
    return KeyCardResponse.from_card(keycard_service.activate_card(store, card_number))


@router.post(
    "/{card_number}/deactivate",
    response_model=KeyCardResponse,
    summary="Revoke a keycard",
)
async def deactivate_card(card_number: str, store: FacilityStore = Depends(get_store)):
    """Revoke a card. Idempotent; the card can be reactivated later."""
    return KeyCardResponse.from_card(keycard_service.deactivate_card(store, card_number))


@router.post(
    "/{card_number}/extend",
    response_model=KeyCardResponse,
    summary="Extend a keycard's expiration",
)
async def extend_card(
    card_number: str,
    request: KeyCardExtendRequest,
    store: FacilityStore = Depends(get_store),
):
    """
    Move the expiration date by **months** calendar months.

    Negative values shorten the card's life. Works on revoked and expired
    cards alike.
    """
    card = keycard_service.extend_card(store, card_number, request.months)
    return KeyCardResponse.from_card(card)


@router.post(
    "/{card_number}/access",
    response_model=AccessDecisionResponse,
    summary="Record an access attempt",
)
async def check_access(
    card_number: str,
    request: AccessRequest,
    store: FacilityStore = Depends(get_store),
):
    """
    Record a swipe at **location** and return whether access is granted.

    The attempt is recorded on the card even when it is denied.
    """
    return keycard_service.check_access(store, card_number, request.location)
