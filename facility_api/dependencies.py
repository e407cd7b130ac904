"""
FastAPI dependencies shared by the routers.

Dependencies are reusable functions that FastAPI injects into route
handlers. The chain here is short:

  get_store (-> FacilityStore)
      └── get_keycard (card_number path parameter -> KeyCard)

Every keycard endpoint that operates on one card declares get_keycard, so
an unknown card number is rejected with 404 before the route handler runs.
"""

from fastapi import Depends

from facility_api.models.keycard import KeyCard
from facility_api.services import keycard_service
from facility_api.store import FacilityStore, get_store


async def get_keycard(
    card_number: str,
    store: FacilityStore = Depends(get_store),
) -> KeyCard:
    """
    Resolve the {card_number} path parameter to an issued KeyCard.

    Raises:
        KeyCardNotFoundError: If no card with that number exists (404).
    """
    return keycard_service.get_card(store, card_number)
