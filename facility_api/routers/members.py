"""
Members router — the member registry over HTTP.

Endpoints:
  POST   /members                          — Register a member
  GET    /members                          — List members (filter by status or name)
  GET    /members/overdue                  — Members with overdue dues
  GET    /members/{member_id}              — Get a member
  PATCH  /members/{member_id}              — Partially update a member
  DELETE /members/{member_id}              — Remove a member
  POST   /members/{member_id}/activate     — Set membership ACTIVE
  POST   /members/{member_id}/deactivate   — Set membership INACTIVE
  POST   /members/{member_id}/payments     — Record a dues payment
  POST   /members/{member_id}/payments/overdue — Flag dues as overdue

Removing a member does not touch keycards issued to them; cards are
revoked through the keycards router.
"""

from fastapi import APIRouter, Depends, Query, status

from facility_api.models.member import MembershipStatus
from facility_api.schemas.member import (
    MemberCreateRequest,
    MemberResponse,
    MemberUpdateRequest,
)
from facility_api.services import member_service
from facility_api.store import FacilityStore, get_store

router = APIRouter()


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new member",
)
async def create_member(
    request: MemberCreateRequest,
    store: FacilityStore = Depends(get_store),
):
    """
    Register a new member.

    - **first_name** / **last_name**: Required
    - **email** / **phone**: At least one is required
    - Membership type, payment option and status default to basic / cash / active
    """
    return member_service.add_member(store, **request.model_dump())


@router.get(
    "",
    response_model=list[MemberResponse],
    summary="List members",
)
async def list_members(
    status: MembershipStatus | None = Query(None, description="Filter by membership status"),
    name: str | None = Query(None, description="Case-insensitive name search"),
    store: FacilityStore = Depends(get_store),
):
    """
    List members in registration order.

    When **name** is given, only members whose first, last or full name
    contains it are returned; a blank name matches nobody.
    """
    if name is not None:
        members = member_service.find_members_by_name(store, name)
        if status is not None:
            members = [m for m in members if m.membership_status == status]
        return members
    return member_service.list_members(store, status=status)


@router.get(
    "/overdue",
    response_model=list[MemberResponse],
    summary="List members with overdue payments",
)
async def list_overdue_members(store: FacilityStore = Depends(get_store)):
    return member_service.list_overdue_members(store)


@router.get(
    "/{member_id}",
    response_model=MemberResponse,
    summary="Get a member",
)
async def get_member(member_id: int, store: FacilityStore = Depends(get_store)):
    return member_service.get_member(store, member_id)


@router.patch(
    "/{member_id}",
    response_model=MemberResponse,
    summary="Update member fields",
)
async def update_member(
    member_id: int,
    updates: MemberUpdateRequest,
    store: FacilityStore = Depends(get_store),
):
    """
    Update a member.

    Only fields present in the body are changed. Keycards already issued
    keep the name and contact details they were issued with.
    """
    # exclude_unset=True: only fields the client explicitly sent
    return member_service.update_member(
        store, member_id, **updates.model_dump(exclude_unset=True)
    )


@router.delete(
    "/{member_id}",
    response_model=MemberResponse,
    summary="Remove a member",
)
async def remove_member(member_id: int, store: FacilityStore = Depends(get_store)):
    """Remove a member and return the removed record."""
    return member_service.remove_member(store, member_id)


@router.post(
    "/{member_id}/activate",
    response_model=MemberResponse,
    summary="Activate a membership",
)
async def activate_member(member_id: int, store: FacilityStore = Depends(get_store)):
    return member_service.activate_member(store, member_id)


@router.post(
    "/{member_id}/deactivate",
    response_model=MemberResponse,
    summary="Deactivate a membership",
)
async def deactivate_member(member_id: int, store: FacilityStore = Depends(get_store)):
    return member_service.deactivate_member(store, member_id)


@router.post(
    "/{member_id}/payments",
    response_model=MemberResponse,
    summary="Record a dues payment",
)
async def record_payment(member_id: int, store: FacilityStore = Depends(get_store)):
    """Record a payment made today. Clears the overdue flag."""
    return member_service.record_member_payment(store, member_id)


@router.post(
    "/{member_id}/payments/overdue",
    response_model=MemberResponse,
    summary="Mark dues as overdue",
)
async def mark_payment_overdue(member_id: int, store: FacilityStore = Depends(get_store)):
    return member_service.mark_member_payment_overdue(store, member_id)
