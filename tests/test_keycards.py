"""
Tests for the keycard endpoints and keycard service.

These tests verify:
  - Issuing copies the holder's details onto the card and returns 201
  - Expiration defaults to one year after issue
  - Card numbers are trimmed, then unique across all issued cards (409 on reuse)
  - Unknown holders and card numbers return 404
  - Later edits to the holder's record don't change issued cards
  - Deactivate / activate / extend behave as on the model
  - Access checks record every attempt and report why a denial happened
  - Listing filters by holder and validity
"""

from datetime import date, timedelta

import pytest

from facility_api.exceptions import (
    DuplicateCardNumberError,
    KeyCardNotFoundError,
    MemberNotFoundError,
)
from facility_api.models.identity import HolderKind
from facility_api.models.keycard import add_months
from facility_api.services import keycard_service, member_service


async def _issue(client, card_number, holder_type="member", holder_id=1, **extra):
    body = {"card_number": card_number, "holder_type": holder_type, "holder_id": holder_id}
    body.update(extra)
    return await client.post("/keycards", json=body)


# ---------------------------------------------------------------------------
# Service layer
# ---------------------------------------------------------------------------

class TestKeyCardService:
    def test_issue_and_duplicate(self, store):
        member = member_service.add_member_with_contact(store, "John", "Doe", "john@example.com")

        card = keycard_service.issue_card(store, "MEM001", HolderKind.MEMBER, member.member_id)
        assert card.holder_id == member.member_id
        assert keycard_service.get_card(store, "MEM001") is card

        with pytest.raises(DuplicateCardNumberError):
            keycard_service.issue_card(store, "MEM001", HolderKind.MEMBER, member.member_id)

    def test_unknown_holder(self, store):
        with pytest.raises(MemberNotFoundError):
            keycard_service.issue_card(store, "MEM001", HolderKind.MEMBER, 42)
        assert store.keycards == {}

    def test_denied_attempt_is_still_recorded(self, store):
        member = member_service.add_member_with_contact(store, "John", "Doe", "john@example.com")
        keycard_service.issue_card(
            store, "OLD001", HolderKind.MEMBER, member.member_id,
            expiration_date=date.today() - timedelta(days=1),
        )

        decision = keycard_service.check_access(store, "OLD001", "Pool")

        assert decision.granted is False
        assert decision.reason == "expired"
        card = keycard_service.get_card(store, "OLD001")
        assert card.last_access_location == "Pool"
        assert card.last_access_time == decision.timestamp

    def test_record_access_ignores_validity(self, store):
        member = member_service.add_member_with_contact(store, "John", "Doe", "john@example.com")
        keycard_service.issue_card(store, "MEM001", HolderKind.MEMBER, member.member_id)
        keycard_service.deactivate_card(store, "MEM001")

        card = keycard_service.record_access(store, "MEM001", "Locker Room")

        assert card.last_access_location == "Locker Room"
        assert card.last_access_time is not None
        assert card.is_valid() is False

        with pytest.raises(KeyCardNotFoundError):
            keycard_service.record_access(store, "NOPE", "Pool")

    def test_padded_card_number_is_trimmed_and_unique(self, store):
        member = member_service.add_member_with_contact(store, "John", "Doe", "john@example.com")

        card = keycard_service.issue_card(store, " MEM1 ", HolderKind.MEMBER, member.member_id)
        assert card.card_number == "MEM1"
        assert keycard_service.get_card(store, "MEM1") is card

        with pytest.raises(DuplicateCardNumberError):
            keycard_service.issue_card(store, "MEM1", HolderKind.MEMBER, member.member_id)
        assert list(store.keycards) == ["MEM1"]

    def test_revoked_reason_beats_expired(self, store):
        member = member_service.add_member_with_contact(store, "John", "Doe", "john@example.com")
        keycard_service.issue_card(
            store, "OLD002", HolderKind.MEMBER, member.member_id,
            expiration_date=date.today() - timedelta(days=10),
        )
        keycard_service.deactivate_card(store, "OLD002")

        decision = keycard_service.check_access(store, "OLD002", "Main Entrance")

        assert decision.reason == "revoked"


# ---------------------------------------------------------------------------
# Issuance over HTTP
# ---------------------------------------------------------------------------

class TestIssueKeyCard:
    async def test_issue_member_card(self, client, member):
        response = await _issue(client, "MEM12345", holder_id=member["member_id"])

        assert response.status_code == 201
        card = response.json()
        assert card["card_number"] == "MEM12345"
        assert card["card_type"] == "member"
        assert card["holder_name"] == "John Doe"
        assert card["holder_email"] == "john.doe@example.com"
        assert card["holder_phone"] == "555-1234"
        assert card["is_active"] is True
        assert card["is_valid"] is True
        assert card["status"] == "active"
        assert card["last_access_time"] is None

    async def test_issue_employee_card(self, client, employee):
        response = await _issue(
            client, "EMP67890", holder_type="employee", holder_id=employee["employee_id"]
        )

        assert response.status_code == 201
        card = response.json()
        assert card["card_type"] == "employee"
        assert card["holder_name"] == "Jane Smith"

    async def test_default_expiration_is_one_year(self, client, member):
        card = (await _issue(client, "MEM00001")).json()

        issue_date = date.fromisoformat(card["issue_date"])
        assert issue_date == date.today()
        assert date.fromisoformat(card["expiration_date"]) == add_months(issue_date, 12)

    async def test_explicit_expiration(self, client, member):
        expires = date.today() + timedelta(days=30)
        card = (await _issue(client, "MEM00002", expiration_date=expires.isoformat())).json()

        assert card["expiration_date"] == expires.isoformat()
        assert card["days_until_expiration"] == 30

    async def test_duplicate_card_number(self, client, member, employee):
        await _issue(client, "SHARED1")

        response = await _issue(client, "SHARED1", holder_type="employee")

        assert response.status_code == 409
        assert response.json()["error_type"] == "duplicate_card_number"

    async def test_unknown_holder(self, client):
        response = await _issue(client, "MEM404", holder_id=99)

        assert response.status_code == 404
        assert response.json()["error_type"] == "member_not_found"

    async def test_blank_card_number(self, client, member):
        response = await _issue(client, "   ")

        assert response.status_code == 422
        assert response.json()["field"] == "card_number"

    async def test_empty_card_number_rejected_by_schema(self, client, member):
        response = await _issue(client, "")
        assert response.status_code == 422

    async def test_holder_edits_do_not_change_card(self, client, member):
        await _issue(client, "MEM12345")

        await client.patch(
            f"/members/{member['member_id']}",
            json={"first_name": "Johnny", "email": "johnny@example.com"},
        )

        card = (await client.get("/keycards/MEM12345")).json()
        assert card["holder_name"] == "John Doe"
        assert card["holder_email"] == "john.doe@example.com"

    async def test_card_survives_holder_removal(self, client, member):
        await _issue(client, "MEM12345")
        await client.delete(f"/members/{member['member_id']}")

        response = await client.get("/keycards/MEM12345")
        assert response.status_code == 200
        assert response.json()["holder_name"] == "John Doe"


# ---------------------------------------------------------------------------
# Card management over HTTP
# ---------------------------------------------------------------------------

class TestManageKeyCard:
    async def test_unknown_card(self, client):
        response = await client.get("/keycards/NOPE")
        assert response.status_code == 404
        assert response.json()["error_type"] == "keycard_not_found"

    async def test_deactivate_and_activate(self, client, member):
        await _issue(client, "MEM12345")

        revoked = (await client.post("/keycards/MEM12345/deactivate")).json()
        assert revoked["is_active"] is False
        assert revoked["is_valid"] is False
        assert revoked["status"] == "revoked"

        restored = (await client.post("/keycards/MEM12345/activate")).json()
        assert restored["is_active"] is True
        assert restored["is_valid"] is True

    async def test_extend(self, client, member):
        initial = date(2031, 1, 31)
        await _issue(client, "MEM12345", expiration_date=initial.isoformat())

        response = await client.post("/keycards/MEM12345/extend", json={"months": 1})

        assert response.status_code == 200
        assert response.json()["expiration_date"] == "2031-02-28"

    async def test_extend_revives_expired_card(self, client, member):
        yesterday = date.today() - timedelta(days=1)
        card = (await _issue(client, "OLD001", expiration_date=yesterday.isoformat())).json()
        assert card["status"] == "expired"

        extended = (await client.post("/keycards/OLD001/extend", json={"months": 1})).json()
        assert extended["is_valid"] is True

    async def test_delete_then_reissue(self, client, member, employee):
        await _issue(client, "REUSE1")

        deleted = await client.delete("/keycards/REUSE1")
        assert deleted.status_code == 200
        assert (await client.get("/keycards/REUSE1")).status_code == 404

        reissued = await _issue(client, "REUSE1", holder_type="employee")
        assert reissued.status_code == 201
        assert reissued.json()["holder_name"] == "Jane Smith"

    async def test_list_filters(self, client, member, employee):
        await _issue(client, "MEM1")
        await _issue(client, "EMP1", holder_type="employee")
        yesterday = date.today() - timedelta(days=1)
        await _issue(client, "MEM2", expiration_date=yesterday.isoformat())

        members_only = await client.get("/keycards", params={"holder_type": "member"})
        assert {c["card_number"] for c in members_only.json()} == {"MEM1", "MEM2"}

        valid = await client.get("/keycards", params={"valid": "true"})
        assert {c["card_number"] for c in valid.json()} == {"MEM1", "EMP1"}

        by_holder = await client.get(
            "/keycards", params={"holder_type": "employee", "holder_id": 1}
        )
        assert [c["card_number"] for c in by_holder.json()] == ["EMP1"]


# ---------------------------------------------------------------------------
# Access checks over HTTP
# ---------------------------------------------------------------------------

class TestAccess:
    async def test_access_granted_and_recorded(self, client, member):
        await _issue(client, "MEM12345")

        response = await client.post(
            "/keycards/MEM12345/access", json={"location": "Main Entrance"}
        )

        assert response.status_code == 200
        decision = response.json()
        assert decision["granted"] is True
        assert decision["reason"] is None
        assert decision["location"] == "Main Entrance"

        card = (await client.get("/keycards/MEM12345")).json()
        assert card["last_access_location"] == "Main Entrance"
        assert card["last_access_time"] is not None

    async def test_access_denied_for_revoked_card(self, client, member):
        await _issue(client, "MEM12345")
        await client.post("/keycards/MEM12345/deactivate")

        response = await client.post("/keycards/MEM12345/access", json={"location": "Pool"})

        assert response.status_code == 200
        assert response.json()["granted"] is False
        assert response.json()["reason"] == "revoked"

        card = (await client.get("/keycards/MEM12345")).json()
        assert card["last_access_location"] == "Pool"

    async def test_latest_location_wins(self, client, member):
        await _issue(client, "MEM12345")

        await client.post("/keycards/MEM12345/access", json={"location": "Main Entrance"})
        await client.post("/keycards/MEM12345/access", json={"location": "Gym Floor"})

        card = (await client.get("/keycards/MEM12345")).json()
        assert card["last_access_location"] == "Gym Floor"

    async def test_access_with_unknown_card(self, client):
        response = await client.post("/keycards/NOPE/access", json={"location": "Pool"})
        assert response.status_code == 404


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestPaddedCardNumbers:
    async def test_padded_duplicate_conflicts(self, client, member):
        first = await _issue(client, "  MEM777 ")
        assert first.status_code == 201
        assert first.json()["card_number"] == "MEM777"

        second = await _issue(client, "MEM777")
        assert second.status_code == 409

        assert (await client.get("/keycards/MEM777")).status_code == 200
