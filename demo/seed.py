#!/usr/bin/env python3
"""
Demo seed script — populates a running server with sample facility data.

!! NOT FOR PRODUCTION !!
This script registers fake members and staff, issues them keycards and
records a few swipes. It is intended ONLY for local demos and front desk
UI development.

Usage:
    # With the API server running on localhost:8000:
    python demo/seed.py

    # Custom server URL:
    python demo/seed.py --base-url http://localhost:9000

Everything is held in server memory, so restarting the server is the
reset. Seeding twice against the same server fails on the first card
number, which is already issued.

Cards after seeding:
    ┌──────────┬──────────────────┬──────────┬───────────────────────┐
    │ Card     │ Holder           │ Type     │ State                 │
    ├──────────┼──────────────────┼──────────┼───────────────────────┤
    │ MEM1001  │ Alice Chen       │ member   │ valid                 │
    │ MEM1002  │ Bob Martinez     │ member   │ valid, 3 months       │
    │ MEM1003  │ Carol Nguyen     │ member   │ expired last week     │
    │ MEM1004  │ Dave Johnson     │ member   │ revoked               │
    │ EMP2001  │ Erin Patel       │ employee │ valid, 2 years        │
    │ EMP2002  │ Frank Osei       │ employee │ valid                 │
    └──────────┴──────────────────┴──────────┴───────────────────────┘
"""

import argparse
import asyncio
import sys
from datetime import date, timedelta

import httpx

BASE_URL = "http://localhost:8000"

# ---------------------------------------------------------------------------
# Demo records
# ---------------------------------------------------------------------------

MEMBERS = [
    {
        "first_name": "Alice",
        "last_name": "Chen",
        "email": "alice.chen@example.com",
        "membership_type": "premium",
        "payment_option": "credit_card",
        "card": {"card_number": "MEM1001"},
    },
    {
        "first_name": "Bob",
        "last_name": "Martinez",
        "phone": "555-0142",
        "card": {"card_number": "MEM1002", "months": 3},
    },
    {
        "first_name": "Carol",
        "last_name": "Nguyen",
        "email": "carol.nguyen@example.com",
        "phone": "555-0199",
        "membership_type": "vip",
        "payment_option": "bank_transfer",
        "card": {"card_number": "MEM1003", "expired_days_ago": 7},
    },
    {
        "first_name": "Dave",
        "last_name": "Johnson",
        "email": "dave.johnson@example.com",
        "card": {"card_number": "MEM1004", "revoke": True},
        "overdue": True,
    },
]

EMPLOYEES = [
    {
        "first_name": "Erin",
        "last_name": "Patel",
        "email": "erin.patel@example.com",
        "department": "Operations",
        "position": "Facility Manager",
        "salary": "68000.00",
        "card": {"card_number": "EMP2001", "months": 24},
    },
    {
        "first_name": "Frank",
        "last_name": "Osei",
        "phone": "555-0107",
        "department": "Training",
        "position": "Personal Trainer",
        "salary": "41500.00",
        "card": {"card_number": "EMP2002"},
    },
]

SWIPES = [
    ("MEM1001", "Main Entrance"),
    ("MEM1001", "Gym Floor"),
    ("MEM1002", "Pool"),
    ("MEM1003", "Main Entrance"),
    ("MEM1004", "Main Entrance"),
    ("EMP2001", "Staff Room"),
    ("EMP2002", "Main Entrance"),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def log(msg: str) -> None:
    print(f"  {msg}")


def add_months(start: date, months: int) -> date:
    # Rough enough for demo data; the server does the exact calendar math.
    return start + timedelta(days=30 * months)


def without_card(record: dict) -> dict:
    return {k: v for k, v in record.items() if k not in ("card", "overdue")}


async def create(client: httpx.AsyncClient, path: str, body: dict) -> dict:
    resp = await client.post(f"{BASE_URL}{path}", json=body)
    resp.raise_for_status()
    return resp.json()


async def issue_card(client: httpx.AsyncClient, holder_type: str,
                     holder_id: int, card: dict) -> dict:
    body: dict = {
        "card_number": card["card_number"],
        "holder_type": holder_type,
        "holder_id": holder_id,
    }
    if "months" in card:
        body["expiration_date"] = add_months(date.today(), card["months"]).isoformat()
    if "expired_days_ago" in card:
        body["expiration_date"] = (
            date.today() - timedelta(days=card["expired_days_ago"])
        ).isoformat()

    resp = await client.post(f"{BASE_URL}/keycards", json=body)
    if resp.status_code == 409:
        print(f"\n  ERROR: {resp.json()['detail']}")
        print("  Restart the server to start from an empty facility.\n")
        sys.exit(1)
    resp.raise_for_status()

    if card.get("revoke"):
        resp = await client.post(f"{BASE_URL}/keycards/{card['card_number']}/deactivate")
        resp.raise_for_status()
    return resp.json()


# ---------------------------------------------------------------------------
# Seed logic
# ---------------------------------------------------------------------------

async def seed(base_url: str) -> None:
    global BASE_URL
    BASE_URL = base_url

    print("\n========================================")
    print("  DEMO SEED — NOT FOR PRODUCTION")
    print("========================================\n")

    async with httpx.AsyncClient(timeout=30.0) as client:
        # Health check
        try:
            health = await client.get(f"{BASE_URL}/health")
            health.raise_for_status()
        except (httpx.ConnectError, httpx.HTTPStatusError):
            print(f"  ERROR: Cannot connect to {BASE_URL}")
            print("  Start the server first: uvicorn facility_api.main:app --reload\n")
            sys.exit(1)

        cards: list[dict] = []

        # --- Members ---
        print("Registering members...")
        for record in MEMBERS:
            member = await create(client, "/members", without_card(record))
            log(f"Member {member['member_id']}: {member['full_name']} "
                f"({member['membership_type']})")
            if record.get("overdue"):
                await create(client, f"/members/{member['member_id']}/payments/overdue", {})
                log("  Dues marked overdue")
            cards.append(await issue_card(client, "member", member["member_id"], record["card"]))

        # --- Employees ---
        print("\nRegistering employees...")
        for record in EMPLOYEES:
            employee = await create(client, "/employees", without_card(record))
            log(f"Employee {employee['employee_id']}: {employee['full_name']} "
                f"({employee['position']}, {employee['department']})")
            cards.append(
                await issue_card(client, "employee", employee["employee_id"], record["card"])
            )

        # --- Swipes ---
        print("\nRecording swipes...")
        for card_number, location in SWIPES:
            decision = await create(
                client, f"/keycards/{card_number}/access", {"location": location}
            )
            outcome = "granted" if decision["granted"] else f"denied ({decision['reason']})"
            log(f"{card_number} at {location}: {outcome}")

    # --- Summary ---
    print("\n========================================")
    print("  SEED COMPLETE — Keycards")
    print("========================================")
    print(f"\n  {'Card':<10s} {'Holder':<18s} {'Type':<9s} {'Expires':<11s} Status")
    print(f"  {'─' * 10} {'─' * 18} {'─' * 9} {'─' * 11} {'─' * 7}")
    for card in cards:
        print(
            f"  {card['card_number']:<10s} {card['holder_name']:<18s} "
            f"{card['card_type']:<9s} {card['expiration_date']:<11s} {card['status']}"
        )
    print()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Demo seed script — NOT FOR PRODUCTION",
        epilog="Registers sample members and staff, issues keycards, records swipes.",
    )
    parser.add_argument(
        "--base-url", default=BASE_URL,
        help="Base URL of the running API (default: http://localhost:8000)",
    )
    args = parser.parse_args()

    await seed(args.base_url)


if __name__ == "__main__":
    asyncio.run(main())
