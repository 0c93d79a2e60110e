from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from rsvp_bridge.api.main import app
from rsvp_bridge.api.routers.guests import get_rsvp_service
from rsvp_bridge.guests.service import RsvpService
from rsvp_bridge.sheets.client import StoreReadError, StoreWriteError

HEADER = [
    "id",
    "firstName",
    "lastName",
    "householdId",
    "invitedFor",
    "notes",
    "CITY_HALL",
    "CEREMONY",
    "DINER",
    "PARTY",
    "remarks",
]


class FakeSheetsClient:
    """In-memory stand-in for the Google Sheets client"""

    def __init__(self, rows: list[list[str]]) -> None:
        self.rows = rows
        self.reads: list[str] = []
        self.writes: list[tuple[str, list[list[str]]]] = []
        self.fail_read = False
        self.fail_write = False

    def read_range(self, range_name: str) -> list[list[str]]:
        self.reads.append(range_name)
        if self.fail_read:
            raise StoreReadError("sheet unreachable")
        return copy.deepcopy(self.rows)

    def write_range(self, range_name: str, rows: list[list[str]]) -> None:
        if self.fail_write:
            raise StoreWriteError("write rejected")
        self.writes.append((range_name, rows))
        self.rows = copy.deepcopy(rows)


@pytest.fixture()
def sheet_rows() -> list[list[str]]:
    return [
        list(HEADER),
        ["1", "Janna", "Peeters", "1", "city_hall, ceremony, diner, party", "", "✓", "✓", "✗", "✓", "vegetarian"],
        ["2", "Ian", "Jacobs", "1", "ceremony,party"],
        ["7", "Lotte", "Claes", "2", "City_Hall, DINER", "", "", "", "✗", ""],
        ["12", "Wout", "Maes", "3", "party", "", "", "", "", "", ""],
    ]


@pytest.fixture()
def fake_client(sheet_rows: list[list[str]]) -> FakeSheetsClient:
    return FakeSheetsClient(sheet_rows)


@pytest.fixture()
def service(fake_client: FakeSheetsClient) -> RsvpService:
    return RsvpService(sheets_client=fake_client, sheet_name="Gasten")


@pytest.fixture()
def api_client(service: RsvpService):
    app.dependency_overrides[get_rsvp_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
