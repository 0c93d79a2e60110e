import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..sheets.models import SheetRow
from .activities import Activity, resolve
from .errors import DuplicateGuestError, SheetSchemaError
from .models import Answer, Attendance, Guest

logger = logging.getLogger(__name__)


ID_HEADER = "id"
FIRST_NAME_HEADER = "firstName"
LAST_NAME_HEADER = "lastName"
HOUSEHOLD_ID_HEADER = "householdId"
INVITED_FOR_HEADER = "invitedFor"
REMARKS_HEADER = "remarks"

REQUIRED_HEADERS = (
    ID_HEADER,
    FIRST_NAME_HEADER,
    LAST_NAME_HEADER,
    HOUSEHOLD_ID_HEADER,
    INVITED_FOR_HEADER,
    *(activity.header for activity in Activity),
)


@dataclass(frozen=True)
class HeaderSchema:
    """Positions of the named columns, taken from the header row"""

    positions: dict[str, int]

    @classmethod
    def from_header(cls, header: Sequence[Any]) -> "HeaderSchema":
        """Build the schema, failing when an expected header is missing"""
        positions: dict[str, int] = {}
        for index, name in enumerate(header):
            positions.setdefault(str(name).strip(), index)

        schema = cls(positions)
        schema.require(REQUIRED_HEADERS)
        return schema

    def require(self, names: Sequence[str]) -> None:
        missing = [name for name in names if name not in self.positions]
        if missing:
            raise SheetSchemaError(f"Missing expected headers: {', '.join(missing)}")

    def cell(self, row: Sequence[Any], name: str) -> Any:
        """Value of the named cell, None when the row is too short"""
        index = self.positions[name]
        return row[index] if index < len(row) else None

    def record(self, row: Sequence[Any]) -> dict[str, Any]:
        """Re-key a positional row by header name"""
        return {
            name: row[index] if index < len(row) and row[index] is not None else ""
            for name, index in self.positions.items()
        }


def parse_sheet_int(value: Any) -> int | None:
    """Parse an integer cell, returning None for empty or non-numeric values"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    text = str(value).strip() if value is not None else ""
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def parse_invited_for(raw: Any) -> list[Activity]:
    """Parse a comma separated list of activities like "city_hall, DINER" """
    if not raw:
        return []
    compact = "".join(str(raw).split())
    return [resolve(token) for token in compact.split(",")]


def _is_blank(row: Sequence[Any]) -> bool:
    return all(cell is None or str(cell).strip() == "" for cell in row)


def map_row(record: dict[str, Any]) -> Guest:
    """Turn one header-keyed record into a Guest"""
    invited_for = parse_invited_for(record[INVITED_FOR_HEADER])
    marks = {activity: record[activity.header] for activity in Activity}
    already_replied = any(bool(mark) for mark in marks.values())

    attending = []
    if already_replied:
        attending = [
            Attendance(activity, Answer.from_mark(marks[activity]))
            for activity in Activity
            if activity in invited_for
        ]

    return Guest(
        id=parse_sheet_int(record[ID_HEADER]),
        first_name=str(record[FIRST_NAME_HEADER]),
        last_name=str(record[LAST_NAME_HEADER]),
        household_id=parse_sheet_int(record[HOUSEHOLD_ID_HEADER]),
        invited_for=invited_for,
        already_replied=already_replied,
        attending=attending,
    )


def map_rows(rows: Sequence[SheetRow]) -> list[Guest]:
    """Map the raw sheet values, header row first, to guests.

    Raises:
        SheetSchemaError: the header row is absent or lacks an expected column
        UnknownActivityError: an invited-for cell names an unknown activity
        DuplicateGuestError: two rows carry the same guest id

    """
    if not rows:
        raise SheetSchemaError("Sheet has no header row")

    header, *data_rows = rows
    schema = HeaderSchema.from_header(header)

    guests: list[Guest] = []
    seen_ids: set[int] = set()
    for row in data_rows:
        if _is_blank(row):
            continue

        guest = map_row(schema.record(row))
        if guest.id is None:
            logger.warning(f"Guest row without a valid id: {guest.first_name} {guest.last_name}")
        elif guest.id in seen_ids:
            raise DuplicateGuestError(guest.id)
        else:
            seen_ids.add(guest.id)
        guests.append(guest)

    return guests
