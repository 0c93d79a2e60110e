from collections.abc import Sequence

from ..sheets.models import SheetRow
from .activities import Activity
from .mapper import ID_HEADER, INVITED_FOR_HEADER, REMARKS_HEADER, HeaderSchema, parse_invited_for, parse_sheet_int
from .models import Answer, AttendanceUpdate


WRITTEN_HEADERS = (*(activity.header for activity in Activity), REMARKS_HEADER)


def _updates_by_guest(updates: Sequence[AttendanceUpdate]) -> dict[int, AttendanceUpdate]:
    lookup: dict[int, AttendanceUpdate] = {}
    for update in updates:
        # first update for a guest wins
        lookup.setdefault(update.guest_id, update)
    return lookup


def _guest_id(schema: HeaderSchema, row: SheetRow) -> int | None:
    return parse_sheet_int(schema.cell(row, ID_HEADER))


def _rewrite_row(
    schema: HeaderSchema, row: SheetRow, update: AttendanceUpdate, restrict_to_invited: bool
) -> SheetRow:
    width = max(schema.positions[name] for name in WRITTEN_HEADERS) + 1
    rewritten = list(row) + [""] * (width - len(row))

    invited_for = None
    if restrict_to_invited:
        invited_for = parse_invited_for(schema.cell(row, INVITED_FOR_HEADER))

    for activity in Activity:
        answer = update.answer_for(activity)
        if invited_for is not None and activity not in invited_for:
            answer = Answer.UNKNOWN
        rewritten[schema.positions[activity.header]] = answer.to_mark()
    rewritten[schema.positions[REMARKS_HEADER]] = update.remarks

    return rewritten


def merge_rows(
    current_rows: Sequence[SheetRow],
    updates: Sequence[AttendanceUpdate],
    restrict_to_invited: bool = False,
) -> list[SheetRow]:
    """Apply attendance updates to the full set of sheet rows.

    The first row is the header; it locates the id, mark and remarks cells.
    Rows whose id matches an update are rewritten in full: the four mark cells
    and the remarks come from the update, every other cell is copied. All
    other rows, the header included, are returned as they are. The result has
    the same length and order as ``current_rows``.

    With ``restrict_to_invited`` the marks of activities the guest was not
    invited to are left empty instead of being written from the update.

    Raises:
        SheetSchemaError: the header lacks a column the merge reads or writes

    """
    if not current_rows:
        return []

    header, *data_rows = current_rows
    schema = HeaderSchema.from_header(header)
    schema.require(WRITTEN_HEADERS)
    lookup = _updates_by_guest(updates)

    merged: list[SheetRow] = [header]
    for row in data_rows:
        guest_id = _guest_id(schema, row)
        update = lookup.get(guest_id) if guest_id is not None else None
        if update is None:
            merged.append(row)
        else:
            merged.append(_rewrite_row(schema, row, update, restrict_to_invited))
    return merged


def unmatched_guest_ids(
    current_rows: Sequence[SheetRow], updates: Sequence[AttendanceUpdate]
) -> list[int]:
    """Return the ids of updates that no row in the sheet refers to"""
    present: set[int | None] = set()
    if current_rows:
        header, *data_rows = current_rows
        schema = HeaderSchema.from_header(header)
        present = {_guest_id(schema, row) for row in data_rows}
    return sorted({update.guest_id for update in updates} - present)
