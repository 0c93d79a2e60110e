import logging
import threading
from collections.abc import Sequence
from typing import Protocol

from ..sheets.models import SheetRow
from .mapper import map_rows
from .merge import merge_rows, unmatched_guest_ids
from .models import AttendanceUpdate, Guest

logger = logging.getLogger(__name__)


class SheetStore(Protocol):
    """Interface of the store holding the guest sheet"""

    def read_range(self, range_name: str) -> list[SheetRow]: ...

    def write_range(self, range_name: str, rows: list[SheetRow]) -> None: ...


class RsvpService:
    """Reads guests from and merges attendance into the guest sheet"""

    # serializes read-merge-write cycles handled by this process
    _submit_lock = threading.Lock()

    def __init__(
        self,
        sheets_client: SheetStore,
        sheet_name: str,
        cell_range: str = "A1:K137",
        restrict_to_invited: bool = False,
    ):
        self.sheets_client = sheets_client
        self.sheet_name = sheet_name
        self.cell_range = cell_range
        self.restrict_to_invited = restrict_to_invited

    @property
    def range_name(self) -> str:
        return f"{self.sheet_name}!{self.cell_range}"

    def fetch_guests(self) -> list[Guest]:
        """Read the sheet and return every guest on it"""
        rows = self.sheets_client.read_range(self.range_name)
        guests = map_rows(rows)
        logger.info(f"Fetched {len(guests)} guests from {self.range_name}")
        return guests

    def submit_attendances(self, updates: Sequence[AttendanceUpdate]) -> None:
        """Merge the submitted answers into the sheet and write it back"""
        with self._submit_lock:
            rows = self.sheets_client.read_range(self.range_name)

            unmatched = unmatched_guest_ids(rows, updates)
            if unmatched:
                logger.warning(f"Ignoring attendance for unknown guest ids: {unmatched}")

            merged = merge_rows(rows, updates, restrict_to_invited=self.restrict_to_invited)
            self.sheets_client.write_range(self.range_name, merged)

        stored = {update.guest_id for update in updates} - set(unmatched)
        logger.info(f"Stored attendance for {len(stored)} guests")
