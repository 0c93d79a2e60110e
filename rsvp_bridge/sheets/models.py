# rsvp_bridge/sheets/models.py
from typing import Any


# one row of cell values, as returned by the values API
SheetRow = list[Any]
