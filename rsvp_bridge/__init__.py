"""RSVP Bridge - A spreadsheet-backed guest list API.

This package exposes the guest list kept in a Google Sheet as a small JSON API:
callers fetch guests with their invitations and answers, and submit updated
attendance which is merged back into the sheet.
"""

__version__ = "0.1.0"

from .guests.service import RsvpService
from .sheets.client import GoogleSheetsClient


__all__ = [
    "GoogleSheetsClient",
    "RsvpService",
]
