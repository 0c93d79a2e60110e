from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends

from rsvp_bridge.api.schemas import AttendanceSubmission, GuestOut, MessageResponse
from rsvp_bridge.config import load_config
from rsvp_bridge.guests.service import RsvpService
from rsvp_bridge.sheets.client import (
    WRITE_SUCCESS_MESSAGE,
    GoogleSheetsClient,
    credentials_from_file,
    credentials_from_key,
)


router = APIRouter(tags=["guests"])


@lru_cache
def get_rsvp_service() -> RsvpService:
    """Build the service from the environment once per process."""
    config = load_config()
    if config["GOOGLE_CREDENTIALS"]:
        credentials = credentials_from_file(config["GOOGLE_CREDENTIALS"])
    else:
        credentials = credentials_from_key(config["GOOGLE_CLIENT_EMAIL"], config["GOOGLE_PRIVATE_KEY"])

    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config["GOOGLE_SHEET_ID"],
        credentials=credentials,
        timeout=config["SHEETS_TIMEOUT_SECONDS"],
    )
    return RsvpService(
        sheets_client=sheets_client,
        sheet_name=config["GOOGLE_SHEET_PAGE_NAME"],
        cell_range=config["GOOGLE_SHEET_RANGE"],
        restrict_to_invited=config["RESTRICT_MARKS_TO_INVITED"],
    )


ServiceDep = Annotated[RsvpService, Depends(get_rsvp_service)]


@router.get("/fetch")
def fetch_guests(service: ServiceDep) -> list[GuestOut]:
    """Return every guest with invitations and answers."""
    return [GuestOut.from_guest(guest) for guest in service.fetch_guests()]


@router.post("/submit")
def submit_attendances(submissions: list[AttendanceSubmission], service: ServiceDep) -> MessageResponse:
    """Store the submitted attendance in the sheet."""
    service.submit_attendances([submission.to_update() for submission in submissions])
    return MessageResponse(message=WRITE_SUCCESS_MESSAGE)
