import logging
from typing import Any

import google_auth_httplib2
import httplib2
from google.oauth2 import service_account
from googleapiclient.discovery import build

from .models import SheetRow

logger = logging.getLogger(__name__)


READ_SUCCESS_MESSAGE = "Sheet met succes uitgelezen!"
READ_ERROR_MESSAGE = "Er ging iets mis bij het uitlezen van de sheet!"
WRITE_SUCCESS_MESSAGE = "Aanwezigheden succesvol opgeslagen!"
WRITE_ERROR_MESSAGE = "Er ging iets mis bij het opslagen van de aanwezigheden!"


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


class StoreReadError(SheetError):
    """The sheet could not be read"""


class StoreWriteError(SheetError):
    """The sheet could not be written"""


def credentials_from_key(client_email: str, private_key: str) -> service_account.Credentials:
    """Build service account credentials from an e-mail address and a PEM key"""
    info = {
        "type": "service_account",
        "client_email": client_email,
        # keys pasted into env files carry escaped newlines
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": "https://oauth2.googleapis.com/token",
    }
    return service_account.Credentials.from_service_account_info(info, scopes=GoogleSheetsClient.SCOPES)


def credentials_from_file(credentials_path: str) -> service_account.Credentials:
    """Build service account credentials from a JSON key file"""
    return service_account.Credentials.from_service_account_file(
        credentials_path, scopes=GoogleSheetsClient.SCOPES
    )


class GoogleSheetsClient:
    """Reads and replaces ranges of a single spreadsheet"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
    VALUE_INPUT_OPTION = "USER_ENTERED"

    def __init__(
        self,
        spreadsheet_id: str,
        credentials: service_account.Credentials,
        timeout: float | None = None,
        service: Any = None,
    ) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.credentials = credentials
        self.timeout = timeout
        self.service = service or self._build_sheets_service()

    def _authorized_http(self) -> google_auth_httplib2.AuthorizedHttp:
        """Create a new authorized transport; httplib2.Http is not thread-safe"""
        return google_auth_httplib2.AuthorizedHttp(self.credentials, http=httplib2.Http(timeout=self.timeout))

    def _build_sheets_service(self) -> Any:
        """Create and return an authorized Sheets API service object"""
        try:
            return build("sheets", "v4", http=self._authorized_http(), cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}") from e

    def read_range(self, range_name: str) -> list[SheetRow]:
        """Read all values in a range, row by row"""
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute(http=self._authorized_http())
            )
        except Exception as e:
            logger.warning(f"{READ_ERROR_MESSAGE} {e}")
            raise StoreReadError(f"Failed to read {range_name}: {str(e)}") from e

        logger.info(READ_SUCCESS_MESSAGE)
        return result.get("values", [])

    def write_range(self, range_name: str, rows: list[SheetRow]) -> None:
        """Replace the values of a range, letting the sheet interpret typed input"""
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption=self.VALUE_INPUT_OPTION,
                body={"values": rows},
            ).execute(http=self._authorized_http())
        except Exception as e:
            logger.error(f"{WRITE_ERROR_MESSAGE} {e}")
            raise StoreWriteError(f"Failed to write {range_name}: {str(e)}") from e

        logger.info(f"{WRITE_SUCCESS_MESSAGE} ({len(rows)} rows)")
