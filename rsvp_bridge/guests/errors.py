class GuestDataError(Exception):
    """Raised when the sheet contents cannot be turned into guests"""


class UnknownActivityError(GuestDataError, ValueError):
    """Raised when an invited-for token is not a known activity"""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown activity: {token}")
        self.token = token


class SheetSchemaError(GuestDataError):
    """Raised when the header row does not match the expected columns"""


class DuplicateGuestError(GuestDataError):
    """Raised when two rows share the same guest id"""

    def __init__(self, guest_id: int) -> None:
        super().__init__(f"Duplicate guest id: {guest_id}")
        self.guest_id = guest_id
