from .activities import Activity, resolve
from .errors import DuplicateGuestError, GuestDataError, SheetSchemaError, UnknownActivityError
from .mapper import map_rows
from .merge import merge_rows
from .models import Answer, Attendance, AttendanceUpdate, Guest


__all__ = [
    "Activity",
    "Answer",
    "Attendance",
    "AttendanceUpdate",
    "DuplicateGuestError",
    "Guest",
    "GuestDataError",
    "SheetSchemaError",
    "UnknownActivityError",
    "map_rows",
    "merge_rows",
    "resolve",
]
