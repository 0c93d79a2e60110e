from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rsvp_bridge.guests.activities import Activity
from rsvp_bridge.guests.models import Answer, AttendanceUpdate, Guest


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttendanceOut(CamelModel):
    activity: Activity
    is_coming: bool


class GuestOut(CamelModel):
    id: int | None
    first_name: str
    last_name: str
    household_id: int | None
    invited_for: list[Activity]
    already_replied: bool
    attending: list[AttendanceOut]

    @classmethod
    def from_guest(cls, guest: Guest) -> "GuestOut":
        return cls(
            id=guest.id,
            first_name=guest.first_name,
            last_name=guest.last_name,
            household_id=guest.household_id,
            invited_for=guest.invited_for,
            already_replied=guest.already_replied,
            attending=[
                AttendanceOut(activity=attendance.activity, is_coming=attendance.is_coming)
                for attendance in guest.attending
            ],
        )


class GuestRef(BaseModel):
    id: int


# each activity field holds "COMING" or anything else for "not coming"
class AttendanceSubmission(BaseModel):
    guest: GuestRef
    city_hall: Any = None
    ceremony: Any = None
    diner: Any = None
    party: Any = None
    remarks: str | None = None

    def to_update(self) -> AttendanceUpdate:
        return AttendanceUpdate(
            guest_id=self.guest.id,
            answers={
                activity: Answer.from_submission(getattr(self, activity.value))
                for activity in Activity
            },
            remarks=self.remarks or "",
        )


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str
    version: str
