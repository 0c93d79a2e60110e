# rsvp_bridge/guests/models.py
from dataclasses import dataclass, field
from enum import Enum

from .activities import Activity


CHECK_MARK = "✓"
CROSS = "✗"
COMING = "COMING"


class Answer(Enum):
    """A guest's answer for one activity"""

    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"

    @classmethod
    def from_mark(cls, cell: object) -> "Answer":
        """Read an answer from a mark cell"""
        if not cell:
            return cls.UNKNOWN
        return cls.YES if cell == CHECK_MARK else cls.NO

    @classmethod
    def from_submission(cls, value: object) -> "Answer":
        """Read an answer from a submitted attendance field"""
        return cls.YES if value == COMING else cls.NO

    def to_mark(self) -> str:
        """Render the answer as a mark cell"""
        if self is Answer.YES:
            return CHECK_MARK
        if self is Answer.NO:
            return CROSS
        return ""


@dataclass(frozen=True)
class Attendance:
    """The answer a guest gave for one activity"""

    activity: Activity
    answer: Answer

    @property
    def is_coming(self) -> bool:
        return self.answer is Answer.YES


@dataclass
class Guest:
    """A guest row as read from the sheet"""

    id: int | None
    first_name: str
    last_name: str
    household_id: int | None
    invited_for: list[Activity] = field(default_factory=list)
    already_replied: bool = False
    attending: list[Attendance] = field(default_factory=list)


@dataclass
class AttendanceUpdate:
    """A submitted set of answers for one guest"""

    guest_id: int
    answers: dict[Activity, Answer]
    remarks: str = ""

    def answer_for(self, activity: Activity) -> Answer:
        return self.answers.get(activity, Answer.NO)
