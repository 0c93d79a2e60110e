from enum import Enum

from .errors import UnknownActivityError


class Activity(str, Enum):
    """Parts of the event a guest can be invited to"""

    CITY_HALL = "city_hall"
    CEREMONY = "ceremony"
    DINER = "diner"
    PARTY = "party"

    @property
    def header(self) -> str:
        """Name of the header cell above this activity's mark column"""
        return self.name


def resolve(token: str) -> Activity:
    """Resolve a raw invited-for token to an Activity"""
    normalized = "".join(token.split()).lower()
    try:
        return Activity(normalized)
    except ValueError:
        raise UnknownActivityError(token) from None
