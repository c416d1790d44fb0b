"""Location record."""
from typing import Optional

from planner.models.base import Record


class Location(Record):
    name: str
    desc: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
