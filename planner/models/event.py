"""Event record — belongs to one Location and one User."""
from typing import Optional
from pydantic import Field

from planner.models.base import ForeignKey, Record


class Event(Record):
    title: str
    desc: Optional[str] = None
    date: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")  # "from" is reserved in Python
    to: Optional[str] = None
    location_id: ForeignKey
    user_id: ForeignKey
