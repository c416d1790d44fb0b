"""User record."""
from planner.models.base import Record


class User(Record):
    username: str
    email: str
