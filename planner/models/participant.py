"""Participant record — associates one User with one Event."""
from planner.models.base import ForeignKey, Record


class Participant(Record):
    user_id: ForeignKey
    event_id: ForeignKey
