"""Relationship lookups across collections.

Each function takes the parent record and the store and scans the related
collection on demand. A dangling foreign key resolves to None or an empty
list; nothing here raises or writes.
"""
from typing import Optional

from planner.models.event import Event
from planner.models.location import Location
from planner.models.participant import Participant
from planner.models.user import User
from planner.services.crud_service import find_by_id
from planner.store import RecordStore


def user_events(store: RecordStore, user: User) -> list[Event]:
    return [event for event in store.events if event.user_id == user.id]


def event_location(store: RecordStore, event: Event) -> Optional[Location]:
    return find_by_id(store.locations, event.location_id)


def event_user(store: RecordStore, event: Event) -> Optional[User]:
    return find_by_id(store.users, event.user_id)


def event_participants(store: RecordStore, event: Event) -> list[Participant]:
    return [participant for participant in store.participants if participant.event_id == event.id]
