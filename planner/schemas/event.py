"""GraphQL types for Events.

``location``, ``user`` and ``participants`` are resolved only when a query
selects them. ``from`` is exposed under its GraphQL name while the Python
attribute is ``from_``.
"""
from typing import Optional

import strawberry
from strawberry.types import Info

from planner.models.event import Event as EventRecord
from planner.schemas.common import as_id, store_from
from planner.schemas.location import Location
from planner.schemas.participant import Participant
from planner.schemas.user import User
from planner.services import relation_service


@strawberry.type
class Event:
    id: strawberry.ID
    title: str
    desc: Optional[str]
    date: Optional[str]
    from_: Optional[str] = strawberry.field(name="from")
    to: Optional[str]
    location_id: strawberry.ID = strawberry.field(name="location_id")
    user_id: strawberry.ID = strawberry.field(name="user_id")
    record: strawberry.Private[EventRecord]

    @classmethod
    def from_record(cls, record: EventRecord) -> "Event":
        return cls(
            id=as_id(record.id),
            title=record.title,
            desc=record.desc,
            date=record.date,
            from_=record.from_,
            to=record.to,
            location_id=as_id(record.location_id),
            user_id=as_id(record.user_id),
            record=record,
        )

    @strawberry.field
    def location(self, info: Info) -> Optional[Location]:
        location = relation_service.event_location(store_from(info), self.record)
        return Location.from_record(location) if location is not None else None

    @strawberry.field
    def user(self, info: Info) -> Optional[User]:
        user = relation_service.event_user(store_from(info), self.record)
        return User.from_record(user) if user is not None else None

    @strawberry.field
    def participants(self, info: Info) -> list[Participant]:
        return [
            Participant.from_record(p)
            for p in relation_service.event_participants(store_from(info), self.record)
        ]


@strawberry.input
class CreateEventInput:
    title: str
    location_id: strawberry.ID = strawberry.field(name="location_id")
    user_id: strawberry.ID = strawberry.field(name="user_id")
    desc: Optional[str] = strawberry.UNSET
    date: Optional[str] = strawberry.UNSET
    from_: Optional[str] = strawberry.field(name="from", default=strawberry.UNSET)
    to: Optional[str] = strawberry.UNSET


@strawberry.input
class UpdateEventInput:
    title: Optional[str] = strawberry.UNSET
    desc: Optional[str] = strawberry.UNSET
    date: Optional[str] = strawberry.UNSET
    from_: Optional[str] = strawberry.field(name="from", default=strawberry.UNSET)
    to: Optional[str] = strawberry.UNSET
    location_id: Optional[strawberry.ID] = strawberry.field(name="location_id", default=strawberry.UNSET)
    user_id: Optional[strawberry.ID] = strawberry.field(name="user_id", default=strawberry.UNSET)
