"""Event queries and mutations."""
from typing import Optional

import strawberry
from strawberry.types import Info

from planner.schemas.common import DeleteAllOutput, provided_fields, store_from
from planner.schemas.event import CreateEventInput, Event, UpdateEventInput
from planner.services import crud_service


@strawberry.type
class EventQuery:
    @strawberry.field
    def event(self, info: Info, id: strawberry.ID) -> Optional[Event]:
        """Fetch a single event by ID."""
        return Event.from_record(crud_service.get_by_id(store_from(info).events, id))

    @strawberry.field
    def events(self, info: Info) -> list[Event]:
        """List all events in insertion order."""
        return [Event.from_record(e) for e in store_from(info).events]


@strawberry.type
class EventMutation:
    @strawberry.mutation
    def create_event(self, info: Info, data: CreateEventInput) -> Event:
        """Create an event. location_id and user_id are stored without checking them."""
        return Event.from_record(crud_service.create(store_from(info).events, provided_fields(data)))

    @strawberry.mutation
    def update_event(self, info: Info, id: strawberry.ID, data: UpdateEventInput) -> Optional[Event]:
        return Event.from_record(crud_service.update(store_from(info).events, id, provided_fields(data)))

    @strawberry.mutation
    def delete_event(self, info: Info, id: strawberry.ID) -> Optional[Event]:
        return Event.from_record(crud_service.delete(store_from(info).events, id))

    @strawberry.mutation
    def delete_all_events(self, info: Info) -> DeleteAllOutput:
        return DeleteAllOutput(count=crud_service.delete_all(store_from(info).events))
