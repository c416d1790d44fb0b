"""GraphQL types for Users."""
from typing import TYPE_CHECKING, Annotated, Optional

import strawberry
from strawberry.types import Info

from planner.models.user import User as UserRecord
from planner.schemas.common import as_id, store_from
from planner.services import relation_service

if TYPE_CHECKING:
    from planner.schemas.event import Event


@strawberry.type
class User:
    id: strawberry.ID
    username: str
    email: str
    record: strawberry.Private[UserRecord]

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(id=as_id(record.id), username=record.username, email=record.email, record=record)

    @strawberry.field
    def events(self, info: Info) -> list[Annotated["Event", strawberry.lazy("planner.schemas.event")]]:
        """Events this user organizes."""
        from planner.schemas.event import Event

        return [Event.from_record(e) for e in relation_service.user_events(store_from(info), self.record)]


@strawberry.input
class CreateUserInput:
    username: str
    email: str


@strawberry.input
class UpdateUserInput:
    username: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
