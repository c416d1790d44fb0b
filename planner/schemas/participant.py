"""GraphQL types for Participants."""
from typing import Optional

import strawberry

from planner.models.participant import Participant as ParticipantRecord
from planner.schemas.common import as_id


@strawberry.type
class Participant:
    id: strawberry.ID
    user_id: strawberry.ID = strawberry.field(name="user_id")
    event_id: strawberry.ID = strawberry.field(name="event_id")

    @classmethod
    def from_record(cls, record: ParticipantRecord) -> "Participant":
        return cls(id=as_id(record.id), user_id=as_id(record.user_id), event_id=as_id(record.event_id))


@strawberry.input
class CreateParticipantInput:
    user_id: strawberry.ID = strawberry.field(name="user_id")
    event_id: strawberry.ID = strawberry.field(name="event_id")


@strawberry.input
class UpdateParticipantInput:
    user_id: Optional[strawberry.ID] = strawberry.field(name="user_id", default=strawberry.UNSET)
    event_id: Optional[strawberry.ID] = strawberry.field(name="event_id", default=strawberry.UNSET)
