"""Participant queries and mutations."""
from typing import Optional

import strawberry
from strawberry.types import Info

from planner.schemas.common import DeleteAllOutput, provided_fields, store_from
from planner.schemas.participant import CreateParticipantInput, Participant, UpdateParticipantInput
from planner.services import crud_service


@strawberry.type
class ParticipantQuery:
    @strawberry.field
    def participant(self, info: Info, id: strawberry.ID) -> Optional[Participant]:
        return Participant.from_record(crud_service.get_by_id(store_from(info).participants, id))

    @strawberry.field
    def participants(self, info: Info) -> list[Participant]:
        return [Participant.from_record(p) for p in store_from(info).participants]


@strawberry.type
class ParticipantMutation:
    @strawberry.mutation
    def create_participant(self, info: Info, data: CreateParticipantInput) -> Participant:
        return Participant.from_record(crud_service.create(store_from(info).participants, provided_fields(data)))

    @strawberry.mutation
    def update_participant(
        self, info: Info, id: strawberry.ID, data: UpdateParticipantInput
    ) -> Optional[Participant]:
        return Participant.from_record(
            crud_service.update(store_from(info).participants, id, provided_fields(data))
        )

    @strawberry.mutation
    def delete_participant(self, info: Info, id: strawberry.ID) -> Optional[Participant]:
        return Participant.from_record(crud_service.delete(store_from(info).participants, id))

    @strawberry.mutation
    def delete_all_participants(self, info: Info) -> DeleteAllOutput:
        return DeleteAllOutput(count=crud_service.delete_all(store_from(info).participants))
