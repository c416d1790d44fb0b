"""Location queries and mutations."""
from typing import Optional

import strawberry
from strawberry.types import Info

from planner.schemas.common import DeleteAllOutput, provided_fields, store_from
from planner.schemas.location import CreateLocationInput, Location, UpdateLocationInput
from planner.services import crud_service


@strawberry.type
class LocationQuery:
    @strawberry.field
    def location(self, info: Info, id: strawberry.ID) -> Optional[Location]:
        return Location.from_record(crud_service.get_by_id(store_from(info).locations, id))

    @strawberry.field
    def locations(self, info: Info) -> list[Location]:
        return [Location.from_record(loc) for loc in store_from(info).locations]


@strawberry.type
class LocationMutation:
    @strawberry.mutation
    def create_location(self, info: Info, data: CreateLocationInput) -> Location:
        return Location.from_record(crud_service.create(store_from(info).locations, provided_fields(data)))

    @strawberry.mutation
    def update_location(self, info: Info, id: strawberry.ID, data: UpdateLocationInput) -> Optional[Location]:
        return Location.from_record(crud_service.update(store_from(info).locations, id, provided_fields(data)))

    @strawberry.mutation
    def delete_location(self, info: Info, id: strawberry.ID) -> Optional[Location]:
        """Delete a location. Events pointing at it keep their location_id."""
        return Location.from_record(crud_service.delete(store_from(info).locations, id))

    @strawberry.mutation
    def delete_all_locations(self, info: Info) -> DeleteAllOutput:
        return DeleteAllOutput(count=crud_service.delete_all(store_from(info).locations))
