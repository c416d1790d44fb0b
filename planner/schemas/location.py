"""GraphQL types for Locations."""
from typing import Optional

import strawberry

from planner.models.location import Location as LocationRecord
from planner.schemas.common import as_id


@strawberry.type
class Location:
    id: strawberry.ID
    name: str
    desc: Optional[str]
    lat: Optional[float]
    lng: Optional[float]

    @classmethod
    def from_record(cls, record: LocationRecord) -> "Location":
        return cls(id=as_id(record.id), name=record.name, desc=record.desc, lat=record.lat, lng=record.lng)


@strawberry.input
class CreateLocationInput:
    name: str
    desc: Optional[str] = strawberry.UNSET
    lat: Optional[float] = strawberry.UNSET
    lng: Optional[float] = strawberry.UNSET


@strawberry.input
class UpdateLocationInput:
    name: Optional[str] = strawberry.UNSET
    desc: Optional[str] = strawberry.UNSET
    lat: Optional[float] = strawberry.UNSET
    lng: Optional[float] = strawberry.UNSET
