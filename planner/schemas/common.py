"""GraphQL helpers shared by every entity kind."""
import dataclasses
from typing import Any

import strawberry
from strawberry.types import Info

from planner.store import RecordStore


@strawberry.type
class DeleteAllOutput:
    count: int


def provided_fields(data: Any) -> dict[str, Any]:
    """Input fields the client actually sent, keyed by record attribute name.

    Omitted optional fields are UNSET and left out; an explicit null is kept.
    """
    return {
        field.name: getattr(data, field.name)
        for field in dataclasses.fields(data)
        if getattr(data, field.name) is not strawberry.UNSET
    }


def store_from(info: Info) -> RecordStore:
    return info.context["store"]


def as_id(value: Any) -> strawberry.ID:
    return strawberry.ID(str(value))
