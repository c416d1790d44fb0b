"""In-memory record store — one ordered collection per entity kind.

Nothing is persisted: the store is seeded from a JSON dataset when the
application starts and discarded when the process exits.
"""
import json
import logging
from pathlib import Path
from typing import Any, Generic, Iterable, Iterator, Mapping, TypeVar, Union

from fastapi import Request

from planner.models.base import Record
from planner.models.event import Event
from planner.models.location import Location
from planner.models.participant import Participant
from planner.models.user import User

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class Collection(Generic[R]):
    """Ordered sequence of records of one kind plus its id counter.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice, even after deletions.
    """

    def __init__(self, name: str, record_type: type[R], records: Iterable[R] = ()):
        self.name = name
        self.record_type = record_type
        self.records: list[R] = list(records)
        self._last_id = max((record.id for record in self.records), default=0)

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"<Collection {self.name} records={len(self.records)}>"


class RecordStore:
    """The four collections served by the API."""

    def __init__(
        self,
        users: Iterable[User] = (),
        events: Iterable[Event] = (),
        locations: Iterable[Location] = (),
        participants: Iterable[Participant] = (),
    ):
        self.users: Collection[User] = Collection("User", User, users)
        self.events: Collection[Event] = Collection("Event", Event, events)
        self.locations: Collection[Location] = Collection("Location", Location, locations)
        self.participants: Collection[Participant] = Collection("Participant", Participant, participants)

    @classmethod
    def from_dataset(cls, data: Mapping[str, Any]) -> "RecordStore":
        """Build a store from raw ``{"users": [...], "events": [...], ...}`` data.

        Missing keys yield empty collections.
        """
        return cls(
            users=[User.model_validate(item) for item in data.get("users", [])],
            events=[Event.model_validate(item) for item in data.get("events", [])],
            locations=[Location.model_validate(item) for item in data.get("locations", [])],
            participants=[Participant.model_validate(item) for item in data.get("participants", [])],
        )

    def collections(self) -> list[Collection]:
        return [self.users, self.events, self.locations, self.participants]


def load_store(path: Union[str, Path]) -> RecordStore:
    """Read the seed dataset from a JSON file."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    store = RecordStore.from_dataset(data)
    logger.info(
        "Loaded dataset from %s (%s)",
        path,
        ", ".join(f"{len(c)} {c.name}" for c in store.collections()),
    )
    return store


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency — the store owned by the running application."""
    return request.app.state.store
