"""GraphQL schema — one root Query and Mutation assembled from the entity resolvers."""
import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.tools import merge_types
from strawberry.types import ExecutionContext

from planner.resolvers.events import EventMutation, EventQuery
from planner.resolvers.locations import LocationMutation, LocationQuery
from planner.resolvers.participants import ParticipantMutation, ParticipantQuery
from planner.resolvers.users import UserMutation, UserQuery
from planner.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


Query = merge_types("Query", (UserQuery, EventQuery, LocationQuery, ParticipantQuery))
Mutation = merge_types("Mutation", (UserMutation, EventMutation, LocationMutation, ParticipantMutation))


class Schema(strawberry.Schema):
    """Reports lookups of unknown ids quietly; everything else is logged as an error."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, NotFoundError):
                logger.info("%s at %s", error.message, ".".join(str(p) for p in error.path or []))
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = Schema(query=Query, mutation=Mutation)
