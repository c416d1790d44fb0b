"""User queries and mutations."""
from typing import Optional

import strawberry
from strawberry.types import Info

from planner.schemas.common import DeleteAllOutput, provided_fields, store_from
from planner.schemas.user import CreateUserInput, UpdateUserInput, User
from planner.services import crud_service


@strawberry.type
class UserQuery:
    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[User]:
        """Fetch a single user by ID."""
        return User.from_record(crud_service.get_by_id(store_from(info).users, id))

    @strawberry.field
    def users(self, info: Info) -> list[User]:
        """List all users."""
        return [User.from_record(u) for u in store_from(info).users]


@strawberry.type
class UserMutation:
    @strawberry.mutation
    def create_user(self, info: Info, data: CreateUserInput) -> User:
        return User.from_record(crud_service.create(store_from(info).users, provided_fields(data)))

    @strawberry.mutation
    def update_user(self, info: Info, id: strawberry.ID, data: UpdateUserInput) -> Optional[User]:
        """Update a user (partial update)."""
        return User.from_record(crud_service.update(store_from(info).users, id, provided_fields(data)))

    @strawberry.mutation
    def delete_user(self, info: Info, id: strawberry.ID) -> Optional[User]:
        """Delete a user. Their events are left in place."""
        return User.from_record(crud_service.delete(store_from(info).users, id))

    @strawberry.mutation
    def delete_all_users(self, info: Info) -> DeleteAllOutput:
        return DeleteAllOutput(count=crud_service.delete_all(store_from(info).users))
