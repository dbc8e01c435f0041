from __future__ import annotations

from uuid import UUID

from ..common.validators import optional_text, require_max_length
from ..core.constants import NAME_MAX_LENGTH
from ..core.exceptions import InvalidNameError, NotFoundError
from .model import User
from .repository import UserRepository


class UserService:
    """Use case: read and rename the signed-in user's profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: UUID) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("user not found")
        return user

    def update_name(self, user_id: UUID, name) -> User:
        name = optional_text(name)
        if not name:
            raise InvalidNameError("name is required")
        require_max_length(name, "name", NAME_MAX_LENGTH, error=InvalidNameError)

        user = self._users.update_name(user_id, name)
        if not user:
            raise NotFoundError("user not found")
        return user
