from __future__ import annotations

from typing import Optional, Protocol
from uuid import UUID

from .model import User


class UserRepository(Protocol):
    """Repository port for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        raise NotImplementedError

    def get_by_phone(self, phone: str) -> Optional[User]:
        raise NotImplementedError

    def get_or_create(self, phone: str) -> tuple[User, bool]:
        """Return the user for ``phone``, creating it on first sight.

        The flag is True when a new row was inserted.
        """

        raise NotImplementedError

    def update_name(self, user_id: UUID, name: str) -> Optional[User]:
        raise NotImplementedError
