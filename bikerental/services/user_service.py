from __future__ import annotations

import logging
from typing import Optional

from bikerental.exceptions import UserNotFoundError
from bikerental.models.store import Store
from bikerental.models.user import User
from bikerental.services.common import require_fields
from bikerental.utils.constants import USER_FIELDS
from bikerental.utils.decorators import returns_result
from bikerental.utils.providers import IdProvider

log = logging.getLogger(__name__)


class IdentityStore:
    """User registration and lookup."""

    def __init__(self, store: Store, ids: IdProvider, clock):
        self.store = store
        self.ids = ids
        self.clock = clock

    @returns_result("create user")
    def create_user(self, payload: dict) -> User:
        require_fields(payload, USER_FIELDS)
        with self.store.transaction():
            user = User(
                user_id=self.ids.next(),
                user_name=payload["userName"],
                user_address=payload["userAddress"],
                user_age=payload["userAge"],
                created_at=self.clock(),
            )
            self.store.users.insert_new(user.user_id, user.to_dict())
        log.info("Created user %s", user.user_id)
        return user

    def get(self, user_id: str) -> Optional[User]:
        d = self.store.users.get(user_id)
        return User.from_dict(d) if d is not None else None

    @returns_result("get user")
    def get_user(self, user_id: str) -> User:
        user = self.get(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
