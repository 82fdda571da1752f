"""
Business logic for users.

Users sign up once and cannot be edited or deleted.  Usernames are
unique.  Passwords are stored and compared as given; hardening the
login flow is outside the scope of this service.
"""

import logging
from typing import Any, Dict, Optional

from ..core.errors import DuplicateUsernameError, InvalidCredentialsError
from ..core.storage import Storage, User

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating and authenticating users."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def create_user(self, data: Dict[str, Any]) -> User:
        """Create a user, raising ``DuplicateUsernameError`` if the name is taken."""
        with self.storage.lock:
            if self.storage.get_user_by_username(data["username"]) is not None:
                raise DuplicateUsernameError(data["username"])
            user = self.storage.create_user(data)
        logger.info("Registered user %s (id %s)", user.username, user.id)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.storage.get_user(user_id)

    def authenticate(self, username: str, password: str) -> User:
        """Return the user matching the credentials.

        Raises ``InvalidCredentialsError`` for an unknown username or a
        wrong password, without telling the two apart.
        """
        user = self.storage.get_user_by_username(username)
        if user is None or user.password != password:
            logger.warning("Failed login attempt for %s", username)
            raise InvalidCredentialsError()
        return user
