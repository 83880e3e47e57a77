"""Application service: Authenticate User use case."""

from __future__ import annotations

import logging

from syos.application.passwords import verify_password
from syos.domain.exceptions import AuthenticationError
from syos.domain.model.user import User
from syos.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthenticateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str, password: str) -> User:
        # One message for both failures so callers cannot probe for emails.
        user = self._user_repo.get_by_email((email or "").strip())
        if user is None or not verify_password(password or "", user.password_hash):
            logger.warning("Failed login attempt for %s", email)
            raise AuthenticationError("Invalid email or password")
        return user
