"""Application service: Register User use case."""

from __future__ import annotations

import logging
import uuid

from syos.application.passwords import BCRYPT_ROUNDS, hash_password
from syos.domain.exceptions import DuplicateError, ValidationError
from syos.domain.model.user import User, is_valid_email
from syos.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, bcrypt_rounds: int = BCRYPT_ROUNDS) -> None:
        self._user_repo = user_repo
        self._bcrypt_rounds = bcrypt_rounds

    def handle(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        address: str = "",
    ) -> User:
        """Register a new online customer.

        Input is validated before the repository is consulted; a duplicate
        email is rejected without saving anything.
        """
        if not name or not name.strip():
            raise ValidationError("Name cannot be empty")
        email = (email or "").strip()
        if not is_valid_email(email):
            raise ValidationError("Invalid email address")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        if self._user_repo.exists_by_email(email):
            raise DuplicateError("Email already registered")

        user = User(
            user_id=str(uuid.uuid4()),
            name=name.strip(),
            email=email,
            password_hash=hash_password(password, rounds=self._bcrypt_rounds),
            address=(address or "").strip(),
        )
        self._user_repo.save(user)
        logger.info("Registered user %s", user.user_id)
        return user
