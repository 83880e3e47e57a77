"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime

from syos.domain.exceptions import DuplicateError
from syos.domain.model.user import User
from syos.domain.repository.user_repository import UserRepository
from syos.infrastructure.persistence.json_file import JsonFileRepository


class JsonUserRepository(JsonFileRepository, UserRepository):

    # --- UserRepository interface ---------------------------------------------

    def get_by_email(self, email: str) -> User | None:
        for raw in self._load_raw():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def save(self, user: User) -> None:
        if self.exists_by_email(user.email):
            raise DuplicateError("Email already registered")
        records = self._load_raw()
        records.append(self._to_raw(user))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "user_id": user.user_id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "address": user.address,
            "registration_date": user.registration_date.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            user_id=raw["user_id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            address=raw.get("address", ""),
            registration_date=datetime.fromisoformat(raw["registration_date"]),
        )
