"""Abstract repository for User entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from syos.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under *email*, or None."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """True if *email* is already registered."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new user."""
