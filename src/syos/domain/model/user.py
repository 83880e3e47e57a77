"""User entity: a registered online customer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from syos.domain.exceptions import ValidationError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_valid_email(email: str | None) -> bool:
    return bool(email) and _EMAIL_PATTERN.match(email) is not None


@dataclass(eq=False)
class User:
    user_id: str
    name: str
    email: str
    password_hash: str
    address: str = ""
    registration_date: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValidationError("User ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Name cannot be empty")
        if not is_valid_email(self.email):
            raise ValidationError("Invalid email address")
        if not self.password_hash:
            raise ValidationError("Password hash is required")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)
