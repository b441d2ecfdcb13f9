"""User domain model - a front desk account held in the in-memory store."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    id: str
    password_hash: str
    role: str
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def identifier(self) -> str:
        return self.email or self.phone or ""

    def __repr__(self):
        return f"<User {self.identifier}>"
