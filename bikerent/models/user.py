"""
User
---------------------------
"""

from attr import dataclass


@dataclass(frozen=True)
class User:
    """
    Represents a User in the system. Credentials are
    managed elsewhere and are opaque to the rental engine.
    """

    id: str
    username: str
    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    password_hash: str = ""
    password_salt: str = ""
    created_at: int = 0

    def serialize(self):
        return {
            "id": self.id,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
        }

    def __str__(self):
        return f"[{self.id}] {self.first_name} ({self.email})"
