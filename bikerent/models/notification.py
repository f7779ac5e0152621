from typing import Optional

from attr import dataclass


@dataclass(frozen=True)
class Notification:
    id: str
    user_id: str
    created_at: int
    title: str
    message: str
    related_rental_id: Optional[str] = None
    read: bool = False

    def serialize(self):
        return {
            "id": self.id,
            "time": self.created_at,
            "title": self.title,
            "message": self.message,
            "rental_id": self.related_rental_id,
            "read": self.read,
        }
