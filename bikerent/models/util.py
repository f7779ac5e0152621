import time
from enum import Enum
from uuid import uuid4


class BikeType(str, Enum):
    """We subclass string to make json serialization work."""
    CITY = "CITY"
    E_BIKE = "E-BIKE"
    MTB = "MTB"


class BikeStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    MAINTENANCE = "maintenance"
    DISABLED = "disabled"


class RentalStatus(str, Enum):
    ACTIVE = "active"
    FINISHED = "finished"


class IssueStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


def now_ms() -> int:
    """The current wall clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def new_id(prefix: str) -> str:
    """Generates a fresh, unique record id such as ``ren_3f2a...``."""
    return f"{prefix}_{uuid4().hex}"


def in_range(low, high):
    """An attrs validator asserting that a number lies within ``[low, high]``."""

    def validator(instance, attribute, value):
        if not low <= value <= high:
            raise ValueError(f"{attribute.name} must be between {low} and {high}, not {value}.")

    return validator


def positive(instance, attribute, value):
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, not {value}.")
