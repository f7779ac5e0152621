"""
Issue
---------------------------

Issues are reported by users and handled by administrators. The
rental engine only carries them along with the rest of the state.
"""

from typing import Optional

from attr import dataclass, attrib

from bikerent.models.util import IssueStatus


@dataclass(frozen=True)
class Issue:
    id: str
    user_id: str
    created_at: int
    description: str
    photo: str = ""
    bike_id: Optional[str] = None
    rental_id: Optional[str] = None
    status: IssueStatus = attrib(converter=IssueStatus, default=IssueStatus.OPEN)

    @property
    def is_open(self) -> bool:
        return self.status is IssueStatus.OPEN
