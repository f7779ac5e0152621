"""
Notifications
-------------

Turns rental events into notifications for the user. Notifications are
kept in the application state, newest first. They are saved at once and
reach the remote with the next push, from the state syncer or a commit.
"""

from typing import Optional, List

from attr import evolve

from bikerent.models import Notification, Rental, Bike
from bikerent.models.util import new_id, now_ms
from bikerent.service.manager.rental_manager import RentalManager, RentalEvent
from bikerent.service.manager.state_manager import StateManager


class NotificationSink:

    def __init__(self, state_manager: StateManager, rental_manager: RentalManager):
        self._state_manager = state_manager
        rental_manager.hub.subscribe(RentalEvent.rental_started, self._rental_started)
        rental_manager.hub.subscribe(RentalEvent.rental_ended, self._rental_ended)

    def emit(self, user_id: str, title: str, message: str, related_rental_id: Optional[str] = None) -> Notification:
        """Adds a notification for a user to the state."""
        notification = Notification(
            id=new_id("ntf"),
            user_id=user_id,
            created_at=now_ms(),
            title=title,
            message=message,
            related_rental_id=related_rental_id,
        )
        state = self._state_manager.state
        self._state_manager.stage(evolve(state, notifications=(notification,) + state.notifications))
        return notification

    def _rental_started(self, rental: Rental, bike: Bike):
        self.emit(rental.user_id, "Rental started", f"You have started riding {bike.label}.", rental.id)

    def _rental_ended(self, rental: Rental, bike: Bike):
        self.emit(
            rental.user_id, "Rental ended",
            f"You returned {bike.label}. The ride cost {rental.total_price:.2f} RSD.",
            rental.id
        )


def notifications_for(notifications, user_id: str) -> List[Notification]:
    """Gets the notifications of a user, newest first."""
    return sorted(
        (notification for notification in notifications if notification.user_id == user_id),
        key=lambda notification: notification.created_at, reverse=True
    )
