from bikerent.models import Location
from bikerent.service.background.state_syncer import StateSyncer
from bikerent.service.manager.rental_manager import RentalManager
from bikerent.service.manager.state_manager import StateManager
from bikerent.service.notifications import NotificationSink, notifications_for
from tests.util import TRG_REPUBLIKE, HALF_AN_HOUR, FakeSync


class TestNotificationSink:

    async def test_emit(self, notification_sink, state_manager):
        notification = notification_sink.emit("user_1", "Hello", "A message", "ren_1")
        assert state_manager.state.notifications[0] == notification
        assert not notification.read
        assert notification.related_rental_id == "ren_1"

    async def test_rental_notifications(self, notification_sink, rental_manager, state_manager, clock, photo):
        rental = await rental_manager.start_rental("user_1", "bike_1")
        clock.advance(HALF_AN_HOUR)
        await rental_manager.end_rental(rental.id, Location(*TRG_REPUBLIKE), photo)

        ended, started = state_manager.state.notifications
        assert started.title == "Rental started"
        assert ended.title == "Rental ended"
        assert "60.00" in ended.message
        assert {started.related_rental_id, ended.related_rental_id} == {rental.id}

    async def test_notifications_for_user(self, notification_sink, state_manager):
        notification_sink.emit("user_1", "First", "message")
        notification_sink.emit("user_2", "Other", "message")
        notifications = notifications_for(state_manager.state.notifications, "user_1")
        assert [notification.title for notification in notifications] == ["First"]


async def test_notifications_reach_remote(memory_store, photo_store, clock, photo):
    sync = FakeSync(memory_store.state)
    state_manager = StateManager(memory_store, sync)
    await state_manager._rebuild()
    rental_manager = RentalManager(state_manager, photo_store, clock=clock)
    NotificationSink(state_manager, rental_manager)

    rental = await rental_manager.start_rental("user_1", "bike_1")
    clock.advance(HALF_AN_HOUR)
    await rental_manager.end_rental(rental.id, Location(*TRG_REPUBLIKE), photo)
    assert state_manager.dirty, "the last notification is not pushed yet"

    assert await StateSyncer(state_manager).sync_once()
    assert [notification.title for notification in sync.state.notifications] == ["Rental ended", "Rental started"]
    assert not state_manager.dirty


async def test_notifications_without_remote(notification_sink, state_manager):
    notification_sink.emit("user_1", "Hello", "A message")
    assert not state_manager.dirty
