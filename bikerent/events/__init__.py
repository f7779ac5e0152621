"""
.. autoclasstree:: bikerent.events

The rental manager announces rentals starting and ending through an event hub,
which is how notifications get written without the manager knowing about them.
An :class:`EventList` declares the events and the arguments their handlers take;
a hub checks handlers against those signatures when they subscribe.

>>> class DockEvents(EventList):
>>>     def bike_docked(self, bike: Bike, zone: ParkingZone):
>>>         "A bike was left in a zone."
>>>
>>> hub = EventHub(DockEvents)
>>> hub.subscribe(DockEvents.bike_docked, lambda bike, zone: print(f"{bike} is at {zone.name}"))
>>> hub.emit(DockEvents.bike_docked, bike, zone)
[CITY] BG-001 is at Trg Republike
"""

from .event_hub import EventHub
from .event_list import EventList
from .exceptions import NoSuchEventError, InvalidHandlerError
