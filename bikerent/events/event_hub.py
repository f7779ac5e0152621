"""
Event Hub
---------

A hub holds a number of event lists and the handlers subscribed to their events.

>>> hub.subscribe(RentalEvent.rental_ended, handler)
>>> hub.emit(RentalEvent.rental_ended, rental, bike)
"""

from collections import defaultdict
from inspect import signature, Parameter
from typing import Callable, Dict, List, Type, Set

from .event_list import EventList
from .exceptions import NoSuchEventError, InvalidHandlerError


def _positional_count(function: Callable) -> int:
    return len([
        param for param in signature(function).parameters.values()
        if param.kind in (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)
    ])


def _event_arity(event: Callable) -> int:
    params = list(signature(event).parameters)
    count = _positional_count(event)
    return count - 1 if params and params[0] == "self" else count


def _accepts_varargs(function: Callable) -> bool:
    return any(param.kind is Parameter.VAR_POSITIONAL for param in signature(function).parameters.values())


class EventHub:
    """
    Dispatches events to their subscribers. Handlers are called synchronously
    in the order they subscribed, and any exception they raise propagates to
    whoever emitted the event.
    """

    def __init__(self, *event_lists: Type[EventList]):
        self._event_lists: Set[Type[EventList]] = set()
        self._listeners: Dict[Callable, List[Callable]] = defaultdict(list)
        self.add_events(*event_lists)

    def add_events(self, *event_lists: Type[EventList]):
        self._event_lists.update(event_lists)

    def subscribe(self, event: Callable, handler: Callable):
        """
        Subscribes a handler to an event.

        :raises NoSuchEventError: If the event is not part of this hub.
        :raises InvalidHandlerError: If the handler cannot take the event's arguments.
        """
        event = self._resolve(event)
        if not _accepts_varargs(handler) and _positional_count(handler) != _event_arity(event):
            raise InvalidHandlerError(f"Handler {handler.__name__} does not match the signature of {event.__name__}.")
        self._listeners[event].append(handler)

    def emit(self, event: Callable, *args, **kwargs):
        """Calls every handler subscribed to the event with the given arguments."""
        event = self._resolve(event)
        for handler in list(self._listeners[event]):
            handler(*args, **kwargs)

    def _resolve(self, event) -> Callable:
        if event not in self:
            raise NoSuchEventError(f"Event {getattr(event, '__name__', event)} is not registered on this hub.")
        return event

    def __contains__(self, item) -> bool:
        if isinstance(item, type) and issubclass(item, EventList):
            return item in self._event_lists
        return any(item in event_list for event_list in self._event_lists)

