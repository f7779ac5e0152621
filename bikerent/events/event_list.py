from typing import Callable


class EventListMeta(type):

    def __contains__(self, event: Callable):
        """Checks if the event (by name) exists on the events list."""
        event_name = getattr(event, "__name__", None)
        if event_name is None:
            return False
        return event is getattr(self, event_name, None)


class EventList(metaclass=EventListMeta):
    """
    Contains a list of emittable events. Events are defined as methods
    on a subclass, and the parameters after ``self`` are the arguments
    every handler of the event must accept.
    """
