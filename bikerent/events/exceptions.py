class NoSuchEventError(AttributeError):
    """Raised when an event is not registered on a hub."""



class InvalidHandlerError(TypeError):
    """Raised when a handler's signature does not match the event's."""
