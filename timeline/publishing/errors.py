"""
Timeline Publishing - Errors
============================
Registration errors for snapshot subscribers.
Subscriber runtime failures are never raised; they are reported.
"""


class PublishingError(Exception):
    """Base error for snapshot publishing."""
    pass


class DuplicateSubscriberError(PublishingError):
    """Same handler already registered."""

    def __init__(self, handler_name: str):
        self.handler_name = handler_name
        super().__init__(f"Handler '{handler_name}' already registered.")
