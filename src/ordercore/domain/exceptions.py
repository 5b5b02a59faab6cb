"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage errors are not wrapped here; they propagate as raised by SQLAlchemy.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderNotFoundError(EntityNotFoundError):
    """No order header row matches the requested id."""

    def __init__(self, order_id: str) -> None:
        super().__init__("Order not found")
        self.order_id = order_id


class EventDispatchError(DomainException):
    """One or more handlers raised while an event was being delivered.

    ``failures`` holds ``(handler, exception)`` pairs in delivery order.
    """

    def __init__(self, event_type: str, failures: list[tuple[Any, BaseException]]) -> None:
        names = ", ".join(type(handler).__name__ for handler, _ in failures)
        super().__init__(
            f"{len(failures)} handler(s) failed for {event_type}: {names}"
        )
        self.event_type = event_type
        self.failures = failures
