"""Building blocks for domain models: events, entities and aggregates."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Hashable, Protocol, TypeVar, runtime_checkable

IdT = TypeVar("IdT", bound=Hashable)


@runtime_checkable
class DomainEvent(Protocol):
    """Anything that carries an event identifier and an event name."""

    @property
    def id(self) -> uuid.UUID: ...

    @property
    def name(self) -> str: ...


@runtime_checkable
class AggregateRoot(Protocol):
    """An object that collects the domain events it raises."""

    @property
    def domain_events(self) -> list[DomainEvent]: ...

    def clear_domain_events(self) -> None: ...

    def raise_domain_event(self, event: DomainEvent) -> None: ...


@dataclass(frozen=True)
class BaseEvent:
    """Fields shared by every domain event."""

    id: uuid.UUID
    aggregate_id: uuid.UUID
    event_type: str
    timestamp: datetime

    @property
    def name(self) -> str:
        """The event type."""
        return self.event_type


def new_base_event(aggregate_id: uuid.UUID, event_type: str) -> BaseEvent:
    """Create a base event with a fresh identifier and the current time."""
    return BaseEvent(
        id=uuid.uuid4(),
        aggregate_id=aggregate_id,
        event_type=event_type,
        timestamp=datetime.now(timezone.utc),
    )


class BaseEntity(Generic[IdT]):
    """An object identified by its id; two entities are equal when their ids are."""

    def __init__(self, entity_id: IdT) -> None:
        self._id = entity_id

    @property
    def id(self) -> IdT:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)


class BaseAggregate(BaseEntity[IdT]):
    """An entity that records the domain events raised on it."""

    def __init__(self, entity_id: IdT) -> None:
        super().__init__(entity_id)
        self._domain_events: list[DomainEvent] = []

    @property
    def domain_events(self) -> list[DomainEvent]:
        """Events raised since the last clear, oldest first."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()

    def raise_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)