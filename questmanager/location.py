"""Reusable geographic locations and the events they raise."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any, Optional

from questmanager.ddd import BaseAggregate, BaseEvent, new_base_event
from questmanager.kernel import GeoCoordinate

LOCATION_CREATED = "location.created"
LOCATION_UPDATED = "location.updated"


def _base_kwargs(base: BaseEvent) -> dict[str, Any]:
    return {f.name: getattr(base, f.name) for f in fields(BaseEvent)}


@dataclass(frozen=True)
class LocationCreated(BaseEvent):
    """Raised when a location is created."""

    coordinate: GeoCoordinate
    address: Optional[str]


@dataclass(frozen=True)
class LocationUpdated(BaseEvent):
    """Raised when a location's coordinate or address changes."""

    coordinate: GeoCoordinate
    address: Optional[str]


def new_location_created(
    location_id: uuid.UUID, coordinate: GeoCoordinate, address: Optional[str]
) -> LocationCreated:
    base = new_base_event(location_id, LOCATION_CREATED)
    return LocationCreated(**_base_kwargs(base), coordinate=coordinate, address=address)


def new_location_updated(
    location_id: uuid.UUID, coordinate: GeoCoordinate, address: Optional[str]
) -> LocationUpdated:
    base = new_base_event(location_id, LOCATION_UPDATED)
    return LocationUpdated(**_base_kwargs(base), coordinate=coordinate, address=address)


class Location(BaseAggregate[uuid.UUID]):
    """A geographic location that can be shared between quests."""

    def __init__(
        self,
        location_id: uuid.UUID,
        coordinate: GeoCoordinate,
        address: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> None:
        super().__init__(location_id)
        self.coordinate = coordinate
        self.address = address
        self.created_at = created_at
        self.updated_at = updated_at

    def __repr__(self) -> str:
        return (
            f"Location(id={self.id!s}, coordinate={self.coordinate!r}, "
            f"address={self.address!r})"
        )

    def update(self, coordinate: GeoCoordinate, address: Optional[str]) -> None:
        """Replace the coordinate and address and raise a LocationUpdated event."""
        self.coordinate = coordinate
        self.address = address
        self.updated_at = datetime.now(timezone.utc)
        self.raise_domain_event(new_location_updated(self.id, coordinate, address))


def new_location(coordinate: GeoCoordinate, address: Optional[str]) -> Location:
    """Create a location with a fresh id and raise a LocationCreated event."""
    location_id = uuid.uuid4()
    now = datetime.now(timezone.utc)
    location = Location(location_id, coordinate, address, now, now)
    location.raise_domain_event(new_location_created(location_id, coordinate, address))
    return location