# questmanager

This package is the domain core of a quest service. It models quests that are tied to places on a map. It also models reusable locations, geographic coordinates and the domain events that changes to them raise. It uses only the standard library.

## Installation

```
pip install questmanager
```

To run the test suite, install the test extra:

```
pip install "questmanager[test]"
pytest
```

## Coordinates (`questmanager.kernel`)

```python
from questmanager.kernel import new_geo_coordinate

moscow = new_geo_coordinate(55.7558, 37.6176)
spb = new_geo_coordinate(59.9311, 30.3609)

moscow.distance_to(spb)                 # great-circle distance in km (earth radius 6371 km)
box = moscow.bounding_box_for_radius(10.0)
box.min_lat, box.max_lat, box.min_lon, box.max_lon
moscow.equals(spb)                      # False
```

`new_geo_coordinate` raises `ValueError` in two cases:

- The latitude is outside -90..90.
- The longitude is outside -180..180.

It checks the latitude first.

`GeoCoordinate` is a frozen dataclass with the fields `lat` and `lon`. It also has the read-only aliases `latitude` and `longitude`. Constructing it directly does not validate anything.

`bounding_box_for_radius` returns an approximate `BoundingBox`. It uses 111.32 km per degree, and the longitude span widens with latitude. At the poles the span is a full 180 degrees on each side.

## Quests (`questmanager.quest`)

```python
from questmanager.quest import new_quest, Status

q = new_quest(
    "Treasure Hunt", "Find the chest", "medium", 3, 60,
    moscow, moscow, "creator-1", ["map"], ["navigation"],
)
q.assign_to("user-1")                   # status becomes Status.ASSIGNED
q.change_status(Status.IN_PROGRESS)
q.change_status("completed")            # plain strings are accepted too
```

`new_quest` validates its input:

- Difficulty must be `easy`, `medium` or `hard`. The values are in the `Difficulty` enum.
- Reward must be between 1 and 5.
- Duration must be between 1 and 525600 minutes (one year).

`assign_to` works only in two statuses, `created` and `posted`, and only when there is no assignee yet.

`change_status` accepts only the following transitions:

| From        | Allowed next statuses             |
|-------------|-----------------------------------|
| created     | posted, assigned                  |
| posted      | assigned, created                 |
| assigned    | in_progress, declined, posted     |
| in_progress | completed, declined               |
| declined    | posted                            |
| completed   | (final)                           |

If a call breaks any of these rules, it raises `ValueError`. `is_valid_status(value)` tells whether a string names a status.

## Locations (`questmanager.location`)

```python
from questmanager.location import new_location

loc = new_location(moscow, "Red Square")
loc.update(spb, None)                   # replaces coordinate and address
```

## Domain events

`Quest` and `Location` are built on `BaseAggregate` from `questmanager.ddd`, and each change records an event on the aggregate:

```python
[e.name for e in q.domain_events]
# ['quest.created', 'quest.assigned', 'quest.status_changed', 'quest.status_changed', 'quest.status_changed']
q.clear_domain_events()
```

The event classes are:

- `QuestCreated`, `QuestAssigned` and `QuestStatusChanged` in `questmanager.quest`.
- `LocationCreated` (`location.created`) and `LocationUpdated` (`location.updated`) in `questmanager.location`.

All of them extend `BaseEvent`. A `BaseEvent` has these fields:

- `id`
- `aggregate_id`
- `event_type`
- `timestamp`, a UTC time

The `questmanager.ddd` module also provides some building blocks for your own models:

- `new_base_event`.
- `BaseEntity`. Entities are equal when their ids are equal.
- `BaseAggregate`.
- The `DomainEvent` and `AggregateRoot` protocols.

## What this package does not do

The package holds the domain model and nothing else:

- **No storage.** It has no repositories, no database access and no transactions. Quests and locations live only in memory.
- **No event delivery.** Events collect on the aggregates, and nothing publishes them.
- **No HTTP API and no command-line program.**