"""The quest aggregate, its statuses and its events."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Optional, Union

from questmanager.ddd import BaseAggregate, BaseEvent, new_base_event
from questmanager.kernel import GeoCoordinate

MAX_DURATION_MINUTES = 525600  # one year
MIN_REWARD = 1
MAX_REWARD = 5


class Status(str, Enum):
    """The state of a quest."""

    CREATED = "created"
    POSTED = "posted"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    DECLINED = "declined"
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value


class Difficulty(str, Enum):
    """How hard a quest is."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    def __str__(self) -> str:
        return self.value


_VALID_STATUSES = frozenset(s.value for s in Status)

_TRANSITIONS: dict[Status, frozenset[Status]] = {
    Status.CREATED: frozenset({Status.POSTED, Status.ASSIGNED}),
    Status.POSTED: frozenset({Status.ASSIGNED, Status.CREATED}),
    Status.ASSIGNED: frozenset({Status.IN_PROGRESS, Status.DECLINED, Status.POSTED}),
    Status.IN_PROGRESS: frozenset({Status.COMPLETED, Status.DECLINED}),
    Status.DECLINED: frozenset({Status.POSTED}),
    Status.COMPLETED: frozenset(),
}


def is_valid_status(status: Union[str, Status]) -> bool:
    """Whether status names one of the quest statuses."""
    value = status.value if isinstance(status, Status) else status
    return value in _VALID_STATUSES


def _base_kwargs(base: BaseEvent) -> dict[str, Any]:
    return {f.name: getattr(base, f.name) for f in fields(BaseEvent)}


@dataclass(frozen=True)
class QuestCreated(BaseEvent):
    """Raised when a quest is created."""

    creator: str


@dataclass(frozen=True)
class QuestAssigned(BaseEvent):
    """Raised when a quest is assigned to a user."""

    user_id: str


@dataclass(frozen=True)
class QuestStatusChanged(BaseEvent):
    """Raised when a quest moves from one status to another."""

    old_status: Status
    new_status: Status


def new_quest_created(quest_id: uuid.UUID, creator: str) -> QuestCreated:
    base = new_base_event(quest_id, "quest.created")
    return QuestCreated(**_base_kwargs(base), creator=creator)


def new_quest_assigned(quest_id: uuid.UUID, user_id: str) -> QuestAssigned:
    base = new_base_event(quest_id, "quest.assigned")
    return QuestAssigned(**_base_kwargs(base), user_id=user_id)


def new_quest_status_changed(
    quest_id: uuid.UUID, old_status: Status, new_status: Status
) -> QuestStatusChanged:
    base = new_base_event(quest_id, "quest.status_changed")
    return QuestStatusChanged(
        **_base_kwargs(base), old_status=old_status, new_status=new_status
    )


class Quest(BaseAggregate[uuid.UUID]):
    """A quest: what to do, where, for what reward, and who does it."""

    def __init__(
        self,
        quest_id: uuid.UUID,
        *,
        title: str,
        description: str,
        difficulty: Difficulty,
        reward: int,
        duration_minutes: int,
        target_location: GeoCoordinate,
        execution_location: GeoCoordinate,
        creator: str,
        equipment: Iterable[str] = (),
        skills: Iterable[str] = (),
        status: Status = Status.CREATED,
        assignee: Optional[str] = None,
        target_location_id: Optional[uuid.UUID] = None,
        execution_location_id: Optional[uuid.UUID] = None,
        target_address: Optional[str] = None,
        execution_address: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        super().__init__(quest_id)
        now = datetime.now(timezone.utc)
        self.title = title
        self.description = description
        self.difficulty = difficulty
        self.reward = reward
        self.duration_minutes = duration_minutes
        self.target_location = target_location
        self.execution_location = execution_location
        self.target_location_id = target_location_id
        self.execution_location_id = execution_location_id
        self.target_address = target_address
        self.execution_address = execution_address
        self.equipment = list(equipment)
        self.skills = list(skills)
        self.status = status
        self.creator = creator
        self.assignee = assignee
        self.created_at = created_at if created_at is not None else now
        self.updated_at = updated_at if updated_at is not None else self.created_at

    def __repr__(self) -> str:
        return f"Quest(id={self.id!s}, title={self.title!r}, status={self.status.value!r})"

    def assign_to(self, user_id: str) -> None:
        """Assign the quest to user_id, moving it to the assigned status."""
        if self.status not in (Status.CREATED, Status.POSTED):
            raise ValueError("quest can only be assigned if status is 'created' or 'posted'")
        if self.assignee is not None:
            raise ValueError("quest is already assigned to another user")

        old_status = self.status
        self.assignee = user_id
        self.status = Status.ASSIGNED
        self.updated_at = datetime.now(timezone.utc)

        self.raise_domain_event(new_quest_assigned(self.id, user_id))
        self.raise_domain_event(new_quest_status_changed(self.id, old_status, self.status))

    def change_status(self, new_status: Union[str, Status]) -> None:
        """Move the quest to new_status if the transition is allowed."""
        raw = new_status.value if isinstance(new_status, Status) else str(new_status)
        if not is_valid_status(raw):
            raise ValueError(f"invalid status: {raw} is not a valid quest status")
        target = Status(raw)

        if target not in _TRANSITIONS.get(self.status, frozenset()):
            raise ValueError(
                f"invalid status transition from {self.status.value} to {target.value}"
            )

        old_status = self.status
        self.status = target
        self.updated_at = datetime.now(timezone.utc)
        self.raise_domain_event(new_quest_status_changed(self.id, old_status, target))


def new_quest(
    title: str,
    description: str,
    difficulty: Union[str, Difficulty],
    reward: int,
    duration_minutes: int,
    target_location: GeoCoordinate,
    execution_location: GeoCoordinate,
    creator: str,
    equipment: Iterable[str],
    skills: Iterable[str],
) -> Quest:
    """Create a quest in the created status, validating its parameters."""
    try:
        quest_difficulty = Difficulty(difficulty)
    except ValueError:
        raise ValueError(
            "invalid difficulty: must be one of 'easy', 'medium', 'hard'"
        ) from None

    if reward < MIN_REWARD or reward > MAX_REWARD:
        raise ValueError("reward must be between 1 and 5")
    if duration_minutes <= 0:
        raise ValueError("duration must be greater than 0 minutes")
    if duration_minutes > MAX_DURATION_MINUTES:
        raise ValueError("duration too long, maximum is 1 year (525600 minutes)")

    quest_id = uuid.uuid4()
    quest = Quest(
        quest_id,
        title=title,
        description=description,
        difficulty=quest_difficulty,
        reward=reward,
        duration_minutes=duration_minutes,
        target_location=target_location,
        execution_location=execution_location,
        creator=creator,
        equipment=equipment,
        skills=skills,
    )
    quest.raise_domain_event(new_quest_created(quest_id, creator))
    return quest