"""Core data types: actions, statuses, epics, stories and the database state."""

from __future__ import annotations

import copy
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_MAX_ID = 0xFFFFFFFF


class ActionKind(enum.Enum):
    """The kinds of action a page can ask the navigator to perform."""

    NAVIGATE_TO_EPIC_DETAIL = enum.auto()
    NAVIGATE_TO_STORY_DETAIL = enum.auto()
    NAVIGATE_TO_PREVIOUS_PAGE = enum.auto()
    CREATE_EPIC = enum.auto()
    UPDATE_EPIC_STATUS = enum.auto()
    DELETE_EPIC = enum.auto()
    CREATE_STORY = enum.auto()
    UPDATE_STORY_STATUS = enum.auto()
    DELETE_STORY = enum.auto()
    EXIT = enum.auto()


@dataclass(frozen=True)
class Action:
    """An action with the identifiers it refers to, if any."""

    kind: ActionKind
    epic_id: int | None = None
    story_id: int | None = None


class Status(enum.Enum):
    """Workflow status of an epic or a story; values are the stored names."""

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    def label(self) -> str:
        """Text shown to the user for this status."""
        return {
            Status.OPEN: "OPEN",
            Status.IN_PROGRESS: "IN PROGRESS",
            Status.RESOLVED: "RESOLVED",
            Status.CLOSED: "CLOSED",
        }[self]

    def __str__(self) -> str:
        return self.label()


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _text(data: Any, key: str) -> str:
    value = _field(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _item_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid id {value!r}")
    if not 0 <= value <= _MAX_ID:
        raise ValueError(f"id out of range: {value}")
    return value


def _key_id(key: Any) -> int:
    if not isinstance(key, str):
        raise ValueError(f"invalid map key {key!r}")
    try:
        return _item_id(int(key))
    except ValueError:
        raise ValueError(f"invalid map key {key!r}") from None


def _status(data: Any) -> Status:
    value = _field(data, "status")
    if not isinstance(value, str):
        raise ValueError("field 'status' must be a string")
    return Status(value)


@dataclass
class Epic:
    """A large piece of work that groups stories."""

    name: str
    description: str
    status: Status = Status.OPEN
    stories: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready representation."""
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "stories": list(self.stories),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Epic:
        """Build an epic from its JSON representation; raises ValueError."""
        stories = _field(data, "stories")
        if not isinstance(stories, list):
            raise ValueError("field 'stories' must be a list")
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            status=_status(data),
            stories=[_item_id(story_id) for story_id in stories],
        )


@dataclass
class Story:
    """A single unit of work belonging to an epic."""

    name: str
    description: str
    status: Status = Status.OPEN

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready representation."""
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Story:
        """Build a story from its JSON representation; raises ValueError."""
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            status=_status(data),
        )


@dataclass
class DBState:
    """The whole database: the last issued id, all epics and all stories."""

    last_item_id: int = 0
    epics: dict[int, Epic] = field(default_factory=dict)
    stories: dict[int, Story] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready representation; map keys become strings."""
        return {
            "last_item_id": self.last_item_id,
            "epics": {str(k): v.to_dict() for k, v in self.epics.items()},
            "stories": {str(k): v.to_dict() for k, v in self.stories.items()},
        }

    @classmethod
    def from_dict(cls, data: Any) -> DBState:
        """Build a state from its JSON representation; raises ValueError."""
        last_item_id = _item_id(_field(data, "last_item_id"))
        epics = _field(data, "epics")
        stories = _field(data, "stories")
        if not isinstance(epics, Mapping) or not isinstance(stories, Mapping):
            raise ValueError("fields 'epics' and 'stories' must be objects")
        return cls(
            last_item_id=last_item_id,
            epics={_key_id(k): Epic.from_dict(v) for k, v in epics.items()},
            stories={_key_id(k): Story.from_dict(v) for k, v in stories.items()},
        )

    def copy(self) -> DBState:
        """An independent deep copy."""
        return copy.deepcopy(self)