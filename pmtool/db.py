"""Storage backends and the issue-tracking operations built on them."""

from __future__ import annotations

import abc
import json
import os
from pathlib import Path

from .models import DBState, Epic, Status, Story


class NotFoundError(LookupError):
    """Raised when an epic or a story does not exist."""


class Database(abc.ABC):
    """Somewhere a whole DBState can be read from and written to."""

    @abc.abstractmethod
    def read_db(self) -> DBState:
        """Return the stored state."""

    @abc.abstractmethod
    def write_db(self, db_state: DBState) -> None:
        """Replace the stored state."""


class JSONFileDatabase(Database):
    """State kept as a JSON document in a file."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.file_path = Path(file_path)

    def read_db(self) -> DBState:
        """Read and parse the file; OSError or ValueError on failure."""
        text = self.file_path.read_text(encoding="utf-8")
        return DBState.from_dict(json.loads(text))

    def write_db(self, db_state: DBState) -> None:
        self.file_path.write_text(json.dumps(db_state.to_dict()), encoding="utf-8")


class MemoryDatabase(Database):
    """State kept in memory; reads and writes work on copies."""

    def __init__(self, initial: DBState | None = None) -> None:
        self._state = initial.copy() if initial is not None else DBState()

    def read_db(self) -> DBState:
        return self._state.copy()

    def write_db(self, db_state: DBState) -> None:
        self._state = db_state.copy()


class JiraDatabase:
    """Epic and story operations over a storage backend."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @classmethod
    def from_file(cls, file_path: str | os.PathLike[str]) -> JiraDatabase:
        """A database backed by the JSON file at file_path."""
        return cls(JSONFileDatabase(file_path))

    def read_db(self) -> DBState:
        return self.database.read_db()

    def create_epic(self, epic: Epic) -> int:
        """Store a new epic and return its id."""
        state = self.read_db()
        state.last_item_id += 1
        new_id = state.last_item_id
        state.epics[new_id] = epic
        self.database.write_db(state)
        return new_id

    def create_story(self, story: Story, epic_id: int) -> int:
        """Store a new story under the given epic and return its id."""
        state = self.read_db()
        state.last_item_id += 1
        new_id = state.last_item_id
        state.stories[new_id] = story
        epic = state.epics.get(epic_id)
        if epic is None:
            raise NotFoundError("Epic not found")
        epic.stories.append(new_id)
        self.database.write_db(state)
        return new_id

    def delete_epic(self, epic_id: int) -> None:
        """Remove an epic together with all its stories."""
        state = self.read_db()
        epic = state.epics.pop(epic_id, None)
        if epic is None:
            raise NotFoundError("Epic not found")
        for story_id in epic.stories:
            state.stories.pop(story_id, None)
        self.database.write_db(state)

    def delete_story(self, epic_id: int, story_id: int) -> None:
        """Remove a story and detach it from its epic."""
        state = self.read_db()
        if state.stories.pop(story_id, None) is None:
            raise NotFoundError("Story not found")
        epic = state.epics.get(epic_id)
        if epic is None:
            raise NotFoundError("Epic not found")
        epic.stories = [sid for sid in epic.stories if sid != story_id]
        self.database.write_db(state)

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        state = self.read_db()
        epic = state.epics.get(epic_id)
        if epic is None:
            raise NotFoundError("Epic not found")
        epic.status = status
        self.database.write_db(state)

    def update_story_status(self, story_id: int, status: Status) -> None:
        state = self.read_db()
        story = state.stories.get(story_id)
        if story is None:
            raise NotFoundError("Story not found")
        story.status = status
        self.database.write_db(state)