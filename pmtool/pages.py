"""Pages of the terminal interface: what each shows and how it reads input."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass

from .db import JiraDatabase, NotFoundError
from .models import Action, ActionKind
from .page_helpers import get_column_string

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_ID = 0xFFFFFFFF

_LIST_HEADER = "     id     |               name               |      status      "
_DETAIL_HEADER = "  id  |     name     |         description         |    status    "


def _parse_id(text: str) -> int | None:
    if not _ID_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_ID else None


def _list_row(item_id: int, name: str, status: object) -> str:
    return " | ".join(
        (
            get_column_string(str(item_id), 11),
            get_column_string(name, 32),
            get_column_string(str(status), 17),
        )
    )


def _detail_row(item_id: int, name: str, description: str, status: object) -> str:
    return " | ".join(
        (
            get_column_string(str(item_id), 5),
            get_column_string(name, 12),
            get_column_string(description, 27),
            get_column_string(str(status), 13),
        )
    )


class Page(abc.ABC):
    """A screen that can draw itself and turn user input into an action."""

    @abc.abstractmethod
    def draw_page(self) -> None:
        """Print the page to standard output."""

    @abc.abstractmethod
    def handle_input(self, text: str) -> Action | None:
        """The action the input asks for, or None if it asks for nothing."""


@dataclass
class HomePage(Page):
    """The list of all epics."""

    db: JiraDatabase

    def draw_page(self) -> None:
        state = self.db.read_db()
        print("----------------------------- EPICS -----------------------------")
        print(_LIST_HEADER)
        for epic_id in sorted(state.epics):
            epic = state.epics[epic_id]
            print(_list_row(epic_id, epic.name, epic.status))
        print()
        print()
        print("[q] quit | [c] create epic | [:id:] navigate to epic")

    def handle_input(self, text: str) -> Action | None:
        if text == "q":
            return Action(ActionKind.EXIT)
        if text == "c":
            return Action(ActionKind.CREATE_EPIC)
        epic_id = _parse_id(text)
        if epic_id is None:
            return None
        if epic_id in self.db.read_db().epics:
            return Action(ActionKind.NAVIGATE_TO_EPIC_DETAIL, epic_id=epic_id)
        return None


@dataclass
class EpicDetail(Page):
    """One epic with the stories list."""

    epic_id: int
    db: JiraDatabase

    def draw_page(self) -> None:
        state = self.db.read_db()
        epic = state.epics.get(self.epic_id)
        if epic is None:
            raise NotFoundError("could not find epic!")
        print("------------------------------ EPIC ------------------------------")
        print(_DETAIL_HEADER)
        print(_detail_row(self.epic_id, epic.name, epic.description, epic.status))
        print()
        print("---------------------------- STORIES ----------------------------")
        print(_LIST_HEADER)
        for story_id in sorted(state.stories):
            story = state.stories[story_id]
            print(_list_row(story_id, story.name, story.status))
        print()
        print()
        print(
            "[p] previous | [u] update epic | [d] delete epic | "
            "[c] create story | [:id:] navigate to story"
        )

    def handle_input(self, text: str) -> Action | None:
        simple = {
            "p": Action(ActionKind.NAVIGATE_TO_PREVIOUS_PAGE),
            "u": Action(ActionKind.UPDATE_EPIC_STATUS, epic_id=self.epic_id),
            "d": Action(ActionKind.DELETE_EPIC, epic_id=self.epic_id),
            "c": Action(ActionKind.CREATE_STORY, epic_id=self.epic_id),
        }
        if text in simple:
            return simple[text]
        story_id = _parse_id(text)
        if story_id is None:
            return None
        if story_id in self.db.read_db().stories:
            return Action(
                ActionKind.NAVIGATE_TO_STORY_DETAIL,
                epic_id=self.epic_id,
                story_id=story_id,
            )
        return None


@dataclass
class StoryDetail(Page):
    """One story."""

    epic_id: int
    story_id: int
    db: JiraDatabase

    def draw_page(self) -> None:
        state = self.db.read_db()
        story = state.stories.get(self.story_id)
        if story is None:
            raise NotFoundError("could not find story!")
        print("------------------------------ STORY ------------------------------")
        print(_DETAIL_HEADER)
        print(_detail_row(self.story_id, story.name, story.description, story.status))
        print()
        print()
        print("[p] previous | [u] update story | [d] delete story")

    def handle_input(self, text: str) -> Action | None:
        if text == "p":
            return Action(ActionKind.NAVIGATE_TO_PREVIOUS_PAGE)
        if text == "u":
            return Action(ActionKind.UPDATE_STORY_STATUS, story_id=self.story_id)
        if text == "d":
            return Action(
                ActionKind.DELETE_STORY, epic_id=self.epic_id, story_id=self.story_id
            )
        return None