"""Page stack that turns user actions into database changes and page moves."""

from __future__ import annotations

from .db import JiraDatabase
from .models import Action, ActionKind
from .pages import EpicDetail, HomePage, Page, StoryDetail
from .prompts import Prompts


class Navigator:
    """Keeps the stack of open pages and carries out actions."""

    def __init__(self, db: JiraDatabase, prompts: Prompts | None = None) -> None:
        self.db = db
        self.prompts = prompts if prompts is not None else Prompts()
        self._pages: list[Page] = [HomePage(db)]

    def current_page(self) -> Page | None:
        """The page on top of the stack, or None once every page is closed."""
        return self._pages[-1] if self._pages else None

    def page_count(self) -> int:
        """How many pages are open."""
        return len(self._pages)

    def handle_action(self, action: Action) -> None:
        """Carry out an action; database and prompt failures are raised."""
        kind = action.kind
        if kind is ActionKind.NAVIGATE_TO_EPIC_DETAIL:
            self._pages.append(EpicDetail(self._required(action.epic_id), self.db))
        elif kind is ActionKind.NAVIGATE_TO_STORY_DETAIL:
            self._pages.append(
                StoryDetail(
                    self._required(action.epic_id),
                    self._required(action.story_id),
                    self.db,
                )
            )
        elif kind is ActionKind.NAVIGATE_TO_PREVIOUS_PAGE:
            if self._pages:
                self._pages.pop()
        elif kind is ActionKind.CREATE_EPIC:
            epic = self.prompts.create_epic()
            self.db.create_epic(epic)
            new_id = self.db.read_db().last_item_id
            self._pages.append(EpicDetail(new_id, self.db))
        elif kind is ActionKind.UPDATE_EPIC_STATUS:
            status = self.prompts.update_status()
            if status is None:
                raise ValueError("Failed to update epic status")
            self.db.update_epic_status(self._required(action.epic_id), status)
        elif kind is ActionKind.DELETE_EPIC:
            if self.prompts.delete_epic():
                self.db.delete_epic(self._required(action.epic_id))
                self._pages.pop()
        elif kind is ActionKind.CREATE_STORY:
            epic_id = self._required(action.epic_id)
            story = self.prompts.create_story()
            self.db.create_story(story, epic_id)
            new_id = self.db.read_db().last_item_id
            self._pages.append(StoryDetail(epic_id, new_id, self.db))
        elif kind is ActionKind.UPDATE_STORY_STATUS:
            status = self.prompts.update_status()
            if status is None:
                raise ValueError("Failed to update story status")
            self.db.update_story_status(self._required(action.story_id), status)
        elif kind is ActionKind.DELETE_STORY:
            if self.prompts.delete_story():
                self.db.delete_story(
                    self._required(action.epic_id), self._required(action.story_id)
                )
                self._pages.pop()
        elif kind is ActionKind.EXIT:
            self._pages.clear()

    @staticmethod
    def _required(item_id: int | None) -> int:
        if item_id is None:
            raise ValueError("action is missing an id")
        return item_id