"""Interactive prompts that ask the user for new items, confirmations and statuses."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .io_utils import get_user_input
from .models import Epic, Status, Story

_SEPARATOR = "----------------------------"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_STATUS_CHOICES = {
    1: Status.OPEN,
    2: Status.IN_PROGRESS,
    3: Status.RESOLVED,
    4: Status.CLOSED,
}


def create_epic_prompt() -> Epic:
    """Ask for an epic's name and description."""
    print(_SEPARATOR)
    print("Epic Name:")
    name = get_user_input()
    print("Epic Description:")
    description = get_user_input()
    return Epic(name, description)


def create_story_prompt() -> Story:
    """Ask for a story's name and description."""
    print(_SEPARATOR)
    print("Story Name:")
    name = get_user_input()
    print("Story Description:")
    description = get_user_input()
    return Story(name, description)


def _confirmed() -> bool:
    return get_user_input().strip().lower() == "y"


def delete_epic_prompt() -> bool:
    """Ask whether an epic and its stories should be deleted."""
    print(_SEPARATOR)
    print(
        "Are you sure you want to delete this epic? "
        "All stories in this epic will also be deleted [Y/n]:"
    )
    return _confirmed()


def delete_story_prompt() -> bool:
    """Ask whether a story should be deleted."""
    print(_SEPARATOR)
    print("Are you sure you want to delete this story? [Y/n]:")
    return _confirmed()


def update_status_prompt() -> Status | None:
    """Ask for a new status by number; None if the answer is not a valid choice."""
    print(_SEPARATOR)
    print("New Status (1 - OPEN, 2 - IN-PROGRESS, 3 - RESOLVED, 4 - CLOSED):")
    answer = get_user_input().strip()
    if not _UNSIGNED.fullmatch(answer):
        return None
    return _STATUS_CHOICES.get(int(answer))


@dataclass
class Prompts:
    """The set of prompts the navigator uses; each can be replaced."""

    create_epic: Callable[[], Epic] = create_epic_prompt
    create_story: Callable[[], Story] = create_story_prompt
    delete_epic: Callable[[], bool] = delete_epic_prompt
    delete_story: Callable[[], bool] = delete_story_prompt
    update_status: Callable[[], Status | None] = update_status_prompt