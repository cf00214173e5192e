import pytest

from pmtool.db import JiraDatabase, MemoryDatabase, NotFoundError
from pmtool.models import Action, ActionKind, Epic, Status, Story
from pmtool.pages import EpicDetail, HomePage, Page, StoryDetail


@pytest.fixture
def db():
    return JiraDatabase(MemoryDatabase())


@pytest.fixture
def epic_and_story(db):
    epic_id = db.create_epic(Epic("", ""))
    story_id = db.create_story(Story("", ""), epic_id)
    return epic_id, story_id


def test_page_is_abstract():
    with pytest.raises(TypeError):
        Page()


# Home page


def test_home_draw_page_prints_header(db, capsys):
    HomePage(db).draw_page()
    out = capsys.readouterr().out
    assert "EPICS" in out
    assert "[q] quit | [c] create epic | [:id:] navigate to epic" in out


def test_home_draw_page_lists_epics_sorted_by_id(db, capsys):
    db.create_epic(Epic("first", ""))
    second_id = db.create_epic(Epic("second", ""))
    db.update_epic_status(second_id, Status.IN_PROGRESS)
    HomePage(db).draw_page()
    out = capsys.readouterr().out
    assert out.index("first") < out.index("second")
    assert "IN PROGRESS" in out
    assert "OPEN" in out


def test_home_handle_input_empty_returns_none(db):
    assert HomePage(db).handle_input("") is None


def test_home_handle_input_returns_the_correct_actions(db):
    epic_id = db.create_epic(Epic("", ""))
    page = HomePage(db)

    assert page.handle_input("q") == Action(ActionKind.EXIT)
    assert page.handle_input("c") == Action(ActionKind.CREATE_EPIC)
    assert page.handle_input(str(epic_id)) == Action(
        ActionKind.NAVIGATE_TO_EPIC_DETAIL, epic_id=1
    )
    assert page.handle_input("999") is None
    assert page.handle_input("j983f2j") is None
    assert page.handle_input("q983f2j") is None
    assert page.handle_input("q\n") is None


# Epic detail page


def test_epic_detail_draw_page_shows_epic(db, capsys):
    epic_id = db.create_epic(Epic("", ""))
    EpicDetail(epic_id, db).draw_page()
    out = capsys.readouterr().out
    assert "EPIC" in out
    assert "STORIES" in out
    assert "OPEN" in out


def test_epic_detail_draw_page_lists_stories(db, capsys):
    epic_id = db.create_epic(Epic("epic", "about it"))
    db.create_story(Story("story a", ""), epic_id)
    db.create_story(Story("story b", ""), epic_id)
    EpicDetail(epic_id, db).draw_page()
    out = capsys.readouterr().out
    assert "about it" in out
    assert out.index("story a") < out.index("story b")


def test_epic_detail_handle_input_empty_returns_none(db):
    epic_id = db.create_epic(Epic("", ""))
    assert EpicDetail(epic_id, db).handle_input("") is None


def test_epic_detail_draw_page_raises_for_invalid_epic_id(db):
    with pytest.raises(NotFoundError):
        EpicDetail(999, db).draw_page()


def test_epic_detail_handle_input_returns_the_correct_actions(db, epic_and_story):
    epic_id, story_id = epic_and_story
    page = EpicDetail(epic_id, db)

    assert page.handle_input("p") == Action(ActionKind.NAVIGATE_TO_PREVIOUS_PAGE)
    assert page.handle_input("u") == Action(ActionKind.UPDATE_EPIC_STATUS, epic_id=1)
    assert page.handle_input("d") == Action(ActionKind.DELETE_EPIC, epic_id=1)
    assert page.handle_input("c") == Action(ActionKind.CREATE_STORY, epic_id=1)
    assert page.handle_input(str(story_id)) == Action(
        ActionKind.NAVIGATE_TO_STORY_DETAIL, epic_id=1, story_id=2
    )
    assert page.handle_input("999") is None
    assert page.handle_input("j983f2j") is None
    assert page.handle_input("p983f2j") is None
    assert page.handle_input("p\n") is None


# Story detail page


def test_story_detail_draw_page_shows_story(db, epic_and_story, capsys):
    epic_id, story_id = epic_and_story
    db.update_story_status(story_id, Status.RESOLVED)
    StoryDetail(epic_id, story_id, db).draw_page()
    out = capsys.readouterr().out
    assert "STORY" in out
    assert "RESOLVED" in out
    assert "[p] previous | [u] update story | [d] delete story" in out


def test_story_detail_handle_input_empty_returns_none(db, epic_and_story):
    epic_id, story_id = epic_and_story
    assert StoryDetail(epic_id, story_id, db).handle_input("") is None


def test_story_detail_draw_page_raises_for_invalid_story_id(db, epic_and_story):
    epic_id, _ = epic_and_story
    with pytest.raises(NotFoundError):
        StoryDetail(epic_id, 999, db).draw_page()


def test_story_detail_handle_input_returns_the_correct_actions(db, epic_and_story):
    epic_id, story_id = epic_and_story
    page = StoryDetail(epic_id, story_id, db)

    assert page.handle_input("p") == Action(ActionKind.NAVIGATE_TO_PREVIOUS_PAGE)
    assert page.handle_input("u") == Action(
        ActionKind.UPDATE_STORY_STATUS, story_id=story_id
    )
    assert page.handle_input("d") == Action(
        ActionKind.DELETE_STORY, epic_id=epic_id, story_id=story_id
    )
    assert page.handle_input("1") is None
    assert page.handle_input("j983f2j") is None
    assert page.handle_input("p983f2j") is None
    assert page.handle_input("p\n") is None