# pmtool

A small terminal tracker for project work. Work is grouped into **epics**, and
each epic holds **stories**. Every epic and story has a status: OPEN,
IN PROGRESS, RESOLVED or CLOSED. Everything is kept in a single JSON file.

## Installing

```
pip install .
```

## Running

```
pmtool [DATABASE]
```

`DATABASE` is the path of the JSON data file. It defaults to `data/mock.json`,
relative to the directory you run `pmtool` from. The file must already exist
and hold a valid database, for example:

```json
{ "last_item_id": 0, "epics": {}, "stories": {} }
```

The program opens on the home page. The screen is cleared and redrawn after
every command. It stops when you quit, when the last page is closed, or when
standard input ends. If a page cannot be drawn or a command fails (for
example, an unknown id or an invalid status number), the error is printed and
the program waits for Enter before going on.

### Pages and commands

Home page (lists all epics, sorted by id):

- `q` quit
- `c` create an epic (you are asked for a name and a description)
- an epic id opens that epic

Epic page (shows the epic, then the stories table sorted by id):

- `p` go back to the previous page
- `u` update the epic's status
- `d` delete the epic and all of its stories, after you confirm with `y`
- `c` create a story in this epic
- a story id opens that story

Story page:

- `p` go back to the previous page
- `u` update the story's status
- `d` delete the story, after you confirm with `y`

When you are asked for a status, enter 1 for OPEN, 2 for IN PROGRESS,
3 for RESOLVED or 4 for CLOSED. Any other answer is reported as an error and
the status is left unchanged. Delete confirmations accept only `y` or `Y`;
anything else cancels.

Columns wider than their space are cut short with `...`.

## Using it as a library

```python
from pmtool.db import JiraDatabase
from pmtool.models import Epic, Story, Status

db = JiraDatabase.from_file("data/mock.json")
epic_id = db.create_epic(Epic("Launch", "Ship the first release"))
story_id = db.create_story(Story("Write docs", "User guide"), epic_id)
db.update_story_status(story_id, Status.IN_PROGRESS)
db.delete_story(epic_id, story_id)
db.delete_epic(epic_id)
```

Operations on an epic or story that does not exist raise
`pmtool.db.NotFoundError` (a `LookupError`). Reading a file that is missing
raises `OSError`; a file that is not a valid database raises `ValueError`.

`pmtool.db.MemoryDatabase` keeps the state in memory instead of in a file,
which is handy for tests:

```python
from pmtool.db import JiraDatabase, MemoryDatabase

db = JiraDatabase(MemoryDatabase())
```

The interactive parts can be driven from code too: `pmtool.navigator.Navigator`
holds the page stack and takes `pmtool.models.Action` values, and
`pmtool.prompts.Prompts` holds the prompt functions it calls, each of which
can be replaced.

## What it does not do

- It does not create the data file; it must exist before you start.
- Names and descriptions cannot be edited after an item is created; only
  statuses can be changed.

## Running the tests

```
pip install .[test]
pytest
```