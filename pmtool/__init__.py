"""Terminal tracker for epics and stories, stored in a JSON file."""

__version__ = "0.1.0"