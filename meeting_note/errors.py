from __future__ import annotations


class MeetingNoteError(Exception):
    """Base class for everything that aborts a single note creation."""


class ConfigError(MeetingNoteError):
    """Settings are missing or do not validate."""


class ParseError(MeetingNoteError):
    """A date token could not be resolved."""

    def __init__(self, reason: str, token: str = "") -> None:
        super().__init__(f"Could not parse date: {reason} ({token!r})" if token else f"Could not parse date: {reason}")
        self.reason = reason
        self.token = token


class InputError(MeetingNoteError):
    """User input is missing the date or the title."""


class DuplicateError(MeetingNoteError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Note already exists: {path}")
        self.path = path


class NoteIOError(MeetingNoteError):
    """Reading the template or writing the note failed."""
