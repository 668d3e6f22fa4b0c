"""Create a meeting note from "<date token> <title>" input.

Flow:
settings -> template -> prompt -> split -> resolve date -> normalize title
-> render -> duplicate check -> write.

Everything that can go wrong raises a MeetingNoteError subclass; MeetingNoteSession.run()
turns those into one notification each and never overwrites an existing note.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

from .config import Settings
from .date import format_timestamp, resolve
from .errors import ConfigError, DuplicateError, InputError, MeetingNoteError
from .store.base import ContentStore
from .title import normalize

PROMPT_MESSAGE = "Enter date and title (e.g., 12_14-30 Meeting with team):"

Level = Literal["info", "error"]
Prompt = Callable[[str], Optional[str]]
Notifier = Callable[[str, Level], None]


@dataclass(frozen=True)
class NoteResult:
    key: str
    path: str
    timestamp: datetime
    title: str
    content: str


def split_input(raw: str) -> tuple[str, str]:
    """Split "<token> <title>" on the first whitespace."""
    parts = (raw or "").strip().split(None, 1)
    if len(parts) < 2:
        raise InputError("Please enter both a date and a title.")
    return parts[0], parts[1].strip()


def format_note_key(ts: datetime, title: str) -> str:
    return f"{format_timestamp(ts)} - {title}"


def note_path(base_path: str, key: str) -> str:
    return f"{base_path.rstrip('/')}/{key}"


def render_template(template: str, *, title: str, timestamp: str) -> str:
    return template.replace("{title}", title).replace("{timestamp}", timestamp)


def console_prompt(message: str) -> str | None:
    try:
        return input(message + " ")
    except (EOFError, KeyboardInterrupt):
        return None


def console_notify(message: str, level: Level) -> None:
    if level == "error":
        print(f"ERROR: {message}", file=sys.stderr)
    else:
        print(f"OK: {message}")


@dataclass
class MeetingNoteSession:
    """One user's note-creation context.

    load_settings is called on every attempt so edits to the settings file are
    picked up; configuration errors are still only reported once per session.
    """

    load_settings: Callable[[], Settings]
    store: ContentStore
    prompt: Prompt = console_prompt
    notify: Notifier = console_notify
    verbose: bool = False

    config_error_shown: bool = field(default=False, init=False)

    def _debug(self, label: str, value: object) -> None:
        if self.verbose:
            print(f"{label}: {value}", file=sys.stderr)

    def create_note(self, user_input: str | None = None, now: datetime | None = None) -> NoteResult | None:
        """Create the note, raising on any failure. Returns None if the prompt was cancelled."""

        settings = self.load_settings().require_paths()

        template = self.store.read(settings.template_path)

        if user_input is None:
            user_input = self.prompt(PROMPT_MESSAGE)
            if user_input is None:
                self._debug("prompt", "cancelled")
                return None

        token, raw_title = split_input(user_input)
        self._debug("token", token)
        self._debug("title", raw_title)

        ts = resolve(token, now)
        title = normalize(raw_title)
        if not title:
            raise InputError("Please enter both a date and a title.")

        stamp = format_timestamp(ts)
        self._debug("timestamp", stamp)
        self._debug("normalized title", title)

        content = render_template(template, title=title, timestamp=stamp)
        key = format_note_key(ts, title)
        path = note_path(settings.base_path, key)
        self._debug("path", path)

        if self.store.exists(path):
            raise DuplicateError(path)

        self.store.write(path, content)
        return NoteResult(key=key, path=path, timestamp=ts, title=title, content=content)

    def run(self, user_input: str | None = None, now: datetime | None = None) -> NoteResult | None:
        """create_note() with every failure reported through notify instead of raised."""

        try:
            result = self.create_note(user_input, now)
        except ConfigError as e:
            if not self.config_error_shown:
                self.config_error_shown = True
                self.notify(
                    f"There was an error with your meetingNote configuration. Check your SETTINGS file: {e}",
                    "error",
                )
            return None
        except MeetingNoteError as e:
            self.notify(str(e), "error")
            return None

        if result is not None:
            self.notify("Note created successfully!", "info")
        return result
