"""Meeting notes from "<date token> <title>" input.

The core is two pure functions, date.resolve() and title.normalize(); note.py wires them
to settings, a prompt and a content store.
"""

from .date import format_timestamp, resolve
from .errors import ConfigError, DuplicateError, InputError, MeetingNoteError, NoteIOError, ParseError
from .title import normalize
