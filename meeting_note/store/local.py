from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import DuplicateError, NoteIOError
from .base import ContentStore


@dataclass
class LocalStore(ContentStore):
    """Pages as markdown files under a root directory (a local SilverBullet/Obsidian space)."""

    root: Path
    suffix: str = ".md"

    name: str = "local"

    def path_for(self, page: str) -> Path:
        """Map a page name to a file, refusing anything that resolves outside root."""
        r = self.root.expanduser().resolve()
        p = (r / f"{page.strip('/')}{self.suffix}").resolve()
        if not p.is_relative_to(r):
            raise NoteIOError(f"Page must be under {r}: {page}")
        return p

    def read(self, page: str) -> str:
        p = self.path_for(page)
        try:
            return p.read_text(encoding="utf-8")
        except OSError as e:
            raise NoteIOError(f"Failed to read page {page}: {e}") from e

    def exists(self, page: str) -> bool:
        p = self.path_for(page)
        try:
            return p.exists()
        except OSError as e:
            raise NoteIOError(f"Failed to check page {page}: {e}") from e

    def write(self, page: str, content: str) -> None:
        p = self.path_for(page)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            # "x" refuses to replace a note created since the duplicate check
            with p.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise DuplicateError(page) from e
        except OSError as e:
            raise NoteIOError(f"Failed to write page {page}: {e}") from e
