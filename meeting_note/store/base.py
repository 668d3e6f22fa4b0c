from __future__ import annotations

from abc import ABC, abstractmethod


class ContentStore(ABC):
    """Where templates are read from and notes are written to.

    Names are page names ("Meetings/2024-03-27_10-20 - standup"), not file paths;
    each backend decides how to map them. Failures raise NoteIOError.
    """

    name: str

    @abstractmethod
    def read(self, page: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def exists(self, page: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def write(self, page: str, content: str) -> None:
        raise NotImplementedError
