from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote

import requests
from dotenv import load_dotenv

from ..errors import ConfigError, NoteIOError
from .base import ContentStore


@dataclass
class SpaceStore(ContentStore):
    """SilverBullet space over its HTTP file API (/.fs/<page>.md)."""

    url: str
    token: str | None = None
    timeout_s: int = 30

    name: str = "space"

    @classmethod
    def from_env(cls, *, timeout_s: int = 30) -> "SpaceStore":
        load_dotenv()
        url = os.environ.get("SB_URL", "").strip()
        token = os.environ.get("SB_AUTH_TOKEN", "").strip()
        if not url:
            raise ConfigError("Missing SB_URL (set env vars or create .env; see .env.example)")
        return cls(url=url, token=token or None, timeout_s=int(timeout_s))

    def _page_url(self, page: str) -> str:
        return self.url.rstrip("/") + "/.fs/" + quote(page.strip("/") + ".md")

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    def read(self, page: str) -> str:
        try:
            r = requests.get(self._page_url(page), headers=self._headers(), timeout=self.timeout_s)
        except requests.RequestException as e:
            raise NoteIOError(f"Failed to read page {page}: {e}") from e
        if r.status_code != 200:
            raise NoteIOError(f"Failed to read page {page} ({r.status_code}): {r.text}")
        r.encoding = "utf-8"
        return r.text

    def exists(self, page: str) -> bool:
        try:
            r = requests.head(self._page_url(page), headers=self._headers(), timeout=self.timeout_s)
        except requests.RequestException as e:
            raise NoteIOError(f"Failed to check page {page}: {e}") from e
        if r.status_code == 200:
            return True
        if r.status_code == 404:
            return False
        raise NoteIOError(f"Failed to check page {page} ({r.status_code})")

    def write(self, page: str, content: str) -> None:
        headers = self._headers()
        headers["Content-Type"] = "text/markdown; charset=utf-8"
        try:
            r = requests.put(
                self._page_url(page),
                headers=headers,
                data=content.encode("utf-8"),
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise NoteIOError(f"Failed to write page {page}: {e}") from e
        if r.status_code not in (200, 201, 204):
            raise NoteIOError(f"Failed to write page {page} ({r.status_code}): {r.text}")
