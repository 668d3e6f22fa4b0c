from __future__ import annotations

from pathlib import Path

import pytest
import requests

import meeting_note.store.space as space_store
from meeting_note.errors import ConfigError, DuplicateError, NoteIOError
from meeting_note.store import LocalStore, SpaceStore, build_store


def test_local_store_roundtrip(tmp_path: Path) -> None:
    store = LocalStore(root=tmp_path)
    page = "Meetings/2024-03-27_10-20 - standup"
    assert not store.exists(page)

    store.write(page, "# standup\n")
    assert store.exists(page)
    assert (tmp_path / "Meetings" / "2024-03-27_10-20 - standup.md").read_text(encoding="utf-8") == "# standup\n"
    assert store.read(page) == "# standup\n"


def test_local_store_missing_page_raises(tmp_path: Path) -> None:
    with pytest.raises(NoteIOError):
        LocalStore(root=tmp_path).read("Templates/Meeting")


def test_local_store_refuses_escaping_root(tmp_path: Path) -> None:
    root = tmp_path / "space"
    root.mkdir()
    with pytest.raises(NoteIOError):
        LocalStore(root=root).write("../outside", "x")
    assert not (tmp_path / "outside.md").exists()


class _Resp:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.encoding = None


def test_space_store_urls_and_auth(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, str, dict]] = []

    def fake(method: str, status: int, text: str = ""):
        def _call(url, headers=None, timeout=None, data=None):
            calls.append((method, url, dict(headers or {})))
            return _Resp(status, text)

        return _call

    monkeypatch.setattr(requests, "get", fake("GET", 200, "Template {title}"))
    monkeypatch.setattr(requests, "head", fake("HEAD", 404))
    monkeypatch.setattr(requests, "put", fake("PUT", 200))

    store = SpaceStore(url="http://sb.local/", token="secret")
    assert store.read("Templates/Meeting") == "Template {title}"
    assert store.exists("Meetings/2024-03-27_10-20 - standup") is False
    store.write("Meetings/2024-03-27_10-20 - standup", "body")

    assert calls[0][1] == "http://sb.local/.fs/Templates/Meeting.md"
    assert calls[1][1] == "http://sb.local/.fs/Meetings/2024-03-27_10-20%20-%20standup.md"
    assert calls[2][0] == "PUT"
    assert all(h["Authorization"] == "Bearer secret" for _, _, h in calls)


def test_space_store_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(url, headers=None, timeout=None, data=None):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(requests, "get", lambda url, headers=None, timeout=None: _Resp(500, "oops"))
    monkeypatch.setattr(requests, "head", lambda url, headers=None, timeout=None: _Resp(403))
    monkeypatch.setattr(requests, "put", boom)

    store = SpaceStore(url="http://sb.local")
    with pytest.raises(NoteIOError):
        store.read("x")
    with pytest.raises(NoteIOError):
        store.exists("x")
    with pytest.raises(NoteIOError):
        store.write("x", "y")


def test_build_store(tmp_path: Path) -> None:
    assert isinstance(build_store("local", root=tmp_path), LocalStore)
    assert isinstance(build_store("sb", url="http://sb.local"), SpaceStore)
    with pytest.raises(ValueError):
        build_store("ftp")
    with pytest.raises(ValueError):
        build_store("local")


def test_local_store_name_too_long_is_io_error(tmp_path: Path) -> None:
    (tmp_path / "Meetings").mkdir()
    store = LocalStore(root=tmp_path)
    page = "Meetings/2024-03-27_10-20 - " + "word " * 80
    with pytest.raises(NoteIOError):
        store.write(page, "x")


def test_local_store_write_never_replaces(tmp_path: Path) -> None:
    store = LocalStore(root=tmp_path)
    page = "Meetings/2024-03-27_10-20 - standup"
    store.write(page, "first")
    with pytest.raises(DuplicateError):
        store.write(page, "second")
    assert store.read(page) == "first"


def test_space_store_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(space_store, "load_dotenv", lambda: False)
    monkeypatch.setenv("SB_URL", " http://sb.local ")
    monkeypatch.setenv("SB_AUTH_TOKEN", "")
    store = SpaceStore.from_env(timeout_s=5)
    assert (store.url, store.token, store.timeout_s) == ("http://sb.local", None, 5)

    monkeypatch.delenv("SB_URL")
    with pytest.raises(ConfigError):
        SpaceStore.from_env()
