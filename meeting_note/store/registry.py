from __future__ import annotations

from pathlib import Path

from .base import ContentStore
from .local import LocalStore
from .space import SpaceStore


def build_store(name: str, **kwargs) -> ContentStore:
    """Store factory: "local" (files under root) or "space" (SilverBullet over HTTP)."""
    n = (name or "local").lower()
    if n in ("local", "fs", "files"):
        root = kwargs.get("root")
        if not root:
            raise ValueError("local store needs a root directory")
        return LocalStore(root=Path(root), suffix=str(kwargs.get("suffix", ".md")))

    if n in ("space", "silverbullet", "sb"):
        url = kwargs.get("url")
        if url:
            return SpaceStore(url=str(url), token=kwargs.get("token"), timeout_s=int(kwargs.get("timeout_s", 30)))
        return SpaceStore.from_env(timeout_s=int(kwargs.get("timeout_s", 30)))

    raise ValueError(f"Unsupported store: {name} (expected 'local' or 'space')")
