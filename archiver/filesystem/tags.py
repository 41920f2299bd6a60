import os
import threading
from collections.abc import Sequence
from pathlib import Path

from archiver.filesystem.base import BaseTagStore
from archiver.logging.logger import Log


class InMemoryTagStore(BaseTagStore):
    """Keeps tags in a process-local mapping keyed by path."""

    def __init__(self) -> None:
        self._tags: dict[Path, list[str]] = {}
        self._lock = threading.Lock()

    def get_tags(self, path: Path) -> list[str]:
        with self._lock:
            return list(self._tags.get(Path(path), []))

    def set_tags(self, path: Path, tags: Sequence[str]) -> None:
        with self._lock:
            self._tags[Path(path)] = list(tags)

    def discard_tags(self, path: Path) -> None:
        with self._lock:
            self._tags.pop(Path(path), None)


class XattrTagStore(BaseTagStore):
    """Stores tags in the ``user.xdg.tags`` extended attribute (Linux).

    The attribute value is the comma separated tag list, the format used by
    desktop file managers that support XDG tags.
    """

    ATTRIBUTE = "user.xdg.tags"

    def get_tags(self, path: Path) -> list[str]:
        try:
            raw = os.getxattr(path, self.ATTRIBUTE)
        except OSError as exc:
            # Missing attribute, missing file or no xattr support.
            Log.debug(f"No file tags readable for {path}: {exc}")
            return []
        try:
            value = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            Log.debug(f"Ignoring undecodable file tags of {path}: {exc}")
            return []
        return [tag for tag in value.split(",") if tag]

    def set_tags(self, path: Path, tags: Sequence[str]) -> None:
        os.setxattr(path, self.ATTRIBUTE, ",".join(tags).encode("utf-8"))
