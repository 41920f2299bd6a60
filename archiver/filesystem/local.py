import shutil
from pathlib import Path

from archiver.filesystem.base import BaseFileSystem


class LocalFileSystem(BaseFileSystem):
    """Filesystem primitives backed by the local disk."""

    def move(self, source: Path, target: Path) -> None:
        shutil.move(source, target)

    def create_directories(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return path.exists()
