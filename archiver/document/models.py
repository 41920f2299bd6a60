from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum, Flag, auto


class DownloadState(Enum):
    ICLOUD_ONLY = "iCloudOnly"
    DOWNLOADING = "downloading"
    LOCAL = "local"


@dataclass(frozen=True)
class DownloadStatus:
    """Where the file currently lives. Informational only.

    ``progress`` is set for ``DOWNLOADING`` and ranges from 0.0 to 1.0.
    """

    state: DownloadState
    progress: float | None = None

    def __post_init__(self) -> None:
        if self.state is DownloadState.DOWNLOADING:
            if self.progress is None or not 0.0 <= self.progress <= 1.0:
                raise ValueError(f"Download progress must be within 0.0..1.0, got {self.progress}")
        elif self.progress is not None:
            raise ValueError(f"Only downloading files carry a progress, not {self.state.value}")

    @classmethod
    def icloud_only(cls) -> DownloadStatus:
        return cls(DownloadState.ICLOUD_ONLY)

    @classmethod
    def downloading(cls, progress: float) -> DownloadStatus:
        return cls(DownloadState.DOWNLOADING, progress)

    @classmethod
    def local(cls) -> DownloadStatus:
        return cls(DownloadState.LOCAL)


@functools.total_ordering
class TaggingStatus(Enum):
    """Whether a document went through the archiving workflow.

    Ordered ``UNTAGGED < TAGGED``.
    """

    UNTAGGED = "untagged"
    TAGGED = "tagged"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TaggingStatus):
            return NotImplemented
        return self.rank < other.rank


class ParsingOptions(Flag):
    """What ``Document.parse_content`` should read from the PDF text."""

    DATE = auto()
    TAGS = auto()
    ALL = DATE | TAGS


class Tag:
    """A tag name together with how many documents use it.

    Tags compare and hash by name only, so a mapping keyed by ``Tag`` keeps
    one entry per name.
    """

    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"{self.name} ({self.count})"

    def __repr__(self) -> str:
        return f"Tag(name={self.name!r}, count={self.count})"


_BYTE_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_byte_count(byte_count: int) -> str:
    """Human readable file size in decimal units, e.g. ``"1.5 MB"``."""
    if byte_count == 0:
        return "Zero KB"
    if abs(byte_count) < 1000:
        return "1 byte" if byte_count == 1 else f"{byte_count} bytes"

    value = float(byte_count)
    unit = _BYTE_UNITS[0]
    for unit in _BYTE_UNITS:
        value /= 1000
        if abs(value) < 1000:
            break

    if unit == "KB":
        return f"{value:.0f} KB"
    digits = 1 if unit == "MB" else 2
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"
