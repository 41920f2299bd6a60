"""Display sorting of documents by a closed set of fields."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from archiver.document.document import Document


class InvalidSortKeyError(ValueError):
    """Raised when documents should be sorted by an unknown field."""


class SortKey(Enum):
    FILENAME = "filename"
    TAGGING_STATUS = "taggingStatus"

    @classmethod
    def parse(cls, key: str | SortKey) -> SortKey:
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidSortKeyError(
                f"Unknown sort key '{key}'. Choose from: {[k.value for k in cls]}"
            ) from exc

    def value_of(self, document: Document) -> Any:
        if self is SortKey.FILENAME:
            return document.filename
        if self is SortKey.TAGGING_STATUS:
            return document.tagging_status
        raise InvalidSortKeyError(f"No accessor for sort key '{self.value}'")


@dataclass(frozen=True)
class SortDescriptor:
    """A field to sort by and its direction. Raw strings are validated."""

    key: SortKey
    ascending: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", SortKey.parse(self.key))


def sort_documents(
    documents: Iterable[Document], descriptors: Sequence[SortDescriptor]
) -> list[Document]:
    """Sort by every descriptor, the first one being the primary key.

    Runs one stable sort per descriptor, starting with the least significant.
    """
    result = list(documents)
    for descriptor in reversed(descriptors):
        result.sort(key=descriptor.key.value_of, reverse=not descriptor.ascending)
    return result
