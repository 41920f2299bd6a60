"""In-memory set of documents shared between threads.

A single lock guards the set. Every mutator runs as one critical section,
so a batch ``add`` or ``remove`` is never seen half applied, and readers
copy the set out under the same lock before filtering or sorting it.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable

from archiver.document.document import Document
from archiver.logging.logger import Log
from archiver.store.search import Searcher


class DocumentStore(Searcher[Document]):
    """Set of documents keyed by their identity."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._lock = threading.Lock()
        self._documents: set[Document] = set(documents)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, documents: Document | Iterable[Document]) -> None:
        """Add documents; already stored identities keep their instance."""
        batch = self._as_batch(documents)
        with self._lock:
            self._documents |= batch
        Log.debug(f"Added {len(batch)} document(s) to the store")

    def remove(self, documents: Document | Iterable[Document]) -> None:
        batch = self._as_batch(documents)
        with self._lock:
            self._documents -= batch
        Log.debug(f"Removed {len(batch)} document(s) from the store")

    def remove_where(self, predicate: Callable[[Document], bool]) -> int:
        """Remove every document matching *predicate*; return how many."""
        with self._lock:
            matching = {document for document in self._documents if predicate(document)}
            self._documents -= matching
        return len(matching)

    def remove_all(self) -> None:
        with self._lock:
            self._documents = set()

    def update(self, document: Document) -> None:
        """Replace the stored document with the same id, or insert it."""
        with self._lock:
            self._documents.discard(document)
            self._documents.add(document)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def documents(self) -> frozenset[Document]:
        """Consistent snapshot of the stored documents."""
        with self._lock:
            return frozenset(self._documents)

    @property
    def all_search_elements(self) -> set[Document]:
        with self._lock:
            return set(self._documents)

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, document: object) -> bool:
        with self._lock:
            return document in self._documents

    @staticmethod
    def _as_batch(documents: Document | Iterable[Document]) -> set[Document]:
        if isinstance(documents, Document):
            return {documents}
        return set(documents)
