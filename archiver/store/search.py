"""Substring search over collections of searchable items.

Matching is plain, case-sensitive ``in`` containment on each item's
``search_term``. Several terms are combined with AND.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Searchable(Protocol):
    """An item that exposes the one string it is searched by."""

    @property
    def search_term(self) -> str: ...


S = TypeVar("S", bound=Searchable)


def filter_by_term(elements: Iterable[S], term: str) -> set[S]:
    """Return the elements whose search term contains *term*."""
    return {element for element in elements if term in element.search_term}


def filter_by_terms(elements: Iterable[S], terms: Iterable[str]) -> set[S]:
    """Return the elements whose search term contains every one of *terms*."""
    current = set(elements)
    for term in terms:
        current = filter_by_term(current, term)
    return current


class Searcher(ABC, Generic[S]):
    """Mixin that adds term filtering to anything holding searchable items."""

    @property
    @abstractmethod
    def all_search_elements(self) -> set[S]:
        """A copy of every element that can be found."""

    def filter_by_term(self, term: str) -> set[S]:
        return filter_by_term(self.all_search_elements, term)

    def filter_by_terms(self, terms: Iterable[str]) -> set[S]:
        return filter_by_terms(self.all_search_elements, terms)
