import re
from abc import ABC, abstractmethod
from collections.abc import Iterable


class BaseTagParser(ABC):
    """Contract for recognizing tags in the text content of a document."""

    @abstractmethod
    def parse(self, text: str) -> set[str]:
        """Return the lower-case tags found in *text*."""


class VocabularyTagParser(BaseTagParser):
    """Finds known tags that occur as whole words, ignoring case."""

    def __init__(self, vocabulary: Iterable[str]) -> None:
        self._patterns = {
            tag: re.compile(rf"(?<!\w){re.escape(tag)}(?!\w)")
            for tag in {name.lower() for name in vocabulary if name}
        }

    def parse(self, text: str) -> set[str]:
        lowered = text.lower()
        return {tag for tag, pattern in self._patterns.items() if pattern.search(lowered)}
