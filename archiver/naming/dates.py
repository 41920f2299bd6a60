"""Recognition of calendar dates embedded in filenames and OCR text.

Two recognizers are tried in order and the first hit wins:

1. The archive's own marker: digits and hyphens directly followed by ``--``,
   read strictly as ``yyyy-MM-dd``.
2. A fallback over the whole string for the common scanner formats
   ``yyyy-MM-dd``, ``yyyy_MM_dd``, ``yyyyMMdd`` and ``dd.MM.yyyy``.

Matches that are not real calendar dates are skipped, never clamped.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import ClassVar, NamedTuple

DATE_FORMAT = "%Y-%m-%d"


class DateMatch(NamedTuple):
    """A recognized date and the exact substring it was read from."""

    date: dt.date
    raw: str


class DateExtractor:
    """Finds the first date of a fixed set of encodings in a string."""

    _CANONICAL_RE: ClassVar[re.Pattern[str]] = re.compile(r"([\d-]+)--")
    _CANONICAL_STRICT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}")

    # The separator is captured once and reused so mixed forms like
    # "2010-05_12" are rejected. Lookarounds keep trailing time digits
    # (e.g. "_15_17") out of the match.
    _FALLBACK_PATTERNS: ClassVar[list[re.Pattern[str]]] = [
        re.compile(
            r"(?<!\d)(?P<year>\d{4})(?P<sep>[-_]?)(?P<month>\d{2})(?P=sep)(?P<day>\d{2})(?!\d)"
        ),
        re.compile(r"(?<!\d)(?P<day>\d{2})\.(?P<month>\d{2})\.(?P<year>\d{4})(?!\d)"),
    ]

    def extract(self, text: str) -> DateMatch | None:
        """Return the first recognized date in *text*, or ``None``."""
        return self.extract_canonical(text) or self.extract_fallback(text)

    def extract_canonical(self, text: str) -> DateMatch | None:
        match = self._CANONICAL_RE.search(text)
        if match is None:
            return None
        raw = match.group(1)
        if not self._CANONICAL_STRICT_RE.fullmatch(raw):
            return None
        try:
            return DateMatch(dt.datetime.strptime(raw, DATE_FORMAT).date(), raw)
        except ValueError:
            return None

    def extract_fallback(self, text: str) -> DateMatch | None:
        for pattern in self._FALLBACK_PATTERNS:
            for match in pattern.finditer(text):
                try:
                    date = dt.date(
                        int(match.group("year")),
                        int(match.group("month")),
                        int(match.group("day")),
                    )
                except ValueError:
                    continue
                return DateMatch(date, match.group(0))
        return None


def format_date(date: dt.date) -> str:
    """Render *date* the way the archive filename scheme expects it."""
    # strftime does not zero-pad years below 1000 on every platform
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
