"""The archive filename scheme.

Canonical names look like::

    2010-05-12--example-description__tag1_tag2.pdf

``--`` separates the date from the specification, ``__`` starts the tag
block and tags are joined by ``_``. Parsing is best effort and never raises;
anything it cannot recognize comes back as ``None``.
"""

from __future__ import annotations

import datetime as dt
import os
import re
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from archiver.naming.dates import DateExtractor, format_date

FILE_EXTENSION = "pdf"
DATE_SEPARATOR = "--"
TAG_BLOCK_SEPARATOR = "__"
TAG_SEPARATOR = "_"

_SPECIFICATION_RE = re.compile(r"--([^_]+)__")

_date_extractor = DateExtractor()


class ParsedFilename(NamedTuple):
    date: dt.date | None
    specification: str | None
    tag_names: list[str] | None


def parse_filename(path: str | os.PathLike[str]) -> ParsedFilename:
    """Read date, specification and tag names from the last path component."""
    filename = Path(path).name
    stem, _extension = os.path.splitext(filename)

    date_match = _date_extractor.extract(filename)
    date = date_match.date if date_match else None
    raw_date = date_match.raw if date_match else ""

    return ParsedFilename(
        date=date,
        specification=_parse_specification(filename, stem, raw_date),
        tag_names=_parse_tag_names(stem),
    )


def _parse_specification(filename: str, stem: str, raw_date: str) -> str | None:
    scheme_match = _SPECIFICATION_RE.search(filename)
    if scheme_match:
        return scheme_match.group(1)

    remainder = stem
    if raw_date:
        if remainder.startswith(raw_date):
            remainder = remainder[len(raw_date):]
        else:
            remainder = remainder.replace(raw_date, "", 1)

    # "_" is reserved for tags
    specification = (
        remainder.split(TAG_BLOCK_SEPARATOR)[0]
        .replace(TAG_SEPARATOR, "-")
        .strip("- ")
    )
    return specification or None


def _parse_tag_names(stem: str) -> list[str] | None:
    if TAG_BLOCK_SEPARATOR not in stem:
        return None
    raw_tags = stem.rsplit(TAG_BLOCK_SEPARATOR, 1)[-1]
    if not raw_tags:
        return None
    return raw_tags.split(TAG_SEPARATOR)


def create_filename(date: dt.date, specification: str, tags: Iterable[str]) -> str:
    """Build the canonical filename; tags are sorted before joining."""
    tag_block = TAG_SEPARATOR.join(sorted(tags))
    return (
        f"{format_date(date)}{DATE_SEPARATOR}{specification}"
        f"{TAG_BLOCK_SEPARATOR}{tag_block}.{FILE_EXTENSION}"
    )
