"""The document entity of the archive.

A ``Document`` wraps one file and the date, specification and tags read
from its name. Identity is the ``id`` alone: the path changes on every
rename and must not create a second entity.

Documents are not synchronized. Only one owner may mutate a document at a
time, and two threads must never rename the same document or race on the
same target path, because ``rename`` checks the target and moves in two
steps.
"""

from __future__ import annotations

import datetime as dt
import uuid
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from archiver.document.exceptions import (
    AlreadyExistsError,
    FileOperationError,
    MissingDateError,
    MissingSpecificationError,
    MissingTagsError,
)
from archiver.document.models import (
    DownloadStatus,
    ParsingOptions,
    TaggingStatus,
    format_byte_count,
)
from archiver.document.sorting import SortDescriptor
from archiver.document.tag_parser import BaseTagParser
from archiver.filesystem.base import BaseFileSystem, BaseTagStore
from archiver.filesystem.local import LocalFileSystem
from archiver.logging.logger import Log
from archiver.naming.dates import DateExtractor
from archiver.naming.grammar import create_filename, parse_filename
from archiver.naming.slug import slugify as slugify_text
from archiver.pdf.base import BasePdfExtractor
from archiver.pdf.exceptions import PdfExtractionError

_date_extractor = DateExtractor()


class RenamingPath(NamedTuple):
    foldername: str
    filename: str


class Document:
    """A file on disk plus the archive fields parsed from its name."""

    def __init__(
        self,
        id: uuid.UUID,
        path: Path,
        size: int | None = None,
        download_status: DownloadStatus = DownloadStatus.local(),
        tagging_status: TaggingStatus = TaggingStatus.UNTAGGED,
        *,
        tag_store: BaseTagStore | None = None,
        filesystem: BaseFileSystem | None = None,
    ) -> None:
        """Create a document and seed its fields from the filename.

        Args:
            id: Identity of the document, never recomputed.
            path: Location of the file.
            size: Raw size in bytes, formatted once for display.
            download_status: Availability of the file.
            tagging_status: Whether the document is already archived.
            tag_store: Source of file tags merged into ``tags`` now and
                target of the tags written after a rename.
            filesystem: Primitives used by ``rename``.
        """
        self._id = id
        self._set_path(Path(path))
        self._size = format_byte_count(size) if size is not None else None
        self.download_status = download_status
        self.tagging_status = tagging_status

        self._tag_store = tag_store
        self._filesystem = filesystem if filesystem is not None else LocalFileSystem()

        parsed = parse_filename(self._path)
        tags = set(parsed.tag_names or [])
        if tag_store is not None:
            tags.update(tag_store.get_tags(self._path))
        self.tags = tags
        self.date: dt.date | None = parsed.date
        self.specification = parsed.specification or ""

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def path(self) -> Path:
        return self._path

    @property
    def filename(self) -> str:
        """Whole filename, e.g. ``"scan1.pdf"``."""
        return self._filename

    @property
    def folder(self) -> str:
        """Name of the parent folder, e.g. ``"2018"``."""
        return self._folder

    @property
    def size(self) -> str | None:
        return self._size

    @property
    def specification(self) -> str:
        """Description of the document, e.g. ``"blue-pullover"``.

        Always lower-case; ``_`` is reserved for tags and becomes ``-``.
        """
        return self._specification

    @specification.setter
    def specification(self, value: str) -> None:
        self._specification = value.replace("_", "-").lower()

    @property
    def specification_capitalized(self) -> str:
        """Specification for display, e.g. ``"Blue Pullover"``."""
        words = [
            part
            for word in self._specification.split(" ")
            for part in word.split("-")
            if part
        ]
        return " ".join(word[:1].upper() + word[1:] for word in words)

    @property
    def tags(self) -> frozenset[str]:
        """Lower-case tags; assign a new collection to change them."""
        return frozenset(self._tags)

    @tags.setter
    def tags(self, value: Iterable[str]) -> None:
        self._tags = {tag.lower() for tag in value if tag}

    @property
    def search_term(self) -> str:
        return self._filename

    def _set_path(self, path: Path) -> None:
        self._path = path
        self._filename = path.name
        self._folder = path.parent.name

    # ------------------------------------------------------------------
    # Renaming
    # ------------------------------------------------------------------

    def get_renaming_path(self) -> RenamingPath:
        """Return the archive folder and filename for the current fields.

        The specification is used as is; slugify it beforehand if needed.

        Raises:
            MissingDateError, MissingTagsError, MissingSpecificationError:
                checked in this order.
        """
        if self.date is None:
            raise MissingDateError()
        if not self._tags:
            raise MissingTagsError()
        if not self._specification:
            raise MissingSpecificationError()

        filename = create_filename(self.date, self._specification, self._tags)
        return RenamingPath(foldername=filename[:4], filename=filename)

    def rename(self, archive_path: Path, slugify: bool) -> None:
        """Move the document to ``archive_path/<year>/<canonical name>``.

        On success the path is updated, the document is marked as tagged and
        its sorted tags are written to the tag store. A failed move keeps the
        old path and tagging status; the slugified specification stays.

        Raises:
            MissingDateError, MissingTagsError, MissingSpecificationError:
                the document is incomplete.
            AlreadyExistsError: another file occupies the target.
            FileOperationError: the filesystem failed.
        """
        if slugify:
            self.specification = slugify_text(self._specification, separator="-")

        foldername, filename = self.get_renaming_path()
        target = Path(archive_path) / foldername / filename

        try:
            self._filesystem.create_directories(target.parent)
            if self._filesystem.exists(target) and target.absolute() != self._path.absolute():
                Log.error(f"File already exists: {target}")
                raise AlreadyExistsError(f"A file already exists at {target}")
            self._filesystem.move(self._path, target)
        except OSError as exc:
            Log.exception(f"Error while moving {self._path} to {target}")
            raise FileOperationError(f"Moving {self._path} to {target} failed: {exc}") from exc

        source = self._path
        self._set_path(target)
        self.tagging_status = TaggingStatus.TAGGED

        if self._tag_store is not None:
            try:
                self._tag_store.set_tags(target, sorted(self._tags))
            except OSError as exc:
                Log.error(f"Could not write file tags of {target}: {exc}")
                raise FileOperationError(f"Writing tags of {target} failed: {exc}") from exc
            if source.absolute() != target.absolute():
                self._tag_store.discard_tags(source)

    # ------------------------------------------------------------------
    # Content parsing
    # ------------------------------------------------------------------

    def parse_content(
        self,
        options: ParsingOptions,
        extractor: BasePdfExtractor,
        tag_parser: BaseTagParser | None = None,
    ) -> None:
        """Read date and tags from the PDF text.

        A found date replaces the current one; found tags are added. Pages
        are joined without a separator, so a date or tag split across a page
        break can be misread.
        """
        if not options:
            return

        try:
            text = "".join(extractor.extract_pages(self._path))
        except PdfExtractionError as exc:
            Log.warning(f"Skipping content parsing of {self._path}: {exc}")
            return
        if not text:
            return

        if ParsingOptions.DATE in options:
            match = _date_extractor.extract(text)
            if match is not None:
                self.date = match.date

        if ParsingOptions.TAGS in options and tag_parser is not None:
            self.tags = self._tags | tag_parser.parse(text)

    # ------------------------------------------------------------------
    # Identity and ordering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __lt__(self, other: object) -> bool:
        # first by date, then by filename (descending)
        if not isinstance(other, Document):
            return NotImplemented
        if self.date is not None and other.date is not None and self.date != other.date:
            return self.date < other.date
        return self._filename > other._filename

    def is_before(self, other: Document, descriptor: SortDescriptor) -> bool:
        mine = descriptor.key.value_of(self)
        theirs = descriptor.key.value_of(other)
        return mine < theirs if descriptor.ascending else mine > theirs

    def __repr__(self) -> str:
        return f"Document(id={self._id}, path={str(self._path)!r})"
