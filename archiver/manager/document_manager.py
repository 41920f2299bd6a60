import uuid
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from archiver.config.settings import Settings
from archiver.document.document import Document
from archiver.document.models import DownloadStatus, ParsingOptions, Tag, TaggingStatus
from archiver.document.tag_parser import BaseTagParser, VocabularyTagParser
from archiver.filesystem.base import BaseFileSystem, BaseTagStore
from archiver.filesystem.factory import TagStoreFactory
from archiver.filesystem.local import LocalFileSystem
from archiver.logging.logger import Log
from archiver.pdf.base import BasePdfExtractor
from archiver.pdf.factory import PdfExtractorFactory
from archiver.store.document_store import DocumentStore


class DocumentManager:
    """Imports, queries and archives the documents of one store.

    Import: path -> Document (filename, file tags, optional PDF content) -> store.
    Archive: rename into the archive folder -> store update.
    """

    def __init__(
        self,
        store: DocumentStore,
        settings: Settings,
        filesystem: BaseFileSystem,
        tag_store: BaseTagStore,
        pdf_extractor: BasePdfExtractor,
        tag_parser: BaseTagParser,
    ) -> None:
        self._store = store
        self._settings = settings
        self._filesystem = filesystem
        self._tag_store = tag_store
        self._pdf_extractor = pdf_extractor
        self._tag_parser = tag_parser

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def default_parsing_options(self) -> ParsingOptions:
        options = ParsingOptions(0)
        if self._settings.parse_content_date:
            options |= ParsingOptions.DATE
        if self._settings.parse_content_tags:
            options |= ParsingOptions.TAGS
        return options

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def add_from_path(
        self,
        path: Path,
        size: int | None = None,
        download_status: DownloadStatus = DownloadStatus.local(),
        status: TaggingStatus = TaggingStatus.UNTAGGED,
        parse: ParsingOptions | None = None,
    ) -> Document:
        """Create a document for *path* and add it to the store."""
        document = self._create_document(uuid.uuid4(), path, size, download_status, status, parse)
        self._store.add(document)
        Log.info(f"Added document {document.id} from {path}")
        return document

    def update_from_path(
        self,
        path: Path,
        size: int | None = None,
        download_status: DownloadStatus = DownloadStatus.local(),
        status: TaggingStatus = TaggingStatus.UNTAGGED,
        parse: ParsingOptions | None = None,
    ) -> Document:
        """Re-read *path*, keeping the id of a document already stored there."""
        existing = self._find_by_path(Path(path))
        document_id = existing.id if existing is not None else uuid.uuid4()
        document = self._create_document(document_id, path, size, download_status, status, parse)
        self._store.update(document)
        Log.info(f"Updated document {document.id} from {path}")
        return document

    def _create_document(
        self,
        document_id: uuid.UUID,
        path: Path,
        size: int | None,
        download_status: DownloadStatus,
        status: TaggingStatus,
        parse: ParsingOptions | None,
    ) -> Document:
        document = Document(
            document_id,
            Path(path),
            size,
            download_status,
            status,
            tag_store=self._tag_store,
            filesystem=self._filesystem,
        )
        options = parse if parse is not None else self.default_parsing_options
        document.parse_content(options, self._pdf_extractor, self._tag_parser)
        return document

    def _find_by_path(self, path: Path) -> Document | None:
        return next((d for d in self._store.documents if d.path == path), None)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, documents: Document | Iterable[Document]) -> None:
        self._store.remove(documents)

    def remove_all(self, status: TaggingStatus | None = None) -> None:
        """Remove every document, or only those with the given tagging status."""
        if status is None:
            self._store.remove_all()
            return
        removed = self._store.remove_where(lambda document: document.tagging_status is status)
        Log.debug(f"Removed {removed} {status.value} document(s)")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(
        self,
        search_terms: Iterable[str] = (),
        status: TaggingStatus | None = None,
    ) -> set[Document]:
        """Documents whose filename contains all terms, optionally by status."""
        documents = self._store.filter_by_terms(search_terms)
        if status is None:
            return documents
        return {document for document in documents if document.tagging_status is status}

    def available_tags(self, search_terms: Iterable[str] = ()) -> set[Tag]:
        """Tags in use with their document counts, filtered by the terms."""
        terms = list(search_terms)
        counts = Counter(tag for document in self._store.documents for tag in document.tags)
        return {
            Tag(name, count)
            for name, count in counts.items()
            if all(term in name for term in terms)
        }

    @property
    def years(self) -> set[str]:
        """Archive folders that hold tagged documents."""
        return {
            document.folder
            for document in self._store.documents
            if document.tagging_status is TaggingStatus.TAGGED
        }

    # ------------------------------------------------------------------
    # Archiving
    # ------------------------------------------------------------------

    def archive(self, document: Document) -> None:
        """Rename *document* into the archive folder and store the result.

        Raises:
            DocumentError: see ``Document.rename``.
        """
        Log.info(f"Archiving {document.path}")
        document.rename(self._settings.archive_path, self._settings.slugify_specification)
        self._store.update(document)
        Log.info(f"Archived document {document.id} as {document.path}")


def build_document_manager(settings: Settings) -> DocumentManager:
    """Build a DocumentManager with the adapters selected in settings."""
    Log.configure(settings.log_level)
    return DocumentManager(
        store=DocumentStore(),
        settings=settings,
        filesystem=LocalFileSystem(),
        tag_store=TagStoreFactory.create(settings),
        pdf_extractor=PdfExtractorFactory.create(settings),
        tag_parser=VocabularyTagParser(settings.known_tags),
    )
