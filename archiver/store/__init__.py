from archiver.store.document_store import DocumentStore
from archiver.store.search import Searchable, Searcher, filter_by_term, filter_by_terms

__all__ = ["DocumentStore", "Searchable", "Searcher", "filter_by_term", "filter_by_terms"]
