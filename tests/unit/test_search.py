from dataclasses import dataclass

from archiver.store.search import Searchable, Searcher, filter_by_term, filter_by_terms


@dataclass(frozen=True)
class _Item:
    search_term: str


class _ItemSearcher(Searcher[_Item]):
    def __init__(self, items: set[_Item]) -> None:
        self._items = items

    @property
    def all_search_elements(self) -> set[_Item]:
        return set(self._items)


ITEMS = {
    _Item("2010-05-12--tax-return__steuer.pdf"),
    _Item("2018-01-01--blue-pullover__clothes_invoice.pdf"),
    _Item("2019-09-02--tax-invoice__invoice_steuer.pdf"),
    _Item("scan1.pdf"),
}


class TestFilterByTerm:
    def test_substring_match(self) -> None:
        result = filter_by_term(ITEMS, "tax")

        assert {item.search_term for item in result} == {
            "2010-05-12--tax-return__steuer.pdf",
            "2019-09-02--tax-invoice__invoice_steuer.pdf",
        }

    def test_case_sensitive(self) -> None:
        assert filter_by_term(ITEMS, "TAX") == set()

    def test_empty_term_matches_everything(self) -> None:
        assert filter_by_term(ITEMS, "") == ITEMS

    def test_returns_new_set(self) -> None:
        result = filter_by_term(ITEMS, "")

        assert result is not ITEMS


class TestFilterByTerms:
    def test_all_terms_must_match(self) -> None:
        result = filter_by_terms(ITEMS, ["tax", "invoice"])

        assert result == {_Item("2019-09-02--tax-invoice__invoice_steuer.pdf")}

    def test_term_order_does_not_matter(self) -> None:
        assert filter_by_terms(ITEMS, ["steuer", "2010"]) == filter_by_terms(ITEMS, ["2010", "steuer"])

    def test_equals_intersection_of_single_terms(self) -> None:
        expected = filter_by_term(ITEMS, "invoice") & filter_by_term(ITEMS, "2018")

        assert filter_by_terms(ITEMS, ["invoice", "2018"]) == expected

    def test_empty_term_list_returns_all(self) -> None:
        assert filter_by_terms(ITEMS, []) == ITEMS

    def test_input_is_untouched(self) -> None:
        items = set(ITEMS)

        filter_by_terms(items, ["tax"])

        assert items == ITEMS


class TestSearcher:
    def test_filters_its_elements(self) -> None:
        searcher = _ItemSearcher(ITEMS)

        assert searcher.filter_by_term("scan") == {_Item("scan1.pdf")}
        assert searcher.filter_by_terms(["pullover", "clothes"]) == {
            _Item("2018-01-01--blue-pullover__clothes_invoice.pdf")
        }

    def test_item_is_searchable(self) -> None:
        assert isinstance(_Item("x"), Searchable)
