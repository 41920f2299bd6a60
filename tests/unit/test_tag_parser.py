from archiver.document.tag_parser import VocabularyTagParser


class TestVocabularyTagParser:
    def test_finds_known_tags_case_insensitive(self) -> None:
        parser = VocabularyTagParser(["invoice", "Tax"])

        assert parser.parse("INVOICE for your tax return") == {"invoice", "tax"}

    def test_matches_whole_words_only(self) -> None:
        parser = VocabularyTagParser(["tax"])

        assert parser.parse("taxi receipt") == set()

    def test_hyphen_is_a_word_boundary(self) -> None:
        parser = VocabularyTagParser(["tax"])

        assert parser.parse("tax-return 2018") == {"tax"}

    def test_empty_vocabulary(self) -> None:
        assert VocabularyTagParser([]).parse("anything") == set()
