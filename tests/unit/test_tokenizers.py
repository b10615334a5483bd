"""Unit tests for tokenizers, the stopword filter and the analyzer pipeline."""

import pytest

from jaccard_suggest.search.analyzers import (
    DEFAULT_STOPWORDS,
    AnalyzerPipeline,
    KeywordTokenizer,
    StopFilter,
    UnicodeWordTokenizer,
    WhitespaceTokenizer,
    available_tokenizers,
    build_analyzer,
    default_tokenizer,
    get_tokenizer,
    normalize_text,
)


@pytest.mark.unit
class TestUnicodeWordTokenizer:
    """Tests for the default segmentation."""

    def test_lowercases_and_drops_punctuation(self):
        assert default_tokenizer("Hello, World!") == ["hello", "world"]

    def test_empty_and_whitespace_input(self):
        assert default_tokenizer("") == []
        assert default_tokenizer("   \t\n") == []

    def test_strips_diacritics(self):
        assert default_tokenizer("Crème Brûlée") == ["creme", "brulee"]
        assert default_tokenizer("Ñandú") == ["nandu"]

    def test_compatibility_decomposition(self):
        # NFKD expands the "fi" ligature
        assert default_tokenizer("ﬁle") == ["file"]

    def test_letters_and_numbers_split(self):
        assert default_tokenizer("abc123def") == ["abc", "123", "def"]
        assert default_tokenizer("café-au-lait 2024") == ["cafe", "au", "lait", "2024"]

    def test_underscore_and_symbols_are_separators(self):
        assert default_tokenizer("snake_case + kebab-case") == ["snake", "case", "kebab", "case"]

    def test_keeps_duplicates_in_order(self):
        assert default_tokenizer("to be or not to be") == ["to", "be", "or", "not", "to", "be"]

    def test_non_latin_letters(self):
        assert default_tokenizer("Привет мир") == ["привет", "мир"]

    def test_spacing_and_modifier_diacritics_are_removed(self):
        # U+02BC modifier apostrophe and U+30FC prolonged sound mark carry the Diacritic property
        assert default_tokenizer("コーヒー donʼt") == ["コヒ", "dont"]
        assert normalize_text("a^b") == "ab"

    def test_deterministic(self):
        tokenizer = UnicodeWordTokenizer()
        text = "Déjà vu, 42 times"
        assert tokenizer(text) == tokenizer(text) == ["deja", "vu", "42", "times"]

    def test_normalize_text(self):
        assert normalize_text("ÉCOLE") == "ecole"


@pytest.mark.unit
class TestOtherTokenizers:
    def test_whitespace_tokenizer(self):
        assert WhitespaceTokenizer()("Foo,  Bar") == ["foo,", "bar"]

    def test_keyword_tokenizer(self):
        assert KeywordTokenizer()("  New York ") == ["new york"]
        assert KeywordTokenizer()("   ") == []

    def test_get_tokenizer_by_name(self):
        assert isinstance(get_tokenizer(None), UnicodeWordTokenizer)
        assert isinstance(get_tokenizer("Whitespace"), WhitespaceTokenizer)
        assert isinstance(get_tokenizer("keyword"), KeywordTokenizer)

    def test_get_tokenizer_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown tokenizer 'bogus'"):
            get_tokenizer("bogus")

    def test_available_tokenizers(self):
        assert available_tokenizers() == ["default", "keyword", "whitespace"]


@pytest.mark.unit
class TestStopFilter:
    def test_default_stopwords(self):
        stop = StopFilter()
        assert stop.stopwords is DEFAULT_STOPWORDS
        assert list(stop(["the", "cat", "and", "the", "hat"])) == ["cat", "hat"]

    def test_custom_stopwords_replace_defaults(self):
        stop = StopFilter(["cat"])
        assert list(stop(["the", "cat"])) == ["the"]

    def test_empty_set_disables_filtering(self):
        assert list(StopFilter([])(["the", "a", "of"])) == ["the", "a", "of"]

    def test_matching_is_case_sensitive(self):
        assert list(StopFilter()(["The", "the"])) == ["The"]


@pytest.mark.unit
class TestAnalyzerPipeline:
    def test_pipeline_applies_filters_in_order(self):
        pipeline = AnalyzerPipeline(default_tokenizer, [StopFilter(["b"]), StopFilter(["c"])])
        assert pipeline("a b c d") == ["a", "d"]

    def test_pipeline_without_filters(self):
        assert AnalyzerPipeline(default_tokenizer)("The End") == ["the", "end"]

    def test_build_analyzer_token_set(self):
        analyzer = build_analyzer(default_tokenizer)
        assert analyzer.token_set("the apple and the pie apple") == frozenset({"apple", "pie"})

    def test_only_stopwords_yield_empty_set(self):
        assert build_analyzer(default_tokenizer).token_set("the a of") == frozenset()
