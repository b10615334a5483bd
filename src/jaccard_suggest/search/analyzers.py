"""Analyzer utilities for the suggestion index.

Tokenizers turn raw text into an ordered list of normalized tokens and
filters post-process that stream. The suggester composes them through
:class:`AnalyzerPipeline` so callers can swap either part independently.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
import unicodedata
from typing import Protocol

import regex


Tokenizer = Callable[[str], Sequence[str]]


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


DEFAULT_STOPWORDS = frozenset(
    [
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "but",
        "by",
        "for",
        "if",
        "in",
        "into",
        "is",
        "it",
        "no",
        "not",
        "of",
        "on",
        "or",
        "such",
        "that",
        "the",
        "their",
        "then",
        "there",
        "these",
        "they",
        "this",
        "to",
        "was",
        "will",
        "with",
    ]
)

_DIACRITICS = regex.compile(r"\p{Diacritic}")


def normalize_text(text: str) -> str:
    """Lowercase, decompose (NFKD) and drop characters with the Diacritic property."""

    return _DIACRITICS.sub("", unicodedata.normalize("NFKD", text.lower()))


class UnicodeWordTokenizer:
    """Regex tokenizer yielding letter runs and number runs of normalized text.

    A token is one or more letters optionally followed by marks, or one or
    more numbers. Everything else separates tokens.
    """

    def __init__(self, pattern: str = r"\p{L}+\p{M}*|\p{N}+") -> None:
        self.pattern = regex.compile(pattern)

    def __call__(self, text: str) -> list[str]:
        if not text:
            return []
        return self.pattern.findall(normalize_text(text))


class WhitespaceTokenizer:
    """Lowercase and split on whitespace only."""

    def __call__(self, text: str) -> list[str]:
        return text.lower().split()


class KeywordTokenizer:
    """Treat the entire (stripped, lowercased) input as a single token."""

    def __call__(self, text: str) -> list[str]:
        value = text.strip().lower()
        if not value:
            return []
        return [value]


class StopFilter:
    """Removes stopwords from the stream.

    Matching is exact and case-sensitive; the default tokenizer lowercases
    before this filter runs.
    """

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        self.stopwords = frozenset(stopwords) if stopwords is not None else DEFAULT_STOPWORDS

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            if token not in self.stopwords:
                yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[str]:
        stream: Iterable[str] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)

    def token_set(self, text: str) -> frozenset[str]:
        return frozenset(self(text))


default_tokenizer: Tokenizer = UnicodeWordTokenizer()

_TOKENIZER_FACTORIES: dict[str, Callable[[], Tokenizer]] = {
    "default": UnicodeWordTokenizer,
    "whitespace": WhitespaceTokenizer,
    "keyword": KeywordTokenizer,
}


def available_tokenizers() -> list[str]:
    return sorted(_TOKENIZER_FACTORIES)


def get_tokenizer(name: str | None) -> Tokenizer:
    """Return tokenizer by name, defaulting to the Unicode word tokenizer."""

    if name is None:
        return _TOKENIZER_FACTORIES["default"]()
    normalized = name.lower()
    if normalized not in _TOKENIZER_FACTORIES:
        msg = f"Unknown tokenizer '{name}'. Available: {available_tokenizers()}"
        raise ValueError(msg)
    return _TOKENIZER_FACTORIES[normalized]()


def build_analyzer(tokenizer: Tokenizer, stopwords: Iterable[str] | None = None) -> AnalyzerPipeline:
    """Pair a tokenizer with a stopword filter."""

    return AnalyzerPipeline(tokenizer, [StopFilter(stopwords)])
