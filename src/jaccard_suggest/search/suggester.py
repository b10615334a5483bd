"""In-memory Jaccard suggestion index.

Keeps three structures in lockstep:

- ``_items``: stored records, one per position; positions are never reused
- ``_tokens``: the cached token set for each position
- ``_index``: token -> positions postings used to gather candidates

Deleted records become tombstones (empty text, empty token set) so every
position recorded in the postings stays valid.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from jaccard_suggest.config import Settings
from jaccard_suggest.domain.model import Item, SuggestResult
from jaccard_suggest.observability.context import bind_context
from jaccard_suggest.observability.metrics import (
    MUTATION_COUNT,
    SUGGEST_COUNT,
    SUGGEST_LATENCY,
    track_latency,
)
from jaccard_suggest.observability.tracing import create_span
from jaccard_suggest.search.analyzers import (
    DEFAULT_STOPWORDS,
    AnalyzerPipeline,
    Tokenizer,
    build_analyzer,
    get_tokenizer,
)
from jaccard_suggest.search.inverted_index import InvertedIndex
from jaccard_suggest.search.scoring import jaccard


logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 0.0
DEFAULT_TOP_K = 5


class JaccardSuggester:
    """Suggest stored records whose token sets best overlap a query.

    Not thread-safe: callers mutating one instance from several threads must
    serialize access themselves.
    """

    def __init__(
        self,
        data: Iterable[str | Item] = (),
        *,
        tokenizer: Tokenizer | None = None,
        stopwords: Iterable[str] | None = None,
        min_score: float | None = None,
        top_k: int | None = None,
        settings: Settings | None = None,
        name: str = "default",
    ) -> None:
        self.settings = settings
        self.name = name
        if settings is None:
            default_tokenizer, default_stopwords = get_tokenizer(None), DEFAULT_STOPWORDS
            default_min_score, default_top_k = DEFAULT_MIN_SCORE, DEFAULT_TOP_K
        else:
            default_tokenizer, default_stopwords = settings.get_tokenizer(), settings.get_stopwords()
            default_min_score, default_top_k = settings.min_score, settings.top_k
        self.tokenizer: Tokenizer = tokenizer if tokenizer is not None else default_tokenizer
        self.stopwords = frozenset(stopwords) if stopwords is not None else default_stopwords
        self.min_score = min_score if min_score is not None else default_min_score
        self.top_k = top_k if top_k is not None else default_top_k

        self._analyzer: AnalyzerPipeline = build_analyzer(self.tokenizer, self.stopwords)
        self._items: list[Item] = []
        self._tokens: list[frozenset[str]] = []
        self._index = InvertedIndex()

        for record in data:
            self.add(record)

    @classmethod
    def from_settings(
        cls, data: Iterable[str | Item] = (), settings: Settings | None = None, **kwargs
    ) -> JaccardSuggester:
        """Build a suggester whose unset options come from ``settings``.

        Without an explicit ``settings`` the environment (and ``.env``) is read.
        """
        return cls(data, settings=settings or Settings(), **kwargs)

    def __len__(self) -> int:
        return len(self._items)

    def size(self) -> int:
        """Number of positions ever allocated, tombstones included."""
        return len(self._items)

    def live_count(self) -> int:
        return sum(1 for item in self._items if item.text)

    def get(self, item_id: str) -> Item | None:
        position = self._find(item_id)
        if position is None:
            return None
        return self._items[position]

    def tokens_at(self, position: int) -> frozenset[str]:
        if position < 0:
            raise IndexError(f"position {position} is negative")
        return self._tokens[position]

    def add(self, record: str | Item) -> Item:
        """Store ``record`` at the next position and index its tokens.

        A bare string gets the current size as its id.
        """
        if isinstance(record, str):
            item = Item(id=str(len(self._items)), text=record)
        else:
            item = record
        with bind_context(index=self.name):
            tokens = self._analyzer.token_set(item.text)

            position = len(self._items)
            self._items.append(item)
            self._tokens.append(tokens)
            self._index.add(position, tokens)
            MUTATION_COUNT.labels(index=self.name, operation="add", found="true").inc()
            logger.debug("Added item %r at position %d with %d tokens", item.id, position, len(tokens))
        return item

    def remove(self, item_id: str) -> bool:
        """Tombstone the first item with ``item_id``.

        Returns False when no stored item (live or tombstoned) has that id.
        """
        with bind_context(index=self.name):
            position = self._find(item_id)
            if position is None:
                self._record_miss("remove", item_id)
                return False

            self._index.discard(position, self._tokens[position])
            self._items[position] = Item(id=item_id, text="", meta=None)
            self._tokens[position] = frozenset()
            MUTATION_COUNT.labels(index=self.name, operation="remove", found="true").inc()
            logger.debug("Removed item %r at position %d", item_id, position)
            return True

    def update(self, item_id: str, text: str) -> bool:
        """Replace the text of the first item with ``item_id`` and reindex it.

        Updating a tombstone revives it in place. The id and meta are kept.
        """
        with bind_context(index=self.name):
            position = self._find(item_id)
            if position is None:
                self._record_miss("update", item_id)
                return False

            tokens = self._analyzer.token_set(text)
            self._index.discard(position, self._tokens[position])
            self._tokens[position] = tokens
            self._index.add(position, tokens)
            self._items[position].text = text
            MUTATION_COUNT.labels(index=self.name, operation="update", found="true").inc()
            logger.debug("Updated item %r at position %d with %d tokens", item_id, position, len(tokens))
            return True

    def suggest(
        self,
        query: str,
        *,
        tokenizer: Tokenizer | None = None,
        stopwords: Iterable[str] | None = None,
        min_score: float | None = None,
        top_k: int | None = None,
    ) -> list[SuggestResult]:
        """Rank stored items by Jaccard similarity to ``query``.

        Only items sharing at least one token with the query are scored.
        Results scoring below ``min_score`` are dropped; equal scores keep
        ascending position order. A negative ``top_k`` is treated as zero.
        """
        if tokenizer is None and stopwords is None:
            analyzer = self._analyzer
        else:
            analyzer = build_analyzer(
                tokenizer if tokenizer is not None else self.tokenizer,
                stopwords if stopwords is not None else self.stopwords,
            )
        threshold = self.min_score if min_score is None else min_score
        limit = max(self.top_k if top_k is None else top_k, 0)

        with bind_context(index=self.name), track_latency(SUGGEST_LATENCY, index=self.name), create_span(
            "suggester.suggest", attributes={"suggester.index": self.name}
        ) as span:
            query_tokens = analyzer.token_set(query)
            span.set_attribute("suggester.query_tokens", len(query_tokens))
            if not query_tokens:
                return self._finish("empty_query", [])

            candidates = self._index.candidates(query_tokens)
            span.set_attribute("suggester.candidates", len(candidates))
            if not candidates:
                return self._finish("no_candidates", [])

            results: list[SuggestResult] = []
            for position in sorted(candidates):
                tokens = self._tokens[position]
                if not tokens:
                    continue
                score = jaccard(query_tokens, tokens)
                if score >= threshold:
                    results.append(SuggestResult(item=self._items[position], score=score, position=position))

            results.sort(key=lambda result: result.score, reverse=True)
            ranked = results[:limit]
            span.set_attribute("suggester.results", len(ranked))
            logger.debug(
                "Query matched %d candidates, kept %d, returning %d",
                len(candidates),
                len(results),
                len(ranked),
            )
            return self._finish("hit" if ranked else "filtered", ranked)

    def verify_index(self) -> list[str]:
        """List mismatches between cached token sets and postings."""
        return self._index.check(self._tokens)

    def _find(self, item_id: str) -> int | None:
        for position, item in enumerate(self._items):
            if item.id == item_id:
                return position
        return None

    def _record_miss(self, operation: str, item_id: str) -> None:
        MUTATION_COUNT.labels(index=self.name, operation=operation, found="false").inc()
        logger.debug("No item with id %r to %s", item_id, operation)

    def _finish(self, outcome: str, results: list[SuggestResult]) -> list[SuggestResult]:
        SUGGEST_COUNT.labels(index=self.name, outcome=outcome).inc()
        return results
