"""In-memory lexical similarity index ranked by Jaccard token-set overlap."""

from jaccard_suggest.config import Settings
from jaccard_suggest.domain.model import Item, SuggestResult
from jaccard_suggest.observability.logging import setup_logging
from jaccard_suggest.search.analyzers import DEFAULT_STOPWORDS, Tokenizer, default_tokenizer, get_tokenizer
from jaccard_suggest.search.scoring import jaccard
from jaccard_suggest.search.suggester import JaccardSuggester


__all__ = [
    "DEFAULT_STOPWORDS",
    "Item",
    "JaccardSuggester",
    "Settings",
    "SuggestResult",
    "Tokenizer",
    "default_tokenizer",
    "get_tokenizer",
    "jaccard",
    "setup_logging",
]
