"""Domain layer for the suggestion index."""

from jaccard_suggest.domain.model import Item, SuggestResult


__all__ = ["Item", "SuggestResult"]
