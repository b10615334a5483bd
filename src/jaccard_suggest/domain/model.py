"""Domain models for the suggestion index.

``Item`` is an entity: the store keeps a reference to the caller's object and
``update`` rewrites its text in place. ``SuggestResult`` is an immutable value
object describing one ranked match.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A stored text record.

    ``id`` is chosen by the caller and is not required to be unique; lookups
    by id resolve to the first stored match.
    """

    id: str
    text: str
    meta: Any | None = None


class SuggestResult(BaseModel):
    """Value object for a single ranked suggestion."""

    model_config = ConfigDict(frozen=True)

    item: Item
    score: float = Field(description="Jaccard similarity against the query token set")
    position: int = Field(ge=0, description="Stable store position of the matched item")
