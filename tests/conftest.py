"""Shared test fixtures and configuration."""

import os

import pytest

from jaccard_suggest import Item, JaccardSuggester


ENV_PREFIX = "JACCARD_SUGGEST_"

DESSERTS = ["apple pie", "banana smoothie", "chocolate cake", "apple juice"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep settings deterministic: no prefixed env vars and no stray .env file."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def desserts():
    """Suggester over the four-item dessert corpus with default options."""
    return JaccardSuggester(DESSERTS)


@pytest.fixture
def catalog():
    """Suggester built from full records carrying ids and meta."""
    return JaccardSuggester(
        [
            Item(id="u1", text="red wool sweater", meta={"sku": 101}),
            Item(id="u2", text="blue cotton shirt", meta={"sku": 102}),
            Item(id="u3", text="red cotton scarf", meta={"sku": 103}),
        ]
    )
