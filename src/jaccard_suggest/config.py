"""Centralized configuration for jaccard-suggest using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jaccard_suggest.search.analyzers import (
    DEFAULT_STOPWORDS,
    Tokenizer,
    available_tokenizers,
    get_tokenizer,
)


class Settings(BaseSettings):
    """Default suggester options loaded from environment variables.

    Read only through ``JaccardSuggester.from_settings`` or an explicit
    ``settings=`` argument. Constructor arguments always win over these
    values; the settings only fill in what the caller leaves unset.
    """

    model_config = SettingsConfigDict(
        env_prefix="JACCARD_SUGGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Ranking
    min_score: float = Field(default=0.0, ge=0.0, le=1.0, description="Minimum Jaccard score kept in results")
    top_k: int = Field(default=5, ge=0, description="Maximum number of suggestions returned")

    # Analysis
    tokenizer: str = Field(default="default", description="Registered tokenizer name")
    stopwords: str = Field(default="", description="Comma-separated stopwords replacing the built-in list")
    disable_stopwords: bool = Field(default=False, description="Skip stopword filtering entirely")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("tokenizer")
    @classmethod
    def _check_tokenizer(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in available_tokenizers():
            raise ValueError(f"Unknown tokenizer '{value}'. Available: {available_tokenizers()}")
        return normalized

    def get_stopwords(self) -> frozenset[str]:
        """Resolve the effective stopword set.

        Returns:
            Empty set when filtering is disabled, the custom list when one is
            configured, otherwise the built-in defaults.
        """
        if self.disable_stopwords:
            return frozenset()
        if not self.stopwords:
            return DEFAULT_STOPWORDS
        return frozenset(word.strip() for word in self.stopwords.split(",") if word.strip())

    def get_tokenizer(self) -> Tokenizer:
        return get_tokenizer(self.tokenizer)
