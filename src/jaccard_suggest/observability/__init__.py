"""Observability module for logging, tracing and metrics."""

from jaccard_suggest.observability.context import bind_context, get_trace_context, set_trace_context, trace_context
from jaccard_suggest.observability.logging import JsonFormatter, configure_logging, setup_logging
from jaccard_suggest.observability.metrics import (
    MUTATION_COUNT,
    SUGGEST_COUNT,
    SUGGEST_LATENCY,
    get_metrics,
    get_metrics_content_type,
    init_metrics,
    track_latency,
)
from jaccard_suggest.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "MUTATION_COUNT",
    "SUGGEST_COUNT",
    "SUGGEST_LATENCY",
    "JsonFormatter",
    "bind_context",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_metrics",
    "init_tracing",
    "set_trace_context",
    "setup_logging",
    "trace_context",
    "track_latency",
]
