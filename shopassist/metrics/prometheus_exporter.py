"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


assistant_messages_total = Counter(
    "assistant_messages_total",
    "Total number of chat messages processed by the assistant.",
    ["intent"],
)

catalog_fetch_failures_total = Counter(
    "catalog_fetch_failures_total",
    "Catalog provider calls that failed and were answered with an empty result.",
    ["operation"],
)

catalog_invalid_records_total = Counter(
    "catalog_invalid_records_total",
    "Product records dropped from a catalog response because they failed validation.",
    ["operation"],
)

catalog_snapshot_size = Gauge(
    "catalog_snapshot_size",
    "Number of products in the most recent catalog snapshot.",
)
