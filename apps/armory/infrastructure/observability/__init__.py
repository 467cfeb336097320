"""Observability - OpenTelemetry Tracing."""

from apps.armory.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "setup_tracing",
    "instrument_fastapi",
    "instrument_httpx",
    "shutdown_tracing",
]
