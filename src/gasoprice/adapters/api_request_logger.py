"""Opt-in request/response tracing, enabled by GASOPRICE_LOG_REQUESTS=true."""

import json
import logging
import os

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Whether GASOPRICE_LOG_REQUESTS is set to "true" (any case)."""
    return os.getenv("GASOPRICE_LOG_REQUESTS", "").lower() == "true"


def _redact(headers: dict[str, str]) -> dict[str, str]:
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(method: str, url: str, headers: dict[str, str] | None = None) -> None:
    """Trace an outgoing request.

    Args:
        method: HTTP method.
        url: Absolute request URL.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    message = f"API Request: {method} {url}"
    if headers:
        message += f"\nHeaders: {json.dumps(_redact(headers), indent=2, ensure_ascii=False)}"
    logger.info(message)


def log_api_response(url: str, status: int, body_size: int, elapsed_seconds: float) -> None:
    """Trace a completed response as a one-line summary."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} from {url} ({body_size} bytes in {elapsed_seconds:.2f}s)")
