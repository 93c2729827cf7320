"""HTTP client for Ministry fuel price API requests."""

import asyncio
import logging
import time

import aiohttp

from gasoprice.adapters.api_request_logger import log_api_request, log_api_response
from gasoprice.adapters.minetur_api.constants import DEFAULT_HEADERS
from gasoprice.domain.errors import NetworkError

logger = logging.getLogger(__name__)


class MineturHttpClient:
    """Issues GET requests and returns raw response bodies.

    Every failure surfaces as NetworkError; nothing is retried here.
    """

    def __init__(self, session: aiohttp.ClientSession, timeout_seconds: float = 60.0) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            timeout_seconds: Total per-request timeout in seconds.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _log_error_response(self, response: aiohttp.ClientResponse, url: str) -> str:
        """Log error response details and return a short description."""
        error_text = await response.text(errors="replace")
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Fuel price API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
        return f"HTTP {response.status} from {url}"

    async def get(self, url: str) -> bytes:
        """GET a URL and return the body.

        Args:
            url: Absolute URL.

        Returns:
            The raw response body.

        Raises:
            NetworkError: On connection failure, timeout or a non-2xx status.
        """
        log_api_request("GET", url, headers=DEFAULT_HEADERS)
        started = time.monotonic()

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if not 200 <= response.status < 300:
                    cause = await self._log_error_response(response, url)
                    raise NetworkError(cause, status_code=response.status)
                body = await response.read()
        except asyncio.TimeoutError as e:
            logger.warning(f"Timed out fetching {url}")
            raise NetworkError(f"Timed out fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error fetching {url}: {e}")
            raise NetworkError(f"Could not reach {url}: {e}") from e

        log_api_response(url, response.status, len(body), time.monotonic() - started)
        return body
