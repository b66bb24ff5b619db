# src/sheet_outline/sources/sheet_client.py

import logging
from time import monotonic

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from sheet_outline.observability import names
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook

from .config import SheetConfig

logger = logging.getLogger(__name__)


class SheetClient:
    """Fetches the raw CSV text of a published spreadsheet export.

    Transport-only retries: network failures are retried, HTTP error
    statuses are raised immediately. The configured timeout is sent with
    every request, so it also holds for an injected client. Parsing is the
    caller's job.
    """

    def __init__(
        self,
        config: SheetConfig,
        client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._config = config
        self._client = client or httpx.AsyncClient(
            timeout=config.timeout, follow_redirects=True
        )
        self._owns_client = client is None
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized SheetClient with url=%s, timeout=%s, max_retries=%s",
            config.url,
            config.timeout,
            config.max_retries,
        )

    async def fetch_text(self) -> str:
        start = monotonic()
        logger.info("Fetching sheet from %s", self._config.url)

        try:
            response = await self._get()
            response.raise_for_status()
        except httpx.HTTPError:
            self.metrics_hook.increment(names.SHEET_ERRORS_TOTAL)
            logger.exception("Sheet fetch failed: %s", self._config.url)
            raise

        text = response.text
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SHEET_FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SHEET_REQUESTS_TOTAL)
        logger.info(
            "Fetched sheet: status=%d, length=%d, latency=%.0fms",
            response.status_code,
            len(text),
            elapsed_ms,
        )
        return text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SheetClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _get(self) -> httpx.Response:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._config.max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.get(
                    self._config.url, timeout=self._config.timeout
                )
