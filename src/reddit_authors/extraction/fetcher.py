# ABOUTME: Sequential about.json fetcher over a single reused httpx client
# ABOUTME: Transport faults become failed FetchResults instead of aborting the batch

from collections.abc import Sequence

import httpx

from reddit_authors.config import Config
from reddit_authors.core.models import FetchResult
from reddit_authors.extraction.base import ProgressCallback
from reddit_authors.utils.logging import get_logger, log_api_call

ABOUT_SUFFIX = "about.json"
ACCEPT_JSON = {"Accept": "application/json"}


def build_about_url(url: str, suffix: str = ABOUT_SUFFIX) -> str:
    """Append *suffix* to *url* with exactly one ``/`` between them."""
    base = url if url.endswith("/") else url + "/"
    return base + suffix


class AboutJsonFetcher:
    """Fetches ``<url>/about.json`` for each post URL, one request at a time."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        suffix: str = ABOUT_SUFFIX,
        timeout: float = 5.0,
        user_agent: str = "reddit-authors",
        follow_redirects: bool = False,
        fail_on_http_error: bool = False,
    ):
        self.suffix = suffix
        self.fail_on_http_error = fail_on_http_error
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": user_agent, **ACCEPT_JSON},
            timeout=timeout,
            follow_redirects=follow_redirects,
        )
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: Config, client: httpx.AsyncClient | None = None) -> "AboutJsonFetcher":
        return cls(
            client,
            suffix=config.about_suffix,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
            follow_redirects=config.follow_redirects,
            fail_on_http_error=config.fail_on_http_error,
        )

    @log_api_call("about.json", url_param="target_url")
    async def _get(self, target_url: str) -> httpx.Response:
        response = await self.http_client.get(target_url, headers=ACCEPT_JSON)
        if self.fail_on_http_error and response.is_error:
            response.raise_for_status()
        return response

    async def fetch(self, url: str) -> FetchResult:
        """GET the about.json document for *url*.

        The body is returned whatever the status code, unless ``fail_on_http_error``
        is set. Connection errors, timeouts and malformed request URLs produce a
        result with ``body=None`` and the error recorded.
        """
        target_url = build_about_url(url, self.suffix)
        try:
            response = await self._get(target_url)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self.logger.warning("Request rejected", url=url, target_url=target_url, status_code=status)
            return FetchResult(url=url, target_url=target_url, status_code=status, error=f"HTTP {status}")
        except (httpx.RequestError, httpx.InvalidURL) as e:
            self.logger.warning(
                "Request failed", url=url, target_url=target_url, error=str(e), error_type=type(e).__name__
            )
            return FetchResult(url=url, target_url=target_url, error=f"{type(e).__name__}: {e}")

        return FetchResult(
            url=url,
            target_url=target_url,
            body=response.content.decode("utf-8", errors="replace"),
            status_code=response.status_code,
        )

    async def fetch_all(self, urls: Sequence[str], on_progress: ProgressCallback | None = None) -> list[FetchResult]:
        """Fetch every URL in order, awaiting each request before sending the next."""
        total = len(urls)
        results: list[FetchResult] = []
        for done, url in enumerate(urls, start=1):
            results.append(await self.fetch(url))
            if on_progress is not None:
                on_progress(done, total)

        self.logger.info(
            "Fetched about.json documents",
            total=total,
            succeeded=sum(1 for result in results if result.ok),
        )
        return results

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AboutJsonFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
