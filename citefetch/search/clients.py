"""Blocking HTTP clients for the search (resolution) and record services."""

import logging
from typing import Optional

import httpx

from citefetch.core.config import ServiceConfig
from citefetch.core.errors import TransportError
from citefetch.search.models import CitationQuery
from citefetch.search.query import build_record_url, build_search_url

logger = logging.getLogger(__name__)


# ── Transport ────────────────────────────────────────────────────────


def fetch_text(
    client: httpx.Client, url: str, timeout: Optional[float] = None
) -> str:
    """GET ``url`` once and return the body as text.

    Any network failure, unusable URL or non-2xx status becomes a
    TransportError.
    """
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        response = client.get(url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise TransportError(
            f"HTTP {status} from {url}", url=url, status_code=status
        ) from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc

    logger.debug("Received %d chars from %s", len(response.text), url)
    return response.text


class _ServiceClient:
    """Owns (or borrows) one httpx.Client for a single service."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.config = config or ServiceConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# ── Resolution Service ───────────────────────────────────────────────


class SearchClient(_ServiceClient):
    """Issues one PubMed ESearch request per citation query."""

    def search(self, query: CitationQuery, timeout: Optional[float] = None) -> str:
        url = build_search_url(self.config, query)
        logger.info(
            "Searching for %s vol. %s p. %s", query.journal, query.volume, query.page
        )
        return fetch_text(self._client, url, timeout)


# ── Record Service ───────────────────────────────────────────────────


class RecordClient(_ServiceClient):
    """Retrieves the citation record for one PMID."""

    def fetch(self, pmid: str, timeout: Optional[float] = None) -> str:
        url = build_record_url(self.config, pmid)
        logger.info("Fetching record for PMID %s", pmid)
        return fetch_text(self._client, url, timeout)
