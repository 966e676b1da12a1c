import requests
from pydantic import ValidationError

from newsfront.config import Settings, require_api_key
from newsfront.exceptions import DecodeError, UpstreamError, UpstreamUnavailable
from newsfront.http_client import get_session
from newsfront.logging import logger
from newsfront.models.news import ResultSet, SearchQuery, SearchView

PAGE_SIZE = 20


def total_pages(total_results: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed to show total_results, page_size at a time."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if total_results <= 0:
        return 0
    return -(-total_results // page_size)


class NewsSearchService:
    """Runs one search against the News API `everything` endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float,
        session: requests.Session | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else get_session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "NewsSearchService":
        return cls(
            api_key=require_api_key(settings),
            base_url=settings.news_api_base,
            timeout=settings.news_api_timeout,
        )

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/everything"

    def build_request(self, query: SearchQuery) -> requests.PreparedRequest:
        params = {
            "q": query.term,
            "pageSize": PAGE_SIZE,
            "page": query.requested_page,
            "apiKey": self._api_key,
            "sortBy": "publishedAt",
            "language": "en",
        }
        return self._session.prepare_request(requests.Request("GET", self.endpoint, params=params))

    def search(self, query: SearchQuery) -> SearchView:
        if not query.term:
            return SearchView(query=query)

        log = logger.bind(term=query.term, page=query.requested_page)
        try:
            resp = self._session.send(self.build_request(query), timeout=self._timeout)
        except requests.RequestException as e:
            log.warning("news_search_upstream_unavailable", error=str(e))
            raise UpstreamUnavailable(query.term, query.requested_page, str(e)) from e

        if resp.status_code != requests.codes.ok:
            log.warning("news_search_upstream_error", status_code=resp.status_code)
            raise UpstreamError(resp.status_code, query.term, query.requested_page)

        try:
            results = ResultSet.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            log.error("news_search_decode_failed", error=str(e))
            raise DecodeError(query.term, query.requested_page, str(e)) from e

        return SearchView(
            query=query,
            total_pages=total_pages(results.total_results),
            results=results,
        )
