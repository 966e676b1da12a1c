class NewsFrontError(Exception):
    """Base class for errors raised while serving a search."""


class ConfigurationError(NewsFrontError):
    """Raised when required settings are missing at startup."""


class UpstreamUnavailable(NewsFrontError):
    """Raised when the News API cannot be reached (DNS, refused connection, timeout)."""

    def __init__(self, term: str, page: int, reason: str = ""):
        self.term = term
        self.page = page
        super().__init__(f"News API unreachable for query '{term}' (page {page}): {reason}")


class UpstreamError(NewsFrontError):
    """Raised when the News API answers with a non-success status."""

    def __init__(self, status_code: int, term: str, page: int):
        self.status_code = status_code
        self.term = term
        self.page = page
        super().__init__(f"News API returned status {status_code} for query '{term}' (page {page})")


class DecodeError(NewsFrontError):
    """Raised when a News API response body does not match the expected schema."""

    def __init__(self, term: str, page: int, reason: str = ""):
        self.term = term
        self.page = page
        super().__init__(f"Could not decode News API response for query '{term}' (page {page}): {reason}")
