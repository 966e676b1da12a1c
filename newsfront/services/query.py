import re
from collections.abc import Mapping

from newsfront.models.news import SearchQuery

_INTEGER = re.compile(r"[+-]?[0-9]+")
# strconv-style overflow: anything past a signed 64-bit integer is malformed
_MAX_PAGE = 2**63 - 1


def _parse_page(raw: str | None) -> int:
    if raw is None or not _INTEGER.fullmatch(raw):
        return 1
    try:
        page = int(raw, 10)
    except ValueError:
        return 1
    return page if 1 <= page <= _MAX_PAGE else 1


def normalize_query(params: Mapping[str, str]) -> SearchQuery:
    """Build a SearchQuery from raw `q` and `page` request parameters.

    The term is kept byte-for-byte; an absent, malformed or non-positive page
    falls back to 1.
    """
    return SearchQuery(
        term=params.get("q", ""),
        requested_page=_parse_page(params.get("page")),
    )
