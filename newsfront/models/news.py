from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


class SearchQuery(BaseModel):
    model_config = _FROZEN

    term: str = ""
    requested_page: int = Field(1, ge=1)


class ArticleSource(BaseModel):
    model_config = _FROZEN

    # NewsAPI sends null for sources it has no slug for
    id: str | int | float | bool | None = None
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value):
        return "" if value is None else value


class Article(BaseModel):
    model_config = _FROZEN

    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = Field("", alias="urlToImage")
    published_at: datetime | None = Field(None, alias="publishedAt")
    content: str = ""

    @field_validator("author", "title", "description", "url", "image_url", "content", mode="before")
    @classmethod
    def _null_strings(cls, value):
        return "" if value is None else value

    def format_published_date(self) -> str:
        """Publication date as e.g. 'March 4, 2024'."""
        if self.published_at is None:
            return ""
        return f"{self.published_at:%B} {self.published_at.day}, {self.published_at.year}"


class ResultSet(BaseModel):
    model_config = _FROZEN

    status: str = Field(strict=True)
    total_results: int = Field(ge=0, alias="totalResults", strict=True)
    articles: list[Article]

    @classmethod
    def empty(cls) -> "ResultSet":
        return cls(status="", total_results=0, articles=[])


class SearchView(BaseModel):
    """Everything the results page needs for one search."""

    model_config = _FROZEN

    query: SearchQuery
    total_pages: int = Field(0, ge=0)
    results: ResultSet = Field(default_factory=ResultSet.empty)

    @property
    def is_last_page(self) -> bool:
        return self.query.requested_page >= self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.query.requested_page > 1

    @property
    def next_page(self) -> int:
        return self.query.requested_page + 1

    @property
    def prev_page(self) -> int:
        return self.query.requested_page - 1
