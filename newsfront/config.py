from functools import lru_cache

from pydantic_settings import BaseSettings

from newsfront.exceptions import ConfigurationError


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    news_api_key: str = ""
    news_api_base: str = "https://newsapi.org/v2"
    news_api_timeout: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()


def require_api_key(settings: Settings) -> str:
    key = settings.news_api_key
    if not key:
        raise ConfigurationError(
            "News API key not configured. Get one at https://newsapi.org and set NEWS_API_KEY in .env"
        )
    return key
