from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


# ---------- APP ----------
class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    env: str = Field("dev", alias="ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(5000, alias="PORT")
    api_prefix: str = Field("/api", alias="API_PREFIX")
    cors_origins: List[str] = Field(["*"], alias="CORS_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @property
    def debug(self) -> bool:
        return self.env == "dev"

# ---------- NEWS API ----------
class NewsApiSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    key: str | None = Field(None, alias="NEWS_API_KEY")
    base_url: str = Field("https://newsapi.org/v2", alias="NEWS_API_URL")
    timeout_sec: float = Field(5.0, alias="NEWS_API_TIMEOUT")
    page_size: int = Field(15, alias="NEWS_API_PAGE_SIZE")
    language: str = Field("en", alias="NEWS_API_LANGUAGE")

    @property
    def configured(self) -> bool:
        return bool(self.key)

# ---------- SUMMARY ----------
class SummarySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
    delay_sec: float = Field(2.0, alias="SUMMARY_DELAY_SEC")


class Settings:
    app = AppSettings()
    news_api = NewsApiSettings()
    summary = SummarySettings()


settings = Settings()
