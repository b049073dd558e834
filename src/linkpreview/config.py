from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    request_timeout_seconds: float = 20
    follow_redirects: bool = True
    max_redirects: int = 10
    user_agent: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="LINKPREVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def client_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if (self.user_agent or "").strip():
            headers["User-Agent"] = self.user_agent.strip()
        return headers


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
