from pathlib import Path
from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site
    BASE_URL: str = ""
    CONTENT_DIR: str = "content/posts"
    OUTPUT_DIR: str = "output"
    TEMPLATES_DIR: str = "templates"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Dispatch server
    PORT: int = 8080
    GH_HOST_SECRET: str = ""

    # GitHub
    GITHUB_TOKEN: str = ""
    GITHUB_REPOSITORY: str = ""
    GITHUB_API_URL: str = "https://api.github.com"

    @property
    def github_owner_repo(self) -> Tuple[str, str]:
        owner, _, name = self.GITHUB_REPOSITORY.partition("/")
        return owner, name


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
