from pathlib import Path

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

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"

    # Blog
    BLOG_CONTENT_DIR: str = "web/content/blogs"
    BLOG_EXTENSION: str = ".md"
    BLOG_REQUIRE_TITLE: bool = False

    # Web assets
    TEMPLATES_DIR: str = "web/templates"
    STATIC_DIR: str = "web/static"

    # Home page
    SITE_TITLE: str = "DevOps Engineer / Full Stack Developer"
    SITE_SUBTITLE: str = (
        "I don't have time to create an actual portfolio "
        "but check out my devlogs and projects"
    )

    @property
    def content_path(self) -> Path:
        return Path(self.BLOG_CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
