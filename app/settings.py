from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    """Developer overrides in .env.local win over the deployed .env."""
    local = Path(".env.local")
    return str(local) if local.exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Hosted Postgres behind the blog_posts table
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DATABASE: str = "postgres"
    BLOG_POSTS_TABLE: str = "blog_posts"

    # Markdown documents served when the store has nothing
    CONTENT_DIR: str = "content/blog"
    CONTENT_GLOB: str = "*.md"

    EXCERPT_LENGTH: int = 200
    LOG_LEVEL: str = "INFO"

    @property
    def postgres_url(self) -> str:
        credentials = f"{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}"
        address = f"{self.POSTGRES_HOST}:{self.POSTGRES_PORT}"
        return f"postgresql://{credentials}@{address}/{self.POSTGRES_DATABASE}"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


settings = Settings()


def get_settings() -> Settings:
    """Dependency hook so tests can override settings."""
    return settings
