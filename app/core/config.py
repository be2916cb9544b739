
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "IT Vendor Database"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite for local dev, any SQLAlchemy async URL otherwise)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./vendors_dev.db",
        alias="DATABASE_URL",
    )

    # Where the HTML views send their API calls. Unset = same process.
    api_base_url: str | None = Field(default=None, alias="API_BASE_URL")
    api_timeout: float = Field(default=10.0, alias="API_TIMEOUT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
