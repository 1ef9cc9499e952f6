"""Configuration settings for Site Search."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Search provider
    search_service_url: str = Field(
        default="http://localhost:8080/search",
        description="Search service endpoint queried with ?q=<query>",
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="HTTP transport timeout of the search client"
    )

    # Presentation
    page_title: str = Field(default="Search", description="Title of the search page")
    decouple_excerpt: bool = Field(
        default=False,
        description="Show excerpts for posts without a publish date",
    )

    # Output settings
    output_dir: str = Field(default="./output", description="Rendered page output directory")

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = {
        "env_prefix": "SITE_SEARCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
