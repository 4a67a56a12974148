"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dataset Configuration
    dataset_path: str = Field(
        default="data/kg_triples_validated.json",
        description="Local JSON array of triples, read once at startup"
    )
    dataset_url: str | None = Field(
        default=None,
        description="Fetch the dataset over HTTP instead of reading dataset_path"
    )
    dataset_timeout: float = 30.0

    # Query Parameters
    query_result_limit: int = Field(
        default=100,
        ge=1,
        description="Max triples returned per query, in dataset order"
    )

    # Graph Parameters
    overview_sample_limit: int = Field(
        default=2000,
        ge=1,
        description="Leading triples rendered by the overview graph"
    )
    node_search_limit: int = 20

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
