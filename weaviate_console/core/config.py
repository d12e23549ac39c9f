from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Console configuration.

    Environment variables are loaded from the process environment and a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    # ========== Weaviate Connection ==========
    weaviate_url: Optional[str] = Field(
        default=None,
        description="Default Weaviate endpoint used until a reconnect (required)"
    )
    weaviate_api_key: Optional[str] = Field(
        default=None,
        description="Weaviate API key for authentication (optional)"
    )
    weaviate_grpc_port: int = Field(
        default=50051,
        description="Weaviate gRPC port used by the typed client"
    )

    # ========== Timeouts (seconds) ==========
    probe_timeout_seconds: float = Field(
        default=5.0,
        description="Timeout for the reachability and metadata probes of a reconnect"
    )
    weaviate_init_timeout: int = 10
    weaviate_query_timeout: int = 60
    weaviate_insert_timeout: int = 60

    # ========== Browsing Policy ==========
    page_size: int = Field(default=100, ge=1, description="Default rows per page")
    max_page_size: int = Field(default=250, ge=1, description="Largest page a caller may request")
    sort_date_properties_only: bool = Field(
        default=True,
        description="Only allow sorting on properties with a date-like data type"
    )
    seed_collection_name: str = Field(
        default="TestCollection",
        description="Reserved name of the demo collection"
    )

    # ========== Logging ==========
    log_dir: Path = Path("logs")
    log_level: str = "INFO"


settings = Settings()
