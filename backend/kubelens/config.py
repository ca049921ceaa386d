from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KUBELENS_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"
    log_json: bool = False
    log_file: str | None = None
    # Cluster access
    kube_context: str | None = None
    kube_config_path: str | None = Field(default=None, alias="KUBE_CONFIG_PATH")
    service_account_token_path: str | None = None
    # None lists across all namespaces
    default_namespace: str | None = Field(default=None, description="Namespace used when the CLI gets none")

    @computed_field
    @property
    def is_debug(self) -> bool:
        return self.app_env == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]
