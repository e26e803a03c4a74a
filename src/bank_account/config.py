from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    initial_balance: float = Field(default=0, ge=0)

    # Random balance oracle settings
    oracle_min_balance: int = 0
    oracle_max_balance: int = 100
    oracle_failure_rate: float = Field(default=0.5, ge=0.0, le=1.0)
    oracle_latency_seconds: float = Field(default=0.0, ge=0.0)
    oracle_seed: int | None = None

    # Prometheus exporter settings
    metrics_enabled: bool = False
    metrics_host: str = "0.0.0.0"
    metrics_port: int = 9090


settings = Settings()
