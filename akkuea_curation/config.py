from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

# .env lives at the repository root (config.py → akkuea_curation → root)
_ROOT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILE = _ROOT_DIR / ".env"


class Settings(BaseSettings):
    # Curation provider
    curation_provider: str = "xai"
    xai_api_key: str = ""  # empty is valid: curation falls back to Pending
    xai_base_url: str = "https://api.x.ai/v1"
    xai_model: str = "grok-3-mini"
    curation_timeout_s: float = 12.0

    # Supabase (resource persistence; in-memory store when unset)
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    supabase_service_role_key: str = ""
    supabase_resources_table: str = "resources"

    @model_validator(mode="after")
    def resolve_service_key(self) -> "Settings":
        """SUPABASE_SERVICE_ROLE_KEY wins over SUPABASE_SERVICE_KEY."""
        if self.supabase_service_role_key:
            self.supabase_service_key = self.supabase_service_role_key
        return self

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_key)

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "https://akkuea.com",
        ],
        description="CORS allowed origins",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        if isinstance(v, str):
            return [o.strip() for o in v.split(",")]
        return v

    # Writes that trigger a provider call (POST/PUT) per client IP
    write_rate_limit_per_minute: int = 30

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10MB
    log_backup_count: int = 5

    model_config = {
        "env_file": str(_ENV_FILE),
        "env_file_encoding": "utf-8",
        "extra": "ignore",  # shared .env also carries frontend-only variables
    }


settings = Settings()
