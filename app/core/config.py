"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./jobs.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class LedgerSettings(BaseModel):
    starting_balance: int = Field(default=1000, ge=0)
    stable_application_cost: int = Field(default=5, ge=0)


class MaintenanceSettings(BaseModel):
    reseed_enabled: bool = True
    reseed_count: int = Field(default=100, gt=0)


class VerificationSettings(BaseModel):
    code_ttl_seconds: int = Field(default=600, gt=0)
    subject: str = "Your VoSo Verification Code"


class SmtpSettings(BaseModel):
    host: str = "smtp.gmail.com"
    port: int = 465
    use_ssl: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: int = 10


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Job Swipe Server"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    ledger: LedgerSettings = LedgerSettings()
    maintenance: MaintenanceSettings = MaintenanceSettings()
    verification: VerificationSettings = VerificationSettings()
    smtp: SmtpSettings = SmtpSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def starting_balance(self) -> int:
        return self.ledger.starting_balance

    @property
    def stable_application_cost(self) -> int:
        return self.ledger.stable_application_cost


@lru_cache()
def get_settings() -> Settings:
    return Settings()
