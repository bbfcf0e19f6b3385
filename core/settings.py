from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, PostgresDsn, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CustomSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


class AppSettings(CustomSettings):
    ENVIRONMENT: Literal["local", "dev", "prod", "test"] = Field(default="local")
    LOG_LEVEL: str = Field(default="INFO")
    JSON_LOGS: bool = Field(default=True)


class PgDbSettings(CustomSettings):
    POSTGRES_ENGINE: str = Field(default="postgresql+asyncpg")
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: SecretStr = Field(default="postgres")
    POSTGRES_DB: str = Field(default="currency")
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: PostgresDsn | str = Field(default="")
    # Create tables on startup instead of relying on Alembic (local/test runs)
    AUTO_CREATE_SCHEMA: bool = Field(default=False)

    @model_validator(mode="before")
    def validate_postgres_dsn(cls, data: dict):
        if isinstance(data, dict) and not data.get("DATABASE_URL"):
            password = data.get("POSTGRES_PASSWORD", "postgres")
            if isinstance(password, SecretStr):
                password = password.get_secret_value()
            _built_uri = PostgresDsn.build(
                scheme=data.get("POSTGRES_ENGINE", "postgresql+asyncpg"),
                username=data.get("POSTGRES_USER", "postgres"),
                password=password,
                host=data.get("POSTGRES_HOST", "localhost"),
                port=int(data.get("POSTGRES_PORT", 5432)),
                path=data.get("POSTGRES_DB", "currency"),
            ).unicode_string()
            data["DATABASE_URL"] = _built_uri
        return data


class ExchangeRateSettings(CustomSettings):
    """Configuration for the external exchange-rate provider.

    Env vars:
    - EXCHANGE_RATE_API_KEY (optional; without it only fallback rates are served)
    - EXCHANGE_RATE_API_URL
    """

    EXCHANGE_RATE_API_KEY: SecretStr = Field(default="")
    EXCHANGE_RATE_API_URL: str = Field(default="https://v6.exchangerate-api.com/v6")


class AuthSettings(CustomSettings):
    """scrypt parameters for password hashing.

    Defaults match Node's crypto.scrypt so existing hashes keep verifying.
    """

    SCRYPT_N: int = Field(default=16384)
    SCRYPT_R: int = Field(default=8)
    SCRYPT_P: int = Field(default=1)
    SCRYPT_KEY_LENGTH: int = Field(default=64)
    SALT_BYTES: int = Field(default=16)


class AdapterSettings(CustomSettings):
    FUNCTION_PATH_PREFIX: str = Field(default="/.netlify/functions/api")


class Settings(BaseModel):
    APP: AppSettings = Field(default_factory=AppSettings)
    DATABASE: PgDbSettings = Field(default_factory=PgDbSettings)
    EXCHANGE_RATE: ExchangeRateSettings = Field(default_factory=ExchangeRateSettings)
    AUTH: AuthSettings = Field(default_factory=AuthSettings)
    ADAPTER: AdapterSettings = Field(default_factory=AdapterSettings)


@lru_cache
def get_settings() -> Settings:
    return Settings()
