from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    database_url: str = "sqlite:///./rodo_audit.db"
    rate_limit: str = "100 per 15 minutes"
    cors_origins: str = "http://localhost:3000"
    max_body_bytes: int = 10 * 1024 * 1024


settings = Settings()
