"""Application settings, loaded from the environment or a ``.env`` file."""
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///data/gdp.db"

    JWT_SECRET: SecretStr = SecretStr("change-me")
    JWT_ALGORITHM: str = "HS256"

    API_BASE_URL: str = "http://127.0.0.1:8000"
    API_TIMEOUT: float = 10.0

    DATA_DIR: Path = Path("data")
    LOG_LEVEL: str = "INFO"

    @property
    def data_dir(self) -> Path:
        return self.DATA_DIR

    @property
    def storage_dir(self) -> Path:
        """Client-side persisted state (token, favorites)."""
        return self.DATA_DIR / "storage"


settings = Settings()
