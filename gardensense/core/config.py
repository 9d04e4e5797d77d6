from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "companion_plants.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Reference data
    CATALOG_PATH: Optional[Path] = None

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api/v1"
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def catalog_path(self) -> Path:
        return self.CATALOG_PATH or BUNDLED_CATALOG_PATH


settings = Settings()
