"""Application configuration loaded from .env and defaults."""
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    confidence_ratio: float = Field(0.3, ge=0, le=1)
    warn_on_term_collisions: bool = False
    log_level: str = "INFO"
    log_path: Path = PROJECT_ROOT / "data" / "logs" / "app.log"
    web_host: str = "127.0.0.1"
    web_port: int = 8787

    @property
    def log_dir(self) -> Path:
        return self.log_path.parent

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"

def get_settings() -> Settings:
    return Settings()
