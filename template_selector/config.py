from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # System
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    # Recommendation defaults
    DEFAULT_LIMIT: int = 5
    DEFAULT_MIN_SCORE: int = 40

    # Manifest source (read per request, never cached)
    MANIFEST_PATH: Path = FIXTURES_DIR / "templates_manifest.json"
    DEMO_ITEMS_PATH: Path = FIXTURES_DIR / "demo_articles.json"

    # HTTP surface
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8001

settings = Settings()
