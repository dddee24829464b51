from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class RecipeSource(Enum):
    local = "local"
    edamam = "edamam"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    assets_dir: Path = ROOT / "assets"
    html_dir: Path = ROOT / "assets" / "html"
    seed_file: Path | None = ROOT / "assets" / "data" / "recipes.json"
    db_url: str = "sqlite+aiosqlite:///recipes.db"
    recipe_source: RecipeSource = RecipeSource.local
    edamam_app_id: str = ""
    edamam_app_key: str = ""
    search_limit: int = 20
    secret_key: str = "change-me"
    session_ttl_minutes: int = 60 * 12
    log_level: str = "INFO"
