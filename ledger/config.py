from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    drive_file_id: str = "1Kx_AiOzfwXMLGN-8NgehFecv3dYki0Ma"
    proxy_base: str = "https://api.allorigins.win/raw?url="
    snapshot_path: str = "data/ledger_snapshot.json"
    request_timeout_s: float = 15.0
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return Settings()
