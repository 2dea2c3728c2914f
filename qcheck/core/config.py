from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path

class Settings(BaseSettings):
    app_name: str = Field(default="QCheck Company API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    # Display name of the target database, only used in diagnostic log text
    db_name: str = Field(default="qcheck", alias="DB_NAME")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma or space separated list of allowed CORS origins")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")
    startup_db_check: bool = Field(default=True, alias="STARTUP_DB_CHECK")
    startup_db_check_delay: float = Field(default=1.0, ge=0, alias="STARTUP_DB_CHECK_DELAY")
    auto_apply_migrations: bool = Field(default=True, alias="AUTO_APPLY_MIGRATIONS")
    seed_demo_data: bool = Field(default=False, alias="SEED_DEMO_DATA")

    class Config:
        # Load env from the project root .env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        extra = "ignore"

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            try:
                import json
                loaded = json.loads(s)
                if isinstance(loaded, list):
                    return [str(e).strip() for e in loaded if str(e).strip()]
            except ValueError:
                pass
        return [e.strip() for e in s.replace(" ", ",").split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback dev defaults if none provided
        if not items:
            return ["http://localhost:4200", "http://127.0.0.1:4200"]
        # Dev convenience: ensure both localhost and 127.0.0.1 variants for same ports
        augmented = set(items)
        for origin in items:
            if origin.startswith("http://localhost:"):
                augmented.add("http://127.0.0.1:" + origin.rsplit(":", 1)[1])
            if origin.startswith("http://127.0.0.1:"):
                augmented.add("http://localhost:" + origin.rsplit(":", 1)[1])
        return sorted(augmented)

    @property
    def is_dev(self) -> bool:
        return self.env.lower() in {"dev", "development"}

settings = Settings()  # type: ignore
