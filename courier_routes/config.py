from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

def _get(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v

@dataclass(frozen=True)
class Settings:
    # Supabase (OPTIONAL - without it schedules come from the JSON snapshot)
    supabase_url: str | None
    supabase_key: str | None
    schedule_table: str
    schedule_json_path: Path

    # Web
    admin_token: str | None
    support_phone: str
    port: int

    # Lookup display
    min_lookup_length: int

    log_dir: Path
    log_level: str

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

def get_settings() -> Settings:
    return Settings(
        supabase_url=_get("SUPABASE_URL"),
        supabase_key=_get("SUPABASE_KEY"),
        schedule_table=_get("SCHEDULE_TABLE", "collection_schedules") or "collection_schedules",
        schedule_json_path=Path(_get("SCHEDULE_JSON_PATH", "data/state/schedules.json") or "data/state/schedules.json"),

        admin_token=_get("ADMIN_TOKEN"),
        support_phone=_get("SUPPORT_PHONE", "+353 871954910") or "+353 871954910",
        port=int(_get("PORT", "5000") or "5000"),

        min_lookup_length=int(_get("MIN_LOOKUP_LENGTH", "2") or "2"),

        log_dir=Path(_get("LOG_DIR", "data/out") or "data/out"),
        log_level=_get("LOG_LEVEL", "INFO") or "INFO",
    )
