from __future__ import annotations
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from supabase import create_client

from courier_routes.config import Settings
from courier_routes.core.models import RouteSchedule
from courier_routes.core.schedule import ScheduleBook
from courier_routes.core.tables import default_schedules

logger = logging.getLogger(__name__)


class ScheduleStoreError(RuntimeError):
    pass


def _load_json(path: Path, default):
    if not path.exists():
        return default
    return json.loads(path.read_text(encoding="utf-8"))

def _save_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


class JsonScheduleStore:
    """collection_schedules rows kept in a local JSON file."""
    def __init__(self, path: Path):
        self.path = Path(path)

    def _rows(self) -> list[dict[str, Any]]:
        try:
            return _load_json(self.path, default=[])
        except (OSError, ValueError) as e:
            raise ScheduleStoreError(f"Could not read {self.path}: {e}") from e

    def _write(self, rows: list[dict[str, Any]]) -> None:
        try:
            _save_json(self.path, rows)
        except OSError as e:
            raise ScheduleStoreError(f"Could not write {self.path}: {e}") from e

    def load(self) -> list[RouteSchedule]:
        return [RouteSchedule.from_dict(r) for r in self._rows()]

    def replace_all(self, schedules: list[RouteSchedule]) -> None:
        now = _now()
        self._write([{**s.to_row(), "updated_at": now} for s in schedules])

    def update_date(self, route: str, new_date: str) -> bool:
        rows = self._rows()
        hit = False
        for r in rows:
            if r.get("route") == route:
                r["pickup_date"] = new_date
                r["updated_at"] = _now()
                hit = True
        if hit:
            self._write(rows)
        return hit

    def add_route(self, schedule: RouteSchedule) -> bool:
        rows = self._rows()
        if any(r.get("route") == schedule.route for r in rows):
            return False
        now = _now()
        rows.append({**schedule.to_row(), "created_at": now, "updated_at": now})
        self._write(rows)
        return True

    def remove_route(self, route: str) -> bool:
        rows = self._rows()
        kept = [r for r in rows if r.get("route") != route]
        if len(kept) == len(rows):
            return False
        self._write(kept)
        return True

    def set_areas(self, route: str, areas: list[str]) -> bool:
        rows = self._rows()
        hit = False
        for r in rows:
            if r.get("route") == route:
                r["areas"] = list(areas)
                r["updated_at"] = _now()
                hit = True
        if hit:
            self._write(rows)
        return hit


class SupabaseScheduleStore:
    """collection_schedules rows in Supabase."""
    def __init__(self, client, table: str = "collection_schedules"):
        self.sb = client
        self.table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseScheduleStore":
        if not settings.has_supabase:
            raise RuntimeError("Missing env var: SUPABASE_URL / SUPABASE_KEY")
        return cls(create_client(settings.supabase_url, settings.supabase_key), settings.schedule_table)

    def _execute(self, what: str, query):
        try:
            return query.execute()
        except Exception as e:
            raise ScheduleStoreError(f"{what} failed on {self.table}: {e}") from e

    def load(self) -> list[RouteSchedule]:
        res = self._execute(
            "select",
            self.sb.table(self.table).select("*").order("updated_at", desc=True),
        )
        rows = res.data or []
        logger.info(f"Retrieved {len(rows)} collection schedules")
        return [RouteSchedule.from_dict(r) for r in rows]

    def update_date(self, route: str, new_date: str) -> bool:
        res = self._execute(
            "update",
            self.sb.table(self.table)
            .update({"pickup_date": new_date, "updated_at": _now()})
            .eq("route", route),
        )
        return bool(res.data)

    def add_route(self, schedule: RouteSchedule) -> bool:
        existing = self._execute(
            "select",
            self.sb.table(self.table).select("id").eq("route", schedule.route),
        )
        if existing.data:
            return False
        row = schedule.to_row()
        row.pop("id", None)
        res = self._execute("insert", self.sb.table(self.table).insert(row))
        return bool(res.data)

    def remove_route(self, route: str) -> bool:
        res = self._execute("delete", self.sb.table(self.table).delete().eq("route", route))
        return bool(res.data)

    def set_areas(self, route: str, areas: list[str]) -> bool:
        res = self._execute(
            "update",
            self.sb.table(self.table)
            .update({"areas": list(areas), "updated_at": _now()})
            .eq("route", route),
        )
        return bool(res.data)


def get_store(settings: Settings):
    if settings.has_supabase:
        return SupabaseScheduleStore.from_settings(settings)
    return JsonScheduleStore(settings.schedule_json_path)


def load_schedule_book(store) -> ScheduleBook:
    """
    Persisted schedule if there is one, otherwise the bundled defaults.
    A store that can't be reached is logged and treated as empty.
    """
    try:
        rows = store.load()
    except ScheduleStoreError as e:
        logger.warning(f"Schedule store unavailable, using bundled defaults: {e}")
        return ScheduleBook(default_schedules())

    if not rows:
        logger.warning("Schedule store is empty, using bundled defaults")
        return ScheduleBook(default_schedules())
    return ScheduleBook(rows)


def seed_defaults(store) -> int:
    """
    Writes the bundled schedule into an empty store so admin edits have
    rows to act on. Returns the number of routes written (0 if the store
    already had data).
    """
    if store.load():
        return 0
    n = 0
    for s in default_schedules():
        if store.add_route(s):
            n += 1
    return n
