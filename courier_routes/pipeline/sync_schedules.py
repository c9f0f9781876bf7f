from __future__ import annotations

from courier_routes.config import get_settings
from courier_routes.logging_setup import setup_logging
from courier_routes.core.schedule import ScheduleBook
from courier_routes.core.storage import SupabaseScheduleStore, JsonScheduleStore

RUN = "sync_schedules"


def run() -> int:
    """Copy collection_schedules from Supabase into the local JSON snapshot."""
    s = get_settings()
    logger = setup_logging(RUN, s.log_dir, s.log_level)

    logger.info("=== sync_schedules: Supabase -> JSON ===")
    remote = SupabaseScheduleStore.from_settings(s)
    rows = remote.load()
    if not rows:
        logger.warning("No schedules in Supabase, snapshot left untouched")
        return 0

    local = JsonScheduleStore(s.schedule_json_path)
    local.replace_all(rows)

    book = ScheduleBook(rows)
    for route in book.route_names():
        when = book.date_by_route(route) or "no date"
        logger.info(f"{route:<24} {when:<16} {len(book.areas_by_route(route))} area(s)")
    logger.info(f"Wrote {len(rows)} schedules to {s.schedule_json_path}")
    return len(rows)


if __name__ == "__main__":
    run()
