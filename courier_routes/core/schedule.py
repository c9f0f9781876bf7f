from __future__ import annotations
import copy
from datetime import date

from courier_routes.core.models import RouteSchedule, IRELAND
from courier_routes.core.postcode import normalize_city
from courier_routes.core.tables import default_schedules


def ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_collection_date(d: date) -> str:
    """date(2026, 4, 21) -> '21st of April'"""
    return f"{d.day}{ordinal_suffix(d.day)} of {d.strftime('%B')}"


class ScheduleBook:
    """
    Collection schedule keyed by route name.

    Rows are copied on the way in, so mutating a book never touches the
    bundled defaults or the caller's list. Mutations return True/False
    instead of raising, the admin screens report that back to the user.
    """
    def __init__(self, schedules: list[RouteSchedule] | None = None):
        rows = default_schedules() if schedules is None else schedules
        self.schedules: list[RouteSchedule] = [copy.deepcopy(s) for s in rows]

    def _find(self, route: str | None) -> RouteSchedule | None:
        if not route:
            return None
        for s in self.schedules:
            if s.route == route:
                return s
        return None

    def __contains__(self, route: str) -> bool:
        return self._find(route) is not None

    def __len__(self) -> int:
        return len(self.schedules)

    def route_names(self) -> list[str]:
        return [s.route for s in self.schedules]

    def areas_by_route(self, route: str | None) -> list[str]:
        s = self._find(route)
        return list(s.areas) if s else []

    def date_by_route(self, route: str | None) -> str | None:
        s = self._find(route)
        if not s or not s.date:
            return None
        return s.date

    def routes_by_country(self, country: str | None) -> list[RouteSchedule]:
        if not country or country == "All":
            return list(self.schedules)
        return [s for s in self.schedules if s.country == country]

    def ireland_cities(self) -> list[str]:
        cities: list[str] = []
        for s in self.routes_by_country(IRELAND):
            for c in s.areas:
                if c not in cities:
                    cities.append(c)
        return sorted(cities)

    def has_ireland_routes(self) -> bool:
        return bool(self.routes_by_country(IRELAND))

    def _ireland_row(self, city: str | None) -> RouteSchedule | None:
        name = normalize_city(city)
        if not name:
            return None
        for s in self.routes_by_country(IRELAND):
            if name in (normalize_city(a) for a in s.areas):
                return s
        return None

    def route_for_ireland_city(self, city: str | None) -> str | None:
        s = self._ireland_row(city)
        return s.route if s else None

    def date_for_ireland_city(self, city: str | None) -> str | None:
        s = self._ireland_row(city)
        return (s.date or None) if s else None

    # -- mutations -----------------------------------------------------------

    def update_route_date(self, route: str, new_date: str) -> bool:
        s = self._find(route)
        if not s:
            return False
        s.date = new_date
        return True

    def add_route(self, route: str, date_text: str, areas: list[str], country: str) -> bool:
        if not route or self._find(route):
            return False
        self.schedules.append(
            RouteSchedule(route=route, date=date_text, areas=list(areas), country=country)
        )
        return True

    def remove_route(self, route: str) -> bool:
        s = self._find(route)
        if not s:
            return False
        self.schedules.remove(s)
        return True

    def add_area_to_route(self, route: str, area: str) -> bool:
        s = self._find(route)
        if not s or not area or area in s.areas:
            return False
        s.areas.append(area)
        return True

    def remove_area_from_route(self, route: str, area: str) -> bool:
        s = self._find(route)
        if not s or area not in s.areas:
            return False
        s.areas.remove(area)
        return True
