from __future__ import annotations

from courier_routes.core.models import LookupResult
from courier_routes.core.postcode import (
    extract_prefix,
    normalize_city,
    is_valid_uk_postcode,
    can_identify_partial_postcode,
)
from courier_routes.core.schedule import ScheduleBook
from courier_routes.core.tables import RouteTables, DEFAULT_TABLES

# All lookups are pure: a miss is None / [] / False, bad input never raises.

_DEFAULT_BOOK: ScheduleBook | None = None


def _book(schedule: ScheduleBook | None) -> ScheduleBook:
    global _DEFAULT_BOOK
    if schedule is not None:
        return schedule
    if _DEFAULT_BOOK is None:
        _DEFAULT_BOOK = ScheduleBook()
    return _DEFAULT_BOOK


def get_route_for_postal_code(postcode: str | None, tables: RouteTables = DEFAULT_TABLES) -> str | None:
    prefix = extract_prefix(postcode)
    if not prefix:
        return None
    # exact key only, "SW" never falls back to "S"
    return tables.postcode_routes.get(prefix)


def get_areas_from_postal_code(postcode: str | None, tables: RouteTables = DEFAULT_TABLES) -> list[str]:
    route = get_route_for_postal_code(postcode, tables)
    if not route:
        return []
    return list(tables.route_areas.get(route, []))


def is_restricted_postal_code(postcode: str | None, tables: RouteTables = DEFAULT_TABLES) -> bool:
    prefix = extract_prefix(postcode)
    if not prefix:
        return False
    return prefix in tables.restricted_prefixes


def get_route_for_ireland_city(city: str | None, tables: RouteTables = DEFAULT_TABLES) -> str | None:
    name = normalize_city(city)
    if not name:
        return None
    return tables.ireland_city_routes.get(name)


def get_ireland_route_date(route: str | None, tables: RouteTables = DEFAULT_TABLES) -> str | None:
    if not route:
        return None
    return tables.ireland_route_dates.get(route)


def get_date_by_postcode(
    postcode: str | None,
    schedule: ScheduleBook | None = None,
    tables: RouteTables = DEFAULT_TABLES,
) -> str | None:
    route = get_route_for_postal_code(postcode, tables)
    if not route:
        return None
    return _book(schedule).date_by_route(route)


def lookup_postal_code(
    postcode: str | None,
    schedule: ScheduleBook | None = None,
    tables: RouteTables = DEFAULT_TABLES,
) -> LookupResult:
    route = get_route_for_postal_code(postcode, tables)
    return LookupResult(
        route=route,
        date=_book(schedule).date_by_route(route) if route else None,
        areas=tuple(get_areas_from_postal_code(postcode, tables)),
        is_restricted=is_restricted_postal_code(postcode, tables),
        is_valid=is_valid_uk_postcode(postcode),
        can_identify=can_identify_partial_postcode(postcode),
    )


def lookup_ireland_city(
    city: str | None,
    schedule: ScheduleBook | None = None,
    tables: RouteTables = DEFAULT_TABLES,
) -> LookupResult:
    """
    Ireland has no postcode prefixes, the city name is the key.

    A book holding Ireland routes decides which cities are served (the
    cities admins add or remove on a route are its areas). A book without
    any falls back to the bundled city table. The date comes from the
    book and then from the bundled Ireland dates.
    """
    book = _book(schedule)
    if book.has_ireland_routes():
        route = book.route_for_ireland_city(city)
        date = book.date_for_ireland_city(city)
    else:
        route = get_route_for_ireland_city(city, tables)
        date = book.date_by_route(route)
    if route and not date:
        date = get_ireland_route_date(route, tables)
    name = normalize_city(city)
    return LookupResult(
        route=route,
        date=date,
        areas=(name,) if route else (),
        is_restricted=False,
        is_valid=route is not None,
        can_identify=len(name) >= 2,
    )
