from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any

from courier_routes.core.models import ENGLAND, IRELAND
from courier_routes.core.postcode import normalize_postcode, normalize_city
from courier_routes.core.routing import lookup_postal_code, lookup_ireland_city
from courier_routes.core.schedule import ScheduleBook
from courier_routes.core.tables import AREA_NOT_SPECIFIED, RouteTables, DEFAULT_TABLES

EMPTY = "EMPTY"
RESTRICTED = "RESTRICTED"
UNRECOGNIZED = "UNRECOGNIZED"
RESOLVED = "RESOLVED"

RESTRICTED_TITLE = "Restricted Area"
RESTRICTED_MESSAGE = (
    "Sorry, we currently don't service this area. "
    "Please contact us for alternative options."
)
UNRECOGNIZED_TITLE = "Area Not Recognized"
UNRECOGNIZED_MESSAGE = (
    "We couldn't identify this area. "
    "Please check your postcode or contact us for assistance."
)
UNAVAILABLE_TITLE = "Area Not Available"


@dataclass
class LookupView:
    state: str
    query: str = ""
    title: str | None = None
    message: str | None = None
    route: str | None = None
    date: str | None = None
    areas: list[str] = field(default_factory=list)

    @property
    def visible(self) -> bool:
        return self.state != EMPTY

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def displayable_areas(areas) -> list[str]:
    # the placeholder on its own says nothing, hide it
    out = [a for a in areas if a]
    if out == [AREA_NOT_SPECIFIED]:
        return []
    return out


def describe_lookup(
    postcode: str | None,
    schedule: ScheduleBook | None = None,
    min_length: int = 2,
    tables: RouteTables = DEFAULT_TABLES,
) -> LookupView:
    """
    Display state for the postcode box, re-evaluated on every change:
      EMPTY        -> nothing typed, or too short to judge
      RESTRICTED   -> prefix is excluded from service (wins over a route)
      UNRECOGNIZED -> no route and long enough to say so
      RESOLVED     -> route + date + areas
    """
    pc = normalize_postcode(postcode)
    if not pc:
        return LookupView(state=EMPTY)

    r = lookup_postal_code(pc, schedule, tables)

    if r.is_restricted:
        return LookupView(state=RESTRICTED, query=pc, title=RESTRICTED_TITLE, message=RESTRICTED_MESSAGE)

    if not r.route:
        if len(pc) >= min_length:
            return LookupView(state=UNRECOGNIZED, query=pc, title=UNRECOGNIZED_TITLE, message=UNRECOGNIZED_MESSAGE)
        return LookupView(state=EMPTY, query=pc)

    return LookupView(
        state=RESOLVED,
        query=pc,
        title="Collection Route",
        route=r.route,
        date=r.date,
        areas=displayable_areas(r.areas),
    )


def describe_ireland_lookup(
    city: str | None,
    schedule: ScheduleBook | None = None,
    support_phone: str = "",
    tables: RouteTables = DEFAULT_TABLES,
) -> LookupView:
    name = normalize_city(city)
    if not name:
        return LookupView(state=EMPTY)

    r = lookup_ireland_city(name, schedule, tables)
    if not r.route:
        return LookupView(
            state=UNRECOGNIZED,
            query=name,
            title=UNAVAILABLE_TITLE,
            message=_unavailable_message(support_phone),
        )
    return LookupView(state=RESOLVED, query=name, title="Collection Information",
                      route=r.route, date=r.date, areas=list(r.areas))


def _unavailable_message(support_phone: str) -> str:
    msg = "Your area is not available but will be considered."
    if support_phone:
        msg += f" Contact support to make a booking: {support_phone}"
    return msg


@dataclass
class CollectionInfo:
    route: str | None
    collection_date: str | None
    message: str

    @property
    def available(self) -> bool:
        return bool(self.route and self.collection_date)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["available"] = self.available
        return d


def collection_info(
    country: str | None,
    postal_code: str | None = None,
    city: str | None = None,
    schedule: ScheduleBook | None = None,
    support_phone: str = "",
    tables: RouteTables = DEFAULT_TABLES,
) -> CollectionInfo:
    """Route + collection date for a booking's pickup address."""
    route = None
    date = None

    if country == ENGLAND and postal_code:
        r = lookup_postal_code(postal_code, schedule, tables)
        # restricted areas are never offered a collection
        if not r.is_restricted:
            route, date = r.route, r.date
    elif country == IRELAND and city:
        r = lookup_ireland_city(city, schedule, tables)
        route, date = r.route, r.date

    if not route or not date:
        return CollectionInfo(route=route, collection_date=None, message=_unavailable_message(support_phone))

    return CollectionInfo(
        route=route,
        collection_date=date,
        message=f"Your shipment will be collected via the {route}. Collection date: {date}",
    )
