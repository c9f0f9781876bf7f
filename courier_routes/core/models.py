from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Any

ENGLAND = "England"
IRELAND = "Ireland"

@dataclass
class RouteSchedule:
    route: str
    date: str            # free text, e.g. "21st of April"
    areas: list[str] = field(default_factory=list)
    country: str = ENGLAND
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_row(self) -> dict[str, Any]:
        # collection_schedules stores the date as pickup_date
        row = {
            "route": self.route,
            "pickup_date": self.date,
            "areas": list(self.areas),
            "country": self.country,
        }
        if self.id:
            row["id"] = self.id
        return row

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "RouteSchedule":
        return RouteSchedule(
            route=str(d["route"]),
            date=str(d.get("pickup_date") or d.get("date") or ""),
            areas=[str(a) for a in (d.get("areas") or [])],
            country=str(d.get("country") or ENGLAND),
            id=str(d["id"]) if d.get("id") else None,
        )

@dataclass(frozen=True)
class LookupResult:
    route: str | None = None
    date: str | None = None
    areas: tuple[str, ...] = ()
    is_restricted: bool = False
    is_valid: bool = False
    can_identify: bool = False

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["areas"] = list(self.areas)
        return d
