from __future__ import annotations
from dataclasses import dataclass, field

from courier_routes.core.models import RouteSchedule, ENGLAND, IRELAND

# ---------------------------------------------------------------------------
# UK postcode area -> collection route
# ---------------------------------------------------------------------------
# Keys are the FULL leading letter run of a postcode ("SW" for SW1A 1AA,
# "S" for S10 2TN). A postcode only ever looks up its own run, so "S" and
# "SW" never compete and there is no fallback to a shorter key.
# ---------------------------------------------------------------------------
POSTCODE_ROUTES: dict[str, str] = {
    # London + inside the M25
    "E": "LONDON ROUTE", "EC": "LONDON ROUTE", "N": "LONDON ROUTE",
    "NW": "LONDON ROUTE", "SE": "LONDON ROUTE", "SW": "LONDON ROUTE",
    "W": "LONDON ROUTE", "WC": "LONDON ROUTE", "BR": "LONDON ROUTE",
    "CR": "LONDON ROUTE", "DA": "LONDON ROUTE", "EN": "LONDON ROUTE",
    "HA": "LONDON ROUTE", "IG": "LONDON ROUTE", "KT": "LONDON ROUTE",
    "RM": "LONDON ROUTE", "SM": "LONDON ROUTE", "TW": "LONDON ROUTE",
    "UB": "LONDON ROUTE", "WD": "LONDON ROUTE",

    # Yorkshire
    "LS": "LEEDS ROUTE", "WF": "LEEDS ROUTE", "HX": "LEEDS ROUTE",
    "DN": "LEEDS ROUTE", "S": "LEEDS ROUTE", "HD": "LEEDS ROUTE",
    "YO": "LEEDS ROUTE", "BD": "LEEDS ROUTE", "HG": "LEEDS ROUTE",
    "HU": "LEEDS ROUTE",

    # East Midlands
    "NG": "NOTTINGHAM ROUTE", "LE": "NOTTINGHAM ROUTE", "DE": "NOTTINGHAM ROUTE",
    "PE": "NOTTINGHAM ROUTE", "LN": "NOTTINGHAM ROUTE",

    # North West
    "M": "MANCHESTER ROUTE", "L": "MANCHESTER ROUTE", "ST": "MANCHESTER ROUTE",
    "BL": "MANCHESTER ROUTE", "WA": "MANCHESTER ROUTE", "OL": "MANCHESTER ROUTE",
    "SY": "MANCHESTER ROUTE", "SK": "MANCHESTER ROUTE", "WN": "MANCHESTER ROUTE",
    "CH": "MANCHESTER ROUTE", "CW": "MANCHESTER ROUTE",

    # West Midlands
    "B": "BIRMINGHAM ROUTE", "WV": "BIRMINGHAM ROUTE", "CV": "BIRMINGHAM ROUTE",
    "DY": "BIRMINGHAM ROUTE", "WS": "BIRMINGHAM ROUTE", "WR": "BIRMINGHAM ROUTE",
    "TF": "BIRMINGHAM ROUTE",

    # South Wales + West Country (north of the restricted south west)
    "CF": "CARDIFF ROUTE", "GL": "CARDIFF ROUTE", "BS": "CARDIFF ROUTE",
    "SN": "CARDIFF ROUTE", "BA": "CARDIFF ROUTE", "SP": "CARDIFF ROUTE",
    "NP": "CARDIFF ROUTE", "SA": "CARDIFF ROUTE",

    # South coast + Thames valley
    "BH": "BOURNEMOUTH ROUTE", "SO": "BOURNEMOUTH ROUTE", "OX": "BOURNEMOUTH ROUTE",
    "RG": "BOURNEMOUTH ROUTE", "GU": "BOURNEMOUTH ROUTE", "PO": "BOURNEMOUTH ROUTE",
    "DT": "BOURNEMOUTH ROUTE",

    # Sussex + Kent
    "BN": "BRIGHTON ROUTE", "HP": "BRIGHTON ROUTE", "SL": "BRIGHTON ROUTE",
    "RH": "BRIGHTON ROUTE", "TN": "BRIGHTON ROUTE", "CT": "BRIGHTON ROUTE",
    "ME": "BRIGHTON ROUTE",

    # Essex + East Anglia
    "SS": "SOUTHEND ROUTE", "NR": "SOUTHEND ROUTE", "IP": "SOUTHEND ROUTE",
    "CO": "SOUTHEND ROUTE", "CM": "SOUTHEND ROUTE", "CB": "SOUTHEND ROUTE",

    # South Midlands
    "NN": "NORTHAMPTON ROUTE", "MK": "NORTHAMPTON ROUTE", "LU": "NORTHAMPTON ROUTE",
    "AL": "NORTHAMPTON ROUTE", "SG": "NORTHAMPTON ROUTE",

    # North East, Cumbria + Scotland
    "G": "SCOTLAND ROUTE", "EH": "SCOTLAND ROUTE", "NE": "SCOTLAND ROUTE",
    "TS": "SCOTLAND ROUTE", "PR": "SCOTLAND ROUTE", "CA": "SCOTLAND ROUTE",
    "DH": "SCOTLAND ROUTE", "SR": "SCOTLAND ROUTE", "DG": "SCOTLAND ROUTE",
    "TD": "SCOTLAND ROUTE", "ML": "SCOTLAND ROUTE", "KA": "SCOTLAND ROUTE",
    "FK": "SCOTLAND ROUTE", "KY": "SCOTLAND ROUTE", "DD": "SCOTLAND ROUTE",
}

ROUTE_AREAS: dict[str, list[str]] = {
    "LONDON ROUTE": [
        "Central London", "North London", "East London", "South London",
        "West London", "Heathrow", "Romford", "All areas inside M25",
    ],
    "LEEDS ROUTE": [
        "Leeds", "Wakefield", "Halifax", "Doncaster", "Sheffield",
        "Huddersfield", "York", "Bradford",
    ],
    "NOTTINGHAM ROUTE": ["Nottingham", "Leicester", "Derby", "Peterborough", "Corby", "Market Harborough"],
    "MANCHESTER ROUTE": ["Manchester", "Liverpool", "Stoke-on-Trent", "Bolton", "Warrington", "Oldham", "Shrewsbury"],
    "BIRMINGHAM ROUTE": ["Birmingham", "Wolverhampton", "Coventry", "Warwick", "Dudley", "Walsall", "Rugby"],
    "CARDIFF ROUTE": ["Cardiff", "Gloucester", "Bristol", "Swindon", "Bath", "Salisbury"],
    "BOURNEMOUTH ROUTE": ["Bournemouth", "Southampton", "Oxford", "Hampshire", "Reading", "Guildford", "Portsmouth"],
    "BRIGHTON ROUTE": ["Brighton", "High Wycombe", "Slough", "Crawley", "Lancing", "Eastbourne", "Canterbury"],
    "SOUTHEND ROUTE": ["Southend", "Norwich", "Ipswich", "Colchester", "Braintree", "Cambridge", "Basildon"],
    "NORTHAMPTON ROUTE": ["Northampton", "Kettering", "Bedford", "Milton Keynes", "Banbury", "Aylesbury", "Luton"],
    "SCOTLAND ROUTE": ["Glasgow", "Edinburgh", "Newcastle", "Middlesbrough", "Preston", "Carlisle"],
}

# Cornwall, Devon, Somerset coast, Highlands + islands, Crown dependencies
RESTRICTED_PREFIXES: frozenset[str] = frozenset({
    "EX", "TR", "PL", "TQ", "TA",
    "IV", "HS", "ZE", "KW", "PH", "PA",
    "IM", "JE", "GY", "LD",
})

# ---------------------------------------------------------------------------
# Ireland: city name -> route
# ---------------------------------------------------------------------------
# Keys are stored the way normalize_city() writes them: first letter upper,
# the rest lower ("Belfast", not "BELFAST").
# ---------------------------------------------------------------------------
IRELAND_CITY_ROUTES: dict[str, str] = {
    "Dublin": "DUBLIN ROUTE", "Swords": "DUBLIN ROUTE", "Bray": "DUBLIN ROUTE",
    "Dundalk": "DUBLIN ROUTE", "Drogheda": "DUBLIN ROUTE", "Navan": "DUBLIN ROUTE",
    "Cork": "CORK ROUTE", "Limerick": "CORK ROUTE", "Waterford": "CORK ROUTE",
    "Kilkenny": "CORK ROUTE", "Clonmel": "CORK ROUTE",
    "Galway": "GALWAY ROUTE", "Athlone": "GALWAY ROUTE", "Sligo": "GALWAY ROUTE",
    "Ennis": "GALWAY ROUTE", "Castlebar": "GALWAY ROUTE",
    "Belfast": "NORTHERN IRELAND ROUTE", "Newry": "NORTHERN IRELAND ROUTE",
    "Derry": "NORTHERN IRELAND ROUTE", "Lisburn": "NORTHERN IRELAND ROUTE",
    "Armagh": "NORTHERN IRELAND ROUTE",
}

IRELAND_ROUTE_DATES: dict[str, str] = {
    "DUBLIN ROUTE": "3rd of May",
    "CORK ROUTE": "5th of May",
    "GALWAY ROUTE": "6th of May",
    "NORTHERN IRELAND ROUTE": "2nd of May",
}

AREA_NOT_SPECIFIED = "Area not specified"

_ENGLAND_DATES: dict[str, str] = {
    "CARDIFF ROUTE": "21st of April",
    "BOURNEMOUTH ROUTE": "22nd of April",
    "BIRMINGHAM ROUTE": "24th of April",
    "LONDON ROUTE": "19th of April",
    "LEEDS ROUTE": "17th of April",
    "NOTTINGHAM ROUTE": "18th of April",
    "MANCHESTER ROUTE": "26th of April",
    "BRIGHTON ROUTE": "28th of April",
    "SOUTHEND ROUTE": "29th of April",
    "NORTHAMPTON ROUTE": "16th of April",
    "SCOTLAND ROUTE": "30th of April",
}


def default_schedules() -> list[RouteSchedule]:
    """Bundled schedule used when the persisted store has nothing to offer."""
    rows = [
        RouteSchedule(route=r, date=d, areas=list(ROUTE_AREAS.get(r, [])), country=ENGLAND)
        for r, d in _ENGLAND_DATES.items()
    ]
    for route, d in IRELAND_ROUTE_DATES.items():
        cities = [c for c, r in IRELAND_CITY_ROUTES.items() if r == route]
        rows.append(RouteSchedule(route=route, date=d, areas=cities, country=IRELAND))
    return rows


@dataclass(frozen=True)
class RouteTables:
    postcode_routes: dict[str, str] = field(default_factory=lambda: POSTCODE_ROUTES)
    route_areas: dict[str, list[str]] = field(default_factory=lambda: ROUTE_AREAS)
    restricted_prefixes: frozenset[str] = RESTRICTED_PREFIXES
    ireland_city_routes: dict[str, str] = field(default_factory=lambda: IRELAND_CITY_ROUTES)
    ireland_route_dates: dict[str, str] = field(default_factory=lambda: IRELAND_ROUTE_DATES)


DEFAULT_TABLES = RouteTables()
