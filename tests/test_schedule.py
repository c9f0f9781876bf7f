from datetime import date

import pytest

from courier_routes.core.models import RouteSchedule, ENGLAND, IRELAND
from courier_routes.core.schedule import ScheduleBook, format_collection_date, ordinal_suffix
from courier_routes.core.tables import default_schedules


@pytest.fixture
def book():
    return ScheduleBook([
        RouteSchedule("LONDON ROUTE", "19th of April", ["Central London", "Heathrow"], ENGLAND),
        RouteSchedule("LEEDS ROUTE", "17th of April", ["Leeds"], ENGLAND),
        RouteSchedule("DUBLIN ROUTE", "3rd of May", ["Dublin", "Bray"], IRELAND),
        RouteSchedule("CORK ROUTE", "", ["Cork"], IRELAND),
    ])


class TestOrdinals:

    @pytest.mark.parametrize("day, suffix", [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"),
        (13, "th"), (21, "st"), (22, "nd"), (23, "rd"), (30, "th"), (31, "st"),
    ])
    def test_suffix(self, day, suffix):
        assert ordinal_suffix(day) == suffix

    def test_format(self):
        assert format_collection_date(date(2026, 4, 21)) == "21st of April"
        assert format_collection_date(date(2026, 9, 6)) == "6th of September"
        assert format_collection_date(date(2026, 5, 12)) == "12th of May"


class TestQueries:

    def test_defaults_when_nothing_given(self):
        assert len(ScheduleBook()) == len(default_schedules())
        assert ScheduleBook().date_by_route("LONDON ROUTE") == "19th of April"

    def test_route_names(self, book):
        assert book.route_names() == ["LONDON ROUTE", "LEEDS ROUTE", "DUBLIN ROUTE", "CORK ROUTE"]

    def test_areas_by_route(self, book):
        assert book.areas_by_route("LONDON ROUTE") == ["Central London", "Heathrow"]
        assert book.areas_by_route("NOWHERE") == []

    def test_date_by_route(self, book):
        assert book.date_by_route("LEEDS ROUTE") == "17th of April"
        assert book.date_by_route("NOWHERE") is None
        assert book.date_by_route(None) is None
        # blank dates count as missing
        assert book.date_by_route("CORK ROUTE") is None

    def test_routes_by_country(self, book):
        assert [s.route for s in book.routes_by_country(IRELAND)] == ["DUBLIN ROUTE", "CORK ROUTE"]
        assert len(book.routes_by_country("All")) == 4
        assert len(book.routes_by_country(None)) == 4

    def test_ireland_cities(self, book):
        assert book.ireland_cities() == ["Bray", "Cork", "Dublin"]

    def test_date_for_ireland_city(self, book):
        assert book.date_for_ireland_city("BRAY") == "3rd of May"
        assert book.date_for_ireland_city("Cork") is None
        assert book.date_for_ireland_city("Leeds") is None
        assert book.date_for_ireland_city("") is None

    def test_route_for_ireland_city(self, book):
        assert book.route_for_ireland_city(" bray ") == "DUBLIN ROUTE"
        assert book.route_for_ireland_city("Cork") == "CORK ROUTE"
        # Galway is in the bundled city table but not on any route here
        assert book.route_for_ireland_city("Galway") is None
        assert book.route_for_ireland_city(None) is None

    def test_has_ireland_routes(self, book):
        assert book.has_ireland_routes()
        assert not ScheduleBook([RouteSchedule("LEEDS ROUTE", "", [], ENGLAND)]).has_ireland_routes()

    def test_default_ireland_cities_cover_the_city_table(self):
        cities = ScheduleBook().ireland_cities()
        assert "Belfast" in cities
        assert "Dublin" in cities


class TestMutations:

    def test_update_route_date(self, book):
        assert book.update_route_date("LONDON ROUTE", "6th of September")
        assert book.date_by_route("LONDON ROUTE") == "6th of September"
        assert not book.update_route_date("NOWHERE", "1st of May")

    def test_add_route(self, book):
        assert book.add_route("BRISTOL ROUTE", "1st of May", ["Bristol"], ENGLAND)
        assert "BRISTOL ROUTE" in book
        assert not book.add_route("BRISTOL ROUTE", "2nd of May", [], ENGLAND)
        assert not book.add_route("", "2nd of May", [], ENGLAND)

    def test_remove_route(self, book):
        assert book.remove_route("LEEDS ROUTE")
        assert "LEEDS ROUTE" not in book
        assert not book.remove_route("LEEDS ROUTE")

    def test_add_area(self, book):
        assert book.add_area_to_route("LEEDS ROUTE", "York")
        assert book.areas_by_route("LEEDS ROUTE") == ["Leeds", "York"]
        assert not book.add_area_to_route("LEEDS ROUTE", "York")
        assert not book.add_area_to_route("NOWHERE", "York")

    def test_remove_area(self, book):
        assert book.remove_area_from_route("LONDON ROUTE", "Heathrow")
        assert book.areas_by_route("LONDON ROUTE") == ["Central London"]
        assert not book.remove_area_from_route("LONDON ROUTE", "Heathrow")

    def test_mutations_do_not_leak_into_defaults(self):
        b = ScheduleBook()
        b.add_area_to_route("LONDON ROUTE", "Croydon")
        b.update_route_date("LONDON ROUTE", "1st of January")
        fresh = ScheduleBook()
        assert "Croydon" not in fresh.areas_by_route("LONDON ROUTE")
        assert fresh.date_by_route("LONDON ROUTE") == "19th of April"

    def test_rows_are_copied_in(self):
        rows = [RouteSchedule("LEEDS ROUTE", "17th of April", ["Leeds"], ENGLAND)]
        b = ScheduleBook(rows)
        b.add_area_to_route("LEEDS ROUTE", "York")
        assert rows[0].areas == ["Leeds"]
