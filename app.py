from __future__ import annotations

import logging
from datetime import date

from flask import Flask, abort, jsonify, render_template, request, redirect, url_for

from courier_routes.config import get_settings
from courier_routes.logging_setup import setup_logging
from courier_routes.core.lookup import describe_lookup, describe_ireland_lookup, collection_info
from courier_routes.core.models import ENGLAND, IRELAND, RouteSchedule
from courier_routes.core.routing import lookup_postal_code, lookup_ireland_city
from courier_routes.core.schedule import format_collection_date
from courier_routes.core.storage import ScheduleStoreError, get_store, load_schedule_book, seed_defaults

app = Flask(__name__)
logger = logging.getLogger("courier_routes.app")

COUNTRIES = [ENGLAND, IRELAND]


def get_schedule_store():
    # tests (and anyone embedding the app) can hand in their own store
    store = app.config.get("SCHEDULE_STORE")
    if store is None:
        store = get_store(get_settings())
    return store


def get_book():
    return load_schedule_book(get_schedule_store())


# ── Postcode lookup ───────────────────────────────────────────
@app.route("/")
def index():
    s = get_settings()
    postcode = request.args.get("postcode", "")
    view = describe_lookup(postcode, get_book(), min_length=s.min_lookup_length)
    return render_template("lookup.html", postcode=postcode, view=view)


@app.route("/api/lookup")
def api_lookup():
    s = get_settings()
    postcode = request.args.get("postcode", "")
    book = get_book()
    view = describe_lookup(postcode, book, min_length=s.min_lookup_length)
    result = lookup_postal_code(postcode, book)
    return jsonify({"view": view.to_dict(), "result": result.to_dict()})


# ── Ireland: by city ──────────────────────────────────────────
@app.route("/ireland")
def ireland():
    s = get_settings()
    city = request.args.get("city", "")
    book = get_book()
    view = describe_ireland_lookup(city, book, support_phone=s.support_phone)
    return render_template("ireland.html", city=city, view=view, cities=book.ireland_cities())


@app.route("/api/ireland")
def api_ireland():
    s = get_settings()
    city = request.args.get("city", "")
    book = get_book()
    view = describe_ireland_lookup(city, book, support_phone=s.support_phone)
    result = lookup_ireland_city(city, book)
    return jsonify({"view": view.to_dict(), "result": result.to_dict()})


@app.route("/api/ireland/cities")
def api_ireland_cities():
    return jsonify({"cities": get_book().ireland_cities()})


@app.route("/api/collection-info")
def api_collection_info():
    s = get_settings()
    info = collection_info(
        request.args.get("country"),
        postal_code=request.args.get("postal_code"),
        city=request.args.get("city"),
        schedule=get_book(),
        support_phone=s.support_phone,
    )
    return jsonify(info.to_dict())


# ── Admin: collection schedules ───────────────────────────────
def _check_token() -> str:
    # Simple protection - set ADMIN_TOKEN in .env and pass ?token=xxx
    token = request.args.get("token", "")
    admin_token = get_settings().admin_token or ""
    if admin_token and token != admin_token:
        abort(403)
    return token


def _back(token: str, msg: str):
    return redirect(url_for("admin", token=token, msg=msg))


def _parse_date(raw: str) -> str | None:
    try:
        return format_collection_date(date.fromisoformat(raw))
    except ValueError:
        return None


def _seeded_store_and_book(route: str | None = None):
    store = get_schedule_store()
    seeded = seed_defaults(store)
    if seeded:
        logger.info(f"Seeded schedule store with {seeded} default routes")
    book = load_schedule_book(store)
    if route is not None and route not in book:
        abort(404)
    return store, book


@app.errorhandler(403)
def forbidden(_e):
    return "Access denied - add ?token=<ADMIN_TOKEN> to the URL", 403


@app.errorhandler(ScheduleStoreError)
def store_unavailable(e):
    # only admin writes reach the store without the defaults fallback
    logger.error(f"Schedule store error on {request.path}: {e}")
    return _back(request.args.get("token", ""), "Schedule store unavailable, nothing was saved")


@app.route("/admin")
def admin():
    token = _check_token()
    country = request.args.get("country", "All")
    book = get_book()
    return render_template(
        "admin.html",
        schedules=book.routes_by_country(country),
        total=len(book),
        country=country,
        countries=COUNTRIES,
        token=token,
        msg=request.args.get("msg"),
    )


@app.route("/admin/schedule", methods=["POST"])
def admin_add_route():
    token = _check_token()
    route = request.form.get("route", "").strip().upper()
    if len(route) < 3:
        return _back(token, "Route name must be at least 3 characters")

    raw_date = request.form.get("date", "")
    date_text = _parse_date(raw_date)
    if not date_text:
        return _back(token, f"Invalid date: {raw_date!r}")

    areas = [a.strip() for a in request.form.get("areas", "").split(",") if a.strip()]
    country = request.form.get("country", ENGLAND)
    if country not in COUNTRIES:
        country = ENGLAND

    store, book = _seeded_store_and_book()
    if not book.add_route(route, date_text, areas, country):
        return _back(token, f"{route} already exists")

    if not store.add_route(RouteSchedule(route=route, date=date_text, areas=areas, country=country)):
        logger.warning(f"Store did not save new route {route}")
        return _back(token, f"Could not save {route}")
    logger.info(f"Added route {route} ({country}) on {date_text}")
    return _back(token, f"Added {route}")


@app.route("/admin/schedule/<route>/date", methods=["POST"])
def admin_update_date(route):
    token = _check_token()
    raw_date = request.form.get("date", "")
    date_text = _parse_date(raw_date)
    if not date_text:
        return _back(token, f"Invalid date: {raw_date!r}")

    store, book = _seeded_store_and_book(route)
    book.update_route_date(route, date_text)
    if not store.update_date(route, date_text):
        logger.warning(f"Store did not update the date of {route}")
        return _back(token, f"Could not save the date for {route}")
    logger.info(f"Updating route {route} to date: {date_text}")
    return _back(token, f"The collection date for {route} has been updated to {date_text}.")


@app.route("/admin/schedule/<route>/delete", methods=["POST"])
def admin_remove_route(route):
    token = _check_token()
    store, book = _seeded_store_and_book(route)
    # an empty store would bring the bundled defaults back
    if len(book) <= 1:
        return _back(token, f"Cannot remove {route}, it is the last route")
    book.remove_route(route)
    if not store.remove_route(route):
        logger.warning(f"Store did not remove {route}")
        return _back(token, f"Could not remove {route}")
    logger.info(f"Removed route {route}")
    return _back(token, f"Removed {route}")


@app.route("/admin/schedule/<route>/areas", methods=["POST"])
def admin_add_area(route):
    token = _check_token()
    store, book = _seeded_store_and_book(route)
    area = request.form.get("area", "").strip()
    if not book.add_area_to_route(route, area):
        return _back(token, f"Could not add {area!r} to {route}")
    if not store.set_areas(route, book.areas_by_route(route)):
        return _back(token, f"Could not save the areas of {route}")
    return _back(token, f"Added {area} to {route}")


@app.route("/admin/schedule/<route>/areas/remove", methods=["POST"])
def admin_remove_area(route):
    token = _check_token()
    store, book = _seeded_store_and_book(route)
    area = request.form.get("area", "")
    if not book.remove_area_from_route(route, area):
        return _back(token, f"{area!r} is not on {route}")
    if not store.set_areas(route, book.areas_by_route(route)):
        return _back(token, f"Could not save the areas of {route}")
    return _back(token, f"Removed {area} from {route}")


if __name__ == "__main__":
    settings = get_settings()
    setup_logging("app", settings.log_dir, settings.log_level)
    app.run(host="0.0.0.0", port=settings.port, debug=False)
