# File: tests/test_geo_service.py

from funapp.models.city import City
from funapp.services.geo_service import find_city_by_coordinates
from tests.conftest import CAIRO, NEW_YORK


def test_exact_match_in_allowed_country(db):
    city = find_city_by_coordinates(
        db, latitude=CAIRO["latitude"], longitude=CAIRO["longitude"], country="Egypt"
    )

    assert city is not None
    assert city.name == "Cairo"


def test_city_in_other_country_is_not_found(db):
    city = find_city_by_coordinates(db, country="Egypt", **NEW_YORK)

    assert city is None


def test_near_miss_is_not_found(db):
    city = find_city_by_coordinates(
        db, latitude=CAIRO["latitude"] + 0.0001, longitude=CAIRO["longitude"], country="Egypt"
    )

    assert city is None


def test_country_must_match(db):
    city = find_city_by_coordinates(
        db, latitude=CAIRO["latitude"], longitude=CAIRO["longitude"], country="Jordan"
    )

    assert city is None


def test_duplicate_coordinates_pick_lowest_id(db):
    db.add(City(name="Heliopolis", country="Egypt", latitude=30.0444, longitude=31.2357))
    db.commit()

    city = find_city_by_coordinates(db, latitude=30.0444, longitude=31.2357, country="Egypt")

    assert city.name == "Cairo"
