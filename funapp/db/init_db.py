"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from funapp.models import Base, City

logger = logging.getLogger(__name__)

# (name, country, latitude, longitude)
DEFAULT_CITIES: list[tuple[str, str, float, float]] = [
    ("Cairo", "Egypt", 30.0444, 31.2357),
    ("Alexandria", "Egypt", 31.2001, 29.9187),
    ("Giza", "Egypt", 30.0131, 31.2089),
    ("Luxor", "Egypt", 25.6872, 32.6396),
    ("Aswan", "Egypt", 24.0889, 32.8998),
    ("New York", "United States", 40.7128, -74.006),
    ("Paris", "France", 48.8566, 2.3522),
    ("Amman", "Jordan", 31.9539, 35.9106),
]


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def reset_db(engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_initial_data(
    db: Session,
    cities: Iterable[tuple[str, str, float, float]] = DEFAULT_CITIES,
) -> int:
    """
    Insert the given cities, skipping any (name, country, lat, lon) row that
    already exists. Returns the number of rows inserted.
    """
    inserted = 0
    for name, country, latitude, longitude in cities:
        existing = db.scalars(
            select(City).where(
                City.name == name,
                City.country == country,
                City.latitude == latitude,
                City.longitude == longitude,
            )
        ).first()
        if existing:
            continue

        db.add(City(name=name, country=country, latitude=latitude, longitude=longitude))
        inserted += 1

    db.commit()
    logger.info("Seeded %d cities", inserted)
    return inserted
