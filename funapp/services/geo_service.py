# File: funapp/services/geo_service.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from funapp.models.city import City


def find_city_by_coordinates(
    db: Session,
    *,
    latitude: float,
    longitude: float,
    country: str,
) -> Optional[City]:
    """
    Return the city at exactly (latitude, longitude) in `country`, or None.

    No tolerance radius is applied. If several rows share the coordinates
    the one with the lowest id is returned.
    """
    stmt = (
        select(City)
        .where(
            City.latitude == latitude,
            City.longitude == longitude,
            City.country == country,
        )
        .order_by(City.id.asc())
        .limit(1)
    )
    return db.scalars(stmt).first()
