# File: funapp/models/city.py

"""
City model.

Rows are written by the seed script only. Signup matches on the exact
(latitude, longitude, country) triple.
"""

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from funapp.models.base import Base


class City(Base):
    __tablename__ = "cities"
    __table_args__ = (Index("ix_cities_coordinates", "latitude", "longitude"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
