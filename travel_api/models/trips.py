# travel_api/models/trips.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TripOut(BaseModel):
    id_trip: int
    name: str
    description: str
    date_from: datetime
    date_to: datetime
    max_people: int
    country_name: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ClientTripOut(BaseModel):
    id_trip: int
    name: str
    description: str
    date_from: datetime
    date_to: datetime
    max_people: int
    country_name: str
    registered_at: int
    payment_date: Optional[int] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class MessageOut(BaseModel):
    message: str
