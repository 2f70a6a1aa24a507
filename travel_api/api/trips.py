# travel_api/api/trips.py

from typing import List

from fastapi import APIRouter

from travel_api.db import travel
from travel_api.models.trips import TripOut

router = APIRouter(prefix="/api/trips", tags=["trips"])


@router.get("", response_model=List[TripOut])
def list_trips() -> List[TripOut]:
    """
    Return all trips with the name of their country.
    """
    return travel.list_trips()
