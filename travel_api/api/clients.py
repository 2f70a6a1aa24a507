# travel_api/api/clients.py

from typing import List

from fastapi import APIRouter, Response, status

from travel_api.db import travel
from travel_api.db.travel import RegistrationOutcome, UnregistrationOutcome
from travel_api.errors import (
    AlreadyRegisteredError,
    ClientNotFoundError,
    ClientTripsNotFoundError,
    RegistrationNotFoundError,
    TripFullError,
    TripNotFoundError,
)
from travel_api.models.clients import ClientCreate, ClientCreated
from travel_api.models.trips import ClientTripOut, MessageOut

router = APIRouter(prefix="/api/clients", tags=["clients"])


@router.get("/{client_id}/trips", response_model=List[ClientTripOut])
def list_client_trips(client_id: int) -> List[ClientTripOut]:
    """
    Return every trip the client is registered for, with registration and payment dates.
    """
    trips = travel.list_client_trips(client_id)
    if not trips:
        raise ClientTripsNotFoundError(client_id)
    return trips


@router.post(
    "",
    response_model=ClientCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_client(payload: ClientCreate, response: Response) -> ClientCreated:
    """
    Create a client and return its new id.
    """
    new_id = travel.create_client(payload)
    response.headers["Location"] = f"/api/clients/{new_id}/trips"
    return ClientCreated(id=new_id)


@router.put("/{client_id}/trips/{trip_id}", response_model=MessageOut)
def register_client_for_trip(client_id: int, trip_id: int) -> MessageOut:
    """
    Register the client for the trip.
    """
    outcome = travel.register_client_for_trip(client_id, trip_id)

    if outcome is RegistrationOutcome.CLIENT_NOT_FOUND:
        raise ClientNotFoundError(client_id)
    if outcome is RegistrationOutcome.TRIP_NOT_FOUND:
        raise TripNotFoundError(trip_id)
    if outcome is RegistrationOutcome.CAPACITY_REACHED:
        raise TripFullError(trip_id)
    if outcome is RegistrationOutcome.ALREADY_REGISTERED:
        raise AlreadyRegisteredError(client_id, trip_id)

    return MessageOut(message=f"Client {client_id} registered for trip {trip_id}.")


@router.delete("/{client_id}/trips/{trip_id}", response_model=MessageOut)
def unregister_client_from_trip(client_id: int, trip_id: int) -> MessageOut:
    """
    Remove the client's registration for the trip.
    """
    outcome = travel.unregister_client_from_trip(client_id, trip_id)

    if outcome is UnregistrationOutcome.REGISTRATION_NOT_FOUND:
        raise RegistrationNotFoundError(client_id, trip_id)

    return MessageOut(message=f"Client {client_id} unregistered from trip {trip_id}.")
