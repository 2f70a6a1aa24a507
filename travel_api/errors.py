# travel_api/errors.py
"""
Typed errors raised by the API layer.

Every error carries a stable code and the HTTP status it maps to. Only these
errors put their message in a response body; anything else is reported as an
opaque 500 by the global handler.
"""


class TravelApiError(Exception):
    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


# ---- 404 ----

class NotFoundError(TravelApiError):
    def __init__(self, message: str, code: str = "NOT_FOUND"):
        super().__init__(message, code, 404)


class ClientNotFoundError(NotFoundError):
    def __init__(self, client_id: int):
        super().__init__(f"Client {client_id} does not exist.", "CLIENT_NOT_FOUND")
        self.client_id = client_id


class TripNotFoundError(NotFoundError):
    def __init__(self, trip_id: int):
        super().__init__(f"Trip {trip_id} does not exist.", "TRIP_NOT_FOUND")
        self.trip_id = trip_id


class ClientTripsNotFoundError(NotFoundError):
    """Raised for an empty trip list; an unknown client looks the same."""

    def __init__(self, client_id: int):
        super().__init__(
            f"Client {client_id} does not exist or has no registered trips.",
            "CLIENT_TRIPS_NOT_FOUND",
        )
        self.client_id = client_id


class RegistrationNotFoundError(NotFoundError):
    def __init__(self, client_id: int, trip_id: int):
        super().__init__(
            f"Client {client_id} is not registered for trip {trip_id}.",
            "REGISTRATION_NOT_FOUND",
        )
        self.client_id = client_id
        self.trip_id = trip_id


# ---- 400 ----

class BusinessRuleError(TravelApiError):
    def __init__(self, message: str, code: str):
        super().__init__(message, code, 400)


class TripFullError(BusinessRuleError):
    def __init__(self, trip_id: int):
        super().__init__(
            f"Trip {trip_id} has reached its maximum number of participants.",
            "CAPACITY_REACHED",
        )
        self.trip_id = trip_id


class AlreadyRegisteredError(BusinessRuleError):
    def __init__(self, client_id: int, trip_id: int):
        super().__init__(
            f"Client {client_id} is already registered for trip {trip_id}.",
            "ALREADY_REGISTERED",
        )
        self.client_id = client_id
        self.trip_id = trip_id
