"""Client for the f1api.dev season endpoints."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from f1topic._http import DEFAULT_TIMEOUT, SyncTransport
from f1topic.constants import BASE_URL
from f1topic.exceptions import F1DecodeError, F1NoDataError
from f1topic.log import log_api_call
from f1topic.models.envelope import (
    ConstructorChampionshipResponse,
    DriverChampionshipResponse,
    ErrorResponse,
    NextRaceResponse,
)
from f1topic.models.race import RaceEvent
from f1topic.models.standings import DriverStanding, TeamStanding

T = TypeVar("T", bound=BaseModel)


def _raise_for_error_envelope(body: bytes) -> None:
    """Raise F1NoDataError if ``body`` is an upstream error envelope."""
    try:
        error = ErrorResponse.model_validate_json(body)
    except ValidationError:
        return
    if error.status >= 400:
        raise F1NoDataError(error.message, status_code=error.status)


def _decode(model: type[T], body: bytes) -> T:
    """Decode a response body, checking for the error envelope first."""
    _raise_for_error_envelope(body)
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise F1DecodeError(
            f"Failed to decode {model.__name__} response: {exc}"
        ) from exc


class F1Client:
    """Synchronous client for the current-season f1api.dev endpoints.

    Usage:
        with F1Client() as f1:
            event = f1.next_race()
            drivers = f1.driver_standings()
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = SyncTransport(base_url=BASE_URL, timeout=timeout)

    def __enter__(self) -> F1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get(self, endpoint: str, model: type[T]) -> T:
        return _decode(model, self._transport.get(endpoint))

    # ── Endpoints ──────────────────────────────────────────────

    @log_api_call
    def next_race(self) -> RaceEvent:
        """Get the next race in the calendar and its round number."""
        response = self._get("/current/next", NextRaceResponse)
        if not response.race:
            raise F1NoDataError("no upcoming races found")
        return RaceEvent(
            race=response.race[0],
            round=response.round,
            season=response.season,
            championship=response.championship,
        )

    @log_api_call
    def driver_standings(self) -> list[DriverStanding]:
        """Get the current driver championship standings."""
        return self._get(
            "/current/drivers-championship", DriverChampionshipResponse
        ).drivers_championship

    @log_api_call
    def constructor_standings(self) -> list[TeamStanding]:
        """Get the current constructor championship standings."""
        return self._get(
            "/current/constructors-championship", ConstructorChampionshipResponse
        ).constructors_championship
