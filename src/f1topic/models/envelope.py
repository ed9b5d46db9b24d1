"""Response envelopes shared by every f1api.dev endpoint.

Success and error responses use the same outer shape; an error is
recognised by a ``status`` of 400 or above.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from f1topic.models._base import ApiModel
from f1topic.models.race import Championship, Race
from f1topic.models.standings import DriverStanding, TeamStanding


class ErrorResponse(ApiModel):
    """Envelope returned when the API has no data for a resource."""

    api: str | None = None
    url: str | None = None
    message: str = ""
    status: int


class _Envelope(ApiModel):
    api: str | None = None
    url: str | None = None
    limit: int | None = None
    offset: int | None = None
    total: int | None = None
    season: int | None = None

    @field_validator(
        "race",
        "drivers_championship",
        "constructors_championship",
        mode="before",
        check_fields=False,
    )
    @classmethod
    def _null_list(cls, value: object) -> object:
        # An explicit null list means "no entries"; a missing key still fails.
        return [] if value is None else value


class NextRaceResponse(_Envelope):
    """Envelope for ``/current/next``."""

    round: int = 0
    championship: Championship | None = None
    race: list[Race]


class DriverChampionshipResponse(_Envelope):
    """Envelope for ``/current/drivers-championship``."""

    championship_id: str | None = Field(default=None, alias="championshipId")
    drivers_championship: list[DriverStanding]


class ConstructorChampionshipResponse(_Envelope):
    """Envelope for ``/current/constructors-championship``."""

    championship_id: str | None = Field(default=None, alias="championshipId")
    constructors_championship: list[TeamStanding]
