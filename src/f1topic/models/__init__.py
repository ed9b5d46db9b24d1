"""f1topic data models."""

from f1topic.models.envelope import (
    ConstructorChampionshipResponse,
    DriverChampionshipResponse,
    ErrorResponse,
    NextRaceResponse,
)
from f1topic.models.race import Championship, Circuit, Race, RaceEvent, Schedule, TimeInfo
from f1topic.models.standings import Driver, DriverStanding, Team, TeamStanding

__all__ = [
    "Championship",
    "Circuit",
    "ConstructorChampionshipResponse",
    "Driver",
    "DriverChampionshipResponse",
    "DriverStanding",
    "ErrorResponse",
    "NextRaceResponse",
    "Race",
    "RaceEvent",
    "Schedule",
    "Team",
    "TeamStanding",
    "TimeInfo",
]
