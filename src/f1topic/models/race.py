"""Race, schedule and circuit models for the next-race endpoint."""

from __future__ import annotations

import datetime as dt

from pydantic import Field, field_validator

from f1topic.models._base import ApiModel


class TimeInfo(ApiModel):
    """Date and time-of-day of one session; unparseable values become None."""

    date: dt.date | None = None
    time: dt.time | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _lenient_date(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return dt.date.fromisoformat(value)
            except ValueError:
                return None
        return value

    @field_validator("time", mode="before")
    @classmethod
    def _lenient_time(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return dt.time.fromisoformat(value)
            except ValueError:
                return None
        return value


class Schedule(ApiModel):
    """Race weekend schedule."""

    race: TimeInfo = TimeInfo()
    qualy: TimeInfo = TimeInfo()


class Circuit(ApiModel):
    """Circuit hosting a race."""

    circuit_id: str = Field(default="", alias="circuitId")
    circuit_name: str = Field(default="", alias="circuitName")
    length: float | None = None
    laps: int | None = None
    lap_record: str | None = Field(default=None, alias="lapRecord")


class Championship(ApiModel):
    """Season-long championship a race belongs to."""

    championship_id: str = Field(default="", alias="championshipId")
    championship_name: str = Field(default="", alias="championshipName")
    url: str | None = None
    year: int | None = None


class Race(ApiModel):
    """A Grand Prix as described by the upstream API."""

    race_id: str = Field(default="", alias="raceId")
    championship_id: str = Field(default="", alias="championshipId")
    race_name: str = Field(default="", alias="raceName")
    schedule: Schedule = Schedule()
    circuit: Circuit = Circuit()
    country: str = ""
    sprint: bool = False


class RaceEvent(ApiModel):
    """The next race of the season together with its round number."""

    race: Race
    round: int
    season: int | None = None
    championship: Championship | None = None

    @property
    def name(self) -> str:
        return self.race.race_name

    @property
    def date(self) -> dt.date | None:
        """Race day, or None when the upstream date is missing or malformed."""
        return self.race.schedule.race.date

    @property
    def time(self) -> dt.time | None:
        return self.race.schedule.race.time
