"""Championship standings models (drivers and constructors)."""

from __future__ import annotations

from pydantic import Field

from f1topic.models._base import ApiModel


class Driver(ApiModel):
    """Driver identity embedded in a standing entry."""

    name: str = ""
    surname: str = ""
    nationality: str = ""
    birthday: str | None = None
    number: int | None = None
    short_name: str = Field(default="", alias="shortName")
    url: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"


class Team(ApiModel):
    """Constructor identity embedded in a standing entry."""

    team_id: str = Field(default="", alias="teamId")
    team_name: str = Field(default="", alias="teamName")
    country: str = ""
    # Upstream spells this key "firstAppareance".
    first_appearance: int | None = Field(default=None, alias="firstAppareance")
    constructors_championships: int | None = Field(
        default=None, alias="constructorsChampionships"
    )
    drivers_championships: int | None = Field(default=None, alias="driversChampionships")
    url: str | None = None


class DriverStanding(ApiModel):
    """Driver championship standing entry."""

    classification_id: int | None = Field(default=None, alias="classificationId")
    driver_id: str = Field(default="", alias="driverId")
    team_id: str = Field(default="", alias="teamId")
    points: float = 0.0
    position: int | None = None
    wins: int = 0
    driver: Driver = Driver()
    team: Team = Team()


class TeamStanding(ApiModel):
    """Constructor championship standing entry."""

    classification_id: int | None = Field(default=None, alias="classificationId")
    team_id: str = Field(default="", alias="teamId")
    points: float = 0.0
    position: int | None = None
    wins: int = 0
    team: Team = Team()
