"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

from f1topic.models.race import RaceEvent
from f1topic.models.standings import DriverStanding, TeamStanding
from f1topic.topic import SeasonSnapshot

BASE_URL = "https://f1api.dev/api"


SAMPLE_NEXT_RACE = {
    "api": "https://f1api.dev",
    "url": "https://f1api.dev/api/current/next",
    "total": 1,
    "season": 2025,
    "round": 3,
    "championship": {
        "championshipId": "f1_2025",
        "championshipName": "2025 Formula 1 World Championship",
        "url": "https://en.wikipedia.org/wiki/2025_Formula_One_World_Championship",
        "year": 2025,
    },
    "race": [
        {
            "raceId": "japanese_2025",
            "championshipId": "f1_2025",
            "raceName": "Lenovo Japanese Grand Prix 2025",
            "schedule": {
                "race": {"date": "2025-04-06", "time": "05:00:00Z"},
                "qualy": {"date": "2025-04-05", "time": "06:00:00Z"},
            },
            "laps": 53,
            "round": 3,
            "circuit": {
                "circuitId": "suzuka",
                "circuitName": "Suzuka Circuit",
                "country": "Japan",
                "city": "Suzuka",
                "lapRecord": "1:30:983",
            },
        }
    ],
}

SAMPLE_DRIVERS = {
    "api": "https://f1api.dev",
    "url": "https://f1api.dev/api/current/drivers-championship",
    "limit": 30,
    "offset": 0,
    "total": 4,
    "season": 2025,
    "championshipId": "f1_2025",
    "drivers_championship": [
        {
            "classificationId": 1,
            "driverId": "norris",
            "teamId": "mclaren",
            "points": 62,
            "position": 1,
            "wins": 1,
            "driver": {
                "name": "Lando",
                "surname": "Norris",
                "nationality": "Great Britain",
                "birthday": "13/11/1999",
                "number": 4,
                "shortName": "NOR",
                "url": "https://en.wikipedia.org/wiki/Lando_Norris",
            },
            "team": {
                "teamId": "mclaren",
                "teamName": "McLaren Formula 1 Team",
                "country": "Great Britain",
                "firstAppareance": 1966,
                "constructorsChampionships": 8,
                "driversChampionships": 12,
                "url": "https://en.wikipedia.org/wiki/McLaren",
            },
        },
        {
            "classificationId": 2,
            "driverId": "max_verstappen",
            "teamId": "red_bull",
            "points": 61,
            "position": 2,
            "wins": 1,
            "driver": {
                "name": "Max",
                "surname": "Verstappen",
                "nationality": "Netherlands",
                "number": 33,
                "shortName": "VER",
            },
            "team": {"teamId": "red_bull", "teamName": "Red Bull Racing", "country": "Austria"},
        },
        {
            "classificationId": 3,
            "driverId": "piastri",
            "teamId": "mclaren",
            "points": 49,
            "position": 3,
            "wins": 1,
            "driver": {
                "name": "Oscar",
                "surname": "Piastri",
                "nationality": "Australia",
                "number": 81,
                "shortName": "PIA",
            },
            "team": {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "country": "Great Britain"},
        },
        {
            "classificationId": 4,
            "driverId": "russell",
            "teamId": "mercedes",
            "points": 45,
            "position": 4,
            "wins": 0,
            "driver": {
                "name": "George",
                "surname": "Russell",
                "nationality": "Great Britain",
                "number": 63,
                "shortName": "RUS",
            },
            "team": {"teamId": "mercedes", "teamName": "Mercedes-AMG Petronas F1 Team", "country": "Germany"},
        },
    ],
}

SAMPLE_TEAMS = {
    "api": "https://f1api.dev",
    "url": "https://f1api.dev/api/current/constructors-championship",
    "limit": 30,
    "offset": 0,
    "total": 4,
    "season": 2025,
    "championshipId": "f1_2025",
    "constructors_championship": [
        {
            "classificationId": 1,
            "teamId": "mclaren",
            "points": 111,
            "position": 1,
            "wins": 2,
            "team": {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team", "country": "Great Britain"},
        },
        {
            "classificationId": 2,
            "teamId": "mercedes",
            "points": 75,
            "position": 2,
            "wins": 0,
            "team": {"teamId": "mercedes", "teamName": "Mercedes-AMG Petronas F1 Team", "country": "Germany"},
        },
        {
            "classificationId": 3,
            "teamId": "red_bull",
            "points": 61,
            "position": 3,
            "wins": 1,
            "team": {"teamId": "red_bull", "teamName": "Red Bull Racing", "country": "Austria"},
        },
        {
            "classificationId": 4,
            "teamId": "ferrari",
            "points": 35,
            "position": 4,
            "wins": 0,
            "team": {"teamId": "ferrari", "teamName": "Scuderia Ferrari", "country": "Italy"},
        },
    ],
}

SAMPLE_ERROR = {
    "api": "https://f1api.dev",
    "url": "https://f1api.dev/api/current/next",
    "message": "No next race found for the current season",
    "status": 404,
}


def make_event(payload: dict = SAMPLE_NEXT_RACE) -> RaceEvent:
    return RaceEvent(
        race=payload["race"][0],
        round=payload["round"],
        season=payload.get("season"),
    )


def make_drivers(payload: dict = SAMPLE_DRIVERS) -> list[DriverStanding]:
    return [DriverStanding.model_validate(d) for d in payload["drivers_championship"]]


def make_teams(payload: dict = SAMPLE_TEAMS) -> list[TeamStanding]:
    return [TeamStanding.model_validate(t) for t in payload["constructors_championship"]]


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def snapshot() -> SeasonSnapshot:
    return SeasonSnapshot(next_race=make_event(), drivers=make_drivers(), teams=make_teams())


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo configure_logging() so caplog sees f1topic records."""
    pkg_logger = logging.getLogger("f1topic")
    yield
    for handler in pkg_logger.handlers[:]:
        handler.close()
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from f1topic.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
