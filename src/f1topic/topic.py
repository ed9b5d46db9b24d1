"""Detailed and compact (Slack topic) renderings of the current season."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from f1topic.client import F1Client
from f1topic.config import get_settings
from f1topic.constants import ERROR_PREFIX, TOP_N, TOPIC_MAX_LENGTH, TOTAL_RACES
from f1topic.exceptions import F1OverflowError, F1TopicError
from f1topic.formatters import (
    country_code,
    driver_emoji,
    extract_race_name,
    format_long_date,
    format_points,
    format_race_time,
    nationality_flag,
    team_badge,
    weekend_span,
)
from f1topic.models.race import RaceEvent
from f1topic.models.standings import DriverStanding, TeamStanding

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SeasonSnapshot:
    """Outcome of the three season fetches; each is a value or the error it raised."""

    next_race: RaceEvent | F1TopicError
    drivers: list[DriverStanding] | F1TopicError
    teams: list[TeamStanding] | F1TopicError


def _capture(fetch: Callable[[], T]) -> T | F1TopicError:
    try:
        return fetch()
    except F1TopicError as exc:
        logger.warning("Error getting %s: %s", getattr(fetch, "__name__", "data"), exc)
        return exc


def fetch_snapshot(client: F1Client) -> SeasonSnapshot:
    """Run the three fetches in order; a failure is kept in place of its result."""
    return SeasonSnapshot(
        next_race=_capture(client.next_race),
        drivers=_capture(client.driver_standings),
        teams=_capture(client.constructor_standings),
    )


def select_top(entries: Sequence[T], n: int = TOP_N) -> list[T]:
    """First ``n`` entries in their existing rank order, without padding."""
    return list(entries[:n])


def _rank(position: int | None, index: int) -> int:
    return position if position is not None else index


# ── Detailed report ────────────────────────────────────────────


def _detailed_next_race(outcome: RaceEvent | F1TopicError) -> list[str]:
    if isinstance(outcome, F1TopicError):
        return [f"Next race: {outcome}", ""]
    if outcome.date is None:
        return ["Next Race: Unknown (date parsing error)", ""]
    return [
        f"Next Race: {outcome.name} (Round {outcome.round})",
        f"Circuit: {outcome.race.circuit.circuit_name}",
        f"Date: {format_long_date(outcome.date)}{format_race_time(outcome.time)}",
        f"Country: {outcome.race.country}",
        "",
    ]


def _detailed_drivers(outcome: list[DriverStanding] | F1TopicError) -> list[str]:
    if isinstance(outcome, F1TopicError):
        return [f"Driver standings error: {outcome}", ""]
    lines = ["Driver Standings:"]
    for index, standing in enumerate(select_top(outcome), start=1):
        lines.append(
            f"{_rank(standing.position, index)}. {standing.driver.full_name} "
            f"({standing.team.team_name}) - {format_points(standing.points)} points"
        )
    lines.append("")
    return lines


def _detailed_teams(outcome: list[TeamStanding] | F1TopicError) -> list[str]:
    if isinstance(outcome, F1TopicError):
        return [f"Constructor standings error: {outcome}"]
    lines = ["Constructor Standings:"]
    for index, standing in enumerate(select_top(outcome), start=1):
        lines.append(
            f"{_rank(standing.position, index)}. {standing.team.team_name} - "
            f"{format_points(standing.points)} points"
        )
    return lines


def detailed_topic(snapshot: SeasonSnapshot, year: int) -> str:
    """Multi-line report: year header, next race, top drivers, top constructors."""
    lines = [f"F1 Data for {year}", ""]
    lines += _detailed_next_race(snapshot.next_race)
    lines += _detailed_drivers(snapshot.drivers)
    lines += _detailed_teams(snapshot.teams)
    return "\n".join(lines) + "\n"


# ── Compact (Slack topic) ──────────────────────────────────────


def _compact_next_race(outcome: RaceEvent | F1TopicError) -> str:
    if isinstance(outcome, F1TopicError):
        return "Next: No upcoming races"
    short_name = extract_race_name(outcome.name)
    head = f"Next: R{outcome.round}/{TOTAL_RACES} {short_name}"
    if outcome.date is None:
        return head
    code = country_code(outcome.name, outcome.race.country)
    return f"{head} :flag-{code}: ({weekend_span(outcome.date)})"


def _compact_driver(standing: DriverStanding) -> str:
    return (
        f"{driver_emoji(standing.driver_id)}{standing.driver.short_name} "
        f"{nationality_flag(standing.driver.nationality)} "
        f"({format_points(standing.points, 0)})"
    )


def _compact_team(standing: TeamStanding) -> str:
    badge = team_badge(standing.team_id)
    return f"{badge.emoji}{badge.abbr} ({format_points(standing.points, 0)})"


def _compact_standings(
    drivers: list[DriverStanding] | F1TopicError,
    teams: list[TeamStanding] | F1TopicError,
) -> str:
    if isinstance(drivers, F1TopicError):
        driver_part = "No data"
    else:
        driver_part = ", ".join(_compact_driver(d) for d in select_top(drivers))
    if isinstance(teams, F1TopicError):
        team_part = "No constructor data"
    else:
        team_part = ", ".join(_compact_team(t) for t in select_top(teams))
    return f"Standings: {driver_part}; {team_part}"


def build_slack_topic(snapshot: SeasonSnapshot, year: int, fantasy_code: str) -> str:
    """Single-line topic; raises F1OverflowError instead of truncating."""
    line = (
        f":f1: {year} {_compact_next_race(snapshot.next_race)} // "
        f"{_compact_standings(snapshot.drivers, snapshot.teams)} // "
        f"Fantasy: `{fantasy_code}`"
    )
    if len(line) > TOPIC_MAX_LENGTH:
        raise F1OverflowError(length=len(line), limit=TOPIC_MAX_LENGTH)
    return line


def slack_topic(snapshot: SeasonSnapshot, year: int, fantasy_code: str) -> str:
    """Like build_slack_topic, but an overflow becomes an ``ERROR:`` string."""
    try:
        return build_slack_topic(snapshot, year, fantasy_code)
    except F1OverflowError as exc:
        logger.warning("%s", exc)
        return f"{ERROR_PREFIX} {exc}"


def is_error_topic(rendered: str) -> bool:
    return rendered.startswith(ERROR_PREFIX)


# ── Fetch-and-render entry points ──────────────────────────────


def _fetch(client: F1Client | None) -> SeasonSnapshot:
    if client is not None:
        return fetch_snapshot(client)
    with F1Client(timeout=get_settings().timeout) as owned:
        return fetch_snapshot(owned)


def topic(client: F1Client | None = None, year: int | None = None) -> str:
    """Fetch the season data and render the detailed report."""
    snapshot = _fetch(client)
    return detailed_topic(snapshot, year or dt.date.today().year)


def compact_topic(
    client: F1Client | None = None,
    year: int | None = None,
    fantasy_code: str | None = None,
) -> str:
    """Fetch the season data and render the Slack topic (or its ``ERROR:`` marker)."""
    snapshot = _fetch(client)
    return slack_topic(
        snapshot,
        year or dt.date.today().year,
        fantasy_code or get_settings().fantasy_code,
    )
