"""Formatting helpers for race labels, flags, badges and numbers."""

from __future__ import annotations

import datetime as dt

from f1topic.constants import (
    COUNTRY_CODES,
    COUNTRY_FLAGS,
    DEFAULT_FLAG,
    DRIVER_EMOJIS,
    RACE_NAME_KEYWORDS,
    TEAM_BADGES,
    UNKNOWN_COUNTRY_CODE,
    UNKNOWN_TEAM,
    TeamBadge,
)

WEEKEND_START_OFFSET = dt.timedelta(days=2)


def extract_race_name(full_name: str) -> str:
    """Shorten a sponsor-laden race title to a country or city label.

    "Lenovo Japanese Grand Prix 2025" -> "Japan". Titles matching no known
    keyword lose their first word (sponsor) and last two ("Grand Prix"
    and the year), so a three-word title becomes an empty string.
    """
    for keywords, label in RACE_NAME_KEYWORDS:
        if any(keyword in full_name for keyword in keywords):
            return label

    parts = full_name.split()
    if len(parts) > 2:
        return " ".join(parts[1:-2])
    return full_name


def country_code(race_name: str, country: str) -> str:
    """Resolve the two-letter flag code for a race.

    The upstream ``country`` field is empty for some races, so Japan and
    China are inferred from the title before the field is consulted.
    """
    short_name = extract_race_name(race_name)
    lowered = race_name.lower()
    if short_name == "Japan" or "japanese" in lowered:
        return "jp"
    if short_name == "China" or "chinese" in lowered:
        return "cn"
    if country:
        if country in COUNTRY_CODES:
            return COUNTRY_CODES[country]
        if len(country) >= 2:
            return country[:2].lower()
    return UNKNOWN_COUNTRY_CODE


def driver_emoji(driver_id: str) -> str:
    return DRIVER_EMOJIS.get(driver_id, "")


def nationality_flag(nationality: str) -> str:
    return COUNTRY_FLAGS.get(nationality, DEFAULT_FLAG)


def team_badge(team_id: str) -> TeamBadge:
    """Emoji and abbreviation for a team, or the ``unknown`` entry.

    A table without the ``unknown`` entry is a misconfiguration and raises
    KeyError.
    """
    if team_id in TEAM_BADGES:
        return TEAM_BADGES[team_id]
    return TEAM_BADGES[UNKNOWN_TEAM]


def format_points(points: float, digits: int = 1) -> str:
    return f"{points:.{digits}f}"


def format_long_date(day: dt.date) -> str:
    """Format a date as "March 16, 2025"."""
    return f"{day:%B} {day.day}, {day.year}"


def format_race_time(race_time: dt.time | None) -> str:
    """Format a race start as " at 15:00 UTC", or "" when unknown."""
    if race_time is None:
        return ""
    zone = race_time.tzname() or "UTC"
    return f" at {race_time:%H:%M} {zone}"


def weekend_span(race_day: dt.date) -> str:
    """Format the Friday-to-Sunday span ending on ``race_day`` as "Mar 14-16"."""
    start = race_day - WEEKEND_START_OFFSET
    return f"{start:%b} {start.day}-{race_day.day}"
