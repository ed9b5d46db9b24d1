"""Static lookup tables and fixed values for topic rendering."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

BASE_URL = "https://f1api.dev/api"

TOTAL_RACES = 24
TOPIC_MAX_LENGTH = 250
DEFAULT_FANTASY_CODE = "C14SOD0WQ01"
TOP_N = 3

ERROR_PREFIX = "ERROR:"
UNKNOWN_TEAM = "unknown"
UNKNOWN_COUNTRY_CODE = "unknown"
DEFAULT_FLAG = ":flag-xx:"


class TeamBadge(NamedTuple):
    emoji: str
    abbr: str


TEAM_BADGES: MappingProxyType[str, TeamBadge] = MappingProxyType({
    "mclaren": TeamBadge(":m1::f1tl:", "MCL"),
    "mercedes": TeamBadge(":f1tm:", "MER"),
    "red_bull": TeamBadge(":f1tr:", "RBR"),
    "ferrari": TeamBadge(":f1tf:", "FER"),
    "aston_martin": TeamBadge(":f1ta:", "AST"),
    "williams": TeamBadge(":f1tw:", "WIL"),
    "alpine": TeamBadge(":f1ta:", "ALP"),
    "haas": TeamBadge(":f1th:", "HAA"),
    "rb": TeamBadge(":f1tb:", "RB"),
    "sauber": TeamBadge(":f1ts:", "SAU"),
    UNKNOWN_TEAM: TeamBadge("", "UNK"),
})

DRIVER_EMOJIS: MappingProxyType[str, str] = MappingProxyType({
    "norris": ":f1ln:",
    "max_verstappen": ":f1mv:",
    "russell": ":f1gr:",
    "piastri": ":f1op:",
    "hamilton": ":f1lh:",
    "leclerc": ":f1cl:",
    "sainz": ":f1cs:",
    "alonso": ":f1fa:",
    "stroll": ":f1ls:",
    "albon": ":f1aa:",
    "tsunoda": ":f1yt:",
    "hulkenberg": ":f1nh:",
    "ocon": ":f1eo:",
    "gasly": ":f1pg:",
})

# Driver nationality -> flag emoji
COUNTRY_FLAGS: MappingProxyType[str, str] = MappingProxyType({
    "Great Britain": ":gb:",
    "Netherlands": ":flag-nl:",
    "Australia": ":flag-au:",
    "Monaco": ":flag-mc:",
    "Spain": ":flag-es:",
    "Mexico": ":flag-mx:",
    "Canada": ":flag-ca:",
    "Japan": ":flag-jp:",
    "France": ":flag-fr:",
    "Thailand": ":flag-th:",
    "China": ":flag-cn:",
    "United States": ":flag-us:",
    "Italy": ":flag-it:",
    "Germany": ":flag-de:",
})

# Race country -> ISO two-letter code used in :flag-xx: emojis
COUNTRY_CODES: MappingProxyType[str, str] = MappingProxyType({
    "China": "cn",
    "Japan": "jp",
    "Great Britain": "gb",
    "United Kingdom": "gb",
    "United States": "us",
    "USA": "us",
    "Australia": "au",
    "Netherlands": "nl",
    "Italy": "it",
    "France": "fr",
    "Germany": "de",
    "Spain": "es",
    "Monaco": "mc",
    "Canada": "ca",
    "Mexico": "mx",
    "Brazil": "br",
    "Austria": "at",
    "Belgium": "be",
    "Hungary": "hu",
    "Singapore": "sg",
    "Russia": "ru",
    "Azerbaijan": "az",
    "Bahrain": "bh",
    "United Arab Emirates": "ae",
    "Abu Dhabi": "ae",
    "Qatar": "qa",
    "Saudi Arabia": "sa",
    "Thailand": "th",
    "Switzerland": "ch",
})

# Ordered: earlier entries win when a title contains several keywords.
RACE_NAME_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("Japanese",), "Japan"),
    (("Chinese",), "China"),
    (("Monaco",), "Monaco"),
    (("British",), "Britain"),
    (("Italian",), "Italy"),
    (("Spanish",), "Spain"),
    (("Australian",), "Australia"),
    (("Hungarian",), "Hungary"),
    (("Belgian",), "Belgium"),
    (("Dutch",), "Netherlands"),
    (("United States", "USA"), "USA"),
    (("Mexico", "Mexican"), "Mexico"),
    (("Brazil", "Brazilian", "São Paulo"), "Brazil"),
    (("Abu Dhabi",), "Abu Dhabi"),
    (("Qatar",), "Qatar"),
    (("Singapore",), "Singapore"),
    (("Saudi", "Jeddah"), "Saudi Arabia"),
    (("Bahrain",), "Bahrain"),
    (("Miami",), "Miami"),
    (("Las Vegas",), "Las Vegas"),
    (("Canada", "Canadian", "Montreal"), "Canada"),
    (("Azerbaijan", "Baku"), "Azerbaijan"),
)
