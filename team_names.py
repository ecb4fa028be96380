# team_names.py - results-feed franchise names -> spreadsheet team names

import logging
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Full display name (as the scoreboard feed reports it) -> short name used in the pool sheet
NFL_TEAM_NAMES: Mapping[str, str] = MappingProxyType({
    "Arizona Cardinals": "Arizona",
    "Atlanta Falcons": "Atlanta",
    "Baltimore Ravens": "Baltimore",
    "Buffalo Bills": "Buffalo",
    "Carolina Panthers": "Carolina",
    "Chicago Bears": "Chicago",
    "Cincinnati Bengals": "Cincinnati",
    "Cleveland Browns": "Cleveland",
    "Dallas Cowboys": "Dallas",
    "Denver Broncos": "Denver",
    "Detroit Lions": "Detroit",
    "Green Bay Packers": "Green Bay",
    "Houston Texans": "Houston",
    "Indianapolis Colts": "Indianapolis",
    "Jacksonville Jaguars": "Jacksonville",
    "Kansas City Chiefs": "Kansas City",
    "Las Vegas Raiders": "Las Vegas",
    "Los Angeles Chargers": "LA Chargers",
    "Los Angeles Rams": "LA Rams",
    "Miami Dolphins": "Miami",
    "Minnesota Vikings": "Minnesota",
    "New England Patriots": "New England",
    "New Orleans Saints": "New Orleans",
    "New York Giants": "NY Giants",
    "New York Jets": "NY Jets",
    "Philadelphia Eagles": "Philadelphia",
    "Pittsburgh Steelers": "Pittsburgh",
    "San Francisco 49ers": "San Francisco",
    "Seattle Seahawks": "Seattle",
    "Tampa Bay Buccaneers": "Tampa Bay",
    "Tennessee Titans": "Tennessee",
    "Washington Commanders": "Washington",
    # relocated / renamed franchises still found in older feeds
    "Oakland Raiders": "Las Vegas",
    "San Diego Chargers": "LA Chargers",
    "St. Louis Rams": "LA Rams",
    "Washington Football Team": "Washington",
    "Washington Redskins": "Washington",
})


def normalize_team_name(full_name: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Map a feed display name to the sheet's team name. Unknown names pass through unchanged."""
    names = NFL_TEAM_NAMES if table is None else table
    short = names.get(full_name)
    if short is None:
        logger.debug("UnmappedTeamName: %r not in team table, using as-is", full_name)
        return full_name
    return short
