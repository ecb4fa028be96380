# game_results.py - game result records and the scoreboard-feed adapter

import logging
import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from pool_config import (
    AWAY,
    FEED_STATE_FINAL,
    FEED_STATE_IN_PROGRESS,
    FEED_STATE_SCHEDULED,
    HOME,
    WEEK_FILENAME_RE,
)

logger = logging.getLogger(__name__)

# leading integer, the way a lenient int parse reads "24", " 17 ", "21.0"
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# -----------------------------
# Data structures
# -----------------------------
class CompletionState(Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    FINAL = "final"


FEED_STATES = {
    FEED_STATE_SCHEDULED: CompletionState.SCHEDULED,
    FEED_STATE_IN_PROGRESS: CompletionState.IN_PROGRESS,
    FEED_STATE_FINAL: CompletionState.FINAL,
}


@dataclass(frozen=True)
class Competitor:
    display_name: str
    score: Any  # numeric string or number, as the feed sends it

    @property
    def points(self) -> Optional[int]:
        return parse_score(self.score)


@dataclass(frozen=True)
class GameResult:
    id: str
    home_team: Competitor
    away_team: Competitor
    completion_state: CompletionState
    status_label: str = ""

    @property
    def is_final(self) -> bool:
        return self.completion_state is CompletionState.FINAL

    def winner(self) -> Optional[Competitor]:
        """Strictly higher score on a final game wins. Ties and unreadable scores have no winner."""
        if not self.is_final:
            return None
        home, away = self.home_team.points, self.away_team.points
        if home is None or away is None or home == away:
            logger.debug(
                "AmbiguousWinner: game %s %s %r - %s %r",
                self.id, self.home_team.display_name, self.home_team.score,
                self.away_team.display_name, self.away_team.score,
            )
            return None
        return self.home_team if home > away else self.away_team

# -----------------------------
# Parsing helpers
# -----------------------------
def parse_score(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        m = LEADING_INT_RE.match(value)
        return int(m.group(1)) if m else None
    return None

def week_from_filename(filename: str) -> Optional[int]:
    """'week_14.xls' -> 14; None when the name carries no week number."""
    m = WEEK_FILENAME_RE.search(filename or "")
    return int(m.group(1)) if m else None

def _competitor(event_id: str, competitors: List[Dict[str, Any]], side: str) -> Competitor:
    entry = next((c for c in competitors if c.get("homeAway") == side), None)
    if entry is None:
        raise ValueError(f"Event {event_id}: no {side} competitor")
    team = entry.get("team") or {}
    return Competitor(display_name=team.get("displayName", ""), score=entry.get("score"))

def game_result_from_event(event: Dict[str, Any]) -> GameResult:
    event_id = str(event.get("id", ""))
    status_type = (event.get("status") or {}).get("type") or {}
    state = status_type.get("state")
    completion = FEED_STATES.get(state)
    if completion is None:
        logger.debug("Event %s: unknown state %r, treating as scheduled", event_id, state)
        completion = CompletionState.SCHEDULED

    competitions = event.get("competitions") or []
    if not competitions:
        raise ValueError(f"Event {event_id}: no competitions")
    competitors = competitions[0].get("competitors") or []

    return GameResult(
        id=event_id,
        home_team=_competitor(event_id, competitors, HOME),
        away_team=_competitor(event_id, competitors, AWAY),
        completion_state=completion,
        status_label=(status_type.get("name") or "").replace("_", " "),
    )

def game_results_from_events(events: Iterable[Dict[str, Any]]) -> List[GameResult]:
    """Convert scoreboard feed events into GameResult records, keeping feed order."""
    return [game_result_from_event(e) for e in events]
