# pool_scoring.py - scores a parsed confidence pool against final game results
#
# A participant earns a pick's confidence points when the team on that pick wins a final game.
# Picks are matched to games by team name only, never by game index.

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from game_results import GameResult
from pool_config import LEADERBOARD_COLUMNS
from pool_parser import ErrorKind, Pick, PoolData
from team_names import normalize_team_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    score: float

# -----------------------------
# Scoring
# -----------------------------
def find_pick(picks: Sequence[Pick], team: str) -> Optional[Pick]:
    """First pick on `team`; later duplicates are ignored."""
    matches = [p for p in picks if p.team == team]
    if len(matches) > 1:
        logger.debug(
            "%s: %d picks on %s, using the first",
            ErrorKind.DUPLICATE_PICK_FOR_TEAM.value, len(matches), team,
        )
    return matches[0] if matches else None

def compute_scores(
    pool: PoolData,
    results: Iterable[GameResult],
    team_names: Optional[Mapping[str, str]] = None,
) -> Dict[str, float]:
    """
    Points per participant from every final game in `results`.
    Pure: rebuilt from scratch on each call, nothing cached between calls.
    """
    scores: Dict[str, float] = {p: 0 for p in pool.participants}

    for game in results:
        if not game.is_final:
            logger.debug("Game %s not final (%s), skipping", game.id, game.completion_state.value)
            continue

        winner = game.winner()
        if winner is None:
            continue
        team = normalize_team_name(winner.display_name, team_names)

        for participant in scores:
            pick = find_pick(pool.picks_for(participant), team)
            # malformed confidence counts as zero
            if pick is not None and pick.has_valid_confidence:
                scores[participant] += pick.confidence

    return scores

# -----------------------------
# Leaderboard
# -----------------------------
def _ordered_names(scores: Mapping[str, float], participants: Optional[Sequence[str]]) -> List[str]:
    names = list(participants) if participants is not None else list(scores)
    seen = set()
    ordered = []
    for name in names:
        if name in scores and name not in seen:
            seen.add(name)
            ordered.append(name)
    return ordered

def build_leaderboard(
    scores: Mapping[str, float],
    participants: Optional[Sequence[str]] = None,
) -> List[LeaderboardEntry]:
    """Highest score first; equal scores keep participant order."""
    names = _ordered_names(scores, participants)
    ranked = sorted(names, key=lambda n: -scores[n])
    return [LeaderboardEntry(name=n, score=scores[n]) for n in ranked]

def leaderboard_frame(
    scores: Mapping[str, float],
    participants: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    rows = [{"Name": n, "Score": scores[n]} for n in _ordered_names(scores, participants)]
    df = pd.DataFrame(rows, columns=["Name", "Score"])
    if not df.empty:
        df = df.sort_values(by="Score", ascending=False, kind="mergesort").reset_index(drop=True)
    df.insert(0, "Rank", list(range(1, len(df) + 1)))
    return df[LEADERBOARD_COLUMNS]
