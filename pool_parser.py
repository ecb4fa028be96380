# pool_parser.py - turns a weekly confidence pool spreadsheet grid into PoolData
#
# Grid layout:
#   row 0        : "", "", participant names...
#   rows 1..     : pairs of team rows (away, home) per game
#                  column 0 = team name, columns 2.. = confidence per participant
#   other rows   : anything without a team name in column 0 is skipped

import logging
import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from pool_config import FIRST_PICK_COLUMN, HEADER_ROW, ROWS_PER_GAME, TEAM_COLUMN

logger = logging.getLogger(__name__)

Cell = Any
Grid = Sequence[Sequence[Cell]]

# ASCII decimal only: "12", "-3", "2.5", ".5", "1e2"; no "1_0", no non-Latin digits
PLAIN_NUMBER_RE = re.compile(
    r"^[+-]?(?:(?P<int>[0-9]+)|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)$"
)

# -----------------------------
# Errors
# -----------------------------
class ErrorKind(Enum):
    NO_TEAM_DATA = "NoTeamData"
    MALFORMED_CONFIDENCE = "MalformedConfidence"
    AMBIGUOUS_WINNER = "AmbiguousWinner"
    UNMAPPED_TEAM_NAME = "UnmappedTeamName"
    DUPLICATE_PICK_FOR_TEAM = "DuplicatePickForTeam"


@dataclass(frozen=True)
class ParseFailure:
    kind: ErrorKind
    message: str


class PoolParseError(ValueError):
    """Raised by parse_pool_or_raise when the grid yields no PoolData."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

# -----------------------------
# Data structures
# -----------------------------
@dataclass(frozen=True)
class Pick:
    team: str
    confidence: float  # NaN when the cell was not a number
    game_index: int

    @property
    def has_valid_confidence(self) -> bool:
        return is_valid_number(self.confidence)


@dataclass(frozen=True)
class PoolData:
    participants: Tuple[str, ...]
    picks: Mapping[str, Tuple[Pick, ...]]
    team_game_map: Mapping[str, int]
    raw_grid: Tuple[Tuple[Cell, ...], ...]

    def picks_for(self, participant: str) -> Tuple[Pick, ...]:
        return self.picks.get(participant, ())

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly dump for debugging; invalid numbers become None."""
        return {
            "participants": list(self.participants),
            "picks": {
                name: [
                    {
                        "team": p.team,
                        "confidence": p.confidence if p.has_valid_confidence else None,
                        "gameIndex": p.game_index,
                    }
                    for p in picks
                ]
                for name, picks in self.picks.items()
            },
            "teamGameMap": dict(self.team_game_map),
            "rawData": [[None if _is_missing(c) else c for c in row] for row in self.raw_grid],
        }


ParseResult = Union[PoolData, ParseFailure]

# -----------------------------
# Cell helpers
# -----------------------------
def is_valid_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value)

def _is_team_cell(value: Cell) -> bool:
    return isinstance(value, str) and value != ""

def _is_missing(value: Cell) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))

def _is_absent(value: Cell) -> bool:
    return _is_missing(value) or value == ""

def _cell(row: Sequence[Cell], col: int) -> Cell:
    return row[col] if col < len(row) else None

def _as_float_sized_int(value: int) -> float:
    try:
        float(value)
    except OverflowError:
        return math.nan
    return value

def _normalize_number(value: float) -> float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

def coerce_confidence(value: Cell) -> float:
    """Best-effort numeric conversion of a pick cell. Returns NaN when it is not a number."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return _as_float_sized_int(int(value))
    if isinstance(value, numbers.Real):
        value = float(value)
        return _normalize_number(value) if math.isfinite(value) else math.nan
    if isinstance(value, str):
        text = value.strip()
        m = PLAIN_NUMBER_RE.match(text)
        if not m:
            return math.nan
        if m.group("int") is not None:
            try:
                return _as_float_sized_int(int(text))
            except ValueError:
                # more digits than int() will read
                return math.nan
        number = float(text)
        return _normalize_number(number) if math.isfinite(number) else math.nan
    return math.nan

def grid_from_frame(df: pd.DataFrame) -> List[List[Cell]]:
    """
    Convert a headerless DataFrame (e.g. pd.read_excel(..., header=None)) into a cell grid.
    NaN cells become None and numpy scalars become plain Python values.
    """
    grid: List[List[Cell]] = []
    for values in df.itertuples(index=False, name=None):
        row = []
        for v in values:
            if pd.isna(v):
                row.append(None)
            elif hasattr(v, "item"):
                row.append(v.item())
            else:
                row.append(v)
        grid.append(row)
    return grid

# -----------------------------
# Parsing
# -----------------------------
def extract_participants(grid: Grid) -> List[str]:
    if len(grid) <= HEADER_ROW:
        return []
    header = grid[HEADER_ROW]
    return [h for h in header[FIRST_PICK_COLUMN:] if _is_team_cell(h)]

def find_first_team_row(grid: Grid) -> Optional[int]:
    for i in range(HEADER_ROW + 1, len(grid)):
        if _is_team_cell(_cell(grid[i], TEAM_COLUMN)):
            return i
    return None

def parse_pool(grid: Grid) -> ParseResult:
    """
    Parse the pool grid:
      Header row -> participants (non-empty strings from column 2 on, in order)
      Team rows  -> one Pick per participant cell that is present
      Every second team row closes a game and bumps the game index.
    Returns ParseFailure(NO_TEAM_DATA) if no row below the header names a team.
    """
    participants = extract_participants(grid)

    first_team_row = find_first_team_row(grid)
    if first_team_row is None:
        message = "No team data found in spreadsheet"
        logger.warning(message)
        return ParseFailure(ErrorKind.NO_TEAM_DATA, message)

    logger.info("Found %d participants", len(participants))
    logger.info(
        "First team row at index %d: %s",
        first_team_row, grid[first_team_row][TEAM_COLUMN],
    )

    picks: Dict[str, List[Pick]] = {p: [] for p in participants}
    team_game_map: Dict[str, int] = {}

    game_index = 0
    team_rows_seen = 0
    for i in range(first_team_row, len(grid)):
        row = grid[i]
        team = _cell(row, TEAM_COLUMN)
        if not _is_team_cell(team):
            continue

        team_game_map[team] = game_index

        for ordinal, participant in enumerate(participants):
            raw = _cell(row, FIRST_PICK_COLUMN + ordinal)
            if _is_absent(raw):
                continue
            confidence = coerce_confidence(raw)
            if not is_valid_number(confidence):
                logger.warning(
                    "%s: %s pick for %s is not a number: %r",
                    ErrorKind.MALFORMED_CONFIDENCE.value, participant, team, raw,
                )
            picks[participant].append(Pick(team=team, confidence=confidence, game_index=game_index))

        team_rows_seen += 1
        if team_rows_seen % ROWS_PER_GAME == 0:
            game_index += 1

    return PoolData(
        participants=tuple(participants),
        picks=MappingProxyType({name: tuple(p) for name, p in picks.items()}),
        team_game_map=MappingProxyType(team_game_map),
        raw_grid=tuple(tuple(row) for row in grid),
    )

def parse_pool_or_raise(grid: Grid) -> PoolData:
    result = parse_pool(grid)
    if isinstance(result, ParseFailure):
        raise PoolParseError(result.kind, result.message)
    return result
