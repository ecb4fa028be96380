# pool_config.py - layout and feed constants for the confidence pool scoreboard

import re

# -----------------------------
# Spreadsheet layout
# -----------------------------
HEADER_ROW = 0
TEAM_COLUMN = 0
FIRST_PICK_COLUMN = 2  # column 1 is reserved
ROWS_PER_GAME = 2      # away row + home row

# -----------------------------
# Results feed
# -----------------------------
FEED_STATE_SCHEDULED = "pre"
FEED_STATE_IN_PROGRESS = "in"
FEED_STATE_FINAL = "post"

HOME = "home"
AWAY = "away"

# e.g. "week_14.xls", "Week-3.xlsx", "week 7.xls"
WEEK_FILENAME_RE = re.compile(r"week[_\s-]?(\d+)", re.I)

# -----------------------------
# Leaderboard
# -----------------------------
LEADERBOARD_COLUMNS = ["Rank", "Name", "Score"]
