import sys

from leaderboard.main import run

sys.exit(run())
