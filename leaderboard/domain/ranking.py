from typing import List

from leaderboard.models.dc_models import LeaderboardEntry

MAX_ENTRIES = 10


def sort_entries(entries: List[LeaderboardEntry]) -> List[LeaderboardEntry]:
    """Sort by score, highest first.

    sorted() is stable with reverse=True, so equal scores keep their stored order.
    """
    return sorted(entries, key=lambda entry: entry.score, reverse=True)


def merge_entry(
    entries: List[LeaderboardEntry],
    entry: LeaderboardEntry,
    limit: int = MAX_ENTRIES,
) -> List[LeaderboardEntry]:
    """Append a new entry to the ranked collection, re-sort it and drop the surplus

    Args:
        entries (List[LeaderboardEntry]): The currently stored collection
        entry (LeaderboardEntry): The entry being submitted
        limit (int, optional): Capacity of the collection. Defaults to MAX_ENTRIES.

    Returns:
        List[LeaderboardEntry]: The new collection, at most `limit` long
    """
    merged = sort_entries([*entries, entry])
    return merged[:limit]
