from typing import List

from arcade.models import LeaderboardEntry

MAX_LEADERBOARD_LIMIT = 100


def clamp_limit(limit, default: int) -> int:
    try:
        limit = int(limit) if limit is not None else default
    except (TypeError, ValueError):
        limit = default
    return max(1, min(limit, MAX_LEADERBOARD_LIMIT))


def top_entries(limit: int) -> List[dict]:
    """Highest scores first; ties go to whoever submitted earlier."""
    rows = (
        LeaderboardEntry.query
        .order_by(LeaderboardEntry.score.desc(), LeaderboardEntry.created_at.asc(), LeaderboardEntry.id.asc())
        .limit(limit)
        .all()
    )
    ranked = []
    for rank, entry in enumerate(rows, start=1):
        item = entry.to_dict()
        item['rank'] = rank
        ranked.append(item)
    return ranked
