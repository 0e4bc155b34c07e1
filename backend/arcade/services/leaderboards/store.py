from typing import Any, Dict, List

from arcade import db
from arcade.models import LeaderboardEntry


def fetch_page(game: str, limit: int, offset: int) -> List[Dict[str, Any]]:
    rows = LeaderboardEntry.ranked(game).limit(limit).offset(offset).all()
    return [row.to_dict() for row in rows]


def count_entries(game: str) -> int:
    return LeaderboardEntry.query.filter_by(game=game).count()


def get_page(game: str, limit: int, offset: int) -> Dict[str, Any]:
    """One page of a game's leaderboard plus its total entry count."""
    return {
        'entries': fetch_page(game, limit, offset),
        'total': count_entries(game),
        'limit': limit,
        'offset': offset,
    }


def insert_entry(game: str, name: str, score: int) -> LeaderboardEntry:
    entry = LeaderboardEntry(game=game, name=name, score=score)
    db.session.add(entry)
    db.session.commit()
    return entry


def delete_entries(game: str) -> int:
    deleted = LeaderboardEntry.query.filter_by(game=game).delete(synchronize_session=False)
    db.session.commit()
    return deleted
