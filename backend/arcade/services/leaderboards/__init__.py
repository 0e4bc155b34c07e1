"""Leaderboard domain services: validation, storage and per-game fan-out.

Imported by HTTP routes, socket handlers and CLI commands so that request
parsing stays out of the storage code.
"""
from .fanout import run_per_game
from .settings import ALL_GAMES, LeaderboardSettings, get_settings, init_settings
from .store import count_entries, delete_entries, fetch_page, get_page, insert_entry
from .validation import (
    DEFAULT_LIMIT,
    DEFAULT_NAME,
    MAX_LIMIT,
    MAX_NAME_LENGTH,
    clamp_limit,
    clamp_offset,
    parse_score,
    sanitize_name,
)

SUBMIT_PAGE_SIZE = 5
