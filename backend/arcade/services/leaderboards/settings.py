from dataclasses import dataclass
from typing import Tuple

from flask import current_app

ALL_GAMES = 'all'
_EXTENSION_KEY = 'leaderboards'


@dataclass(frozen=True)
class LeaderboardSettings:
    """Startup configuration for the leaderboard service. Never mutated."""

    games: Tuple[str, ...]
    admin_key: str = ''
    max_workers: int = 4

    @classmethod
    def from_config(cls, config) -> 'LeaderboardSettings':
        games = config.get('LEADERBOARD_GAMES') or ()
        if isinstance(games, str):
            games = [g.strip() for g in games.split(',')]
        # dedupe but keep configured order
        ordered = tuple(dict.fromkeys(g for g in games if g))
        if ALL_GAMES in ordered:
            raise ValueError(f"'{ALL_GAMES}' is reserved and cannot be a game identifier")
        return cls(
            games=ordered,
            admin_key=config.get('ADMIN_KEY') or '',
            max_workers=max(1, int(config.get('LEADERBOARD_MAX_WORKERS', 4))),
        )

    @property
    def auth_enabled(self) -> bool:
        return bool(self.admin_key)

    def is_allowed(self, game: str) -> bool:
        return game in self.games


def init_settings(app) -> LeaderboardSettings:
    settings = LeaderboardSettings.from_config(app.config)
    app.extensions[_EXTENSION_KEY] = settings
    return settings


def get_settings() -> LeaderboardSettings:
    return current_app.extensions[_EXTENSION_KEY]
