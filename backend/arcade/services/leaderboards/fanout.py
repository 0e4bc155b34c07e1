from typing import Callable, Dict, Iterable, TypeVar

from arcade import socketio

T = TypeVar('T')


def run_per_game(app, games: Iterable[str], func: Callable[[str], T], max_workers: int = 1) -> Dict[str, T]:
    """Run ``func(game)`` for every game and wait for all of them.

    With more than one worker the calls run as Socket.IO background tasks,
    at most ``max_workers`` at a time, each inside its own application
    context so it gets its own database session. The first error raised by
    any call is re-raised once every call has finished. Results keep the
    order of ``games``.
    """
    games = list(games)
    if max_workers <= 1 or len(games) <= 1:
        return {game: func(game) for game in games}

    results: Dict[str, T] = {}
    errors: Dict[str, BaseException] = {}

    def _task(game: str) -> None:
        with app.app_context():
            try:
                results[game] = func(game)
            except Exception as exc:
                errors[game] = exc

    for start in range(0, len(games), max_workers):
        batch = [socketio.start_background_task(_task, game) for game in games[start:start + max_workers]]
        for task in batch:
            task.join()

    for game in games:
        if game in errors:
            raise errors[game]
    return {game: results[game] for game in games}
