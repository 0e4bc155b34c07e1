import hmac

from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from arcade import db, socketio
from arcade.services.leaderboards import ALL_GAMES, delete_entries, get_settings, run_per_game


admin = Blueprint('admin', __name__)


def _key_matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode('utf-8'), expected.encode('utf-8'))


@admin.route('/reset/<string:game>', methods=['POST'])
def reset_leaderboard(game):
    """Delete every entry for one game, or for all games with ``all``.

    When ADMIN_KEY is empty this route is open to anyone.
    """
    settings = get_settings()
    if game != ALL_GAMES and not settings.is_allowed(game):
        return jsonify({'error': 'Unknown game'}), 400
    if settings.auth_enabled and not _key_matches(request.args.get('key', ''), settings.admin_key):
        current_app.logger.warning(f"[reset-denied] game={game} remote={request.remote_addr}")
        return jsonify({'error': 'Unauthorized'}), 401

    targets = list(settings.games) if game == ALL_GAMES else [game]
    try:
        deleted = run_per_game(
            current_app._get_current_object(),
            targets,
            delete_entries,
            max_workers=settings.max_workers,
        )
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[reset-failed] game={game}")
        return jsonify({'error': 'Failed to reset leaderboard'}), 500

    current_app.logger.info(f"[reset] cleared={targets} deleted={deleted}")
    for cleared in targets:
        try:
            socketio.emit('leaderboard_reset', {'game': cleared}, to=f"leaderboard:{cleared}", namespace='/ws')
        except Exception:
            current_app.logger.exception(f"[reset-emit-failed] game={cleared}")
    return jsonify({'ok': True, 'cleared': targets})
