from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from arcade import db, socketio
from arcade.services.leaderboards import (
    SUBMIT_PAGE_SIZE,
    clamp_limit,
    clamp_offset,
    get_page,
    get_settings,
    insert_entry,
    parse_score,
    run_per_game,
    sanitize_name,
)


leaderboards = Blueprint('leaderboards', __name__)


def _paging_args():
    return clamp_limit(request.args.get('limit')), clamp_offset(request.args.get('offset'))


@leaderboards.route('', methods=['GET'])
def get_all_leaderboards():
    settings = get_settings()
    limit, offset = _paging_args()
    app = current_app._get_current_object()
    try:
        pages = run_per_game(
            app,
            settings.games,
            lambda game: get_page(game, limit, offset),
            max_workers=settings.max_workers,
        )
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[fetch-all-failed] limit={limit} offset={offset}")
        return jsonify({'error': 'Failed to fetch leaderboards'}), 500
    return jsonify(pages)


@leaderboards.route('/<string:game>', methods=['GET'])
def get_leaderboard(game):
    if not get_settings().is_allowed(game):
        return jsonify({'error': 'Unknown game'}), 400
    limit, offset = _paging_args()
    try:
        page = get_page(game, limit, offset)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[fetch-failed] game={game}")
        return jsonify({'error': 'Failed to fetch leaderboard'}), 500
    return jsonify({'game': game, **page})


@leaderboards.route('/<string:game>', methods=['POST'])
def submit_score(game):
    if not get_settings().is_allowed(game):
        return jsonify({'error': 'Unknown game'}), 400
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    name = sanitize_name(data.get('name'))
    score = parse_score(data.get('score'))
    if score is None:
        return jsonify({'error': 'Invalid score'}), 400

    try:
        entry = insert_entry(game, name, score).to_entry_dict()
        # Not transactional with the insert; a concurrent submit may land in between
        page = get_page(game, SUBMIT_PAGE_SIZE, 0)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[submit-failed] game={game}")
        return jsonify({'error': 'Failed to submit score'}), 500

    current_app.logger.info(f"[submit] game={game} id={entry['id']} score={score} total={page['total']}")
    try:
        socketio.emit(
            'leaderboard_update',
            {'game': game, 'entry': entry, 'total': page['total']},
            to=f"leaderboard:{game}",
            namespace='/ws',
        )
    except Exception:
        # The score is already stored; a failed push must not fail the submit
        current_app.logger.exception(f"[submit-emit-failed] game={game} id={entry['id']}")
    return jsonify({'entry': entry, **page}), 201
