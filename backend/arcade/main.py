from flask import Blueprint, jsonify
from arcade.services.leaderboards import get_settings

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Arcade leaderboard API is running'})


@main.route('/api/health')
def health():
    return jsonify({'status': 'ok', 'games': list(get_settings().games)})
