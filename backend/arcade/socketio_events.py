from flask_socketio import join_room, leave_room, emit
from arcade import socketio
from arcade.services.leaderboards import get_settings


def _room_for(data):
    """Resolve the room for a payload, emitting an error if it is unusable."""
    game = (data or {}).get('game')
    if not game:
        emit('error', {'message': 'game is required'})
        return None
    if not get_settings().is_allowed(game):
        emit('error', {'message': 'Unknown game'})
        return None
    return f"leaderboard:{game}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_leaderboard(data):
    room = _room_for(data)
    if room is None:
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_leaderboard(data):
    room = _room_for(data)
    if room is None:
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_leaderboard', handle_join_leaderboard, namespace=namespace)
        socketio.on_event('leave_leaderboard', handle_leave_leaderboard, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
