from flask_socketio import join_room, leave_room, emit
from flask import current_app
from arcade import socketio

NAMESPACE = '/ws'
# Per-game rooms are "leaderboard:<gameId>"; the global room has no separator.
GLOBAL_ROOM = 'leaderboard'


def leaderboard_room(game_id=None):
    if game_id is None:
        return GLOBAL_ROOM
    return f"leaderboard:{game_id}"


def _room_for_payload(data):
    """Room named by a join/leave payload, or None when the payload is unusable."""
    if data is None:
        return GLOBAL_ROOM
    if not isinstance(data, dict):
        return None
    game_id = data.get('gameId')
    if game_id is None or game_id == '':
        return GLOBAL_ROOM
    if not isinstance(game_id, str):
        return None
    return leaderboard_room(game_id)


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_leaderboard(data=None):
    room = _room_for_payload(data)
    if room is None:
        emit('error', {'message': 'join_leaderboard expects {"gameId": <string>}'})
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_leaderboard(data=None):
    room = _room_for_payload(data)
    if room is None:
        emit('error', {'message': 'leave_leaderboard expects {"gameId": <string>}'})
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data=None):
    emit('pong', data if isinstance(data, dict) else {})


def broadcast_leaderboard_update(game_id):
    """Tell subscribers of the global and per-game boards to refetch."""
    payload = {'gameId': game_id}
    for room in (leaderboard_room(), leaderboard_room(game_id)):
        socketio.emit('leaderboard_update', payload, to=room, namespace=NAMESPACE)
    current_app.logger.info(f"[leaderboard-push] game={game_id}")


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = [NAMESPACE, '/'] if testing else [NAMESPACE]
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_leaderboard', handle_join_leaderboard, namespace=namespace)
        socketio.on_event('leave_leaderboard', handle_leave_leaderboard, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
