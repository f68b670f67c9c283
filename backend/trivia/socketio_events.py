from flask import current_app
from flask_socketio import join_room, leave_room, emit

from trivia import socketio
from trivia.services.games.broadcast import (
    NAMESPACE,
    LOBBY_ROOM,
    session_room,
    session_snapshot,
)
from trivia.services.games.sessions import list_game_sessions


def _session_id_from(data):
    raw = (data or {}).get('session_id')
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def handle_connect():
    emit('connected', {'message': f'Connected to {NAMESPACE}'})


def handle_join_session(data):
    session_id = _session_id_from(data)
    if session_id is None:
        emit('error', {'message': 'session_id is required'})
        return
    room = session_room(session_id)
    join_room(room)
    current_app.logger.debug(f"[join] room={room}")
    emit('joined', {'room': room})
    # Late joiners render from this snapshot until the next push
    emit('state_update', session_snapshot(session_id))


def handle_leave_session(data):
    session_id = _session_id_from(data)
    if session_id is None:
        emit('error', {'message': 'session_id is required'})
        return
    room = session_room(session_id)
    leave_room(room)
    current_app.logger.debug(f"[leave] room={room}")
    emit('left', {'room': room})


def handle_join_lobby(data=None):
    join_room(LOBBY_ROOM)
    emit('joined', {'room': LOBBY_ROOM})
    emit('sessions_update', {'sessions': list_game_sessions()})


def handle_leave_lobby(data=None):
    leave_room(LOBBY_ROOM)
    emit('left', {'room': LOBBY_ROOM})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('join_session', handle_join_session, namespace=NAMESPACE)
    socketio.on_event('leave_session', handle_leave_session, namespace=NAMESPACE)
    socketio.on_event('join_lobby', handle_join_lobby, namespace=NAMESPACE)
    socketio.on_event('leave_lobby', handle_leave_lobby, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
