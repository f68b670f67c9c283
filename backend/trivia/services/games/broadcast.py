"""Push updated projections to Socket.IO rooms after successful commands."""
from flask import current_app

from trivia import socketio
from .play import is_game_over
from .sessions import get_game_session, get_game_questions, list_game_sessions

NAMESPACE = '/ws'
LOBBY_ROOM = 'lobby'


def session_room(session_id: int) -> str:
    return f"session:{session_id}"


def session_snapshot(session_id: int) -> dict:
    """Everything a connected play or setup screen renders for one session."""
    session = get_game_session(session_id)
    if session is None:
        return {'session': None, 'questions': [], 'is_game_over': False}
    return {
        'session': session,
        'questions': get_game_questions(session_id),
        'is_game_over': is_game_over(session_id),
    }


def publish_session_state(session_id: int) -> None:
    socketio.emit('state_update', session_snapshot(session_id), to=session_room(session_id), namespace=NAMESPACE)
    current_app.logger.debug(f"[publish] room={session_room(session_id)} event=state_update")


def publish_sessions_list() -> None:
    socketio.emit('sessions_update', {'sessions': list_game_sessions()}, to=LOBBY_ROOM, namespace=NAMESPACE)
    current_app.logger.debug(f"[publish] room={LOBBY_ROOM} event=sessions_update")
