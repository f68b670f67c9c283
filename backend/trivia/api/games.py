from flask import Blueprint, jsonify, request, current_app
from trivia import db
from trivia.models import TEAM_NAME_LENGTH
from trivia.services.games import sessions as svc_sessions
from trivia.services.games import play as svc_play
from trivia.services.games.broadcast import publish_session_state, publish_sessions_list
from trivia.services.games.errors import GameError, ValidationError


games = Blueprint('games', __name__)


@games.errorhandler(GameError)
def handle_game_error(exc: GameError):
    db.session.rollback()
    current_app.logger.info(f"[rejected] {request.method} {request.path} code={exc.code} message={exc.message!r}")
    return jsonify(exc.to_dict()), exc.status


def _require_int(data: dict, key: str) -> int:
    value = data.get(key)
    # Only JSON integers; bool is an int subclass and floats would truncate
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'{key} is required and must be an integer')
    return value


@games.route('/sessions', methods=['POST'])
def create_game_session():
    session = svc_sessions.create_game_session()
    publish_sessions_list()
    return jsonify({'id': session.id}), 201


@games.route('/sessions', methods=['GET'])
def list_game_sessions():
    return jsonify(svc_sessions.list_game_sessions())


@games.route('/sessions/<int:session_id>', methods=['GET'])
def get_game_session(session_id):
    session = svc_sessions.get_game_session(session_id)
    if session is None:
        return jsonify({'error': 'Game session not found', 'code': 'NOT_FOUND'}), 404
    return jsonify(session)


@games.route('/sessions/<int:session_id>/setup', methods=['GET'])
def get_game_setup(session_id):
    setup = svc_sessions.get_game_setup(session_id)
    if setup is None:
        return jsonify({'error': 'Game session not found', 'code': 'NOT_FOUND'}), 404
    return jsonify(setup)


@games.route('/sessions/<int:session_id>/teams', methods=['POST'])
def create_team(session_id):
    data = request.get_json(silent=True) or {}
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('Team name is required')
    name = name.strip()
    max_len = min(int(current_app.config.get('TEAM_NAME_MAX_LENGTH', TEAM_NAME_LENGTH)), TEAM_NAME_LENGTH)
    if len(name) > max_len:
        raise ValidationError(f'Team name must be at most {max_len} characters')

    team = svc_sessions.create_team(session_id, name)
    publish_session_state(session_id)
    return jsonify(team.to_dict()), 201


@games.route('/sessions/<int:session_id>/question-set', methods=['PUT'])
def select_question_set(session_id):
    data = request.get_json(silent=True) or {}
    question_set_id = _require_int(data, 'question_set_id')
    session = svc_sessions.select_question_set(session_id, question_set_id)
    publish_session_state(session_id)
    publish_sessions_list()
    return jsonify(session.to_dict())


@games.route('/sessions/<int:session_id>/start', methods=['POST'])
def start_game(session_id):
    session = svc_sessions.start_game(session_id)
    publish_session_state(session_id)
    return jsonify(session.to_dict())


@games.route('/sessions/<int:session_id>/questions', methods=['GET'])
def get_game_questions(session_id):
    return jsonify(svc_sessions.get_game_questions(session_id))


@games.route('/sessions/<int:session_id>/board', methods=['GET'])
def get_board(session_id):
    return jsonify(svc_play.get_board(session_id))


@games.route('/questions/<int:question_id>/select', methods=['POST'])
def select_question(question_id):
    data = request.get_json(silent=True) or {}
    team_id = _require_int(data, 'team_id')
    question = svc_play.select_question(question_id, team_id)
    publish_session_state(question.session_id)
    return jsonify(question.to_dict())


@games.route('/questions/<int:question_id>/answer', methods=['POST'])
def submit_answer(question_id):
    data = request.get_json(silent=True) or {}
    team_id = _require_int(data, 'team_id')
    is_correct = data.get('is_correct')
    if not isinstance(is_correct, bool):
        raise ValidationError('is_correct must be true or false')
    question = svc_play.submit_answer(question_id, team_id, is_correct)
    publish_session_state(question.session_id)
    return jsonify(question.to_dict())


@games.route('/question-sets', methods=['GET'])
def get_question_sets():
    return jsonify(svc_sessions.get_question_sets())


@games.route('/question-sets/<int:question_set_id>/count', methods=['GET'])
def get_question_count(question_set_id):
    return jsonify({'question_set_id': question_set_id, 'count': svc_sessions.get_question_count(question_set_id)})
