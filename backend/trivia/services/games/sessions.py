"""Session lifecycle: creating sessions and teams, picking a question set and
starting the game, plus the read-side projections used by the setup screens.
"""
from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from trivia import db
from trivia.models import GameSession, Team, QuestionSet, QuestionTemplate, Question
from .errors import (
    NotFound,
    QuestionSetNotFound,
    NoQuestionSet,
    NoTeams,
    GameAlreadyStarted,
    DuplicateTeamName,
)


def _get_session_or_raise(session_id: int) -> GameSession:
    session = db.session.get(GameSession, session_id)
    if not session:
        raise NotFound('Game session not found')
    return session


def create_game_session() -> GameSession:
    session = GameSession(is_started=False)
    db.session.add(session)
    db.session.commit()
    current_app.logger.info(f"[session-create] session={session.id}")
    return session


def create_team(session_id: int, name: str) -> Team:
    """Register a team in a session that has not started yet.

    Names are unique per session, compared by their casefolded form.
    """
    session = _get_session_or_raise(session_id)
    if session.is_started:
        raise GameAlreadyStarted('Teams cannot be added after the game has started')

    name_key = name.casefold()
    clash = Team.query.filter_by(session_id=session.id, name_key=name_key).first()
    if clash:
        raise DuplicateTeamName(f'Team "{clash.name}" already exists in this game')

    team = Team(name=name, name_key=name_key, session_id=session.id, points=0)
    db.session.add(team)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race against a concurrent insert of the same name
        db.session.rollback()
        raise DuplicateTeamName(f'Team "{name}" already exists in this game')
    current_app.logger.info(f"[team-create] session={session.id} team={team.id} name={team.name!r}")
    return team


def select_question_set(session_id: int, question_set_id: int) -> GameSession:
    session = _get_session_or_raise(session_id)
    if session.is_started:
        raise GameAlreadyStarted('The question set cannot change after the game has started')
    if not db.session.get(QuestionSet, question_set_id):
        raise QuestionSetNotFound()

    session.question_set_id = question_set_id
    db.session.add(session)
    db.session.commit()
    current_app.logger.info(f"[question-set] session={session.id} question_set={question_set_id}")
    return session


def start_game(session_id: int) -> GameSession:
    """Materialize the chosen question set into session questions and start.

    Starting an already-started session is a no-op that returns the session
    unchanged, so questions are only ever created once per session.
    """
    session = _get_session_or_raise(session_id)
    if session.is_started:
        current_app.logger.info(f"[start-skip] session={session.id} already started")
        return session

    if not session.question_set_id:
        raise NoQuestionSet()

    min_teams = max(1, int(current_app.config.get('MIN_TEAMS', 1)))
    team_count = Team.query.filter_by(session_id=session.id).count()
    if team_count < min_teams:
        if min_teams == 1:
            raise NoTeams()
        raise NoTeams(f'At least {min_teams} teams are required to start')

    question_set = db.session.get(QuestionSet, session.question_set_id)
    if not question_set:
        raise QuestionSetNotFound()

    # Flip the flag with a guarded UPDATE so a concurrent start cannot
    # materialize the questions a second time.
    flipped = GameSession.query.filter_by(id=session.id, is_started=False).update(
        {GameSession.is_started: True}, synchronize_session=False
    )
    if not flipped:
        db.session.rollback()
        current_app.logger.info(f"[start-skip] session={session.id} started concurrently")
        return _get_session_or_raise(session_id)

    templates = QuestionTemplate.query.filter_by(question_set_id=question_set.id).order_by(QuestionTemplate.id).all()
    for template in templates:
        db.session.add(Question(
            session_id=session.id,
            text=template.text,
            answer=template.answer,
            points=template.points,
            category=template.category,
        ))
    db.session.commit()
    current_app.logger.info(
        f"[start] session={session.id} question_set={question_set.id} teams={team_count} questions={len(templates)}"
    )
    return session


def list_game_sessions() -> list:
    """All sessions, each with its selected question set and that set's questions nested."""
    sessions = GameSession.query.order_by(GameSession.id).all()
    result = []
    for session in sessions:
        data = session.to_dict(include_teams=False)
        data['question_set'] = session.question_set.to_dict() if session.question_set else None
        result.append(data)
    return result


def get_game_session(session_id: int) -> Optional[dict]:
    session = db.session.get(GameSession, session_id)
    if not session:
        return None
    return session.to_dict()


def get_game_setup(session_id: int) -> Optional[dict]:
    session = db.session.get(GameSession, session_id)
    if not session:
        return None
    data = session.to_dict()
    data['question_set'] = session.question_set.to_dict(include_questions=False) if session.question_set else None
    return data


def get_question_sets() -> list:
    return [qs.to_dict() for qs in QuestionSet.query.order_by(QuestionSet.id).all()]


def get_question_count(question_set_id: Optional[int]) -> int:
    if not question_set_id:
        return 0
    return QuestionTemplate.query.filter_by(question_set_id=question_set_id).count()


def get_game_questions(session_id: int) -> list:
    session = _get_session_or_raise(session_id)
    return [q.to_dict() for q in session.questions.order_by(Question.id).all()]
