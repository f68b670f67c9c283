from typing import Optional

from flask import current_app

from trivia import db
from trivia.models import GameSession, Team, Question
from .errors import NotFound, AlreadySelected, AlreadyAnswered, WrongTeam


def _load_question_and_team(question_id: int, team_id: int):
    question = db.session.get(Question, question_id)
    if not question:
        raise NotFound('Question not found')
    team = db.session.get(Team, team_id)
    if not team or team.session_id != question.session_id:
        raise NotFound('Team not found')
    return question, team


def _reject_for_state(question: Question, team_id: Optional[int] = None) -> None:
    if question.answered_by_team_id is not None:
        raise AlreadyAnswered()
    if team_id is None and question.selected_by_team_id is not None:
        raise AlreadySelected()
    if team_id is not None and question.selected_by_team_id != team_id:
        raise WrongTeam()


def select_question(question_id: int, team_id: int) -> Question:
    """Mark an unselected question as selected by ``team_id``.

    The write is a conditional UPDATE on the question row, so when two
    teams race for the same question exactly one of them wins.
    """
    question, team = _load_question_and_team(question_id, team_id)
    _reject_for_state(question)

    claimed = Question.query.filter(
        Question.id == question.id,
        Question.selected_by_team_id.is_(None),
        Question.answered_by_team_id.is_(None),
    ).update({Question.selected_by_team_id: team.id}, synchronize_session=False)
    if not claimed:
        db.session.rollback()
        _reject_for_state(db.session.get(Question, question_id))
        raise AlreadySelected()
    db.session.commit()

    question = db.session.get(Question, question_id)
    current_app.logger.info(f"[select] session={question.session_id} question={question.id} team={team.id}")
    return question


def submit_answer(question_id: int, team_id: int, is_correct: bool) -> Question:
    """Close a question selected by ``team_id``; award its points when correct."""
    question, team = _load_question_and_team(question_id, team_id)
    _reject_for_state(question, team_id=team.id)

    closed = Question.query.filter(
        Question.id == question.id,
        Question.selected_by_team_id == team.id,
        Question.answered_by_team_id.is_(None),
    ).update({
        Question.selected_by_team_id: None,
        Question.answered_by_team_id: team.id,
        Question.answered_correctly: bool(is_correct),
    }, synchronize_session=False)
    if not closed:
        db.session.rollback()
        _reject_for_state(db.session.get(Question, question_id), team_id=team.id)
        raise AlreadyAnswered()

    if is_correct:
        Team.query.filter_by(id=team.id).update(
            {Team.points: Team.points + question.points}, synchronize_session=False
        )
    db.session.commit()

    question = db.session.get(Question, question_id)
    current_app.logger.info(
        f"[answer] session={question.session_id} question={question.id} team={team.id} "
        f"correct={bool(is_correct)} points={question.points if is_correct else 0}"
    )
    return question


def is_game_over(session_id: int) -> bool:
    """True once the session has questions and every one of them is answered."""
    total = Question.query.filter_by(session_id=session_id).count()
    if total == 0:
        return False
    open_questions = Question.query.filter(
        Question.session_id == session_id,
        Question.answered_by_team_id.is_(None),
    ).count()
    return open_questions == 0


def get_board(session_id: int) -> dict:
    """Play-screen projection: the category grid, leaderboard and whose turn it is.

    Teams take turns in id order and the turn passes after every submitted
    answer, so the current team is derived from the number of answered
    questions. The turn is advisory; selection does not enforce it.
    """
    session = db.session.get(GameSession, session_id)
    if not session:
        raise NotFound('Game session not found')

    questions = session.questions.order_by(Question.id).all()
    teams = sorted(session.teams, key=lambda t: t.id)

    categories = {}
    for q in questions:
        categories.setdefault(q.category, []).append(q)
    grid = [
        {
            'name': name,
            'questions': [q.to_dict() for q in sorted(categories[name], key=lambda q: (q.points, q.id))],
        }
        for name in sorted(categories)
    ]

    answered_count = sum(1 for q in questions if q.answered_by_team_id is not None)
    current_team = teams[answered_count % len(teams)] if teams and questions else None
    game_over = bool(questions) and answered_count == len(questions)

    return {
        'session_id': session.id,
        'is_started': session.is_started,
        'categories': grid,
        'point_values': sorted({q.points for q in questions}),
        'leaderboard': [t.to_dict() for t in sorted(teams, key=lambda t: (-t.points, t.id))],
        'current_team_id': None if game_over or not current_team else current_team.id,
        'answered_count': answered_count,
        'question_count': len(questions),
        'is_game_over': game_over,
    }
