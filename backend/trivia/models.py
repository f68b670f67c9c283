from datetime import datetime, timezone

from trivia import db


TEAM_NAME_LENGTH = 64


def _utcnow():
    return datetime.now(timezone.utc)


class GameSession(db.Model):
    __tablename__ = 'game_session'
    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)
    is_started = db.Column(db.Boolean, default=False, nullable=False)
    question_set_id = db.Column(db.Integer, db.ForeignKey('question_set.id'), nullable=True)
    question_set = db.relationship('QuestionSet')
    teams = db.relationship('Team', back_populates='session', order_by='Team.id')
    questions = db.relationship('Question', back_populates='session', order_by='Question.id', lazy='dynamic')

    def to_dict(self, include_teams=True):
        data = {
            'id': self.id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'is_started': self.is_started,
            'question_set_id': self.question_set_id,
        }
        if include_teams:
            data['teams'] = [t.to_dict() for t in self.teams]
        return data


class Team(db.Model):
    __tablename__ = 'team'
    __table_args__ = (
        db.UniqueConstraint('session_id', 'name_key', name='uq_team_session_name_key'),
        db.CheckConstraint('points >= 0', name='ck_team_points_non_negative'),
    )
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(TEAM_NAME_LENGTH), nullable=False)
    # casefolded name, the per-session uniqueness key
    name_key = db.Column(db.String(TEAM_NAME_LENGTH * 3), nullable=False)
    session_id = db.Column(db.Integer, db.ForeignKey('game_session.id'), nullable=False, index=True)
    points = db.Column(db.Integer, default=0, nullable=False)
    session = db.relationship('GameSession', back_populates='teams')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'session_id': self.session_id,
            'points': self.points,
        }


class QuestionSet(db.Model):
    __tablename__ = 'question_set'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    questions = db.relationship('QuestionTemplate', back_populates='question_set', order_by='QuestionTemplate.id')

    def to_dict(self, include_questions=True):
        data = {
            'id': self.id,
            'name': self.name,
            'question_count': len(self.questions),
        }
        if include_questions:
            data['questions'] = [q.to_dict() for q in self.questions]
        return data


class QuestionTemplate(db.Model):
    """A pre-authored question belonging to a reusable question set."""
    __tablename__ = 'question_template'
    id = db.Column(db.Integer, primary_key=True)
    question_set_id = db.Column(db.Integer, db.ForeignKey('question_set.id'), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    points = db.Column(db.Integer, nullable=False)
    category = db.Column(db.String(128), nullable=False)
    question_set = db.relationship('QuestionSet', back_populates='questions')

    def to_dict(self):
        return {
            'id': self.id,
            'question_set_id': self.question_set_id,
            'text': self.text,
            'answer': self.answer,
            'points': self.points,
            'category': self.category,
        }


QUESTION_UNSELECTED = 'unselected'
QUESTION_SELECTED = 'selected'
QUESTION_ANSWERED = 'answered'


class Question(db.Model):
    """A session-scoped copy of a template question.

    Lifecycle: unselected -> selected (by one team) -> answered (terminal).
    A row never has both ``selected_by_team_id`` and ``answered_by_team_id`` set.
    """
    __tablename__ = 'question'
    __table_args__ = (
        db.CheckConstraint(
            'selected_by_team_id IS NULL OR answered_by_team_id IS NULL',
            name='ck_question_single_owner',
        ),
    )
    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.Integer, db.ForeignKey('game_session.id'), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    points = db.Column(db.Integer, nullable=False)
    category = db.Column(db.String(128), nullable=False)
    selected_by_team_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=True)
    answered_by_team_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=True)
    answered_correctly = db.Column(db.Boolean, nullable=True)
    session = db.relationship('GameSession', back_populates='questions')

    @property
    def state(self):
        if self.answered_by_team_id is not None:
            return QUESTION_ANSWERED
        if self.selected_by_team_id is not None:
            return QUESTION_SELECTED
        return QUESTION_UNSELECTED

    def to_dict(self):
        return {
            'id': self.id,
            'session_id': self.session_id,
            'text': self.text,
            'answer': self.answer,
            'points': self.points,
            'category': self.category,
            'state': self.state,
            'selected_by_team_id': self.selected_by_team_id,
            'answered_by_team_id': self.answered_by_team_id,
            'answered_correctly': self.answered_correctly,
        }
