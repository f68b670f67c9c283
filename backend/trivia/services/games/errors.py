"""Typed rejections raised by the game services.

Routes translate these into JSON error responses; socket handlers and the
CLI can catch :class:`GameError` directly.
"""


class GameError(Exception):
    code = 'GAME_ERROR'
    status = 400
    default_message = 'Game command rejected'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class ValidationError(GameError):
    code = 'VALIDATION_ERROR'
    default_message = 'Invalid request'


class NotFound(GameError):
    code = 'NOT_FOUND'
    status = 404
    default_message = 'Not found'


class QuestionSetNotFound(NotFound):
    code = 'QUESTION_SET_NOT_FOUND'
    default_message = 'Question set not found'


class InvalidState(GameError):
    code = 'INVALID_STATE'
    default_message = 'Command not allowed in the current game state'


class AlreadySelected(InvalidState):
    code = 'ALREADY_SELECTED'
    default_message = 'Question already selected'


class AlreadyAnswered(InvalidState):
    code = 'ALREADY_ANSWERED'
    default_message = 'Question already answered'


class WrongTeam(InvalidState):
    code = 'WRONG_TEAM'
    default_message = 'Question not selected by this team'


class NoQuestionSet(InvalidState):
    code = 'NO_QUESTION_SET'
    default_message = 'Question set not selected'


class NoTeams(InvalidState):
    code = 'NO_TEAMS'
    default_message = 'At least one team is required'


class GameAlreadyStarted(InvalidState):
    code = 'GAME_ALREADY_STARTED'
    default_message = 'Game has already started'


class DuplicateTeamName(InvalidState):
    code = 'DUPLICATE_TEAM_NAME'
    default_message = 'A team with that name already exists'
