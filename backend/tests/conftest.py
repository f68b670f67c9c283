import os
import sys
import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MIN_TEAMS = 1
    TEAM_NAME_MAX_LENGTH = 64
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGINS = ['http://localhost:3000']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import trivia.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def question_set_id(flask_app):
    """A small two-category set: Music 100/200 and Film 100."""
    from trivia.seed import seed_question_sets
    (question_set,) = seed_question_sets([{
        'name': 'Tiny',
        'questions': [
            ('Music', 200, 'Who wrote "Yesterday"?', 'Paul McCartney'),
            ('Music', 100, 'How many strings does a violin have?', 'Four'),
            ('Film', 100, 'Who directed "Jaws"?', 'Steven Spielberg'),
        ],
    }])
    return question_set.id


@pytest.fixture()
def single_question_set_id(flask_app):
    from trivia.seed import seed_question_sets
    (question_set,) = seed_question_sets([{
        'name': 'One',
        'questions': [('Science', 100, 'What is H2O?', 'Water')],
    }])
    return question_set.id
