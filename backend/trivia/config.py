import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///trivia.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Minimum teams required before a game can start
    MIN_TEAMS = int(os.environ.get('MIN_TEAMS', '1'))
    # Capped at the team name column length (64)
    TEAM_NAME_MAX_LENGTH = int(os.environ.get('TEAM_NAME_MAX_LENGTH', '64'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma separated list of frontend origins allowed for CORS and Socket.IO
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000',
        ).split(',')
        if origin.strip()
    ]
