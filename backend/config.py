import os

BASEDIR = os.path.abspath(os.path.dirname(__file__))


def _csv(value):
    return tuple(part.strip() for part in (value or '').split(',') if part.strip())


def _database_uri():
    if os.environ.get('DATABASE_URL'):
        return os.environ['DATABASE_URL']
    db_path = os.environ.get('DB_PATH') or os.path.join(BASEDIR, 'leaderboards.db')
    return f'sqlite:///{db_path}'


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.environ.get('PORT', '3001'))
    # Empty string disables the admin key check on reset
    ADMIN_KEY = os.environ.get('ADMIN_KEY', '')
    LEADERBOARD_GAMES = _csv(os.environ.get('LEADERBOARD_GAMES', 'fruit,flappy,potato'))
    # Worker threads for per-game fan-out reads and resets. 1 runs them inline.
    LEADERBOARD_MAX_WORKERS = int(os.environ.get('LEADERBOARD_MAX_WORKERS', '4'))
    CORS_ORIGINS = _csv(os.environ.get('CORS_ORIGINS', '*'))
    # Create missing tables at startup
    AUTO_CREATE_TABLES = os.environ.get('AUTO_CREATE_TABLES', '1').lower() not in ('0', 'false', 'no')
    # Request bodies above 10 KB are refused with 413
    MAX_CONTENT_LENGTH = 10 * 1024
