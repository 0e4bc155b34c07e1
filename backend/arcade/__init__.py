from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def _cors_origins(config):
    origins = list(config.get('CORS_ORIGINS') or ['*'])
    return '*' if '*' in origins else origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    from arcade.services.leaderboards import init_settings
    settings = init_settings(flask_app)
    if not settings.games:
        raise ValueError('LEADERBOARD_GAMES must name at least one game')

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    origins = _cors_origins(flask_app.config)
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # Import and register blueprints here
    from arcade.main import main
    flask_app.register_blueprint(main)

    from arcade.api.leaderboards import leaderboards
    # Mount under /api to match the game clients
    flask_app.register_blueprint(leaderboards, url_prefix='/api/leaderboards')

    from arcade.api.admin import admin
    flask_app.register_blueprint(admin, url_prefix='/api/admin')

    from arcade.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    from arcade import models  # noqa: F401
    if flask_app.config.get('AUTO_CREATE_TABLES'):
        with flask_app.app_context():
            db.create_all()

    if not settings.auth_enabled:
        flask_app.logger.warning('ADMIN_KEY is not set: /api/admin/reset is unauthenticated')
    flask_app.logger.info(f"[startup] games={list(settings.games)} workers={settings.max_workers}")

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the leaderboard tables."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            click.echo('Database has been reset!')

    @click.command('leaderboard-top')
    @click.argument('game')
    @click.option('--limit', default=5, show_default=True, help='Entries to show (1-20).')
    @click.option('--offset', default=0, show_default=True, help='Entries to skip.')
    def leaderboard_top_command(game, limit, offset):
        """Prints the ranked leaderboard for GAME."""
        from arcade.services.leaderboards import clamp_limit, clamp_offset, get_page
        if not settings.is_allowed(game):
            raise click.BadParameter(f'unknown game {game!r}', param_hint='GAME')
        with flask_app.app_context():
            page = get_page(game, clamp_limit(limit), clamp_offset(offset))
        for rank, entry in enumerate(page['entries'], start=page['offset'] + 1):
            click.echo(f"{rank}. {entry['name']} - {entry['score']} ({entry['created_at']})")
        click.echo(f"{page['total']} total")

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(leaderboard_top_command)

    return flask_app
