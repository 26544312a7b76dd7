from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

# Headers the browser client sends along with the submission
CORS_ALLOWED_HEADERS = ['authorization', 'x-client-info', 'apikey', 'content-type']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    # Derive the accepted score range from the game constants once per app
    from arcade.services.scores.bounds import GameConstants, score_bounds
    constants = GameConstants.from_config(flask_app.config)
    min_score, max_score = score_bounds(constants)
    flask_app.config['MIN_VALID_SCORE'] = min_score
    flask_app.config['MAX_VALID_SCORE'] = max_score

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS') or '*'
    if allowed_origins == ['*']:
        allowed_origins = '*'

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins, allow_headers=CORS_ALLOWED_HEADERS,
         send_wildcard=(allowed_origins == '*'))

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Pre-flight is answered for every path before routing or validation runs;
    # Flask-CORS adds the cross-origin headers on the way out.
    @flask_app.before_request
    def answer_preflight():
        if request.method == 'OPTIONS':
            return '', 200

    from arcade.main import main
    flask_app.register_blueprint(main)

    from arcade.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    try:
        from arcade.socketio_events import register_socketio_handlers
        register_socketio_handlers(testing=flask_app.config.get('TESTING', False))
    except Exception as exc:
        flask_app.logger.warning(f"SocketIO events not loaded: {exc}")

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the leaderboard schema."""
        import arcade.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    flask_app.logger.info(
        f"[startup] score bounds=[{min_score}, {max_score}] "
        f"rate_limit={flask_app.config.get('MAX_SUBMISSIONS_PER_WINDOW')}/{flask_app.config.get('RATE_LIMIT_WINDOW_SEC')}s"
    )

    return flask_app
