from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)


def seed_defaults(flask_app):
    """Seed the administrator and the starter catalog (idempotent)."""
    from arcade.services.accounts.seed import seed_admin
    from arcade.services.catalog import seed_catalog
    seed_admin(db, bcrypt, flask_app.config)
    added = seed_catalog(db)
    flask_app.logger.info(f"[seed] admin ready, catalog games added={added}")


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One set of account services per app; handlers reach it via get_accounts()
    from arcade.services.accounts import AccountServices
    AccountServices.from_app(flask_app, db, bcrypt)

    from arcade.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Registers the bearer-token request loader on login_manager
    import arcade.security  # noqa: F401

    from arcade.main import main
    flask_app.register_blueprint(main)

    from arcade.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix='/api/auth')

    from arcade.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    from arcade.api.leaderboard import leaderboard
    flask_app.register_blueprint(leaderboard, url_prefix='/api/leaderboard')

    from arcade.api.admin import admin
    flask_app.register_blueprint(admin, url_prefix='/api/admin')

    from arcade.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from arcade.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    if flask_app.config.get('SEED_ON_STARTUP'):
        with flask_app.app_context():
            import arcade.models  # noqa: F401
            db.create_all()
            seed_defaults(flask_app)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seed_defaults(flask_app)
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
