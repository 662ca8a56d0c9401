from flask import Flask, g, request
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import os
import sqlite3
from pathlib import Path
from freshstock.utils.logger import configure_logging, get_logger, new_request_id

# Initialize extensions
db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(config_overrides=None):
    """
    Application factory.

    Args:
        config_overrides: Optional mapping applied on top of the environment
            derived configuration (tests pass an in-memory database here)

    Returns:
        Flask: The configured application
    """
    base_dir = Path(__file__).parent.parent

    app = Flask(__name__, instance_path=str(base_dir / 'instance'))

    logger = get_logger("freshstock")
    logger.info("Initializing Flask application")

    # Prefer an explicit DATABASE_URL env var; otherwise keep a SQLite file
    # inside the project's `instance/` directory.
    db_env = os.environ.get('DATABASE_URL')
    if db_env:
        app.config['SQLALCHEMY_DATABASE_URI'] = db_env
    else:
        instance_dir = Path(app.instance_path)
        instance_dir.mkdir(parents=True, exist_ok=True)
        default_db_path = instance_dir / 'freshstock.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{str(default_db_path.resolve())}"

    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['LOG_TO_DATABASE'] = _env_flag('LOG_TO_DATABASE', 'True')
    app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO')
    app.config['LOG_FILE'] = os.environ.get('LOG_FILE')

    if config_overrides:
        app.config.update(config_overrides)

    app.json.sort_keys = False

    db.init_app(app)
    logger.debug("Database configured: %s", db_dialect_name(app))

    # Import models to ensure they're registered with SQLAlchemy
    from freshstock import data  # noqa: F401
    from freshstock.data.log_entry import LogEntry

    with app.app_context():
        configure_logging(
            level=app.config['LOG_LEVEL'],
            log_file=app.config['LOG_FILE'],
            engine=db.engine if app.config['LOG_TO_DATABASE'] else None,
            table=LogEntry.__table__,
        )

    from freshstock.presentation import init_app as init_presentation
    init_presentation(app)

    @app.before_request
    def assign_request_id():
        """Correlate every log line of a request"""
        g.request_id = request.headers.get('X-Request-ID') or new_request_id()

    @app.after_request
    def echo_request_id(response):
        request_id = g.get('request_id')
        if request_id:
            response.headers['X-Request-ID'] = request_id
        return response

    logger.info("Flask application initialization complete")

    return app


def db_dialect_name(app):
    return app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]
