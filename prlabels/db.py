from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import structlog

logger = structlog.get_logger('db')

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite pragmas for better concurrent access"""
    if not type(dbapi_connection).__module__.startswith("sqlite3"):
        return
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest correctly
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


@event.listens_for(Engine, "begin")
def begin_sqlite_transaction(conn):
    if conn.dialect.name != "sqlite":
        return
    conn.exec_driver_sql("BEGIN")


def init_db(app):
    """Bind the extension to `app` and create missing tables."""
    # Register the tables on db.metadata
    from prlabels import models  # noqa: F401

    db.init_app(app)
    with app.app_context():
        db.create_all()
        logger.info(f"Label tables ready on {db.engine.url.render_as_string(hide_password=True)}")


def flush(session=None):
    """Force pending ORM writes to the database without committing."""
    session = session if session is not None else db.session
    session.flush()
