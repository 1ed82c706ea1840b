"""
prlabels - Application Factory
"""
from flask import Flask
import structlog

from prlabels.db import init_db
from prlabels.settings import load_settings
from prlabels.utils import configure_logging

logger = structlog.get_logger('main')


def create_app(config_overrides=None, settings=None):
    """Create a Flask app hosting the label tables.

    `config_overrides` is applied to `app.config` after the settings file,
    so tests can point SQLALCHEMY_DATABASE_URI at a scratch database.
    """
    settings = settings or load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = settings["database"]["uri"]
    app.config["SQLALCHEMY_ECHO"] = bool(settings["database"].get("echo", False))
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    if config_overrides:
        app.config.update(config_overrides)

    init_db(app)
    logger.info("Label store initialized")
    return app
