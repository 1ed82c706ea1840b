"""
Pytest fixtures and configuration for prlabels tests
"""
import copy

import pytest

from prlabels import settings as settings_module
from prlabels.app import create_app
from prlabels.constants import DEFAULT_SETTINGS
from prlabels.db import db
from prlabels.repositories.label_repository import LabelRepository
from prlabels.repositories.labelitem_repository import LabelItemRepository


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory database"""
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    settings['database']['uri'] = 'sqlite:///:memory:'
    # capture_logs needs uncached loggers
    settings['logging']['cache_loggers'] = False
    return settings


@pytest.fixture
def app(test_settings):
    """Flask app with label tables created, inside an app context"""
    _app = create_app(settings=test_settings)
    with _app.app_context():
        yield _app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def labels(session):
    return LabelRepository(session)


@pytest.fixture
def items(session, labels):
    return LabelItemRepository(session, labels=labels)


@pytest.fixture
def reset_settings_cache():
    yield
    settings_module._cached_settings = None
