"""
Repositories package

Each repository encapsulates database operations for a model and takes
the SQLAlchemy session it works on:
- label_repository.py: label catalog, deduplicated by scope identity
- labelitem_repository.py: pull request assignments and label lookups

Usage:
    from prlabels.db import db
    from prlabels.repositories.labelitem_repository import LabelItemRepository
    item_id = LabelItemRepository(db.session).create(1, 10, 42, "bug", "#ff0000")
"""
