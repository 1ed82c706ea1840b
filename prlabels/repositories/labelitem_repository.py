"""
Repository for LabelItem database operations

Assignments bind a catalog Label to a pull request. Lookups join items
against their labels with one of the filters from `prlabels.filters`, then
load the referenced labels in a single query.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from prlabels import db as storage
from prlabels.filters import (
    ByPullRequest,
    ByPullRequestAndNamePattern,
    ByRepo,
    ByRepoAndNamePattern,
    ByRepositorySet,
)
from prlabels.metrics import track_db_query
from prlabels.models import Label, LabelItem
from prlabels.repositories.label_repository import LabelRepository
from prlabels.views import build_label_views

logger = structlog.get_logger('labels')


class LabelItemRepository:
    """Repository for LabelItem database operations"""

    def __init__(self, session, labels=None):
        self.session = session
        self.labels = labels if labels is not None else LabelRepository(session)

    @track_db_query("label_item_find")
    def find(self, query_filter):
        """Get label views for every item matched by `query_filter`.

        Row order is whatever the database returns.
        """
        items = (
            self.session.query(LabelItem)
            .join(Label, Label.id == LabelItem.label_id)
            .filter(*query_filter.clauses())
            .all()
        )

        label_ids = {item.label_id for item in items}
        if not label_ids:
            return build_label_views(items, [])

        labels = self.labels.get_by_ids(label_ids)
        return build_label_views(items, labels)

    def find_by_pull_request(self, project_id, repository_id, pull_request_id):
        return self.find(ByPullRequest(project_id, repository_id, pull_request_id))

    def find_by_repository(self, project_id, repository_id):
        return self.find(ByRepo(project_id, repository_id))

    def find_by_name(self, project_id, repository_id, name_pattern):
        return self.find(ByRepoAndNamePattern(project_id, repository_id, name_pattern))

    def find_by_pull_request_and_name(self, project_id, repository_id, pull_request_id, name_pattern):
        return self.find(ByPullRequestAndNamePattern(project_id, repository_id, pull_request_id, name_pattern))

    def find_by_repositories(self, repository_ids):
        return self.find(ByRepositorySet(repository_ids))

    @track_db_query("label_item_create")
    def create_item(self, project_id, repository_id, pull_request_id, label):
        """Create new LabelItem record for an existing label"""
        try:
            item = LabelItem(
                label_id=label.id,
                project_id=project_id,
                repository_id=repository_id,
                pull_request_id=pull_request_id,
            )
            self.session.add(item)
            self.session.commit()
            self.session.refresh(item)
            return item
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

    def create(self, project_id, repository_id, pull_request_id, name, color):
        """Attach a label to a pull request, creating the label if needed.

        Returns the new item id. A failure after the label is stored leaves
        the label in place; calling again reuses it.
        """
        label = self.labels.create_or_get(project_id, repository_id, name, color)
        item = self.create_item(project_id, repository_id, pull_request_id, label)
        logger.info(f"Label '{label.name}' ({label.id}) assigned to pull request {pull_request_id}, item {item.id}")
        return item.id

    @track_db_query("label_item_delete")
    def delete_items(self, labels):
        """Delete the assignments behind the given label views in one statement.

        Labels themselves are kept. Returns the number of deleted rows.
        """
        item_ids = [label.item_id for label in labels]
        if not item_ids:
            return 0

        try:
            deleted = (
                self.session.query(LabelItem)
                .filter(LabelItem.id.in_(item_ids))
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

        logger.info(f"Deleted {deleted} label items")
        return deleted

    def flush(self):
        """Push pending writes to the database before reading them back"""
        storage.flush(self.session)

    def count(self):
        """Count total LabelItem records"""
        return self.session.query(LabelItem).count()
