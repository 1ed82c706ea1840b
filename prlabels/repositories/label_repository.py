"""
Repository for Label database operations

Labels are deduplicated per (project, repository, name) through the unique
`hash` column. Concurrent creators race on the insert; losers read the
winner's row back instead of failing.
"""

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from prlabels.exceptions import LabelConflictException
from prlabels.hashing import ensure_hashing_available, label_hash
from prlabels.metrics import label_conflicts_total, track_db_query
from prlabels.models import Label

logger = structlog.get_logger('labels')


class LabelRepository:
    """Repository for Label database operations"""

    def __init__(self, session):
        ensure_hashing_available()
        self.session = session

    def get_by_id(self, id):
        """Get Label by ID"""
        return self.session.get(Label, id)

    @track_db_query("label_get_by_ids")
    def get_by_ids(self, ids):
        """Get Labels by a list of IDs"""
        ids = list(ids)
        if not ids:
            return []
        return self.session.query(Label).filter(Label.id.in_(ids)).all()

    def find_by_name(self, project_id, repository_id, name):
        """Get the label with this exact name in a project/repository scope"""
        return (
            self.session.query(Label)
            .filter(
                Label.project_id == project_id,
                Label.repository_id == repository_id,
                Label.name == name,
            )
            .first()
        )

    def get_scoped(self, project_id, repository_id, label_id):
        """Get Label by ID, only if it belongs to the given scope"""
        return (
            self.session.query(Label)
            .filter(
                Label.project_id == project_id,
                Label.repository_id == repository_id,
                Label.id == label_id,
            )
            .first()
        )

    def find_by_hash(self, hash):
        """Get the label owning an identity digest"""
        return self.session.query(Label).filter(Label.hash == hash).first()

    @track_db_query("label_create_or_get")
    def create_or_get(self, project_id, repository_id, name, color):
        """Create a Label, or return the one already stored for this scope and name.

        The stored color of an existing label is left unchanged. The insert
        runs in a SAVEPOINT, so a duplicate only undoes the insert itself and
        the caller's other pending writes are kept and committed either way.
        """
        label = Label(
            project_id=project_id,
            repository_id=repository_id,
            name=name,
            color=color,
            hash=label_hash(project_id, repository_id, name),
        )
        try:
            with self.session.begin_nested():
                self.session.add(label)
        except IntegrityError as e:
            existing = self.find_by_name(project_id, repository_id, name)
            if existing is None:
                label_conflicts_total.labels(outcome="failed").inc()
                logger.error(f"Label insert failed and no '{name}' label exists in {project_id}/{repository_id}: {e}")
                raise e
            label_conflicts_total.labels(outcome="adopted").inc()
            logger.debug(f"Label '{name}' already exists in {project_id}/{repository_id}, using id {existing.id}")
            label = existing
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e
        self.session.refresh(label)
        return label

    @track_db_query("label_update")
    def update(self, project_id, repository_id, label_id, name, color):
        """Rename and recolor a Label in place.

        Returns None when no label with this id exists in the scope. Raises
        LabelConflictException when the new name is taken by another label;
        the label keeps its stored values in that case.
        """
        label = self.get_scoped(project_id, repository_id, label_id)
        if label is None:
            logger.warning(
                f"no labels found with such conditions: project={project_id} repository={repository_id} id={label_id}"
            )
            return None

        new_hash = label_hash(project_id, repository_id, name)
        if new_hash != label.hash:
            owner = self.find_by_hash(new_hash)
            if owner is not None and owner.id != label.id:
                raise LabelConflictException(
                    f"label '{name}' already exists in project {project_id} repository {repository_id}",
                    label_id=label.id,
                    conflicting_label_id=owner.id,
                )

        try:
            with self.session.begin_nested():
                label.name = name
                label.color = color
                label.hash = new_hash
        except IntegrityError as e:
            raise LabelConflictException(
                f"label '{name}' was created concurrently in project {project_id} repository {repository_id}",
                label_id=label_id,
            ) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e
        return label

    def hash(self, label):
        """Identity digest of a label's current scope and name"""
        return label_hash(label.project_id, label.repository_id, label.name)

    def count(self):
        """Count total Label records"""
        return self.session.query(Label).count()
