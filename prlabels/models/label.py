"""
Model: Label
"""

from prlabels.constants import LABEL_COLOR_MAX_LENGTH, LABEL_HASH_LENGTH, LABEL_NAME_MAX_LENGTH
from prlabels.db import db


class Label(db.Model):
    __tablename__ = "label"

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, nullable=False)
    repository_id = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(LABEL_NAME_MAX_LENGTH), nullable=False)
    color = db.Column(db.String(LABEL_COLOR_MAX_LENGTH))
    # Identity digest of (project_id, repository_id, name), the real uniqueness key
    hash = db.Column(db.String(LABEL_HASH_LENGTH), unique=True, nullable=False)

    __table_args__ = (
        # Read-back lookup after a duplicate insert
        db.Index("idx_label_scope_name", "project_id", "repository_id", "name"),
    )

    def __repr__(self):
        return f"<Label(id={self.id}, name='{self.name}', project={self.project_id}, repository={self.repository_id})>"
