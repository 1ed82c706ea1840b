"""
Model: LabelItem
Assignment of a Label to one pull request.
"""

from prlabels.db import db


class LabelItem(db.Model):
    __tablename__ = "label_item"

    id = db.Column(db.Integer, primary_key=True)
    # No delete cascade: labels outlive their assignments
    label_id = db.Column(db.Integer, db.ForeignKey("label.id"), nullable=False, index=True)
    project_id = db.Column(db.Integer, nullable=False)
    repository_id = db.Column(db.Integer, nullable=False)
    pull_request_id = db.Column(db.BigInteger, nullable=False)

    label = db.relationship("Label", backref=db.backref("items", lazy=True))

    __table_args__ = (
        db.Index("idx_label_item_pull_request", "project_id", "repository_id", "pull_request_id"),
        db.Index("idx_label_item_repository", "repository_id"),
    )

    def __repr__(self):
        return f"<LabelItem(id={self.id}, label_id={self.label_id}, pull_request={self.pull_request_id})>"
