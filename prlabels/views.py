"""Label views: an assignment row combined with its label's catalog data."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import structlog

logger = structlog.get_logger('views')


@dataclass
class LabelView:
    """A label as seen on one pull request"""

    item_id: int
    label_id: int
    project_id: int
    repository_id: int
    pull_request_id: int
    name: str
    color: Optional[str]
    hash: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_label_views(items, labels) -> List[LabelView]:
    """Pair each item with its label by id, keeping item order."""
    labels_by_id = {label.id: label for label in labels or []}

    views = []
    for item in items:
        label = labels_by_id.get(item.label_id)
        if label is None:
            logger.debug(f"Skipping label item {item.id}: label {item.label_id} not loaded")
            continue
        views.append(
            LabelView(
                item_id=item.id,
                label_id=label.id,
                project_id=item.project_id,
                repository_id=item.repository_id,
                pull_request_id=item.pull_request_id,
                name=label.name,
                color=label.color,
                hash=label.hash,
            )
        )
    return views
