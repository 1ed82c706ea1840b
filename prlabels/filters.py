"""
Query filters for label lookups.

Each filter is one of the fixed query shapes the assignment store answers.
`clauses()` returns SQLAlchemy expressions over `LabelItem` and the joined
`Label` row; name patterns are SQL LIKE patterns, passed through as given.
"""

from dataclasses import dataclass
from typing import Tuple

from prlabels.models import Label, LabelItem


@dataclass(frozen=True)
class ByPullRequest:
    project_id: int
    repository_id: int
    pull_request_id: int

    def clauses(self):
        return [
            LabelItem.project_id == self.project_id,
            LabelItem.repository_id == self.repository_id,
            LabelItem.pull_request_id == self.pull_request_id,
        ]


@dataclass(frozen=True)
class ByRepo:
    project_id: int
    repository_id: int

    def clauses(self):
        return [
            LabelItem.project_id == self.project_id,
            LabelItem.repository_id == self.repository_id,
        ]


@dataclass(frozen=True)
class ByRepoAndNamePattern:
    project_id: int
    repository_id: int
    name_pattern: str

    def clauses(self):
        return ByRepo(self.project_id, self.repository_id).clauses() + [Label.name.like(self.name_pattern)]


@dataclass(frozen=True)
class ByPullRequestAndNamePattern:
    project_id: int
    repository_id: int
    pull_request_id: int
    name_pattern: str

    def clauses(self):
        return ByPullRequest(self.project_id, self.repository_id, self.pull_request_id).clauses() + [
            Label.name.like(self.name_pattern)
        ]


@dataclass(frozen=True)
class ByRepositorySet:
    repository_ids: Tuple[int, ...]

    def __post_init__(self):
        # Accept any iterable, keep the instance hashable
        object.__setattr__(self, "repository_ids", tuple(self.repository_ids))

    def clauses(self):
        return [LabelItem.repository_id.in_(self.repository_ids)]


LABEL_FILTERS = (ByPullRequest, ByRepo, ByRepoAndNamePattern, ByPullRequestAndNamePattern, ByRepositorySet)
