"""
Tests for pull request label assignments
"""
import pytest
from sqlalchemy.exc import IntegrityError

from prlabels.filters import ByPullRequest, ByRepositorySet
from prlabels.models import Label, LabelItem
from prlabels.views import LabelView


@pytest.fixture
def assigned(items):
    """Labels assigned across two repositories of project 1 and one of project 2"""
    return {
        "bug_pr1": items.create(1, 10, 1, "bug", "#ff0000"),
        "bugfix_pr1": items.create(1, 10, 1, "bugfix", "#ff8800"),
        "feature_pr2": items.create(1, 10, 2, "feature", "#00ff00"),
        "bug_pr2": items.create(1, 10, 2, "bug", "#ff0000"),
        "docs_repo11": items.create(1, 11, 3, "docs", "#0000ff"),
        "bug_project2": items.create(2, 10, 1, "bug", "#ff0000"),
    }


def _names(views):
    return sorted(view.name for view in views)


class TestCreate:
    """Tests for label assignment creation"""

    def test_returns_item_id(self, items, session):
        item_id = items.create(1, 10, 42, "bug", "#ff0000")

        item = session.get(LabelItem, item_id)
        assert item.pull_request_id == 42
        assert item.label.name == "bug"

    def test_same_assignment_twice_creates_two_items_for_one_label(self, items, labels):
        first = items.create(1, 10, 42, "bug", "#ff0000")
        second = items.create(1, 10, 42, "bug", "#ff0000")

        assert first != second
        assert items.count() == 2
        assert labels.count() == 1
        views = items.find_by_pull_request(1, 10, 42)
        assert len({view.label_id for view in views}) == 1

    def test_create_item_for_existing_label(self, items, labels):
        label = labels.create_or_get(1, 10, "bug", "#ff0000")

        item = items.create_item(1, 10, 7, label)

        assert item.id is not None
        assert item.label_id == label.id

    def test_failed_item_keeps_label(self, items, labels):
        """The label survives an item insert failure and is reused on retry"""
        with pytest.raises(IntegrityError):
            items.create(1, 10, None, "bug", "#ff0000")

        assert labels.count() == 1
        assert items.count() == 0

        item_id = items.create(1, 10, 42, "bug", "#ff0000")
        assert item_id is not None
        assert labels.count() == 1

    def test_pull_request_ids_beyond_32_bits(self, items):
        pull_request_id = 2 ** 40
        items.create(1, 10, pull_request_id, "bug", "#ff0000")

        views = items.find_by_pull_request(1, 10, pull_request_id)
        assert [view.pull_request_id for view in views] == [pull_request_id]


class TestFind:
    """Tests for the five label query shapes"""

    def test_by_pull_request(self, items, assigned):
        views = items.find_by_pull_request(1, 10, 1)

        assert _names(views) == ["bug", "bugfix"]
        assert all(isinstance(view, LabelView) for view in views)
        assert {view.item_id for view in views} == {assigned["bug_pr1"], assigned["bugfix_pr1"]}

    def test_by_repository(self, items, assigned):
        views = items.find_by_repository(1, 10)

        assert _names(views) == ["bug", "bug", "bugfix", "feature"]

    def test_by_name_pattern(self, items, assigned):
        views = items.find_by_name(1, 10, "bug%")

        assert _names(views) == ["bug", "bug", "bugfix"]

    def test_by_exact_name(self, items, assigned):
        views = items.find_by_name(1, 10, "bug")

        assert _names(views) == ["bug", "bug"]
        assert {view.pull_request_id for view in views} == {1, 2}

    def test_by_pull_request_and_name_pattern(self, items, assigned):
        views = items.find_by_pull_request_and_name(1, 10, 2, "feat%")

        assert _names(views) == ["feature"]

    def test_name_pattern_matching_nothing(self, items, assigned):
        assert items.find_by_pull_request_and_name(1, 10, 1, "feature") == []

    def test_by_repository_set(self, items):
        items.create(1, 5, 1, "bug", "#ff0000")
        items.create(1, 7, 2, "feature", "#00ff00")
        items.create(1, 9, 3, "docs", "#0000ff")

        views = items.find_by_repositories([5, 7])

        assert {view.repository_id for view in views} == {5, 7}
        by_repo = {view.repository_id: view for view in views}
        assert by_repo[5].name == "bug"
        assert by_repo[7].name == "feature"
        assert by_repo[7].color == "#00ff00"

    def test_by_repository_set_spans_projects(self, items, assigned):
        views = items.find_by_repositories([11])

        assert _names(views) == ["docs"]

    def test_by_empty_repository_set(self, items, assigned):
        assert items.find(ByRepositorySet([])) == []

    def test_no_items(self, items):
        assert items.find_by_pull_request(1, 10, 1) == []

    def test_views_carry_assignment_and_catalog_data(self, items, labels):
        item_id = items.create(3, 4, 5, "wip", "#cccccc")
        label = labels.find_by_name(3, 4, "wip")

        [view] = items.find(ByPullRequest(3, 4, 5))

        assert view.to_dict() == {
            "item_id": item_id,
            "label_id": label.id,
            "project_id": 3,
            "repository_id": 4,
            "pull_request_id": 5,
            "name": "wip",
            "color": "#cccccc",
            "hash": label.hash,
        }

    def test_renamed_label_seen_by_all_assignments(self, items, labels, assigned):
        bug = labels.find_by_name(1, 10, "bug")
        labels.update(1, 10, bug.id, "defect", "#990000")

        views = items.find_by_repository(1, 10)

        assert _names(views) == ["bugfix", "defect", "defect", "feature"]


class TestDeleteItems:
    """Tests for bulk unassignment"""

    def test_deletes_only_given_items(self, items, assigned):
        views = items.find_by_pull_request(1, 10, 1)

        deleted = items.delete_items(views)

        assert deleted == 2
        assert items.find_by_pull_request(1, 10, 1) == []
        assert _names(items.find_by_pull_request(1, 10, 2)) == ["bug", "feature"]

    def test_labels_are_kept(self, items, labels, assigned, session):
        label_count = labels.count()

        items.delete_items(items.find_by_repository(1, 10))

        assert labels.count() == label_count
        assert session.query(Label).filter(Label.name == "feature").count() == 1

    def test_empty_input(self, items, assigned):
        before = items.count()

        assert items.delete_items([]) == 0
        assert items.count() == before


class TestFlush:
    """Tests for forcing pending writes"""

    def test_flush_assigns_pending_ids(self, items, labels, session):
        label = labels.create_or_get(1, 10, "bug", "#ff0000")
        item = LabelItem(label_id=label.id, project_id=1, repository_id=10, pull_request_id=9)
        session.add(item)

        items.flush()

        assert item.id is not None
        session.rollback()
