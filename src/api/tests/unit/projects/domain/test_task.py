"""Unit tests for the Task aggregate."""

from uuid import uuid4

import pytest

from projects.domain.aggregates import Task
from projects.domain.value_objects import TaskStatus


@pytest.fixture
def task() -> Task:
    return Task.create(
        project_id=uuid4(),
        number=1,
        title="Implement basic search",
        description="Use Google",
        author="alice",
    )


class TestTaskCreation:
    def test_new_task_starts_in_status_new(self, task):
        assert task.status is TaskStatus.NEW
        assert task.assignee is None
        assert task.author == "alice"

    def test_create_with_assignee(self):
        task = Task.create(uuid4(), 2, "Title", "", "alice", assignee="bob")

        assert task.assignee == "bob"

    def test_rejects_non_positive_number(self):
        with pytest.raises(ValueError):
            Task.create(uuid4(), 0, "Title", "", "alice")

    def test_rejects_empty_title(self):
        with pytest.raises(ValueError, match="Task title"):
            Task.create(uuid4(), 1, "", "", "alice")


class TestTaskUpdate:
    def test_partial_update_keeps_other_fields(self, task):
        task.update(status=TaskStatus.IN_PROGRESS)

        assert task.status is TaskStatus.IN_PROGRESS
        assert task.title == "Implement basic search"
        assert task.description == "Use Google"

    def test_update_reassigns(self, task):
        task.update(assignee="bob")

        assert task.assignee == "bob"

    def test_omitted_assignee_is_unchanged(self, task):
        task.update(assignee="bob")
        task.update(title="Renamed")

        assert task.assignee == "bob"

    def test_rejected_update_changes_nothing(self, task):
        """Validation runs before any field is touched."""
        with pytest.raises(ValueError):
            task.update(description="Use Bing", title="x" * 256)

        assert task.description == "Use Google"
        assert task.title == "Implement basic search"


class TestTaskStatus:
    def test_values(self):
        assert [s.value for s in TaskStatus] == ["NEW", "IN_PROGRESS", "DONE"]
