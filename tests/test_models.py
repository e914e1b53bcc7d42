"""Unit tests for Task, TaskOrder and the Result type."""

from taskcache.errors import TaskNotFoundError
from taskcache.models import Error, Success, Task, TaskOrder


class TestTask:
    """Tests for Task identity and helpers."""

    def test_new_tasks_get_unique_ids(self):
        assert Task(title="a").id != Task(title="a").id

    def test_equality_is_by_id(self):
        """Tasks with the same id are equal even when other fields differ."""
        assert Task(id="1", title="A") == Task(id="1", title="B", completed=True)
        assert Task(id="1") != Task(id="2")
        assert len({Task(id="1", title="A"), Task(id="1", title="B")}) == 1

    def test_same_fields_compares_values(self):
        assert not Task(id="1", title="A").same_fields(Task(id="1", title="B"))
        assert Task(id="1", title="A").same_fields(Task(id="1", title="A"))

    def test_copy_task_is_independent(self):
        original = Task(id="1", title="A", description="d")
        copy = original.copy_task()

        copy.title = "changed"

        assert original.title == "A"
        assert copy is not original
        assert copy.id == "1"

    def test_copy_task_with_changes(self):
        copy = Task(id="1", title="A").copy_task(completed=True)
        assert copy.completed is True
        assert copy.title == "A"

    def test_title_for_list_falls_back_to_description(self):
        assert Task(title="Title", description="desc").title_for_list == "Title"
        assert Task(description="desc").title_for_list == "desc"

    def test_is_active_and_is_empty(self):
        assert Task(title="x").is_active
        assert not Task(title="x", completed=True).is_active
        assert Task().is_empty
        assert not Task(description="d").is_empty


class TestTaskSerialization:
    """Tests for front matter and payload mapping."""

    def test_to_frontmatter_omits_empty_title(self):
        assert Task(id="1").to_frontmatter() == {"completed": False}
        assert Task(id="1", title="T", completed=True).to_frontmatter() == {
            "title": "T",
            "completed": True,
        }

    def test_from_frontmatter_defaults(self):
        task = Task.from_frontmatter(task_id="x", metadata={}, body="Body")
        assert task.same_fields(Task(id="x", description="Body"))

    def test_to_frontmatter_keeps_padded_description(self):
        assert "description" not in Task(id="1", description="a\n\nb").to_frontmatter()
        data = Task(id="1", description="  line\n\n").to_frontmatter()
        assert data["description"] == "  line\n\n"

    def test_from_frontmatter_prefers_description_key(self):
        task = Task.from_frontmatter(
            task_id="x", metadata={"description": "  line\n"}, body="line"
        )
        assert task.description == "  line\n"

    def test_from_frontmatter_null_title(self):
        task = Task.from_frontmatter(task_id="x", metadata={"title": None}, body="")
        assert task.title == ""

    def test_payload_ignores_unknown_fields(self):
        task = Task.from_payload({"id": "1", "title": "A", "owner": "someone"})
        assert task.same_fields(Task(id="1", title="A"))
        assert Task(id="1", title="A").to_payload() == {
            "id": "1",
            "title": "A",
            "description": "",
            "completed": False,
        }


class TestTaskOrder:
    """Tests for TaskOrder bookkeeping."""

    def test_add_and_remove(self):
        order = TaskOrder()
        assert order.add_task("a")
        assert not order.add_task("a")
        assert order.remove_task("a")
        assert not order.remove_task("a")
        assert order.order == []

    def test_reconcile_drops_missing_and_appends_new_sorted(self):
        order = TaskOrder(order=["c", "gone", "a"])

        changed = order.reconcile({"a", "c", "z", "b"})

        assert changed
        assert order.order == ["c", "a", "b", "z"]

    def test_reconcile_unchanged(self):
        order = TaskOrder(order=["b", "a"])
        assert not order.reconcile({"a", "b"})


class TestResult:
    """Tests for Success and Error."""

    def test_success(self):
        result = Success([1, 2])
        assert result.value == [1, 2]

    def test_error_message(self):
        cause = TaskNotFoundError("42")
        result = Error(cause)
        assert result.cause is cause
        assert result.message == "Task not found: 42"

    def test_error_message_falls_back_to_type_name(self):
        assert Error(RuntimeError()).message == "RuntimeError"
