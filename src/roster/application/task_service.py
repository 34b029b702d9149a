"""Task registry."""

from roster.application.ports import RecordStore
from roster.application.registry import DeletePolicy, Registry
from roster.domain import Task


class TaskService(Registry[Task]):
    """Add, delete, update and look up tasks by id."""

    def __init__(
        self,
        store: RecordStore[Task],
        *,
        policy: DeletePolicy = DeletePolicy.LENIENT,
    ) -> None:
        super().__init__(Task, store, policy=policy)

    def add_task(self, task: Task | None) -> None:
        self.add(task)

    def delete_task(self, task_id: str | None) -> bool:
        """Remove a task. Returns whether one was removed."""
        return self.delete(task_id)

    def get_task(self, task_id: str | None) -> Task | None:
        return self.get(task_id)

    def update_task(
        self,
        task_id: str | None,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        """Rename and/or re-describe a task. None leaves a field unchanged.

        The name is applied before the description; if the description is
        rejected, the new name stays.
        """
        changes = {"name": name, "description": description}
        self.update(task_id, **{key: value for key, value in changes.items() if value is not None})
