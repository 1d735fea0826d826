"""
Task list store for the todolist application.

Holds the ordered, in-memory collection of tasks behind the to-do screen and
applies the add / complete / remove mutations. Tasks can be addressed by
their display position or by their stable id. Every applied mutation
publishes the complete new snapshot to subscribed listeners.
"""

from typing import Callable, Iterator, List, Tuple
from uuid import UUID

from todolist.logging_config import get_logger
from todolist.models import Task

logger = get_logger(__name__)

Snapshot = Tuple[Task, ...]
Listener = Callable[[Snapshot], None]


class TaskStoreError(Exception):
    """Base exception for task store errors."""
    pass


class TaskIndexError(TaskStoreError, IndexError):
    """Raised when a position does not address an existing task."""
    pass


class TaskNotFoundError(TaskStoreError, KeyError):
    """Raised when no task has the requested id."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class TaskListStore:
    """
    Ordered collection of tasks with positional and id-based mutations.

    Insertion order is display order; new tasks are appended at the end.
    The collection is replaced as a whole on each mutation, so a snapshot
    handed out earlier never changes underneath its holder.
    """

    def __init__(self) -> None:
        self._tasks: Snapshot = ()
        self._listeners: List[Listener] = []

    # ==============================================================================
    # QUERIES
    # ==============================================================================

    @property
    def tasks(self) -> Snapshot:
        """Current ordered snapshot of all tasks."""
        return self._tasks

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self._tasks if task.is_completed)

    @property
    def pending_count(self) -> int:
        return len(self._tasks) - self.completed_count

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    def position_of(self, task_id: UUID) -> int:
        """
        Get the display position of a task.

        Args:
            task_id: UUID of the task

        Returns:
            Zero-based position in the current snapshot

        Raises:
            TaskNotFoundError: If no task has this id
        """
        for position, task in enumerate(self._tasks):
            if task.id == task_id:
                return position
        raise TaskNotFoundError(f"Task with id {task_id} not found")

    def get_task(self, task_id: UUID) -> Task:
        """
        Get a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        return self._tasks[self.position_of(task_id)]

    # ==============================================================================
    # SUBSCRIPTION
    # ==============================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the new snapshot after each mutation.

        Listeners run synchronously, in subscription order, once the mutation
        is fully applied. An exception raised by a listener propagates to the
        caller of the mutation; the mutation itself stays applied.

        Args:
            listener: Callable receiving the complete snapshot

        Returns:
            Function that removes the listener (safe to call more than once)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, tasks: Snapshot) -> Snapshot:
        self._tasks = tasks
        for listener in list(self._listeners):
            listener(tasks)
        return tasks

    # ==============================================================================
    # VALIDATION HELPERS
    # ==============================================================================

    def _check_index(self, index: int) -> int:
        """
        Verify that a position addresses an existing task.

        Raises:
            TaskIndexError: If index is not an int or is out of range
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TaskIndexError(f"Task position must be an int, got {type(index).__name__}")
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(
                f"Task position {index} out of range for list of {len(self._tasks)} tasks"
            )
        return index

    # ==============================================================================
    # POSITIONAL MUTATIONS
    # ==============================================================================

    def add_task(self, description: str) -> Snapshot:
        """
        Append a new pending task.

        Blank descriptions (empty or whitespace only) are ignored: nothing
        is appended and listeners are not notified.

        Args:
            description: Task text, stored as entered

        Returns:
            The resulting snapshot
        """
        if not description or not description.strip():
            logger.debug("Ignoring add_task with blank description")
            return self._tasks

        task = Task(description=description)
        logger.debug(f"Adding task {task.id} at position {len(self._tasks)}")
        return self._publish(self._tasks + (task,))

    def set_completed(self, index: int, completed: bool) -> Snapshot:
        """
        Set the completion state of the task at a position.

        Args:
            index: Zero-based position
            completed: New completion state

        Returns:
            The resulting snapshot

        Raises:
            TaskIndexError: If index is out of range
        """
        self._check_index(index)
        updated = self._tasks[index].with_completed(completed)
        logger.debug(f"Setting task {updated.id} at position {index} completed={completed}")
        return self._publish(self._tasks[:index] + (updated,) + self._tasks[index + 1:])

    def toggle_task(self, index: int) -> Snapshot:
        """
        Flip the completion state of the task at a position.

        Raises:
            TaskIndexError: If index is out of range
        """
        self._check_index(index)
        return self.set_completed(index, not self._tasks[index].is_completed)

    def remove_task(self, index: int) -> Snapshot:
        """
        Remove the task at a position; later tasks shift down by one.

        Args:
            index: Zero-based position

        Returns:
            The resulting snapshot

        Raises:
            TaskIndexError: If index is out of range
        """
        self._check_index(index)
        logger.debug(f"Removing task {self._tasks[index].id} at position {index}")
        return self._publish(self._tasks[:index] + self._tasks[index + 1:])

    # ==============================================================================
    # ID-BASED MUTATIONS
    # ==============================================================================

    def set_completed_by_id(self, task_id: UUID, completed: bool) -> Snapshot:
        """
        Set the completion state of a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        return self.set_completed(self.position_of(task_id), completed)

    def remove_task_by_id(self, task_id: UUID) -> Snapshot:
        """
        Remove a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        return self.remove_task(self.position_of(task_id))
