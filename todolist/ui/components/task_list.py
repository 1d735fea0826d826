"""Task list widget for the to-do screen.

This module provides the TaskListView widget which displays the current
task snapshot as a scrollable list of TaskItems with:
- A selection cursor kept on the same task across re-renders
- Up/down navigation
- Toggle and delete requests addressed by position and task id
- An empty-state message
"""

from typing import List, Optional, Sequence
from uuid import UUID

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static

from todolist.logging_config import get_logger
from todolist.models import Task
from todolist.ui.components.task_item import TaskItem
from todolist.ui.keybindings import get_list_bindings
from todolist.ui.theme import BORDER, COMMENT, FOCUS_COLOR

logger = get_logger(__name__)


class TaskListView(Widget):
    """Scrollable list of tasks with a selection cursor.

    The widget never mutates tasks itself. Toggle and delete actions post
    ToggleRequested / DeleteRequested messages carrying the position and
    id of the selected task, read from the snapshot currently displayed.
    """

    can_focus = True

    BINDINGS = get_list_bindings()

    DEFAULT_CSS = f"""
    TaskListView {{
        border: solid {BORDER};
        padding: 0 1;
        margin: 0 1;
        height: 1fr;
    }}

    TaskListView:focus {{
        border: thick {FOCUS_COLOR};
    }}

    TaskListView .list-content {{
        width: 100%;
        height: 1fr;
        padding: 1 0;
    }}

    TaskListView .empty-message {{
        width: 100%;
        color: {COMMENT};
        text-align: center;
        padding: 2;
    }}
    """

    selected_task_id: reactive[Optional[UUID]] = reactive(None)

    def __init__(self, empty_message: str = "No tasks", **kwargs) -> None:
        """Initialize a TaskListView widget.

        Args:
            empty_message: Message to show when the list is empty
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self.empty_message = empty_message
        self._tasks: List[Task] = []
        self._items: List[TaskItem] = []
        self._selected_index: int = -1

    def compose(self) -> ComposeResult:
        with VerticalScroll(classes="list-content"):
            yield Static(self.empty_message, classes="empty-message")

    def on_mount(self) -> None:
        self._render_tasks()

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    def set_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the displayed tasks with a new snapshot.

        The selection follows the previously selected task by id. When that
        task is gone, the cursor stays at the same position, clamped to the
        new length.

        Args:
            tasks: Complete ordered snapshot to display
        """
        logger.debug(f"set_tasks() called with {len(tasks)} tasks")

        previous_id = self.selected_task_id
        previous_index = self._selected_index
        self._tasks = list(tasks)

        if not self._tasks:
            self._selected_index = -1
        else:
            new_index = next(
                (i for i, task in enumerate(self._tasks) if task.id == previous_id),
                None,
            )
            if new_index is None:
                new_index = min(max(previous_index, 0), len(self._tasks) - 1)
            self._selected_index = new_index

        self.selected_task_id = self._selected_task_id()
        self._render_tasks()

    def _selected_task_id(self) -> Optional[UUID]:
        task = self.get_selected_task()
        return task.id if task else None

    def _render_tasks(self) -> None:
        """Rebuild the TaskItem widgets from the current tasks."""
        if not self.is_mounted:
            return

        content = self.query_one(".list-content", VerticalScroll)
        empty_message = self.query_one(".empty-message", Static)

        for item in self._items:
            item.remove()
        self._items = []

        empty_message.display = not self._tasks
        if not self._tasks:
            return

        for index, task in enumerate(self._tasks):
            item = TaskItem(task)
            item.selected = index == self._selected_index
            self._items.append(item)
        content.mount_all(self._items)
        logger.debug(f"Mounted {len(self._items)} task items")

    def _update_selection(self, new_index: int) -> None:
        """Move the selection cursor.

        Args:
            new_index: New selection index
        """
        if not self._tasks or new_index < 0 or new_index >= len(self._tasks):
            return

        if 0 <= self._selected_index < len(self._items):
            self._items[self._selected_index].selected = False

        self._selected_index = new_index
        self.selected_task_id = self._tasks[new_index].id

        if new_index < len(self._items):
            item = self._items[new_index]
            item.selected = True
            if self.is_mounted:
                item.scroll_visible()

    def get_selected_task(self) -> Optional[Task]:
        """Get the currently selected task, or None if nothing is selected."""
        if 0 <= self._selected_index < len(self._tasks):
            return self._tasks[self._selected_index]
        return None

    def action_navigate_up(self) -> None:
        if self._selected_index > 0:
            self._update_selection(self._selected_index - 1)

    def action_navigate_down(self) -> None:
        if self._selected_index < len(self._tasks) - 1:
            self._update_selection(self._selected_index + 1)

    def action_toggle_selected(self) -> None:
        """Request flipping the completion state of the selected task."""
        task = self.get_selected_task()
        if task is None:
            return
        self.post_message(
            self.ToggleRequested(self._selected_index, task.id, not task.is_completed)
        )

    def action_delete_selected(self) -> None:
        """Request removal of the selected task."""
        task = self.get_selected_task()
        if task is None:
            return
        self.post_message(self.DeleteRequested(self._selected_index, task.id))

    def on_task_item_selected(self, message: TaskItem.Selected) -> None:
        """Handle a click on a row."""
        message.stop()
        for index, task in enumerate(self._tasks):
            if task.id == message.task_id:
                self._update_selection(index)
                if message.delete:
                    self.action_delete_selected()
                elif message.toggle:
                    self.action_toggle_selected()
                break
        self.focus()

    class ToggleRequested(Message):
        """Message asking to set the completion state of a task."""

        def __init__(self, position: int, task_id: UUID, completed: bool) -> None:
            super().__init__()
            self.position = position
            self.task_id = task_id
            self.completed = completed

    class DeleteRequested(Message):
        """Message asking to remove a task."""

        def __init__(self, position: int, task_id: UUID) -> None:
            super().__init__()
            self.position = position
            self.task_id = task_id
