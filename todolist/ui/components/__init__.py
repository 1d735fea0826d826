"""todolist UI components - Reusable widgets."""

from todolist.ui.components.task_item import TaskItem
from todolist.ui.components.task_list import TaskListView
from todolist.ui.components.task_input import TaskInput

__all__ = ["TaskItem", "TaskListView", "TaskInput"]
