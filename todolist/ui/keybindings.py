"""Keyboard bindings for the todolist application.

Bindings are split between the app (prompt visibility, quitting) and the
task list widget (selection and task actions), so that typing into the
add-task prompt never triggers list actions.
"""

from textual.binding import Binding

# Task list navigation, active while the list has focus
NAVIGATION_BINDINGS = [
    Binding("up,k", "navigate_up", "Navigate Up", show=False),
    Binding("down,j", "navigate_down", "Navigate Down", show=False),
]

# Task actions, active while the list has focus
TASK_ACTION_BINDINGS = [
    Binding("space,enter", "toggle_selected", "Toggle Complete", show=True),
    Binding("delete,backspace,x", "delete_selected", "Delete Task", show=True),
]

# Add-task prompt
INPUT_BINDINGS = [
    Binding("a,n,plus", "show_input", "Add Task", show=True),
    Binding("escape", "hide_input", "Close Prompt", show=False),
]

# Application control keybindings
APP_CONTROL_BINDINGS = [
    Binding("q", "quit", "Quit", show=True),
]


def get_list_bindings() -> list[Binding]:
    """Get the bindings owned by the task list widget."""
    return NAVIGATION_BINDINGS + TASK_ACTION_BINDINGS


def get_app_bindings() -> list[Binding]:
    """Get the application-level bindings."""
    return INPUT_BINDINGS + APP_CONTROL_BINDINGS
