"""Main Textual application for todolist.

The to-do screen is a single task list with an add-task prompt at the
bottom. The app owns one TaskListStore for its whole lifetime, subscribes to
it on mount, and redraws the list from every snapshot the store publishes.
Whether the prompt is open is presentation state kept on the app only.
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.command import DiscoveryHit, Hit, Hits, Provider
from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header

from todolist.config import Config
from todolist.logging_config import get_logger
from todolist.services.task_store import Snapshot, TaskListStore, TaskStoreError
from todolist.ui.components.task_input import TaskInput
from todolist.ui.components.task_list import TaskListView
from todolist.ui.constants import (
    MAX_DESCRIPTION_LENGTH_IN_NOTIFICATION,
    NOTIFICATION_TIMEOUT_MEDIUM,
    NOTIFICATION_TIMEOUT_SHORT,
    TASK_INPUT_ID,
    TASK_LIST_ID,
)
from todolist.ui.keybindings import get_app_bindings
from todolist.ui.theme import ACCENT_COLOR, BACKGROUND, FOREGROUND, SELECTION

# Initialize logger for this module
logger = get_logger(__name__)

ADD_BUTTON_ID = "add-button"


class TodoCommands(Provider):
    """Command provider for to-do actions."""

    def _commands(self):
        app = self.app
        return [
            ("Add Task", "Open the add-task prompt (a)", app.action_show_input),
            ("Toggle Task Completion", "Mark task as complete/incomplete (Space)", app.action_toggle_completion),
            ("Delete Task", "Delete the selected task (x/Delete)", app.action_delete_task),
        ]

    async def discover(self) -> Hits:
        for title, help_text, callback in self._commands():
            yield DiscoveryHit(title, help_text, callback)

    async def search(self, query: str) -> Hits:
        matcher = self.matcher(query)
        for title, help_text, callback in self._commands():
            score = matcher.match(title)
            if score > 0:
                yield Hit(score, matcher.highlight(title), callback, help=help_text)


def _shorten(description: str) -> str:
    if len(description) <= MAX_DESCRIPTION_LENGTH_IN_NOTIFICATION:
        return description
    return description[:MAX_DESCRIPTION_LENGTH_IN_NOTIFICATION - 3] + "..."


class TodoApp(App):
    """Single-screen to-do list application."""

    CSS = f"""
    Screen {{
        background: {BACKGROUND};
        color: {FOREGROUND};
        layout: vertical;
    }}

    #main-container {{
        width: 100%;
        height: 1fr;
        layout: vertical;
    }}

    #{ADD_BUTTON_ID} {{
        width: 100%;
        background: {ACCENT_COLOR};
        color: {BACKGROUND};
        border: none;
    }}

    Header, Footer {{
        background: {SELECTION};
    }}
    """

    BINDINGS = get_app_bindings()
    COMMANDS = App.COMMANDS | {TodoCommands}

    input_visible: reactive[bool] = reactive(False, init=False)

    # ==============================================================================
    # LIFECYCLE METHODS
    # ==============================================================================

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[TaskListStore] = None,
        **kwargs
    ) -> None:
        """Initialize the application.

        Args:
            config: Configuration, loaded from the default path when omitted
            store: Task store to drive, a new empty one when omitted
            **kwargs: Additional keyword arguments for App
        """
        super().__init__(**kwargs)
        self._config = config or Config()
        self._input_config = self._config.get_input_config()
        self._display_config = self._config.get_display_config()
        self._store = store if store is not None else TaskListStore()
        self._store_unsubscribe = None
        self.title = self._display_config['title']

    @property
    def store(self) -> TaskListStore:
        return self._store

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            yield TaskListView(
                empty_message=self._display_config['empty_message'],
                id=TASK_LIST_ID,
            )
            yield TaskInput(
                placeholder=self._input_config['placeholder'],
                id=TASK_INPUT_ID,
            )
            yield Button("+", id=ADD_BUTTON_ID)
        yield Footer()

    def on_mount(self) -> None:
        logger.info("todolist application mounted")
        self._store_unsubscribe = self._store.subscribe(self._on_tasks_changed)
        self._on_tasks_changed(self._store.tasks)
        self._apply_input_visibility(self.input_visible)

    def on_unmount(self) -> None:
        if self._store_unsubscribe is not None:
            self._store_unsubscribe()
            self._store_unsubscribe = None

    # ==============================================================================
    # HELPERS
    # ==============================================================================

    @property
    def _task_list(self) -> TaskListView:
        return self.query_one(f"#{TASK_LIST_ID}", TaskListView)

    @property
    def _task_input(self) -> TaskInput:
        return self.query_one(f"#{TASK_INPUT_ID}", TaskInput)

    def _on_tasks_changed(self, tasks: Snapshot) -> None:
        """Redraw from the snapshot published by the store."""
        self._task_list.set_tasks(tasks)
        self.sub_title = (
            f"{self._store.pending_count} pending / {self._store.completed_count} done"
        )

    def _apply_input_visibility(self, visible: bool) -> None:
        self._task_input.display = visible
        self.query_one(f"#{ADD_BUTTON_ID}", Button).display = not visible
        if visible:
            self._task_input.focus_field()
        else:
            self._task_list.focus()

    def watch_input_visible(self, visible: bool) -> None:
        logger.debug(f"Add-task prompt visible={visible}")
        self._apply_input_visibility(visible)

    # ==============================================================================
    # ACTIONS
    # ==============================================================================

    def action_show_input(self) -> None:
        """Open the add-task prompt."""
        self.input_visible = True

    def action_hide_input(self) -> None:
        """Close the add-task prompt, keeping any typed text."""
        self.input_visible = False

    def action_toggle_completion(self) -> None:
        self._task_list.action_toggle_selected()

    def action_delete_task(self) -> None:
        self._task_list.action_delete_selected()

    # ==============================================================================
    # MESSAGE HANDLERS
    # ==============================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == ADD_BUTTON_ID:
            self.action_show_input()

    def on_task_input_submitted(self, message: TaskInput.Submitted) -> None:
        """Add the submitted text as a new task.

        Blank text is ignored and the prompt stays as it is.
        """
        count_before = len(self._store)
        self._store.add_task(message.value)
        if len(self._store) == count_before:
            logger.debug("Blank task submission ignored")
            return

        self._task_input.clear()
        if self._input_config['close_on_submit']:
            self.input_visible = False

    def on_task_list_view_toggle_requested(self, message: TaskListView.ToggleRequested) -> None:
        try:
            self._store.set_completed_by_id(message.task_id, message.completed)
        except TaskStoreError as e:
            logger.warning(f"Toggle at position {message.position} failed: {e}")
            self.notify(str(e), severity="error", timeout=NOTIFICATION_TIMEOUT_MEDIUM)

    def on_task_list_view_delete_requested(self, message: TaskListView.DeleteRequested) -> None:
        try:
            task = self._store.get_task(message.task_id)
            self._store.remove_task_by_id(message.task_id)
        except TaskStoreError as e:
            logger.warning(f"Delete at position {message.position} failed: {e}")
            self.notify(str(e), severity="error", timeout=NOTIFICATION_TIMEOUT_MEDIUM)
            return
        self.notify(
            f"Deleted: {_shorten(task.description)}",
            severity="information",
            timeout=NOTIFICATION_TIMEOUT_SHORT,
        )
