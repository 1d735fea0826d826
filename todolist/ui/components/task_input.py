"""Add-task prompt for the to-do screen.

A single-line text field with an Add button. Pressing Enter in the field or
clicking Add posts a TaskInput.Submitted message with the current text; the
app decides whether the text is accepted and clears the prompt itself.
"""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input

from todolist.ui.constants import TASK_INPUT_ADD_ID, TASK_INPUT_FIELD_ID
from todolist.ui.theme import ACCENT_COLOR, BACKGROUND, SELECTION, SUCCESS_COLOR


class TaskInput(Horizontal):
    """Text field plus Add button for entering a new task."""

    DEFAULT_CSS = f"""
    TaskInput {{
        height: auto;
        padding: 0 1;
        background: {SELECTION};
        border-top: solid {ACCENT_COLOR};
    }}

    TaskInput Input {{
        width: 1fr;
    }}

    TaskInput Button {{
        min-width: 8;
        background: {SUCCESS_COLOR};
        color: {BACKGROUND};
    }}
    """

    def __init__(self, placeholder: str = "Enter a task", **kwargs) -> None:
        """Initialize the prompt.

        Args:
            placeholder: Hint shown while the field is empty
            **kwargs: Additional keyword arguments for Horizontal
        """
        super().__init__(**kwargs)
        self.placeholder = placeholder

    def compose(self) -> ComposeResult:
        yield Input(placeholder=self.placeholder, id=TASK_INPUT_FIELD_ID)
        yield Button("Add", id=TASK_INPUT_ADD_ID)

    @property
    def field(self) -> Input:
        return self.query_one(f"#{TASK_INPUT_FIELD_ID}", Input)

    @property
    def value(self) -> str:
        return self.field.value

    def clear(self) -> None:
        self.field.value = ""

    def focus_field(self) -> None:
        self.field.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != TASK_INPUT_ADD_ID:
            return
        event.stop()
        self.post_message(self.Submitted(self.value))

    class Submitted(Message):
        """Message carrying the text the user asked to add."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value
