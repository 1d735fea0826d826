"""TaskItem widget for displaying a single task row.

Renders a checkbox followed by the task description and a trailing delete
glyph, with completed tasks struck through and the selected row highlighted.
"""

from uuid import UUID

from rich.text import Text
from textual import events
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from todolist.models import Task
from todolist.ui.constants import CHECKBOX_WIDTH, DELETE_GLYPH, DELETE_WIDTH
from todolist.ui.theme import (
    ACCENT_COLOR,
    COMPLETE_COLOR,
    ERROR_COLOR,
    FOREGROUND,
    HOVER_OPACITY,
    SELECTION,
    with_alpha,
)


class TaskItem(Widget):
    """A widget representing a single task in the task list."""

    DEFAULT_CSS = f"""
    TaskItem {{
        height: 1;
        width: 100%;
        background: transparent;
        border-left: thick {ACCENT_COLOR};
    }}

    TaskItem:hover {{
        background: {with_alpha(SELECTION, HOVER_OPACITY)};
    }}

    TaskItem.selected {{
        background: {SELECTION};
    }}

    TaskItem.completed {{
        border-left: thick {COMPLETE_COLOR};
    }}
    """

    selected: reactive[bool] = reactive(False)

    def __init__(self, task: Task, **kwargs) -> None:
        """Initialize a TaskItem widget.

        Args:
            task: The Task model to display
            **kwargs: Additional keyword arguments for Widget
        """
        super().__init__(**kwargs)
        self._task_model = task
        self.set_class(task.is_completed, "completed")

    @property
    def task(self) -> Task:
        """The task associated with this item."""
        return self._task_model

    @property
    def task_id(self) -> UUID:
        return self._task_model.id

    def render(self) -> Text:
        """Render the task as Rich Text.

        Completed tasks show a checked box and a struck-through, dimmed
        description. The selected row always uses the foreground color for
        contrast against the selection background. Once the widget has a
        size, the description is cut to fit so the delete glyph always sits
        in the last column.
        """
        text = Text()

        if self._task_model.is_completed:
            checkbox_color = FOREGROUND if self.selected else COMPLETE_COLOR
            text.append("[✓] ", style=checkbox_color)
            description_color = FOREGROUND if self.selected else COMPLETE_COLOR
            text.append(self._task_model.description, style=f"strike {description_color}")
        else:
            text.append("[ ] ", style=FOREGROUND)
            text.append(self._task_model.description, style=FOREGROUND)

        width = self.size.width
        if width > DELETE_WIDTH:
            text.truncate(width - DELETE_WIDTH, overflow="ellipsis", pad=True)
        text.append(" ")
        text.append(DELETE_GLYPH, style=ERROR_COLOR)

        if self.selected:
            text.stylize(f"on {SELECTION}")

        return text

    def on_click(self, event: events.Click) -> None:
        """Select the row; the checkbox also toggles, the glyph also deletes."""
        offset = event.get_content_offset(self)
        width = self.size.width
        on_checkbox = offset is not None and offset.x < CHECKBOX_WIDTH
        on_delete = (
            offset is not None
            and width > DELETE_WIDTH
            and offset.x >= width - DELETE_WIDTH
        )
        self.post_message(self.Selected(self.task_id, toggle=on_checkbox, delete=on_delete))

    def watch_selected(self, selected: bool) -> None:
        self.set_class(selected, "selected")
        self.refresh()

    class Selected(Message):
        """Message emitted when a task item is clicked."""

        def __init__(self, task_id: UUID, toggle: bool = False, delete: bool = False) -> None:
            """Initialize the Selected message.

            Args:
                task_id: ID of the clicked task
                toggle: True when the click landed on the checkbox
                delete: True when the click landed on the delete glyph
            """
            super().__init__()
            self.task_id = task_id
            self.toggle = toggle
            self.delete = delete
