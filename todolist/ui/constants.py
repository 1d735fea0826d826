"""UI constants for the todolist application."""

# Notification settings
MAX_DESCRIPTION_LENGTH_IN_NOTIFICATION = 30
NOTIFICATION_TIMEOUT_SHORT = 2
NOTIFICATION_TIMEOUT_MEDIUM = 3

# Widget identifiers
TASK_LIST_ID = "task-list"
TASK_INPUT_ID = "task-input"
TASK_INPUT_FIELD_ID = "task-input-field"
TASK_INPUT_ADD_ID = "task-input-add"

# Width of the "[ ] " checkbox prefix; clicks inside it toggle the task
CHECKBOX_WIDTH = 4

# Trailing " ✗" delete glyph; clicks in the last DELETE_WIDTH cells delete the task
DELETE_GLYPH = "✗"
DELETE_WIDTH = 2
