"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Trivia Night Host"
PLACEHOLDER_ROUND_TEXT: str = """1. What is the capital of France?
Answer: Paris

2. Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn
Answer: B) Mars"""
FORMAT_HELP_TEXT: str = "Format: 1. Question text? A) ... B) ... Answer: B) The answer"
PLACEHOLDER_ROUND_TITLE: str = "Round Title (e.g., Classic Cars)"
PLACEHOLDER_ROUND_TOPIC: str = "Topic (optional)"

MODE_BUTTON_EDIT: str = "Edit Rounds"
MODE_BUTTON_PRESENT: str = "Present Event"
MODE_BUTTON_OPEN_LIBRARY: str = "Open Library"
MODE_BUTTON_SAVE_LIBRARY: str = "Save Library"

EDITOR_SAVE_BUTTON: str = "Save Round"
EDITOR_NEW_BUTTON: str = "New Round"
EDITOR_IMPORT_BUTTON: str = "Import Round Text"
EDITOR_EXPORT_BUTTON: str = "Export Round Text"
EXIT_BUTTON_TEXT: str = "×"

LIBRARY_DIALOG_TITLE: str = "Select trivia library"
LIBRARY_FILE_FILTER: str = "Trivia library (*.json);;All files (*.*)"
ROUND_DIALOG_TITLE: str = "Select round text file"
ROUND_FILE_FILTER: str = "Round files (*.txt *.md);;All files (*.*)"

NO_EVENTS_MESSAGE: str = "The library has no events yet. Open a library that contains events."
EVENT_NOT_FOUND_MESSAGE: str = "The selected event could not be loaded."

MODE_BUTTON_EVENTS: str = "Edit Events"
PLACEHOLDER_EVENT_TITLE: str = "Event Title (e.g., Tuesday Pub Quiz)"
EVENT_NEW_BUTTON: str = "New Event"
EVENT_SAVE_BUTTON: str = "Save Event"
EVENT_ADD_ROUND_BUTTON: str = "Add Round"
EVENT_REMOVE_ROUND_BUTTON: str = "Remove Round"
EVENT_MOVE_UP_BUTTON: str = "Move Up"
EVENT_MOVE_DOWN_BUTTON: str = "Move Down"
EVENT_DELETE_BUTTON: str = "Delete Event"

EDITOR_DELETE_BUTTON: str = "Delete Round"
EDITOR_MODE_MARKDOWN: str = "Markdown"
EDITOR_MODE_CARDS: str = "Cards"
CARD_ADD_BUTTON: str = "+ Add Question"
CARD_REMOVE_BUTTON: str = "Remove Question"
CARD_MOVE_UP_BUTTON: str = "↑"
CARD_MOVE_DOWN_BUTTON: str = "↓"
CARD_COLUMN_HEADERS: tuple[str, str] = ("Question", "Answer")
