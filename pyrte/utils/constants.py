APP_ORG = "QuickTools"
APP_NAME = "PyRichText Editor"

# Host file I/O always uses this encoding.
TEXT_ENCODING = "utf-8"

DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_PLACEHOLDER = "Start typing here..."

UNTITLED = "Untitled"
DIRTY_MARK = " •"

CONFIRM_NEW_TEXT = "You have unsaved changes. Create a new file anyway?"
CONFIRM_QUIT_TEXT = "You have unsaved changes. Quit anyway?"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"
