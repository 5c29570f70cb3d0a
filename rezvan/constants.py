"""Constants and configuration for the rezvan editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Rendering
    TAB_STOP = 4  # Tabs expand to the next multiple of this display column
    FILLER_MARKER = "~"  # Drawn on screen rows past the end of the document
    VERSION = "0.1"
    WELCOME_MESSAGE = "Rezvan Editor --- Version {}"

    # Screen layout
    STATUS_BAR_ROWS = 2  # Status bar plus message bar below the text area

    # Editing defaults (overridable through EditorConfig)
    QUIT_TIMES = 1  # Extra Ctrl-W presses needed to quit with unsaved changes
    MESSAGE_TIMEOUT = 5.0  # Seconds before a status message expires

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Status messages
    HELP_MESSAGE = "HELP: Ctrl-S = Save | Ctrl-W = Quit | Ctrl-F = Find"
    SAVE_PROMPT = "Save as: {} (ESC to cancel)"
    SEARCH_PROMPT = "Search: {} (Use ESC / Arrows / Enter)"
    SAVE_ABORTED_MESSAGE = "Save Aborted"
    BYTES_WRITTEN_MESSAGE = "{} bytes written to disk"
    QUIT_WARNING_MESSAGE = (
        "WARNING! File has unsaved changes. Press Ctrl-W {} more time(s) to quit."
    )
    NO_NAME = "[No Name]"
