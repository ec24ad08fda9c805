"""Constants and configuration for the docforge editor."""


class EditorConstants:
    """Central configuration constants for document assembly and storage."""

    # Rendering
    IMAGE_PLACEHOLDER = "[Image: {}]"  # Placeholder emitted for image elements
    LINE_BREAK = "\n"
    TAB_STOP = "\t"

    # File storage
    DEFAULT_FILENAME = "document.txt"  # Where the file backend saves by default
    DEFAULT_ENCODING = "utf-8"
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Database storage
    DEFAULT_DATABASE = "documents.db"

    # PDF layout (points; US letter is 612 x 792)
    DEFAULT_PDF_FILENAME = "document.pdf"
    PDF_FONT_NAME = "Courier"
    PDF_FONT_SIZE = 12
    PDF_MARGIN = 72  # One inch on every side
    TAB_WIDTH = 8  # Columns a tab stop expands to in fixed-width output

    # Settings
    APP_NAME = "docforge"
    SETTINGS_FILENAME = "settings.json"
    DEFAULT_BACKEND = "file"
    BACKENDS = ("file", "sqlite", "pdf", "terminal")
