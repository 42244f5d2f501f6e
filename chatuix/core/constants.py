"""Constants for core module."""

from pathlib import Path

# --- I/O --- #
LOGS_FPATH: Path = Path("logs")

# --- Replies that are not tied to a single action or keyword --- #
ERROR_REPLY: str = "An error occurred processing your request."

GREETING_MSG: str = (
    "Hello! I'm ChatUIX, an interactive chatbot that can generate dynamic UI"
    " elements. Try asking me to:\n\n"
    "• Create a form\n"
    "• Show a data table\n"
    "• Generate a chart\n"
    "• Display cards or lists\n"
    "• Or anything else!"
)

STAR_GLYPH: str = "⭐"
