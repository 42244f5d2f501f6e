"""Constants for the widget package."""

# Tunables
MAX_INPUT_LENGTH = 1000  # max length of user input string in characters
MAX_TTL_SECONDS = 24 * 3600  # drop idle sessions after 24 hours

CHAT_PLACEHOLDER = "Ask for a form, a table, a chart, cards, a survey..."

USER_FRIENDLY_EXC = (
    "Whoa...something went sideways."
    " The error has been logged; please refresh the page to start over."
)
