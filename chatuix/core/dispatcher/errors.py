"""Exceptions raised while computing a reply."""


class DispatchError(Exception):
    """Base class for failures while computing a reply."""


class BadPayloadError(DispatchError):
    """The action payload can't be read as the shape the action needs."""

    def __init__(self, action: str, detail: str) -> None:
        """Initialize with the offending action and a readable reason."""
        self.action = action
        self.detail = detail
        super().__init__(f"Bad payload for action '{action}': {detail}")


class UnknownActionError(DispatchError):
    """No catalog entry matches the action id."""

    def __init__(self, action: str) -> None:
        """Initialize with the unmatched action id."""
        self.action = action
        super().__init__(f"Unknown action: {action}")


class EmptyHistoryError(DispatchError):
    """Text mode was asked for a reply without any message to read."""
