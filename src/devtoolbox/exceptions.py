"""Custom exceptions for DevToolbox."""


class ToolInputError(Exception):
    """Raised by a tool controller when its input cannot be processed."""

    def __init__(self, tool_id: str, message: str) -> None:
        self.tool_id = tool_id
        self.message = message
        super().__init__(f"{tool_id}: {message}")


class UnknownActionError(Exception):
    """Raised when a tool controller is asked for an action it does not offer."""

    def __init__(self, tool_id: str, action: str) -> None:
        self.tool_id = tool_id
        self.action = action
        super().__init__(f"Tool '{tool_id}' has no action '{action}'")
