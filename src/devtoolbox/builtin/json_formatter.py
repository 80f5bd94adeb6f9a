"""JSON formatter tool."""

import json

from devtoolbox.exceptions import ToolInputError, UnknownActionError
from devtoolbox.tools.base import (
    BaseToolProvider,
    ToolCategory,
    ToolDescriptor,
    ToolSettings,
)
from devtoolbox.views import Panel, ToolView, affordances_for

TOOL_ID = "json-formatter"


class JSONFormatterController:
    """Pretty-prints, minifies and validates JSON documents."""

    actions: tuple[str, ...] = ("format", "minify", "validate")

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def perform(self, action: str, text: str) -> str:
        if action not in self.actions:
            raise UnknownActionError(TOOL_ID, action)

        data = self._parse(text)
        if action == "format":
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        if action == "minify":
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return "Valid JSON"

    @staticmethod
    def _parse(text: str) -> object:
        if not text.strip():
            raise ToolInputError(TOOL_ID, "Input is empty")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ToolInputError(
                TOOL_ID, f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
            )


class JSONFormatterTool(BaseToolProvider):
    """Format and validate JSON."""

    settings = ToolSettings(supports_drop_files=True)

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            id=TOOL_ID,
            name="JSON Formatter",
            description="Format and validate JSON data in real time",
            icon="curlybraces.square",
            category=ToolCategory.FORMATTING,
        )

    def create_entry_view(self) -> ToolView:
        tool = self.descriptor()
        return ToolView(
            tool_id=tool.id,
            title=tool.name,
            description=tool.description,
            icon=tool.icon,
            panels=[
                Panel(id="input", label="Input", kind="text-input", placeholder="Paste JSON here"),
                Panel(id="output", label="Formatted", kind="text-output"),
            ],
            actions=list(JSONFormatterController.actions),
            affordances=affordances_for(self.settings),
        )

    def state_controller(self) -> JSONFormatterController:
        return JSONFormatterController()
