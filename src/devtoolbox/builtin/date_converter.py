"""Date converter tool."""

from devtoolbox.tools.base import (
    BaseToolProvider,
    ToolCategory,
    ToolDescriptor,
    ToolSettings,
)
from devtoolbox.views import Panel, ToolView, affordances_for

OUTPUT_FORMATS = [
    "ISO 8601",
    "RFC 2822",
    "Unix timestamp",
    "Unix timestamp (ms)",
    "Relative",
]


class DateConverterTool(BaseToolProvider):
    """Convert dates between formats, timezones and relative time."""

    settings = ToolSettings(supports_history=True)

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            id="date-converter",
            name="Date Converter",
            description="Convert dates between formats, timezones, and relative time",
            icon="calendar.badge.clock",
            category=ToolCategory.DATE_TIME,
        )

    def create_entry_view(self) -> ToolView:
        tool = self.descriptor()
        return ToolView(
            tool_id=tool.id,
            title=tool.name,
            description=tool.description,
            icon=tool.icon,
            panels=[
                Panel(
                    id="input",
                    label="Date",
                    kind="text-input",
                    placeholder="2025-09-06T12:00:00Z or 1757160000",
                ),
                Panel(id="format", label="Output format", kind="picker", options=OUTPUT_FORMATS),
                Panel(id="timezone", label="Timezone", kind="picker"),
                Panel(id="output", label="Result", kind="text-output"),
            ],
            affordances=affordances_for(self.settings),
        )
