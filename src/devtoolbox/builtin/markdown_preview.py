"""Markdown preview tool."""

from devtoolbox.tools.base import (
    BaseToolProvider,
    ToolCategory,
    ToolDescriptor,
    ToolSettings,
)
from devtoolbox.views import Panel, ToolView, affordances_for


class MarkdownPreviewTool(BaseToolProvider):
    settings = ToolSettings(supports_drop_files=True)

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            id="markdown-preview",
            name="Markdown Preview",
            description="Real-time markdown editor with live preview.",
            icon="text.badge.star",
            category=ToolCategory.TEXT_PROCESSING,
        )

    def create_entry_view(self) -> ToolView:
        tool = self.descriptor()
        return ToolView(
            tool_id=tool.id,
            title=tool.name,
            description=tool.description,
            icon=tool.icon,
            panels=[
                Panel(id="editor", label="Markdown", kind="text-input"),
                Panel(id="preview", label="Preview", kind="preview"),
            ],
            affordances=affordances_for(self.settings),
        )
