"""QR code generator tool."""

from devtoolbox.tools.base import BaseToolProvider, ToolCategory, ToolDescriptor
from devtoolbox.views import Panel, ToolView, affordances_for


class QRCodeTool(BaseToolProvider):
    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            id="qr-code-generator",
            name="QR Code Generator",
            description="Generate QR codes from text",
            icon="qrcode",
            category=ToolCategory.IMAGES,
        )

    def create_entry_view(self) -> ToolView:
        tool = self.descriptor()
        return ToolView(
            tool_id=tool.id,
            title=tool.name,
            description=tool.description,
            icon=tool.icon,
            panels=[
                Panel(id="input", label="Text", kind="text-input", placeholder="Text or URL"),
                Panel(id="code", label="QR Code", kind="image"),
            ],
            affordances=affordances_for(self.settings),
        )
