"""Base64 encoder/decoder tool."""

import base64
import binascii

from devtoolbox.exceptions import ToolInputError, UnknownActionError
from devtoolbox.tools.base import (
    BaseToolProvider,
    ToolCategory,
    ToolDescriptor,
    ToolSettings,
    ToolTestSuite,
)
from devtoolbox.views import Panel, ToolView, affordances_for

TOOL_ID = "base64-encoder"


class Base64Controller:
    """Encodes UTF-8 text to Base64 and back."""

    actions: tuple[str, ...] = ("encode", "decode")

    def perform(self, action: str, text: str) -> str:
        if action == "encode":
            return self.encode(text)
        if action == "decode":
            return self.decode(text)
        raise UnknownActionError(TOOL_ID, action)

    def encode(self, text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, text: str) -> str:
        try:
            raw = base64.b64decode("".join(text.split()), validate=True)
        except (binascii.Error, ValueError):
            raise ToolInputError(TOOL_ID, "Invalid Base64 input")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ToolInputError(TOOL_ID, "Decoded data is not valid UTF-8 text")


def _encodes_ascii() -> None:
    assert Base64Controller().encode("Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="


def _decodes_ascii() -> None:
    assert Base64Controller().decode("SGVsbG8sIFdvcmxkIQ==") == "Hello, World!"


def _rejects_garbage() -> None:
    try:
        Base64Controller().decode("not base64!")
    except ToolInputError:
        return
    raise AssertionError("invalid input was accepted")


class Base64EncoderTool(BaseToolProvider):
    """Encode and decode Base64 data."""

    settings = ToolSettings(
        supports_history=True,
        supports_keyboard_shortcuts=True,
    )

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            id=TOOL_ID,
            name="Base64 Encoder",
            description="Encode and decode Base64 data with ease",
            icon="lock.rectangle",
            category=ToolCategory.ENCODING,
            version="1.0",
            author="DevTools Team",
        )

    def create_entry_view(self) -> ToolView:
        tool = self.descriptor()
        return ToolView(
            tool_id=tool.id,
            title=tool.name,
            description=tool.description,
            icon=tool.icon,
            panels=[
                Panel(id="mode", label="Mode", kind="picker", options=["Encode", "Decode"]),
                Panel(
                    id="input",
                    label="Input",
                    kind="text-input",
                    placeholder="Enter text to encode...",
                ),
                Panel(id="output", label="Output", kind="text-output"),
            ],
            actions=list(Base64Controller.actions),
            affordances=affordances_for(self.settings),
        )

    def state_controller(self) -> Base64Controller:
        return Base64Controller()

    def test_hooks(self) -> ToolTestSuite:
        return ToolTestSuite(unit_tests=[_encodes_ascii, _decodes_ascii, _rejects_garbage])
