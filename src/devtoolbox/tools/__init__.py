"""Tool framework: descriptors, the provider protocol and the registry."""

from devtoolbox.tools.base import (
    BaseToolProvider,
    ToolCategory,
    ToolController,
    ToolDescriptor,
    ToolProvider,
    ToolService,
    ToolSettings,
    ToolTestSuite,
)
from devtoolbox.tools.registry import (
    FindingKind,
    RegisteredTool,
    ToolRegistry,
    ValidationFinding,
)

__all__ = [
    "BaseToolProvider",
    "FindingKind",
    "RegisteredTool",
    "ToolCategory",
    "ToolController",
    "ToolDescriptor",
    "ToolProvider",
    "ToolRegistry",
    "ToolService",
    "ToolSettings",
    "ToolTestSuite",
    "ValidationFinding",
]
