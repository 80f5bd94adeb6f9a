"""Global test configuration for DevToolbox."""

from unittest.mock import MagicMock

import pytest

from devtoolbox.tools.base import ToolCategory, ToolDescriptor, ToolProvider, ToolSettings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings from its own environment."""
    from devtoolbox.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_descriptor(
    tool_id: str,
    name: str | None = None,
    description: str | None = None,
    category: ToolCategory = ToolCategory.UTILITIES,
) -> ToolDescriptor:
    """Build a descriptor with readable defaults derived from the id."""
    return ToolDescriptor(
        id=tool_id,
        name=tool_id.replace("-", " ").title() if name is None else name,
        description=f"Mock {tool_id}" if description is None else description,
        icon="wrench.fill",
        category=category,
    )


def make_provider(descriptor: ToolDescriptor, view: object | None = None) -> ToolProvider:
    """Create a lightweight mock that satisfies the ToolProvider protocol."""
    provider = MagicMock(spec=ToolProvider)
    provider.settings = ToolSettings()
    provider.descriptor.return_value = descriptor
    provider.create_entry_view.return_value = view if view is not None else {"tool": descriptor.id}
    provider.state_controller.return_value = None
    provider.services.return_value = []
    provider.test_hooks.return_value = None
    return provider


def make_entry(tool_id: str, **kwargs) -> tuple[ToolDescriptor, ToolProvider]:
    descriptor = make_descriptor(tool_id, **kwargs)
    return descriptor, make_provider(descriptor)
