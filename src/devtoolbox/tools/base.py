"""Tool protocol and descriptor for the DevToolbox tool framework."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from devtoolbox.navigation.route import Route, route_for


class ToolCategory(str, Enum):
    """Categories used to group tools in navigation."""

    DATE_TIME = "Date & Time"
    TEXT_PROCESSING = "Text Processing"
    FORMATTING = "Formatting"
    ENCODING = "Encoding"
    UTILITIES = "Utilities"
    IMAGES = "Images"

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_ICONS = {
    ToolCategory.DATE_TIME: "clock.fill",
    ToolCategory.TEXT_PROCESSING: "text.alignleft",
    ToolCategory.FORMATTING: "text.justify",
    ToolCategory.ENCODING: "lock.fill",
    ToolCategory.UTILITIES: "wrench.fill",
    ToolCategory.IMAGES: "photo",
}


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable identity and metadata record for a tool.

    Attributes:
        id: Stable unique identifier, kebab-case (e.g. "date-converter").
        name: Display name.
        description: Human-readable summary of the tool.
        icon: Opaque icon reference for the rendering layer.
        category: Grouping used by navigation.
        version: Informational tool version.
        author: Informational author/contributor.
    """

    id: str
    name: str
    description: str
    icon: str
    category: ToolCategory
    version: str = "1.0"
    author: str = "Community"

    @property
    def route(self) -> Route:
        """Navigation route derived from the tool id."""
        return route_for(self.id)


@dataclass(frozen=True)
class ToolSettings:
    """Optional capability flags a tool declares for the shell."""

    supports_history: bool = False
    supports_preferences: bool = False
    supports_keyboard_shortcuts: bool = False
    supports_drop_files: bool = False


@dataclass(frozen=True)
class ToolTestSuite:
    """Self-test hooks shipped with a tool."""

    unit_tests: list[Callable[[], Any]] = field(default_factory=list)
    integration_tests: list[Callable[[], Any]] = field(default_factory=list)
    ui_tests: list[Callable[[], Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.unit_tests) + len(self.integration_tests) + len(self.ui_tests)


@runtime_checkable
class ToolService(Protocol):
    """A tool-owned service with an explicit lifecycle."""

    @property
    def service_id(self) -> str: ...

    def initialize(self) -> None: ...

    def cleanup(self) -> None: ...


@runtime_checkable
class ToolController(Protocol):
    """State/business-logic object behind a tool's view.

    The registry never looks at controllers; only the navigation shell
    dispatches actions to them.
    """

    @property
    def actions(self) -> tuple[str, ...]: ...

    def perform(self, action: str, text: str) -> str: ...


@runtime_checkable
class ToolProvider(Protocol):
    """Protocol that every registrable tool must satisfy.

    Only ``descriptor()`` and ``create_entry_view()`` carry tool-specific
    behavior; the rest are optional extras (see BaseToolProvider).
    """

    @property
    def settings(self) -> ToolSettings: ...

    def descriptor(self) -> ToolDescriptor: ...

    def create_entry_view(self) -> Any: ...

    def state_controller(self) -> ToolController | None: ...

    def services(self) -> list[ToolService]: ...

    def test_hooks(self) -> ToolTestSuite | None: ...


class BaseToolProvider(ABC):
    """Base class for tools, supplying defaults for the optional extras."""

    settings: ToolSettings = ToolSettings()

    @abstractmethod
    def descriptor(self) -> ToolDescriptor:
        """Return the tool's descriptor."""
        ...

    @abstractmethod
    def create_entry_view(self) -> Any:
        """Build the tool's root view."""
        ...

    def state_controller(self) -> ToolController | None:
        return None

    def services(self) -> list[ToolService]:
        return []

    def test_hooks(self) -> ToolTestSuite | None:
        return None
