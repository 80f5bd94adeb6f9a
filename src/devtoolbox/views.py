"""View payloads rendered by the navigation shell."""

from pydantic import BaseModel, Field

from devtoolbox.navigation.route import HOME_ID
from devtoolbox.tools.base import ToolDescriptor, ToolSettings


class ToolCard(BaseModel):
    """One navigation affordance for a registered tool."""

    id: str
    name: str
    description: str
    icon: str
    category: str
    route: str

    @classmethod
    def from_descriptor(cls, tool: ToolDescriptor) -> "ToolCard":
        return cls(
            id=tool.id,
            name=tool.name,
            description=tool.description,
            icon=tool.icon,
            category=tool.category.value,
            route=tool.route.slug,
        )


class CategoryGroup(BaseModel):
    """Tools sharing a category."""

    category: str
    icon: str
    tools: list[ToolCard] = Field(default_factory=list)


class HomeView(BaseModel):
    """Home grid: every tool, plus the same tools grouped by category."""

    kind: str = "home"
    title: str = "Home"
    tools: list[ToolCard] = Field(default_factory=list)
    categories: list[CategoryGroup] = Field(default_factory=list)


class Panel(BaseModel):
    """A region of a tool view (input editor, output pane, preview...)."""

    id: str
    label: str
    kind: str  # text-input, text-output, preview, image, picker
    placeholder: str | None = None
    options: list[str] = Field(default_factory=list)


class ToolView(BaseModel):
    """Root UI unit produced by a tool's entry-view factory."""

    kind: str = "tool"
    tool_id: str
    title: str
    description: str = ""
    icon: str = ""
    panels: list[Panel] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    affordances: list[str] = Field(default_factory=list)


class ErrorPanel(BaseModel):
    """Shown instead of a tool view when a route cannot be displayed."""

    kind: str = "error"
    title: str = "Tool Error"
    message: str
    route: str
    home_route: str = HOME_ID


class ActionResult(BaseModel):
    """Outcome of running a tool action through its controller."""

    tool_id: str | None
    action: str
    ok: bool
    output: str | None = None
    error: str | None = None


class SelfTestReport(BaseModel):
    """Outcome of a tool's self-test hooks."""

    tool_id: str | None
    passed: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class NavigationState(BaseModel):
    """Snapshot of the router, for clients restoring their selection."""

    selected_sidebar_route: str
    selected_detail_route: str | None = None
    path: list[str] = Field(default_factory=list)
    can_navigate_back: bool = False
    available_tools: list[str] = Field(default_factory=list)


def affordances_for(settings: ToolSettings) -> list[str]:
    """Map a tool's settings flags to the affordances the client should wire."""
    affordances = ["copy"]
    if settings.supports_history:
        affordances.append("history")
    if settings.supports_preferences:
        affordances.append("preferences")
    if settings.supports_keyboard_shortcuts:
        affordances.append("keyboard_shortcuts")
    if settings.supports_drop_files:
        affordances.append("drop_files")
    return affordances
