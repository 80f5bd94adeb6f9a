"""FastAPI routes exposing the navigation shell."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from devtoolbox import __version__
from devtoolbox.config import get_settings
from devtoolbox.navigation.route import Route
from devtoolbox.navigation.shell import NavigationShell
from devtoolbox.tools.base import ToolCategory
from devtoolbox.tools.registry import ToolRegistry, ValidationFinding
from devtoolbox.views import (
    ActionResult,
    ErrorPanel,
    HomeView,
    NavigationState,
    SelfTestReport,
    ToolCard,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependency injection
_registry: ToolRegistry | None = None
_shell: NavigationShell | None = None


class ActionRequest(BaseModel):
    """Input for a tool action."""

    input: str = ""


class FindingResponse(BaseModel):
    kind: str
    tool_id: str
    message: str

    @classmethod
    def from_finding(cls, finding: ValidationFinding) -> "FindingResponse":
        return cls(kind=finding.kind.value, tool_id=finding.tool_id, message=finding.message)


def get_registry() -> ToolRegistry:
    """Get or create registry instance."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry(revalidate_on_add=get_settings().revalidate_on_add)
    return _registry


def get_shell() -> NavigationShell:
    """Get or create navigation shell instance."""
    global _shell
    if _shell is None:
        _shell = NavigationShell(registry=get_registry())
    return _shell


@router.get("/health")
async def health(
    registry: Annotated[ToolRegistry, Depends(get_registry)],
) -> dict:
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "tools": [tool.id for tool in await registry.all_tools()],
    }


@router.get("/tools", response_model=list[ToolCard])
async def list_tools(
    registry: Annotated[ToolRegistry, Depends(get_registry)],
    category: ToolCategory | None = None,
) -> list[ToolCard]:
    """List registered tools, optionally for one category."""
    if category is None:
        tools = await registry.all_tools()
    else:
        tools = await registry.tools_by_category(category)
    return [ToolCard.from_descriptor(tool) for tool in tools]


@router.get("/home", response_model=HomeView)
async def home(
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> HomeView:
    return await shell.home()


@router.get("/routes/{slug}", response_model=None)
async def open_route(
    slug: str,
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> Any:
    """Open a route and return what the client should display.

    Unresolved routes come back as a 404 whose body is the error panel,
    so clients can always render something and link back home.
    """
    return _view_response(await shell.open(Route.from_slug(slug)))


@router.post("/routes/{slug}/actions/{action}", response_model=ActionResult)
async def perform_action(
    slug: str,
    action: str,
    request: ActionRequest,
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> Any:
    """Run an action on a tool's controller."""
    result = await shell.perform(Route.from_slug(slug), action, request.input)
    if result.ok:
        return result
    status_code = (
        status.HTTP_404_NOT_FOUND
        if result.tool_id is None
        else 422
    )
    return JSONResponse(status_code=status_code, content=result.model_dump())


@router.post("/routes/{slug}/self-test", response_model=SelfTestReport)
async def self_test(
    slug: str,
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> SelfTestReport:
    report = await shell.run_self_test(Route.from_slug(slug))
    if report.tool_id is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool '{slug}' not found",
        )
    return report


@router.get("/validation", response_model=list[FindingResponse])
async def validation(
    registry: Annotated[ToolRegistry, Depends(get_registry)],
) -> list[FindingResponse]:
    """Re-run registry validation and return the findings."""
    return [FindingResponse.from_finding(f) for f in await registry.validate()]


@router.get("/navigation", response_model=NavigationState)
async def navigation(
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> NavigationState:
    nav = shell.router
    return NavigationState(
        selected_sidebar_route=nav.selected_sidebar_route.slug,
        selected_detail_route=(
            nav.selected_detail_route.slug if nav.selected_detail_route else None
        ),
        path=list(nav.path),
        can_navigate_back=nav.can_navigate_back(),
        available_tools=[route.slug for route in nav.available_tools],
    )


@router.post("/navigation/back", response_model=None)
async def navigate_back(
    shell: Annotated[NavigationShell, Depends(get_shell)],
    count: int = 1,
) -> Any:
    """Go back ``count`` steps; an emptied stack lands on home."""
    return _view_response(await shell.back(count))


@router.post("/navigation/root", response_model=HomeView)
async def navigate_to_root(
    shell: Annotated[NavigationShell, Depends(get_shell)],
) -> HomeView:
    return await shell.root()
