"""Navigation state for the shell: sidebar selection and back stack."""

import logging

from devtoolbox.navigation.route import Route
from devtoolbox.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Router:
    """Tracks what the shell is showing.

    ``path`` holds the slugs of opened tool routes, most recent last; its
    top is the route currently shown. An empty path means home.
    """

    def __init__(self) -> None:
        self.selected_sidebar_route: Route = Route.home()
        self.selected_detail_route: Route | None = None
        self.path: list[str] = []
        # Loaded from the registry on demand, not at construction
        self.available_tools: list[Route] = []

    def navigate(self, route: Route) -> None:
        """Select a route and push it onto the back stack."""
        if route.is_home:
            self.navigate_to_root()
            return
        self._select(route)
        if not self.path or self.path[-1] != route.slug:
            self.path.append(route.slug)
        logger.debug(f"Navigated to {route}")

    def navigate_back(self, count: int = 1) -> Route:
        """Pop up to ``count`` routes and select what is left on top.

        Returns:
            The newly selected route, home once the stack is empty
        """
        self.pop_to_view(count)
        if not self.path:
            self.navigate_to_root()
            return Route.home()
        route = Route.from_slug(self.path[-1])
        self._select(route)
        return route

    def navigate_to_root(self) -> None:
        self.path.clear()
        self.selected_sidebar_route = Route.home()
        self.selected_detail_route = None

    def pop_to_view(self, count: int) -> None:
        """Pop up to ``count`` entries off the back stack."""
        count_to_pop = min(max(count, 0), len(self.path))
        if count_to_pop:
            del self.path[-count_to_pop:]

    def can_navigate_back(self) -> bool:
        return bool(self.path)

    def _select(self, route: Route) -> None:
        self.selected_sidebar_route = route
        self.selected_detail_route = route

    async def refresh_available_tools(self, registry: ToolRegistry) -> list[Route]:
        """Reload the sidebar routes from the registry."""
        tools = await registry.all_tools()
        self.available_tools = [tool.route for tool in tools]
        return self.available_tools
