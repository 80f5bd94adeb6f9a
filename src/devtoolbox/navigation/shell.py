"""Navigation shell: turns registry contents into views.

The shell is the only component that calls into tool code (entry-view
factories, controllers, services, self-test hooks). Failures in tool
code are logged and rendered as error values; the shell itself never
raises to its caller.
"""

import logging
from typing import Any, Iterable

from devtoolbox.exceptions import ToolInputError, UnknownActionError
from devtoolbox.navigation.route import Route
from devtoolbox.navigation.router import Router
from devtoolbox.tools.base import ToolCategory, ToolProvider, ToolService
from devtoolbox.tools.registry import ToolRegistry, ValidationFinding
from devtoolbox.views import (
    ActionResult,
    CategoryGroup,
    ErrorPanel,
    HomeView,
    SelfTestReport,
    ToolCard,
)

logger = logging.getLogger(__name__)


class NavigationShell:
    """Consumes the tool registry to render navigation and tool views."""

    def __init__(self, registry: ToolRegistry, router: Router | None = None) -> None:
        self.registry = registry
        self.router = router or Router()
        self._services: list[tuple[str, ToolService]] = []

    async def startup(
        self,
        providers: Iterable[ToolProvider],
        validate: bool = True,
    ) -> list[ValidationFinding]:
        """Register the application's tools and start their services.

        Args:
            providers: Every tool the application ships
            validate: Run registry validation after registering

        Returns:
            Validation findings (empty when validation is skipped)
        """
        await self.registry.register_providers(providers)
        findings = await self.registry.validate() if validate else []

        for tool in await self.registry.all_tools():
            provider = await self.registry.capability_for(tool.route)
            if provider is None:
                continue
            await self._start_services(tool.id, provider)

        await self.router.refresh_available_tools(self.registry)
        return findings

    async def _start_services(self, tool_id: str, provider: ToolProvider) -> None:
        try:
            services = provider.services()
        except Exception as e:
            logger.error(f"Could not list services for {tool_id}: {e}")
            return

        for service in services:
            if any(existing is service for _, existing in self._services):
                continue
            try:
                service.initialize()
            except Exception as e:
                logger.error(
                    f"Service {service.service_id} of {tool_id} failed to initialize: {e}"
                )
                continue
            self._services.append((tool_id, service))
            logger.debug(f"Initialized service {service.service_id} for {tool_id}")

    async def shutdown(self) -> None:
        """Clean up every service started by ``startup``."""
        while self._services:
            tool_id, service = self._services.pop()
            try:
                service.cleanup()
            except Exception as e:
                logger.error(
                    f"Service {service.service_id} of {tool_id} failed to clean up: {e}"
                )

    async def home(self) -> HomeView:
        """Build the home grid from the current registry contents."""
        tools = await self.registry.all_tools()
        cards = [ToolCard.from_descriptor(tool) for tool in tools]

        groups: list[CategoryGroup] = []
        for category in ToolCategory:
            in_category = [card for card in cards if card.category == category.value]
            if in_category:
                groups.append(CategoryGroup(
                    category=category.value,
                    icon=category.icon,
                    tools=in_category,
                ))

        return HomeView(tools=cards, categories=groups)

    async def open(self, route: Route) -> Any:
        """Select a route and build what should be displayed for it.

        Returns:
            HomeView for home, the tool's entry view, or an ErrorPanel
        """
        if route.is_home:
            return await self.root()

        self.router.navigate(route)
        return await self._render(route)

    async def back(self, count: int = 1) -> Any:
        """Go back ``count`` steps and show whatever is then on top."""
        route = self.router.navigate_back(count)
        if route.is_home:
            return await self.home()
        return await self._render(route)

    async def root(self) -> HomeView:
        """Clear the back stack and show the home grid."""
        self.router.navigate_to_root()
        return await self.home()

    async def _render(self, route: Route) -> Any:
        provider = await self.registry.capability_for(route)
        if provider is None:
            logger.warning(f"No tool registered for route '{route}'")
            return ErrorPanel(
                message=f"Tool '{route}' not found",
                route=route.slug,
            )

        tool = await self.registry.tool_by_route(route)
        name = tool.name if tool and tool.name else route.title
        try:
            return provider.create_entry_view()
        except Exception:
            logger.exception(f"Entry view for '{route}' failed to build")
            return ErrorPanel(
                message=f"Tool '{name}' could not be displayed",
                route=route.slug,
            )

    async def perform(self, route: Route, action: str, text: str) -> ActionResult:
        """Run an action on the tool's state controller."""
        provider = await self.registry.capability_for(route)
        if provider is None:
            return ActionResult(
                tool_id=None,
                action=action,
                ok=False,
                error=f"Tool '{route}' not found",
            )

        tool = await self.registry.tool_by_route(route)
        tool_id = tool.id if tool else route.slug
        try:
            controller = provider.state_controller()
        except Exception as e:
            logger.error(f"Controller for {tool_id} failed to build: {e}")
            return ActionResult(
                tool_id=tool_id,
                action=action,
                ok=False,
                error=f"Tool '{tool_id}' controller unavailable: {e}",
            )
        if controller is None:
            return ActionResult(
                tool_id=tool_id,
                action=action,
                ok=False,
                error=f"Tool '{tool_id}' has no actions",
            )

        try:
            output = controller.perform(action, text)
        except (ToolInputError, UnknownActionError) as e:
            return ActionResult(tool_id=tool_id, action=action, ok=False, error=str(e))
        except Exception as e:
            logger.exception(f"Action {action} of {tool_id} failed")
            return ActionResult(tool_id=tool_id, action=action, ok=False, error=str(e))

        return ActionResult(tool_id=tool_id, action=action, ok=True, output=output)

    async def run_self_test(self, route: Route) -> SelfTestReport:
        """Run a tool's self-test hooks and report which passed."""
        provider = await self.registry.capability_for(route)
        if provider is None:
            return SelfTestReport(tool_id=None)

        tool = await self.registry.tool_by_route(route)
        report = SelfTestReport(tool_id=tool.id if tool else route.slug)
        try:
            suite = provider.test_hooks()
        except Exception as e:
            logger.error(f"Self-test hooks of {report.tool_id} failed to load: {e}")
            report.failed["hooks"] = f"{type(e).__name__}: {e}"
            return report
        if suite is None:
            return report

        hooks = [
            *(("unit", hook) for hook in suite.unit_tests),
            *(("integration", hook) for hook in suite.integration_tests),
            *(("ui", hook) for hook in suite.ui_tests),
        ]
        for group, hook in hooks:
            name = f"{group}:{getattr(hook, '__name__', repr(hook))}"
            try:
                hook()
            except AssertionError as e:
                report.failed[name] = str(e) or "assertion failed"
            except Exception as e:
                logger.error(f"Self-test {name} of {report.tool_id} raised: {e}")
                report.failed[name] = f"{type(e).__name__}: {e}"
            else:
                report.passed.append(name)

        logger.info(
            f"Self-test for {report.tool_id}: "
            f"{len(report.passed)} passed, {len(report.failed)} failed"
        )
        return report
