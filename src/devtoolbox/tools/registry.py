"""Tool registry: the authoritative set of registered tools."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from devtoolbox.navigation.route import Route, id_for
from devtoolbox.tools.base import ToolCategory, ToolDescriptor, ToolProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredTool:
    """A descriptor paired with the provider that supplied it."""

    descriptor: ToolDescriptor
    provider: ToolProvider


class FindingKind(str, Enum):
    """Kind of validation finding."""

    DUPLICATE_ID = "duplicate_id"
    EMPTY_NAME = "empty_name"
    EMPTY_DESCRIPTION = "empty_description"


@dataclass(frozen=True)
class ValidationFinding:
    """Non-fatal diagnostic about a registered tool's metadata."""

    kind: FindingKind
    tool_id: str
    message: str


class ToolRegistry:
    """Registry of tools available to the navigation shell.

    Entries are kept as an immutable tuple that is replaced wholesale
    under a single lock, so readers see either all of a registration
    call or none of it. Lookups never raise; a miss returns None or an
    empty list.

    Duplicate ids are kept in storage. Single-valued lookups return the
    first registered entry and ``validate()`` reports the rest.
    """

    def __init__(self, revalidate_on_add: bool = False) -> None:
        """Initialize an empty registry.

        Args:
            revalidate_on_add: Run validate() after every add_one()
        """
        self._entries: tuple[RegisteredTool, ...] = ()
        self._lock = asyncio.Lock()
        self._revalidate_on_add = revalidate_on_add

    async def register(
        self,
        batch: Iterable[tuple[ToolDescriptor, ToolProvider]],
    ) -> None:
        """Replace the registered set with a full batch.

        Args:
            batch: (descriptor, provider) pairs in registration order
        """
        entries = tuple(
            RegisteredTool(descriptor=descriptor, provider=provider)
            for descriptor, provider in batch
        )
        async with self._lock:
            self._entries = entries
        logger.info(f"Registered {len(entries)} tools")

    async def register_providers(self, providers: Iterable[ToolProvider]) -> None:
        """Register providers, taking each descriptor from the provider itself."""
        await self.register(
            (provider.descriptor(), provider) for provider in providers
        )

    async def add_one(self, descriptor: ToolDescriptor, provider: ToolProvider) -> None:
        """Append a single tool.

        Safe to call concurrently with other additions and with reads.
        """
        entry = RegisteredTool(descriptor=descriptor, provider=provider)
        async with self._lock:
            self._entries = self._entries + (entry,)
        logger.debug(f"Added tool {descriptor.id}")

        if self._revalidate_on_add:
            await self.validate()

    async def all_tools(self) -> list[ToolDescriptor]:
        """All registered descriptors in registration order."""
        entries = await self._snapshot()
        return [entry.descriptor for entry in entries]

    async def tools_by_category(self, category: ToolCategory) -> list[ToolDescriptor]:
        return [tool for tool in await self.all_tools() if tool.category == category]

    async def tool_by_id(self, tool_id: str) -> ToolDescriptor | None:
        entry = self._first(await self._snapshot(), tool_id)
        return entry.descriptor if entry else None

    async def tool_by_route(self, route: Route) -> ToolDescriptor | None:
        tool_id = id_for(route)
        if tool_id is None:
            return None
        return await self.tool_by_id(tool_id)

    async def capability_for(self, route: Route) -> ToolProvider | None:
        """Get the provider behind a route, for building its view."""
        tool_id = id_for(route)
        if tool_id is None:
            return None
        entry = self._first(await self._snapshot(), tool_id)
        if entry is None:
            logger.debug(f"No tool registered for route {route}")
            return None
        return entry.provider

    async def validate(self) -> list[ValidationFinding]:
        """Check registered metadata and log any problems.

        Returns:
            Findings in registration order; empty when everything is fine
        """
        entries = await self._snapshot()
        findings: list[ValidationFinding] = []
        seen_ids: set[str] = set()

        for entry in entries:
            tool = entry.descriptor
            if tool.id in seen_ids:
                findings.append(ValidationFinding(
                    kind=FindingKind.DUPLICATE_ID,
                    tool_id=tool.id,
                    message=f"Duplicate tool ID found: {tool.id}",
                ))
            seen_ids.add(tool.id)

            if not tool.name:
                findings.append(ValidationFinding(
                    kind=FindingKind.EMPTY_NAME,
                    tool_id=tool.id,
                    message=f"Tool {tool.id} has empty name",
                ))

            if not tool.description:
                findings.append(ValidationFinding(
                    kind=FindingKind.EMPTY_DESCRIPTION,
                    tool_id=tool.id,
                    message=f"Tool {tool.id} has empty description",
                ))

        for finding in findings:
            logger.warning(finding.message)
        logger.info(f"Tool validation complete - {len(entries)} tools registered")
        return findings

    async def _snapshot(self) -> tuple[RegisteredTool, ...]:
        async with self._lock:
            return self._entries

    @staticmethod
    def _first(
        entries: tuple[RegisteredTool, ...],
        tool_id: str,
    ) -> RegisteredTool | None:
        for entry in entries:
            if entry.descriptor.id == tool_id:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, tool_id: str) -> bool:
        return self._first(self._entries, tool_id) is not None
