"""Tests for ToolRegistry: registration, lookup, validation and concurrency."""

import asyncio
import logging

import pytest

from conftest import make_descriptor, make_entry, make_provider
from devtoolbox.navigation.route import Route, RouteKind, route_for
from devtoolbox.tools.base import ToolCategory
from devtoolbox.tools.registry import FindingKind, ToolRegistry


@pytest.fixture
def registry():
    """Empty registry."""
    return ToolRegistry()


# ---------------------------------------------------------------------------
# TestRegistration
# ---------------------------------------------------------------------------

class TestRegistration:
    """Verify batch registration and id lookup."""

    @pytest.mark.asyncio
    async def test_register_batch(self, registry):
        """Every tool in a batch is listed and found by id."""
        batch = [make_entry(f"tool-{i}") for i in range(5)]
        await registry.register(batch)

        tools = await registry.all_tools()
        assert len(tools) == 5
        for descriptor, _ in batch:
            assert await registry.tool_by_id(descriptor.id) == descriptor

    @pytest.mark.asyncio
    async def test_registration_order_preserved(self, registry):
        """all_tools keeps registration order rather than sorting."""
        await registry.register([make_entry(i) for i in ("zeta", "alpha", "mid")])
        assert [t.id for t in await registry.all_tools()] == ["zeta", "alpha", "mid"]

    @pytest.mark.asyncio
    async def test_register_replaces_previous_batch(self, registry):
        """A second register() call is a full replace, not an append."""
        await registry.register([make_entry("old-a"), make_entry("old-b")])
        await registry.register([make_entry("new")])

        assert [t.id for t in await registry.all_tools()] == ["new"]
        assert await registry.tool_by_id("old-a") is None

    @pytest.mark.asyncio
    async def test_register_providers_uses_provider_descriptor(self, registry):
        descriptor = make_descriptor("from-provider")
        provider = make_provider(descriptor)
        await registry.register_providers([provider])

        assert await registry.tool_by_id("from-provider") == descriptor
        assert await registry.capability_for(descriptor.route) is provider

    @pytest.mark.asyncio
    async def test_add_one_appends(self, registry):
        await registry.register([make_entry("first")])
        await registry.add_one(*make_entry("second"))
        assert [t.id for t in await registry.all_tools()] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_len_and_contains(self, registry):
        await registry.register([make_entry("a"), make_entry("b")])
        assert len(registry) == 2
        assert "a" in registry
        assert "missing" not in registry


# ---------------------------------------------------------------------------
# TestLookup
# ---------------------------------------------------------------------------

class TestLookup:
    """Verify category, route and capability lookups."""

    @pytest.mark.asyncio
    async def test_tools_by_category(self, registry):
        await registry.register([
            make_entry("a", category=ToolCategory.ENCODING),
            make_entry("b", category=ToolCategory.FORMATTING),
            make_entry("c", category=ToolCategory.ENCODING),
        ])
        encoding = await registry.tools_by_category(ToolCategory.ENCODING)
        assert [t.id for t in encoding] == ["a", "c"]
        assert await registry.tools_by_category(ToolCategory.IMAGES) == []

    @pytest.mark.asyncio
    async def test_tool_by_route_pinned(self, registry):
        descriptor, provider = make_entry("date-converter")
        await registry.register([(descriptor, provider)])

        assert await registry.tool_by_route(Route(RouteKind.DATE_CONVERTER)) == descriptor
        assert await registry.capability_for(Route(RouteKind.DATE_CONVERTER)) is provider

    @pytest.mark.asyncio
    async def test_tool_by_route_dynamic(self, registry):
        descriptor, provider = make_entry("base64-encoder")
        await registry.register([(descriptor, provider)])

        assert await registry.tool_by_route(Route.dynamic("base64-encoder")) == descriptor
        assert await registry.capability_for(Route.dynamic("base64-encoder")) is provider

    @pytest.mark.asyncio
    async def test_home_resolves_to_nothing(self, registry):
        await registry.register([make_entry("home-ish")])
        assert await registry.tool_by_route(Route.home()) is None
        assert await registry.capability_for(Route.home()) is None


# ---------------------------------------------------------------------------
# TestAbsence
# ---------------------------------------------------------------------------

class TestAbsence:
    """Lookups return None for unknown keys and never raise."""

    @pytest.mark.asyncio
    async def test_empty_registry(self, registry):
        assert await registry.all_tools() == []
        assert await registry.tool_by_id("does-not-exist") is None
        assert await registry.tool_by_route(Route.dynamic("nope")) is None
        assert await registry.capability_for(Route.dynamic("nope")) is None
        assert await registry.capability_for(Route(RouteKind.JSON_FORMATTER)) is None
        assert await registry.validate() == []

    @pytest.mark.asyncio
    async def test_populated_registry(self, registry):
        await registry.register([make_entry("a")])
        assert await registry.tool_by_id("does-not-exist") is None
        assert await registry.tool_by_route(Route.dynamic("nope")) is None
        assert await registry.capability_for(Route(RouteKind.MARKDOWN_PREVIEW)) is None


# ---------------------------------------------------------------------------
# TestValidation
# ---------------------------------------------------------------------------

class TestValidation:
    """Verify non-fatal metadata validation."""

    @pytest.mark.asyncio
    async def test_clean_registry_has_no_findings(self, registry):
        await registry.register([make_entry("a"), make_entry("b")])
        assert await registry.validate() == []

    @pytest.mark.asyncio
    async def test_duplicate_id_reported_once(self, registry):
        """Two entries sharing an id give one finding; both stay stored."""
        first = make_entry("dup", name="First")
        second = make_entry("dup", name="Second")
        await registry.register([first, second])

        findings = await registry.validate()
        assert len(findings) == 1
        assert findings[0].kind is FindingKind.DUPLICATE_ID
        assert findings[0].tool_id == "dup"

        assert len(await registry.all_tools()) == 2
        assert (await registry.tool_by_id("dup")).name == "First"
        assert await registry.capability_for(route_for("dup")) is first[1]

    @pytest.mark.asyncio
    async def test_empty_name_reported(self, registry):
        """A tool with an empty name is flagged but still returned unchanged."""
        descriptor, provider = make_entry("nameless", name="")
        await registry.register([(descriptor, provider)])

        findings = await registry.validate()
        assert [(f.kind, f.tool_id) for f in findings] == [(FindingKind.EMPTY_NAME, "nameless")]
        assert await registry.tool_by_id("nameless") == descriptor

    @pytest.mark.asyncio
    async def test_empty_description_reported(self, registry):
        await registry.register([make_entry("blank", description="")])
        findings = await registry.validate()
        assert [f.kind for f in findings] == [FindingKind.EMPTY_DESCRIPTION]

    @pytest.mark.asyncio
    async def test_findings_are_logged(self, registry, caplog):
        await registry.register([make_entry("dup"), make_entry("dup")])
        with caplog.at_level(logging.INFO, logger="devtoolbox.tools.registry"):
            await registry.validate()

        assert "Duplicate tool ID found: dup" in caplog.text
        assert "Tool validation complete - 2 tools registered" in caplog.text

    @pytest.mark.asyncio
    async def test_revalidate_on_add(self, caplog):
        registry = ToolRegistry(revalidate_on_add=True)
        await registry.register([make_entry("a")])
        with caplog.at_level(logging.WARNING, logger="devtoolbox.tools.registry"):
            await registry.add_one(*make_entry("a"))
        assert "Duplicate tool ID found: a" in caplog.text


# ---------------------------------------------------------------------------
# TestConcurrency
# ---------------------------------------------------------------------------

class TestConcurrency:
    """Verify concurrent registration never loses or tears entries."""

    @pytest.mark.asyncio
    async def test_concurrent_add_one_loses_nothing(self, registry):
        ids = [f"tool-{i}" for i in range(200)]
        await asyncio.gather(*(registry.add_one(*make_entry(i)) for i in ids))

        tools = await registry.all_tools()
        assert len(tools) == len(ids)
        assert sorted(t.id for t in tools) == sorted(ids)

    @pytest.mark.asyncio
    async def test_reads_during_registration_see_whole_batches(self, registry):
        """Concurrent readers see either no batch or a full one."""
        batch = [make_entry(f"tool-{i}") for i in range(50)]
        sizes: list[int] = []

        async def reader():
            for _ in range(20):
                sizes.append(len(await registry.all_tools()))
                await asyncio.sleep(0)

        await asyncio.gather(reader(), registry.register(batch), reader())
        assert set(sizes) <= {0, 50}
        assert len(await registry.all_tools()) == 50

    @pytest.mark.asyncio
    async def test_queries_are_idempotent(self, registry):
        await registry.register([make_entry("a"), make_entry("b")])
        assert await registry.all_tools() == await registry.all_tools()
