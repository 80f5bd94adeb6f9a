"""Navigation routes and the tool-id <-> route mapping.

A handful of tools predate generic id-based routing and keep dedicated
("pinned") routes. Every other tool gets a dynamic route carrying its id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RouteKind(str, Enum):
    """Kind of navigation route."""

    HOME = "home"
    DATE_CONVERTER = "dateConverter"
    JSON_FORMATTER = "jsonFormatter"
    MARKDOWN_PREVIEW = "markdownPreview"
    DYNAMIC_TOOL = "dynamicTool"


HOME_ID = "home"
DYNAMIC_SLUG_PREFIX = "tool:"

# Pinned tool id -> route kind. Home is handled separately: it names no tool.
_PINNED_IDS: dict[str, RouteKind] = {
    "date-converter": RouteKind.DATE_CONVERTER,
    "json-formatter": RouteKind.JSON_FORMATTER,
    "markdown-preview": RouteKind.MARKDOWN_PREVIEW,
}
_PINNED_KINDS: dict[RouteKind, str] = {kind: tool_id for tool_id, kind in _PINNED_IDS.items()}
_KIND_SLUGS = frozenset(kind.value for kind in RouteKind)

_TITLES = {
    RouteKind.HOME: "Home",
    RouteKind.DATE_CONVERTER: "Date Converter",
    RouteKind.JSON_FORMATTER: "JSON Formatter",
    RouteKind.MARKDOWN_PREVIEW: "Markdown Preview",
}

_ICONS = {
    RouteKind.HOME: "house",
    RouteKind.DATE_CONVERTER: "calendar.badge.clock",
    RouteKind.JSON_FORMATTER: "curlybraces",
    RouteKind.MARKDOWN_PREVIEW: "doc.text",
    RouteKind.DYNAMIC_TOOL: "wrench.fill",
}


@dataclass(frozen=True)
class Route:
    """A navigable location in the shell.

    Pinned kinds never carry a tool id; DYNAMIC_TOOL always does. Two
    routes are equal when their kinds match and, for dynamic routes,
    their ids match.
    """

    kind: RouteKind
    tool_id: str | None = None

    def __post_init__(self) -> None:
        if self.kind is RouteKind.DYNAMIC_TOOL:
            if self.tool_id is None:
                raise ValueError("Dynamic routes require a tool id")
        elif self.tool_id is not None:
            raise ValueError(f"{self.kind.value} routes do not carry a tool id")

    @classmethod
    def home(cls) -> Route:
        return cls(RouteKind.HOME)

    @classmethod
    def dynamic(cls, tool_id: str) -> Route:
        return cls(RouteKind.DYNAMIC_TOOL, tool_id)

    @property
    def is_home(self) -> bool:
        return self.kind is RouteKind.HOME

    @property
    def title(self) -> str:
        if self.kind is RouteKind.DYNAMIC_TOOL:
            # Display name normally comes from the tool's descriptor
            return self.tool_id.replace("-", " ").title()
        return _TITLES[self.kind]

    @property
    def icon(self) -> str:
        return _ICONS[self.kind]

    @property
    def slug(self) -> str:
        """Persisted/URL form of the route.

        Dynamic routes use the bare tool id unless it would parse back as
        a different route; those get the "tool:" prefix.
        """
        if self.kind is not RouteKind.DYNAMIC_TOOL:
            return self.kind.value
        tool_id = self.tool_id
        if (
            not tool_id
            or tool_id.startswith(DYNAMIC_SLUG_PREFIX)
            or tool_id in _KIND_SLUGS
            or route_for(tool_id) != self
        ):
            return f"{DYNAMIC_SLUG_PREFIX}{tool_id}"
        return tool_id

    @classmethod
    def from_slug(cls, slug: str) -> Route:
        """Parse a slug produced by ``slug``.

        Plain tool ids are accepted too, so "date-converter" and
        "dateConverter" resolve to the same pinned route.
        """
        if not slug:
            return cls.home()
        if slug.startswith(DYNAMIC_SLUG_PREFIX):
            return cls.dynamic(slug[len(DYNAMIC_SLUG_PREFIX):])
        try:
            kind = RouteKind(slug)
        except ValueError:
            return route_for(slug)
        if kind is RouteKind.DYNAMIC_TOOL:
            return cls.dynamic(slug)
        return cls(kind)

    def __str__(self) -> str:
        return self.slug


def route_for(tool_id: str) -> Route:
    """Map a tool id to its route (pinned if known, dynamic otherwise)."""
    if tool_id == HOME_ID:
        return Route.home()
    kind = _PINNED_IDS.get(tool_id)
    if kind is not None:
        return Route(kind)
    return Route.dynamic(tool_id)


def id_for(route: Route) -> str | None:
    """Map a route back to a tool id. Home identifies no tool."""
    if route.kind is RouteKind.HOME:
        return None
    if route.kind is RouteKind.DYNAMIC_TOOL:
        return route.tool_id
    return _PINNED_KINDS[route.kind]
