"""Routes and navigation state."""

from devtoolbox.navigation.route import Route, RouteKind, id_for, route_for

__all__ = ["Route", "RouteKind", "id_for", "route_for"]
