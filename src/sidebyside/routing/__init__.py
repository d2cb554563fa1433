"""Routing — an immutable table of literal paths.

Bindings are registered during setup and compiled into a read-only
registry when the site freezes.
"""

from sidebyside.routing.registry import RouteRegistry, validate_path
from sidebyside.routing.route import ViewBinding

__all__ = ["RouteRegistry", "ViewBinding", "validate_path"]
