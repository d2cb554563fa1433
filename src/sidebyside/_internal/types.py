"""Shared type aliases used across sidebyside modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# View — user-defined function returning a Page; may accept ``request``
View: TypeAlias = Callable[..., Any]
