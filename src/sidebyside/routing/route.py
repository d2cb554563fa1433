"""ViewBinding frozen dataclass."""

from dataclasses import dataclass

from sidebyside._internal.types import View


@dataclass(frozen=True, slots=True)
class ViewBinding:
    """A literal path bound to the view that renders it.

    Created during site setup, compiled into the registry at freeze time.
    Views never see their own binding.
    """

    path: str
    view: View
    name: str | None = None

    @property
    def view_name(self) -> str:
        """Human-readable view identifier for listings and logs."""
        module = getattr(self.view, "__module__", "")
        qualname = getattr(self.view, "__qualname__", repr(self.view))
        return f"{module}.{qualname}" if module else qualname
