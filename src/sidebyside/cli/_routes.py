"""``sidebyside routes`` — list the route table."""

import argparse
import sys

from sidebyside.cli._resolve import load_site
from sidebyside.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print PATH and VIEW for every binding, in registration order."""
    try:
        site = load_site(args)
        registry = site.registry
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(registry):
        print("No routes registered.")
        return

    rows = [
        (binding.path, binding.view_name + (f" ({binding.name})" if binding.name else ""))
        for binding in registry
    ]
    width = max(4, *(len(path) for path, _ in rows))
    fmt = f"{{:<{width}}}  {{}}"
    print(fmt.format("PATH", "VIEW"))
    print("-" * min(width + 2 + max(len(view) for _, view in rows), 80))
    for path, view in rows:
        print(fmt.format(path, view))
