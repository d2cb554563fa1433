"""``sidebyside check`` — render every route and report problems.

Exits with code 1 if errors are found.
"""

import argparse
import sys

from sidebyside.cli._resolve import load_site
from sidebyside.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    """Resolve ``args.site`` and delegate to ``Site.check()``."""
    try:
        site = load_site(args)
        site.check()
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
