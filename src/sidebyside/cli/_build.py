"""``sidebyside build`` — freeze the site to static HTML."""

import argparse
import sys

from sidebyside.build import BuildError, build_site
from sidebyside.cli._resolve import load_site
from sidebyside.errors import ConfigurationError


def run_build(args: argparse.Namespace) -> None:
    """Write every route of ``args.site`` under ``args.out``.

    ``--out`` defaults to the site's ``SiteConfig.output_dir``.
    """
    try:
        site = load_site(args)
        out_dir = args.out or site.config.output_dir
        written = build_site(site, out_dir, clean=args.clean)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError, BuildError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Wrote {len(written)} files to {out_dir}")
