"""Site import resolution — resolves ``"module:attribute"`` strings to Site instances.

Shared by every ``sidebyside`` subcommand.
"""

import argparse
import importlib
import logging

from sidebyside.site import Site

DEFAULT_SITE = "sidebyside.content:site"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_site(import_string: str) -> Site:
    """Resolve an import string to a Site instance.

    Accepts ``"module:attribute"``. When the attribute is omitted it
    defaults to ``"site"``. A callable that is not a Site is treated as
    a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a ``Site``.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "site"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Site):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Site):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a sidebyside.Site instance"
        raise TypeError(msg)

    return obj


def load_site(args: argparse.Namespace) -> Site:
    """Resolve ``args.site`` and configure logging from its config.

    ``--log-level`` on the command line wins over ``SiteConfig.log_level``.
    """
    site = resolve_site(args.site)
    level = getattr(args, "log_level", None) or site.config.log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    return site
