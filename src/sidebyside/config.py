"""Site configuration.

One frozen ``SiteConfig`` is read at freeze time by the template
environment and the shell, and later by the CLI and static export.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(site_name="Concepts", debug=True)
    """

    site_name: str = "Side by Side"
    debug: bool = False

    # Templates
    template_dir: str | Path | None = None  # Searched before the packaged templates
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Article frame back link (one parent for the whole site)
    article_parent: str = "/concepts"
    article_parent_label: str = "Back to concepts"

    # htmx: tab clicks swap one variant selector in place
    htmx: bool = True
    htmx_version: str = "2.0.4"  # Pinned for reproducibility

    # Logging (configured by the CLI)
    log_level: str = "info"

    # Static export
    output_dir: str | Path = "public"
