"""Kida environment setup.

Creates a kida Environment from SiteConfig. The environment is created
once during Site._freeze() and shared by the shell and every component.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader
from kida.template import Markup

from sidebyside.config import SiteConfig
from sidebyside.templating.filters import BUILTIN_FILTERS


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment from site configuration.

    A configured ``template_dir`` is searched first so a site can
    override any packaged template (``base.html``, ``components/…``).
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("sidebyside", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.update_filters(BUILTIN_FILTERS)
    return env


def render_markup(env: Environment, name: str, **context: object) -> Markup:
    """Render template *name* and mark the result safe for embedding."""
    template = env.get_template(name)
    return Markup(template.render(context))
