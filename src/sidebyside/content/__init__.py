"""The Side by Side site: route table, navigation and fallback page.

Serve it with any ASGI server::

    uvicorn sidebyside.content:site

or freeze it with ``sidebyside build``.
"""

from sidebyside.config import SiteConfig
from sidebyside.content.classes import classes
from sidebyside.content.concepts import concepts_index
from sidebyside.content.database import database
from sidebyside.content.file_persistence import file_persistence
from sidebyside.content.gui import gui
from sidebyside.content.home import home, not_found
from sidebyside.content.inheritance import inheritance
from sidebyside.content.web_research import web_research
from sidebyside.site import Site

site = Site(SiteConfig(site_name="Side by Side"))

site.add_route("/", home, name="home")
site.add_route("/concepts", concepts_index, name="concepts")
site.add_route("/concepts/classes", classes, name="classes")
site.add_route("/concepts/inheritance", inheritance, name="inheritance")
site.add_route("/concepts/gui", gui, name="gui")
site.add_route("/concepts/file-persistence", file_persistence, name="file-persistence")
site.add_route("/concepts/database", database, name="database")
site.add_route("/concepts/web-research", web_research, name="web-research")

site.not_found(not_found)

site.nav("Home", "/")
site.nav("Concepts", "/concepts")
