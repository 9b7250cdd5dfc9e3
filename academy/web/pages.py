"""
Server-rendered public pages.

Templates live in ``academy/web/templates`` and are rendered with a
module-level Jinja2 environment (HTML autoescaping on).
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from academy.config.settings import settings
from academy.web.catalog import list_courses

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

NAV_LINKS = (
    ("Home", "/"),
    ("Courses", "/courses"),
    ("Login", "/login"),
)

env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template_name: str, **context) -> str:
    template = env.get_template(template_name)
    return template.render(
        app_name=settings.APP_NAME,
        nav_links=NAV_LINKS,
        **context,
    )


def render_courses_page() -> str:
    """Header, the course listing inside ``<main>``, and footer."""
    return _render("courses.html", courses=list_courses())


def render_not_found_page() -> str:
    return _render("not_found.html")
