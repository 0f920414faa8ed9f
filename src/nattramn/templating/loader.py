"""Kida-backed loading of page templates.

Page templates are static strings at request time. Keeping them in
files is still convenient, so this module renders a template file once,
at startup, into the string a ``Page`` carries::

    Page(
        route="/users/:id",
        template=load_template("layout.html", template_dir="templates", site="Demo"),
        handler=user_page,
    )

Kida syntax is resolved during that single render; the router markers
and ``<head>`` tag pass through untouched.
"""

from pathlib import Path
from typing import Any

from kida import Environment, FileSystemLoader


def create_environment(template_dir: str | Path = "templates") -> Environment:
    """Create a kida Environment reading from *template_dir*."""
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def load_template(
    name: str,
    *,
    template_dir: str | Path = "templates",
    env: Environment | None = None,
    **context: Any,
) -> str:
    """Render template *name* once and return the resulting page template."""
    env = env or create_environment(template_dir)
    template = env.get_template(name)
    return template.render(context)
