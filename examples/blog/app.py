"""Blog — a two-page site with static assets and partial navigation.

Demonstrates a kida-rendered layout shared by every page, route
placeholders, per-page headers, and static files served from ``public/``.
Navigations made by the client router fetch the body fragment only.

Run:
    python app.py
"""

from pathlib import Path

from nattramn import CompressionMethod, Config, Nattramn, Page, PageData, RouterConfig, ServerConfig
from nattramn.templating.loader import load_template

HERE = Path(__file__).parent

POSTS = {
    "hello": ("Hello, world", "The first post."),
    "routing": ("Routing", "Placeholders capture exactly one path segment."),
}

LAYOUT = load_template("layout.html", template_dir=HERE / "templates", site="Nattramn Blog")


def index(request, params):
    items = "".join(f'<li><a href="/posts/{slug}">{title}</a></li>' for slug, (title, _) in POSTS.items())
    return PageData(head="<title>Blog</title>", body=f"<h1>Blog</h1><ul>{items}</ul>")


async def post(request, params):
    entry = POSTS.get(params["slug"])
    if entry is None:
        return None
    title, text = entry
    return PageData(
        head=f"<title>{title}</title>",
        body=f"<article><h1>{title}</h1><p>{text}</p></article>",
        headers={"Cache-Control": "public, max-age=60"},
    )


app = Nattramn(
    Config(
        server=ServerConfig(
            compression=CompressionMethod.GZIP,
            serve_static="public",
            static_root=HERE,
        ),
        router=RouterConfig(
            pages=(
                Page("/", LAYOUT, index),
                Page("/posts/:slug", LAYOUT, post),
            )
        ),
    )
)


if __name__ == "__main__":
    app.start_server(port=5000)
