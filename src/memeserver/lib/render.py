"""Render a ``Post`` into a standalone HTML page.

Rendering is pure: the same post always produces the same bytes.
"""

from html import escape

from ..models import Post

SITE_BASE_URL = "https://www.reddit.com"

PAGE_TITLE = "Wholesome meme of the moment"

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{page_title}</title>
<style>
body {{ margin: 0; padding: 2rem 1rem; background: #fafafa; color: #1a1a1b; font-family: sans-serif; text-align: center; }}
h1 {{ font-size: 1.5rem; margin: 0 auto 1.5rem; max-width: 40rem; }}
a {{ color: #0079d3; text-decoration: none; }}
a:hover {{ text-decoration: underline; }}
img {{ max-width: 100%; max-height: 80vh; border-radius: 4px; }}
.no-image {{ color: #7c7c7c; font-style: italic; }}
</style>
</head>
<body>
<h1><a href="{post_link}">{title}</a></h1>
{media}
</body>
</html>
"""


def post_link(post: Post) -> str:
    """Absolute reddit.com link for the post."""
    return SITE_BASE_URL + post.permalink


def _render_media(post: Post) -> str:
    # No media url: leave the image out instead of emitting a broken <img>.
    if not post.url:
        return '<p class="no-image">No image available</p>'
    return f'<img src="{escape(post.url)}" alt="{escape(post.title)}">'


def render_post(post: Post) -> bytes:
    """Render ``post`` as a UTF-8 encoded HTML document."""
    html = _PAGE_TEMPLATE.format(
        page_title=escape(PAGE_TITLE),
        post_link=escape(post_link(post)),
        title=escape(post.title),
        media=_render_media(post),
    )
    return html.encode("utf-8")
